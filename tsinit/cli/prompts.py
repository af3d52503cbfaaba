"""Interactive collection of project options."""

import logging
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from tsinit.cli.message_templates import PROMPT_MESSAGES
from tsinit.cli.utils import TsinitConsole
from tsinit.core.errors import InvalidOptionsError
from tsinit.core.models.options import DEFAULT_STRICTNESS, ProjectOptions, Strictness

logger = logging.getLogger(__name__)

# Asked in this order after the name and strictness questions
BOOLEAN_FIELDS = ("is_transpiler", "is_library", "is_monorepo", "is_dom")


def _field_default(name: str) -> Any:
    return ProjectOptions.model_fields[name].default


def prompt_strictness(console: TsinitConsole) -> Strictness:
    """Show the strictness menu and return the selected level."""
    choices = list(Strictness)
    default_index = choices.index(DEFAULT_STRICTNESS)

    console.print(f"[primary]?[/primary] {PROMPT_MESSAGES['strictness']}")
    console.print_menu([choice.label for choice in choices], default_index)

    selected = click.prompt(
        PROMPT_MESSAGES['strictness_choice'],
        type=click.IntRange(1, len(choices)),
        default=default_index + 1,
        err=True,
    )
    return choices[selected - 1]


def prompt_options(
    console: TsinitConsole,
    preset: Optional[Dict[str, Any]] = None,
    assume_defaults: bool = False,
) -> ProjectOptions:
    """Collect project options, asking only for what is not already known.

    Args:
        console: Console used for menus, normally one writing to stderr
        preset: Answers supplied on the command line; ``None`` values are unanswered
        assume_defaults: Skip every question and fall back to defaults

    Returns:
        Validated project options

    Raises:
        InvalidOptionsError: If the answers do not form valid options
        click.Abort: If the user interrupts a prompt
    """
    answers = {key: value for key, value in (preset or {}).items() if value is not None}

    if not assume_defaults:
        if "project_name" not in answers:
            answers["project_name"] = click.prompt(
                PROMPT_MESSAGES['project_name'],
                default=_field_default("project_name"),
                err=True,
            )
        if "strictness" not in answers:
            answers["strictness"] = prompt_strictness(console)
        for field in BOOLEAN_FIELDS:
            if field not in answers:
                answers[field] = click.confirm(PROMPT_MESSAGES[field], default=_field_default(field), err=True)

    logger.debug("Collected answers: %s", answers)

    try:
        return ProjectOptions(**answers)
    except ValidationError as e:
        details = "; ".join(error["msg"] for error in e.errors())
        raise InvalidOptionsError(f"Invalid project options: {details}") from e
