"""tsconfig-init: initialize a TypeScript project.

Parses the command line, collects project options (prompting for whatever
was not given), and writes the generated tsconfig.json.
"""

from __future__ import annotations

import asyncio
import importlib.metadata as _metadata
import logging
import signal
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import click
from click.core import ParameterSource
from dotenv import find_dotenv, load_dotenv

from tsinit.cli.message_templates import COMMAND_MESSAGES, PROMPT_MESSAGES
from tsinit.cli.prompts import prompt_options
from tsinit.cli.utils import TsinitConsole, atomic_write_text, format_success, format_warning
from tsinit.config import get_settings
from tsinit.core.errors import ProjectExistsError
from tsinit.core.generator import generate_tsconfig, render_tsconfig, resolve_project_dir
from tsinit.core.models.options import STRICTNESS_ALIASES
from tsinit.core.utils.constants import TSCONFIG_FILENAME

console = TsinitConsole()
# Questions and menus stay off stdout so --dry-run output can be redirected
prompt_console = TsinitConsole(stderr=True)
logger = logging.getLogger(__name__)

PROG_NAME = "tsconfig-init"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# CLI flag name -> ProjectOptions field
_FLAG_FIELDS = {
    "project_name": "project_name",
    "strictness": "strictness",
    "transpiler": "is_transpiler",
    "library": "is_library",
    "monorepo": "is_monorepo",
    "dom": "is_dom",
}


def _get_version() -> str:
    """Return the installed version of tsconfig-init."""
    try:
        return _metadata.version("tsconfig-init")
    except _metadata.PackageNotFoundError:
        return "0.1.0-dev"


@dataclass
class InitRequest:
    """Parsed command line for a single initialization."""
    preset: Dict[str, Any] = field(default_factory=dict)
    assume_yes: bool = False
    force: bool = False
    dry_run: bool = False
    verbose: bool = False


def configure_logging(level: str) -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.command(
    name=PROG_NAME,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "max_content_width": 100
    },
)
@click.argument("project_name", required=False)
@click.option(
    "--strictness",
    type=click.Choice(list(STRICTNESS_ALIASES), case_sensitive=False),
    help="Compiler strictness (relaxed, balanced or rigorous)",
)
@click.option("--transpiler/--no-transpiler", help="Emit JavaScript with tsc")
@click.option("--library/--no-library", help="Emit declaration files")
@click.option("--monorepo/--no-monorepo", help="Library inside a monorepo (composite build)")
@click.option("--dom/--no-dom", help="Include browser (DOM) type libraries")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Accept defaults without prompting")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing tsconfig.json")
@click.option("--dry-run", is_flag=True, help="Print the generated config instead of writing it")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(_get_version(), message="tsconfig-init v%(version)s")
@click.pass_context
def cli(ctx: click.Context, assume_yes: bool, force: bool, dry_run: bool, verbose: bool, **answers: Any) -> InitRequest:
    """Initialize a TypeScript project.

    Asks a few questions about the project and writes a tsconfig.json
    tailored to the answers. Any question answered by an option below is
    skipped.

    \b
    Examples:
      tsconfig-init
      tsconfig-init my-app --strictness rigorous --dom
      tsconfig-init -y --dry-run
    """
    preset = {}
    for flag, option_field in _FLAG_FIELDS.items():
        if ctx.get_parameter_source(flag) in (ParameterSource.DEFAULT, None):
            continue
        preset[option_field] = answers[flag]

    return InitRequest(
        preset=preset,
        assume_yes=assume_yes,
        force=force,
        dry_run=dry_run,
        verbose=verbose,
    )


@contextmanager
def interruptible_prompts():
    """Restore the default SIGINT handler while a prompt blocks on stdin.

    asyncio.run installs a handler that only cancels the main task, so a
    read blocked in input() would keep waiting. With the default handler
    click sees KeyboardInterrupt and raises Abort.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.getsignal(signal.SIGINT)
    signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        yield
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


def _confirm_overwrite(target: Path, assume_yes: bool) -> None:
    """Ask before replacing an existing tsconfig.json."""
    if assume_yes:
        raise ProjectExistsError(target)
    if not click.confirm(PROMPT_MESSAGES['overwrite'].format(path=target), default=False, err=True):
        raise ProjectExistsError(target)
    prompt_console.print(format_warning(COMMAND_MESSAGES['overwriting'].format(path=target)), soft_wrap=True)


async def run(argv: Optional[Sequence[str]] = None) -> None:
    """Run tsconfig-init once for the given command line.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``

    Raises:
        TsinitError: If the project cannot be initialized
        click.ClickException: On invalid command-line usage
        click.Abort: If the user interrupts a prompt
    """
    # Load environment variables from .env file, but don't override existing ones
    load_dotenv(find_dotenv(usecwd=True), override=False)
    settings = get_settings()

    args = list(sys.argv[1:] if argv is None else argv)
    request = cli.main(args=args, prog_name=PROG_NAME, standalone_mode=False)

    if not isinstance(request, InitRequest):
        # --help or --version: click already wrote the output
        return

    configure_logging("DEBUG" if request.verbose else settings.log_level)
    logger.debug("Environment %s, arguments %s", settings.app_env, args)

    assume_yes = request.assume_yes or settings.assume_yes
    with interruptible_prompts():
        options = prompt_options(prompt_console, request.preset, assume_yes)

    content = render_tsconfig(generate_tsconfig(options))

    if request.dry_run:
        click.echo(content)
        return

    project_dir = resolve_project_dir(options.project_name)
    target = project_dir / TSCONFIG_FILENAME

    if target.exists() and not request.force:
        with interruptible_prompts():
            _confirm_overwrite(target, assume_yes)

    await asyncio.to_thread(atomic_write_text, target, content)
    logger.info("Wrote %s (%d bytes)", target, len(content))

    console.print(format_success(COMMAND_MESSAGES['generated'].format(directory=project_dir)), soft_wrap=True)
