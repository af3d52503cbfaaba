"""tsconfig.json generation from project options."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from tsinit.core.models.options import ProjectOptions, Strictness
from tsinit.core.utils.constants import CURRENT_DIR_NAME, DEFAULT_OUT_DIR, ES_TARGET

logger = logging.getLogger(__name__)

__all__: list[str] = ["generate_tsconfig", "render_tsconfig", "resolve_project_dir"]

BASE_COMPILER_OPTIONS: Dict[str, Any] = {
    "esModuleInterop": True,
    "skipLibCheck": True,
    "target": ES_TARGET,
    "allowJs": True,
    "resolveJsonModule": True,
    "moduleDetection": "force",
    "isolatedModules": True,
    "verbatimModuleSyntax": True,
}

STRICTNESS_OPTIONS: Dict[Strictness, Dict[str, Any]] = {
    Strictness.OFF: {},
    Strictness.ON: {"strict": True},
    Strictness.STRICT: {
        "strict": True,
        "noUncheckedIndexedAccess": True,
        "noImplicitOverride": True,
    },
}

TRANSPILER_OPTIONS: Dict[str, Any] = {
    "module": "NodeNext",
    "outDir": DEFAULT_OUT_DIR,
    "sourceMap": True,
}

BUNDLER_OPTIONS: Dict[str, Any] = {
    "module": "preserve",
    "noEmit": True,
}


def generate_tsconfig(options: ProjectOptions) -> Dict[str, Any]:
    """Build the tsconfig.json document for a set of project options.

    Args:
        options: Answers collected from the command line or prompts

    Returns:
        Mapping with a single ``compilerOptions`` key
    """
    compiler_options = dict(BASE_COMPILER_OPTIONS)

    compiler_options.update(STRICTNESS_OPTIONS[options.strictness])

    if options.is_transpiler:
        compiler_options.update(TRANSPILER_OPTIONS)
    else:
        compiler_options.update(BUNDLER_OPTIONS)

    if options.is_library:
        compiler_options["declaration"] = True

    if options.is_monorepo:
        compiler_options.update({"composite": True, "declarationMap": True})

    if options.is_dom:
        compiler_options["lib"] = [ES_TARGET, "dom", "dom.iterable"]
    else:
        compiler_options["lib"] = [ES_TARGET]

    logger.debug("Generated %d compiler options for %s", len(compiler_options), options.project_name)
    return {"compilerOptions": compiler_options}


def render_tsconfig(tsconfig: Dict[str, Any]) -> str:
    """Serialize a tsconfig document as pretty JSON with sorted keys."""
    return json.dumps(tsconfig, indent=2, sort_keys=True)


def resolve_project_dir(project_name: str, cwd: Optional[Path] = None) -> Path:
    """Return the directory tsconfig.json should be written to."""
    base = cwd if cwd is not None else Path.cwd()
    if project_name == CURRENT_DIR_NAME:
        return base
    return base / project_name
