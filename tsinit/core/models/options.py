"""
Pydantic models for project options.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tsinit.core.utils.constants import CURRENT_DIR_NAME


class Strictness(str, Enum):
    """How strict the TypeScript compiler should be."""
    OFF = "off"
    ON = "on"
    STRICT = "strict"

    @property
    def label(self) -> str:
        return STRICTNESS_LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Strictness":
        """Resolve a strictness value or one of its friendly aliases."""
        key = name.strip().lower()
        if key in STRICTNESS_ALIASES:
            return STRICTNESS_ALIASES[key]
        raise ValueError(f"Unknown strictness: {name!r}")


# Menu order matters: prompts present these top to bottom
STRICTNESS_LABELS = {
    Strictness.OFF: "Relaxed (Few checks)",
    Strictness.ON: "Balanced (Recommended)",
    Strictness.STRICT: "Rigorous (Maximum safety)",
}

STRICTNESS_ALIASES = {
    "relaxed": Strictness.OFF,
    "off": Strictness.OFF,
    "balanced": Strictness.ON,
    "on": Strictness.ON,
    "rigorous": Strictness.STRICT,
    "strict": Strictness.STRICT,
}

DEFAULT_STRICTNESS = Strictness.ON


class ProjectOptions(BaseModel):
    """Answers that drive tsconfig.json generation."""
    project_name: str = Field(CURRENT_DIR_NAME, description="Target directory name, '.' for the current directory.")
    strictness: Strictness = Field(DEFAULT_STRICTNESS, description="Compiler strictness level.")
    is_transpiler: bool = Field(True, description="Whether tsc emits JavaScript.")
    is_library: bool = Field(False, description="Whether declarations should be emitted.")
    is_monorepo: bool = Field(False, description="Whether the project is a library inside a monorepo.")
    is_dom: bool = Field(False, description="Whether the project targets a browser environment.")

    model_config = ConfigDict(frozen=True)

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """Strip whitespace and reject names that cannot be a directory."""
        v = v.strip()
        if not v:
            raise ValueError("Project name must not be empty")
        if "\x00" in v:
            raise ValueError("Project name must not contain NUL characters")
        return v

    @field_validator("strictness", mode="before")
    @classmethod
    def validate_strictness(cls, v):
        if isinstance(v, str) and not isinstance(v, Strictness):
            return Strictness.from_name(v)
        return v
