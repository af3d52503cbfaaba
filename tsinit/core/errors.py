"""Exceptions raised by tsconfig-init."""

from pathlib import Path


class TsinitError(Exception):
    """Base exception for tsconfig-init operations."""
    pass


class ProjectExistsError(TsinitError):
    """Raised when tsconfig.json already exists and may not be overwritten."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} already exists (use --force to overwrite)")


class InvalidOptionsError(TsinitError):
    """Raised when collected project options fail validation."""
    pass
