"""Pydantic models for project options."""

from .options import ProjectOptions, Strictness

__all__ = ["ProjectOptions", "Strictness"]
