"""CLI utilities and helpers."""

from .console import TsinitConsole, format_error, format_success, format_warning
from .error_helpers import describe_error
from .file_utils import atomic_write_text

__all__ = [
    "TsinitConsole",
    "format_error",
    "format_success",
    "format_warning",
    "describe_error",
    "atomic_write_text",
]
