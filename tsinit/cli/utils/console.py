"""tsconfig-init console utilities for styled output."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from tsinit.cli.design_standards import COLORS, LAYOUT, SYMBOLS

TSINIT_THEME = Theme(COLORS)


class TsinitConsole(Console):
    """Themed console for prompts and results."""

    def __init__(self, **kwargs):
        kwargs.setdefault("width", LAYOUT['terminal_width'])
        super().__init__(theme=TSINIT_THEME, **kwargs)

    def print_menu(self, items: list[str], default_index: int) -> None:
        """Print a numbered menu, marking the default entry."""
        indent = " " * LAYOUT['menu_indent']
        for i, item in enumerate(items, start=1):
            marker = " [muted](default)[/muted]" if i - 1 == default_index else ""
            self.print(f"{indent}[muted]{i}.[/muted] {item}{marker}")


def format_error(message: str) -> Text:
    """Format an error message."""
    return Text(f"{SYMBOLS['fail']} Error: {message}", style="error")


def format_success(message: str) -> Text:
    """Format a success message."""
    return Text(f"{SYMBOLS['pass']} {message}", style="success")


def format_warning(message: str) -> Text:
    """Format a warning message."""
    return Text(f"{SYMBOLS['warning_text']} {message}", style="warning")
