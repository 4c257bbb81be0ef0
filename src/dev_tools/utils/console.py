"""Themed console output for the dev_tools command line.

A thin layer over a Rich console: a few colour themes and status-prefixed
printing shared by the CLI commands.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success")
    ERROR = ("[x]", "error")
    WARNING = ("[!]", "warning")
    INFO = ("[!]", "info")
    DEBUG = ("[D]", "debug")

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    dim: str
    debug: str = "magenta"

    def to_styles(self) -> Dict[str, str]:
        return {
            "info": self.info,
            "warning": self.warning,
            "error": self.error,
            "success": self.success,
            "highlight": self.highlight,
            "path": self.path,
            "dim": self.dim,
            "debug": self.debug,
        }


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        dim='bright_black',
        debug='bright_magenta'
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        dim='green',
        debug='bright_magenta'
    ),
}


class ConsoleManager:
    """Console with theme support."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize the console.

        Args:
            theme: Theme name from THEMES; unknown names fall back to manhattan
            file: Output file (defaults to sys.stdout at print time)
        """
        self.theme_name = theme if theme in THEMES else 'manhattan'
        self.theme_colors = THEMES[self.theme_name]
        self.console = Console(
            theme=Theme(self.theme_colors.to_styles()),
            file=file,
            highlight=False,
            emoji=False,
            soft_wrap=True
        )

    def print(self, *args, **kwargs) -> None:
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str) -> None:
        """Print a message prefixed with the status symbol."""
        self.console.print(f"[{status.style}]{escape(status.symbol)}[/{status.style}] {message}")

    def print_path(self, path: str) -> None:
        """Print a path verbatim, without markup or emoji codes."""
        self.console.print(path, style="path", markup=False, emoji=False)

    def print_exception(self) -> None:
        self.console.print_exception()
