"""Centralized output handling with quiet mode support."""

from typing import Optional, TextIO

from rich.console import Console as RichConsole


class QuietConsole:
    """A console wrapper that respects quiet mode.

    In quiet mode, only prompts, retry messages and errors are printed.
    Everything goes out as plain text: markup, highlighting and emoji codes
    are left untouched and long lines are never wrapped.
    """

    def __init__(self, file: Optional[TextIO] = None):
        self._console = RichConsole(
            file=file,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        self._quiet = False

    @property
    def quiet(self) -> bool:
        return self._quiet

    @quiet.setter
    def quiet(self, value: bool):
        self._quiet = value

    def print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self._quiet:
            self._console.print(*args, **kwargs)

    def message(self, text: str):
        """Print a prompt or retry message (always shown, even in quiet mode).

        Written straight to the console's file so tabs and control
        characters reach the terminal unchanged.
        """
        file = self._console.file
        file.write(f"{text}\n")
        file.flush()

    def error(self, *args, **kwargs):
        """Print error messages (always shown, even in quiet mode)."""
        self._console.print(*args, **kwargs)


# Global console instance
console = QuietConsole()


def set_quiet(quiet: bool):
    """Set global quiet mode."""
    console.quiet = quiet


def is_quiet() -> bool:
    """Check if quiet mode is enabled."""
    return console.quiet
