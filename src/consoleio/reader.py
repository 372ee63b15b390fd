"""Blocking prompt-and-validate helpers for interactive console input.

Each prompt shows its text, reads one line and validates it. Invalid user
input never raises: the reason is printed and the prompt repeats until a
valid value arrives. Invalid arguments from the caller raise ``ValueError``
before anything is printed or read.

End of input is a known limitation. With the default
``ExhaustedInputPolicy.RETRY`` a source that has reached end of stream keeps
yielding no line, so the prompt repeats forever. Pass
``ExhaustedInputPolicy.RAISE`` to get an ``InputExhaustedError`` instead.
"""

import io
import logging
import sys
from enum import Enum
from typing import Optional, Sequence, TextIO

from .output import QuietConsole
from .output import console as default_console
from .validation import (
    IO_FAILURE_MESSAGE,
    require_bounds,
    require_prompt,
    require_tokens,
    validate_boolean,
    validate_int,
    validate_string,
)

logger = logging.getLogger(__name__)

MENU_HEADER = "Please choose one of the following:"
MENU_QUIT_OPTION = "0) Quit"
MENU_FOOTER = "Enter the number of your selection: "


class ExhaustedInputPolicy(Enum):
    """What a prompt does when its input source reaches end of stream."""

    RETRY = "retry"
    RAISE = "raise"


class InputExhaustedError(EOFError):
    """Input source reached end of stream under ``ExhaustedInputPolicy.RAISE``."""


def format_menu(options: Sequence[str], with_quit: bool) -> str:
    """Build the menu prompt: numbered options, optional quit, then the ask."""
    parts = [MENU_HEADER, "\n\n"]
    for number, option in enumerate(options, 1):
        parts.append(f"{number}) {option}\n")
    if options:
        parts.append("\n")
    if with_quit:
        parts.append(f"{MENU_QUIT_OPTION}\n\n")
    parts.append(MENU_FOOTER)
    return "".join(parts)


class InteractiveInputReader:
    """Reads typed values from a line-oriented text source.

    Not safe for concurrent use: all prompts share the source's read position.
    """

    def __init__(
        self,
        source: Optional[TextIO] = None,
        output: Optional[QuietConsole] = None,
        on_exhausted: ExhaustedInputPolicy = ExhaustedInputPolicy.RETRY,
    ):
        """Initialize the reader.

        Args:
            source: Object with a ``readline()`` method; ``sys.stdin`` when omitted
            output: Sink with a ``message(text)`` method; the global console when omitted
            on_exhausted: Behaviour once the source reaches end of stream
        """
        self._source = source
        self.output = output or default_console
        self.on_exhausted = ExhaustedInputPolicy(on_exhausted)

    @property
    def source(self) -> TextIO:
        # Resolved per read so a replaced sys.stdin is picked up.
        source = self._source if self._source is not None else sys.stdin
        # Undecodable bytes become U+FFFD and fail validation like any bad input.
        if isinstance(source, io.TextIOWrapper) and source.errors == "strict":
            source.reconfigure(errors="replace")
        return source

    def read_line(self) -> Optional[str]:
        """Read one line without its terminator, or None at end of stream."""
        line = self.source.readline()
        if not line:
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith(("\n", "\r")):
            return line[:-1]
        return line

    def prompt_for_string(self, prompt: str) -> str:
        """Prompt until a non-blank line is entered.

        Args:
            prompt: Text shown before every read attempt

        Returns:
            The line as entered, untrimmed

        Raises:
            ValueError: If the prompt is None, empty or whitespace-only
            InputExhaustedError: At end of stream under the RAISE policy
        """
        require_prompt(prompt)

        while True:
            self.output.message(prompt)

            try:
                line = self.read_line()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Reading console input failed: %s", e)
                self.output.message(IO_FAILURE_MESSAGE)
                continue

            if line is None and self.on_exhausted is ExhaustedInputPolicy.RAISE:
                raise InputExhaustedError("Input ended before a valid response was entered")

            result = validate_string(line)
            if result.is_valid:
                return result.value

            logger.debug("Rejected input %r: %s", line, result.reason)
            self.output.message(result.reason)

    def prompt_for_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Prompt until an integer within ``[minimum, maximum]`` is entered.

        Raises:
            ValueError: If minimum is greater than maximum, or the prompt is blank
        """
        require_bounds(minimum, maximum)

        while True:
            line = self.prompt_for_string(prompt)
            result = validate_int(line, minimum, maximum)
            if result.is_valid:
                return result.value

            logger.debug("Rejected input %r: %s", line, result.reason)
            self.output.message(result.reason)

    def prompt_for_boolean(self, prompt: str, true_token: str, false_token: str) -> bool:
        """Prompt until one of two tokens is entered, ignoring case.

        Example: with tokens "yes" and "no", "YES" returns True and "no"
        returns False. Anything else repeats the prompt.

        Raises:
            ValueError: If either token is blank, or both are equal ignoring case
        """
        require_tokens(true_token, false_token)
        true_token = true_token.strip()
        false_token = false_token.strip()

        while True:
            line = self.prompt_for_string(prompt).strip()
            result = validate_boolean(line, true_token, false_token)
            if result.is_valid:
                return result.value

            logger.debug("Rejected input %r: %s", line, result.reason)
            self.output.message(result.reason)

    def prompt_for_menu_selection(self, options: Optional[Sequence[str]], with_quit: bool) -> int:
        """Show a numbered menu and return the chosen number.

        Options are numbered from 1; 0 is reserved for "Quit" when with_quit
        is set. The caller maps the number back onto its options.

        Raises:
            ValueError: If there are no options and no quit choice
        """
        options = list(options or [])
        if not options and not with_quit:
            raise ValueError("There must be at least one menu option to select.")

        minimum = 0 if with_quit else 1
        return self.prompt_for_int(format_menu(options, with_quit), minimum, len(options))


_default_reader: Optional[InteractiveInputReader] = None


def get_default_reader() -> InteractiveInputReader:
    """Reader bound to standard input and the global console."""
    global _default_reader
    if _default_reader is None:
        _default_reader = InteractiveInputReader()
    return _default_reader


def prompt_for_string(prompt: str) -> str:
    return get_default_reader().prompt_for_string(prompt)


def prompt_for_int(prompt: str, minimum: int, maximum: int) -> int:
    return get_default_reader().prompt_for_int(prompt, minimum, maximum)


def prompt_for_boolean(prompt: str, true_token: str, false_token: str) -> bool:
    return get_default_reader().prompt_for_boolean(prompt, true_token, false_token)


def prompt_for_menu_selection(options: Optional[Sequence[str]], with_quit: bool) -> int:
    return get_default_reader().prompt_for_menu_selection(options, with_quit)
