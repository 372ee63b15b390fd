"""Validation of raw console input.

Every prompt loop reads a raw line, hands it to one of the validators below
and gets back a ``Validation``: either the accepted value, or the message to
show the user before asking again. The ``require_*`` helpers check the
caller's arguments and raise ``ValueError`` before any input is read.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

INVALID_STRING_MESSAGE = "Your input cannot be null, empty, or just white space. Please, try again."
IO_FAILURE_MESSAGE = "There was a technical issue. Please, try again."
INT_RANGE_MESSAGE = "You must enter a number between {minimum} and {maximum}, Please, try again."
BOOLEAN_TOKEN_MESSAGE = 'You must input either "{true_token}" or "{false_token}". Please, try again.'

# Optional sign followed by digits only; no surrounding spaces or underscores.
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


@dataclass
class Validation:
    """Outcome of validating one raw input line."""

    is_valid: bool
    value: Any = None
    reason: Optional[str] = None

    @classmethod
    def accept(cls, value: Any) -> "Validation":
        return cls(is_valid=True, value=value)

    @classmethod
    def reject(cls, reason: str) -> "Validation":
        return cls(is_valid=False, reason=reason)


def equals_ignore_case(left: str, right: str) -> bool:
    """Compare character by character, ignoring case.

    Each character pair matches if equal after upper- or lower-casing. No
    multi-character folding, so "straße" and "STRASSE" differ.
    """
    if len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower()
        for a, b in zip(left, right)
    )


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only text."""
    return text is None or not text.strip()


def require_prompt(prompt: Optional[str]) -> None:
    if is_blank(prompt):
        raise ValueError("The prompt cannot be null, empty, or whitespaces-only.")


def require_bounds(minimum: int, maximum: int) -> None:
    if maximum < minimum:
        raise ValueError("The min cannot be greater than the max.")


def require_tokens(true_token: Optional[str], false_token: Optional[str]) -> None:
    if (
        is_blank(true_token)
        or is_blank(false_token)
        or equals_ignore_case(true_token.strip(), false_token.strip())
    ):
        raise ValueError(
            "The true and false tokens cannot be null, empty, whitespaces-only, "
            "or case-insensitively equal."
        )


def validate_string(line: Optional[str]) -> Validation:
    """Accept any non-blank line, returned exactly as read."""
    if is_blank(line):
        return Validation.reject(INVALID_STRING_MESSAGE)
    return Validation.accept(line)


def validate_int(line: str, minimum: int, maximum: int) -> Validation:
    """Accept a base-10 integer within ``[minimum, maximum]``."""
    reason = INT_RANGE_MESSAGE.format(minimum=minimum, maximum=maximum)
    if not _INTEGER_PATTERN.fullmatch(line):
        return Validation.reject(reason)

    number = int(line)
    if number < minimum or number > maximum:
        return Validation.reject(reason)
    return Validation.accept(number)


def validate_boolean(line: str, true_token: str, false_token: str) -> Validation:
    """Map a line onto one of two tokens, ignoring case.

    Both tokens are expected to be trimmed already; the line is trimmed here.
    """
    answer = line.strip()
    if equals_ignore_case(answer, true_token):
        return Validation.accept(True)
    if equals_ignore_case(answer, false_token):
        return Validation.accept(False)
    return Validation.reject(
        BOOLEAN_TOKEN_MESSAGE.format(true_token=true_token, false_token=false_token)
    )
