"""Helpers shared by the prompt commands."""

import sys
from typing import Callable, Optional, TypeVar

import click

from ..output import console
from ..reader import InputExhaustedError, InteractiveInputReader

T = TypeVar("T")


def run_prompt(
    reader: Optional[InteractiveInputReader],
    prompt: Callable[[InteractiveInputReader], T],
) -> T:
    """Run a prompt, turning caller errors into usage errors.

    Exits with status 1 when input ends under the "raise" policy.
    """
    reader = reader or InteractiveInputReader()
    try:
        return prompt(reader)
    except InputExhaustedError as e:
        console.error(f"✗ {e}")
        sys.exit(1)
    except ValueError as e:
        raise click.UsageError(str(e)) from e
