"""Prompt for one of two answers."""

import sys

import click

from ..output import console
from .common import run_prompt


@click.command(name="confirm")
@click.argument("prompt")
@click.option("--true-token", default="yes", show_default=True, help="Answer meaning true")
@click.option("--false-token", default="no", show_default=True, help="Answer meaning false")
@click.pass_obj
def cmd(reader, prompt: str, true_token: str, false_token: str):
    """Ask until either token is entered (case-insensitive).

    Prints "true" or "false" and exits with status 1 on false, so the
    command can drive shell conditionals.

    PROMPT: Text shown before each attempt
    """
    value = run_prompt(
        reader, lambda r: r.prompt_for_boolean(prompt, true_token, false_token)
    )
    console.print("true" if value else "false")
    if not value:
        sys.exit(1)
