"""Prompt for a line of free text."""

import click

from ..output import console
from .common import run_prompt


@click.command(name="text")
@click.argument("prompt")
@click.pass_obj
def cmd(reader, prompt: str):
    """Ask until a non-blank line is entered, then print it.

    PROMPT: Text shown before each attempt
    """
    value = run_prompt(reader, lambda r: r.prompt_for_string(prompt))
    console.print(value)
