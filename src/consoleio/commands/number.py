"""Prompt for a bounded integer."""

import click

from ..output import console
from .common import run_prompt


@click.command(name="number")
@click.argument("prompt")
@click.option("--min", "minimum", type=int, required=True, help="Smallest accepted value")
@click.option("--max", "maximum", type=int, required=True, help="Largest accepted value")
@click.pass_obj
def cmd(reader, prompt: str, minimum: int, maximum: int):
    """Ask until a whole number between --min and --max is entered.

    PROMPT: Text shown before each attempt
    """
    value = run_prompt(reader, lambda r: r.prompt_for_int(prompt, minimum, maximum))
    console.print(str(value))
