"""Prompt for a numbered menu selection."""

import click

from ..output import console
from .common import run_prompt


@click.command(name="menu")
@click.argument("options", nargs=-1)
@click.option(
    "--quit/--no-quit",
    "with_quit",
    default=True,
    show_default=True,
    help="Offer 0) Quit as a choice",
)
@click.pass_obj
def cmd(reader, options: tuple[str, ...], with_quit: bool):
    """Show OPTIONS as a numbered menu and print the chosen number.

    Options are numbered from 1; 0 means quit.
    """
    value = run_prompt(reader, lambda r: r.prompt_for_menu_selection(options, with_quit))
    console.print(str(value))
