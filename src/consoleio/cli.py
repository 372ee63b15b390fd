#!/usr/bin/env python3
"""CLI entry point for consoleio."""

import logging
import sys

import click

from .config import Config
from .output import set_quiet
from .reader import InteractiveInputReader
from .commands import (
    confirm,
    menu,
    number,
    text,
)


@click.group()
@click.version_option(package_name="consoleio")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress the echoed answer. Prompts and errors are still shown.",
)
@click.option(
    "--on-exhausted",
    type=click.Choice(["retry", "raise"], case_sensitive=False),
    default=None,
    help="What to do when input ends before a valid answer (default: from CONSOLEIO_ON_EXHAUSTED).",
)
@click.pass_context
def main(ctx: click.Context, quiet: bool, on_exhausted: str):
    """Prompt for validated answers on the terminal and print them."""
    set_quiet(quiet)

    config = Config()
    if on_exhausted:
        config.on_exhausted = on_exhausted.lower()

    errors = config.validate()
    if errors:
        raise click.UsageError("; ".join(errors))

    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = InteractiveInputReader(on_exhausted=config.exhausted_policy)


# Register commands
main.add_command(text.cmd)
main.add_command(number.cmd)
main.add_command(confirm.cmd)
main.add_command(menu.cmd)


if __name__ == "__main__":
    sys.exit(main())
