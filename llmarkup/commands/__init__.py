"""Command registration for the llmarkup CLI group."""
import click

from .extract import section, sections, tags
from .files import pack, route, unpack


def register_commands(cli: click.Group) -> None:
    """Attach every subcommand to ``cli``. Safe to call more than once."""
    for command in (tags, section, sections, unpack, pack, route):
        if command.name not in cli.commands:
            cli.add_command(command)
