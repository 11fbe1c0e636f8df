# llmarkup/cli.py
"""Console-script entry point: the core group with every command registered."""
from .commands import register_commands
from .core.cli import cli, process_commands

register_commands(cli)

__all__ = ["cli", "process_commands"]

if __name__ == "__main__":
    cli()
