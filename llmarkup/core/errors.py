"""Console theme and the shared command error handler."""
import click
from rich.console import Console
from rich.theme import Theme

from ..errors import MalformedMarkup, MarkupError, MissingRequiredAttribute, SectionNotFound

custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "dim blue",
    "command": "bold magenta",
})
console = Console(theme=custom_theme)


def handle_error(e: Exception, command_name: str, quiet: bool):
    """Prints a categorised error message and re-raises the exception."""
    if not quiet:
        console.print(f"[error]Error during '{command_name}' command:[/error]", style="error")
        if isinstance(e, MalformedMarkup):
            console.print(f"  [error]Malformed markup:[/error] {e}", style="error")
        elif isinstance(e, MissingRequiredAttribute):
            console.print(f"  [error]Missing attribute:[/error] {e}", style="error")
        elif isinstance(e, SectionNotFound):
            console.print(f"  [error]Section not found:[/error] {e}", style="error")
        elif isinstance(e, MarkupError):
            console.print(f"  [error]Extraction failed:[/error] {e}", style="error")
        elif isinstance(e, FileNotFoundError):
            console.print(f"  [error]File not found:[/error] {e}", style="error")
        elif isinstance(e, (ValueError, IOError)):
            console.print(f"  [error]Input/Output Error:[/error] {e}", style="error")
        elif isinstance(e, click.UsageError):
            console.print(f"  [error]Usage Error:[/error] {e}", style="error")
        else:
            console.print(f"  [error]An unexpected error occurred:[/error] {e}", style="error")
    raise e
