from __future__ import annotations

import logging
from typing import Any, List, Optional

import click
from rich.logging import RichHandler

from .. import __version__
from ..config import load_settings
from ..quiet import disable_quiet_mode, enable_quiet_mode
from .errors import console, handle_error


def configure_logging(verbose: bool) -> None:
    """Route ``llmarkup`` log records through rich; DEBUG only when verbose."""
    package_logger = logging.getLogger("llmarkup")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    package_logger.propagate = False


# --- Main CLI Group ---
@click.group(
    chain=True,
    help=(
        "Extract tags, sections and file manifests from LLM output.\n\n"
        "Commands can be chained. Give each command its options before its "
        "arguments, e.g. 'llmarkup unpack --output-dir gen out.txt pack gen'."
    ),
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite existing files without asking for confirmation.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Increase output verbosity for more detailed information.",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Decrease output verbosity for minimal information.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a .llmarkuprc file (defaults to the nearest one above the working directory).",
)
@click.version_option(version=__version__, package_name="llmarkup")
@click.pass_context
def cli(ctx: click.Context, force: bool, verbose: bool, quiet: bool, config_path: Optional[str]):
    """
    Main entry point. Handles global options and loads settings into the
    context. Supports multi-command chaining.
    """
    ctx.ensure_object(dict)
    ctx.obj["force"] = force
    ctx.obj["quiet"] = quiet
    # Suppress verbose if quiet is enabled
    ctx.obj["verbose"] = verbose and not quiet

    if quiet:
        enable_quiet_mode()
    else:
        disable_quiet_mode()
    configure_logging(ctx.obj["verbose"])

    try:
        ctx.obj["settings"] = load_settings(rc_path=config_path)
    except Exception as e:
        handle_error(e, "config", quiet)


# --- Result Callback for Chained Commands ---
@cli.result_callback()
@click.pass_context
def process_commands(ctx: click.Context, results: List[Any], **kwargs):
    """
    Summarise chained commands. Each command returns ``(result, count)``;
    ``None`` means the command produced nothing to report.
    """
    if ctx.obj.get("quiet") or len(results) < 2:
        return

    invoked = getattr(ctx, "invoked_subcommands", [])
    console.print("\n[info]--- Command Chain Summary ---[/info]")
    for i, result in enumerate(results):
        name = invoked[i] if i < len(invoked) else f"step {i + 1}"
        if isinstance(result, tuple) and len(result) == 2:
            console.print(f"  [info]Step {i + 1} ({name}):[/info] {result[1]} item(s)")
        elif result is None:
            console.print(f"  [info]Step {i + 1} ({name}):[/info] completed (no result).")
        else:
            console.print(
                f"  [warning]Step {i + 1} ({name}):[/warning] Unexpected result format: {type(result).__name__}"
            )
