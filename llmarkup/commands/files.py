"""
Commands that move files in and out of manifests (unpack, route, pack).
"""
from typing import Optional, Tuple

import click

from ..core.errors import handle_error
from ..pack_main import pack_main
from ..route_output import DEFAULT_WORKER_PATH
from ..unpack_main import MARKUP_FORMATS, route_main, unpack_main


@click.command("unpack")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--section",
    default=None,
    help="Wrapper section holding the <file> tags (default: configured manifest_section).",
)
@click.option(
    "--whole-text",
    is_flag=True,
    default=False,
    help="Treat every tag in the input as a file instead of looking inside a section.",
)
@click.option(
    "--format",
    "markup_format",
    type=click.Choice(MARKUP_FORMATS),
    default="tags",
    show_default=True,
    help="How files are marked up: <file> tags, ```lang:path fences, or 'File: path' dumps.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, writable=True),
    default=None,
    help="Directory to write files into (default: configured output_dir).",
)
@click.pass_context
def unpack(
    ctx: click.Context,
    input_file: str,
    section: Optional[str],
    whole_text: bool,
    markup_format: str,
    output_dir: Optional[str],
) -> Optional[Tuple]:
    """Write every file block of INPUT_FILE to disk."""
    try:
        return unpack_main(
            ctx, input_file, section, output_dir,
            whole_text=whole_text, markup_format=markup_format,
        )
    except Exception as e:
        handle_error(e, "unpack", ctx.obj.get("quiet", False))
        return None


@click.command("route")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, writable=True),
    default=None,
    help="Write the worker and fetch wrappers here instead of printing JSON.",
)
@click.option(
    "--worker-path",
    default=DEFAULT_WORKER_PATH,
    show_default=True,
    help="Relative path for the worker code inside the output directory.",
)
@click.pass_context
def route(ctx: click.Context, input_file: str, output_dir: Optional[str], worker_path: str) -> Optional[Tuple]:
    """Recover the worker code and per-route fetch wrappers."""
    try:
        return route_main(ctx, input_file, output_dir, worker_path)
    except Exception as e:
        handle_error(e, "route", ctx.obj.get("quiet", False))
        return None


@click.command("pack")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Save the JSON manifest to this file instead of stdout.",
)
@click.pass_context
def pack(ctx: click.Context, directory: str, output: Optional[str]) -> Optional[Tuple]:
    """Emit a base64 upload manifest for DIRECTORY."""
    try:
        return pack_main(ctx, directory, output)
    except Exception as e:
        handle_error(e, "pack", ctx.obj.get("quiet", False))
        return None
