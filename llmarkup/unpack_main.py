import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich import print as rprint

from .code_blocks import parse_boilerplate, parse_code_blocks
from .config import Settings
from .extract_main import read_input
from .file_manifest import to_file_manifest
from .project_files import write_manifest
from .route_output import GeneratedRoute, parse_route_output
from .section_extractor import extract_section

logger = logging.getLogger(__name__)

MARKUP_FORMATS = ("tags", "fenced", "boilerplate")


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj.get("settings") or Settings()


def unpack_main(
    ctx: click.Context,
    input_file: str,
    section: Optional[str],
    output_dir: Optional[str],
    whole_text: bool = False,
    markup_format: str = "tags",
) -> Tuple[List[Path], int]:
    """
    Handle the core logic for the 'unpack' command: read model output, pull
    the file manifest out of it and write every file to disk.

    Args:
        ctx (click.Context): Click context carrying the global options and settings.
        input_file (str): File holding model output, or ``-`` for stdin.
        section (Optional[str]): Wrapper section holding the manifest. Falls back
            to the configured ``manifest_section``.
        output_dir (Optional[str]): Destination directory. Falls back to the
            configured ``output_dir``.
        whole_text (bool): Scan the whole input instead of a wrapper section.
        markup_format (str): ``tags`` for ``<file name="...">`` blocks,
            ``fenced`` for ```` ```lang:path ```` blocks or ``boilerplate`` for
            ``File: path`` dumps. The last two always scan the whole input.

    Returns:
        Tuple[List[Path], int]: Written paths and their count.
    """
    settings = _settings(ctx)
    quiet = ctx.obj.get("quiet", False)
    text = read_input(input_file)

    if markup_format == "fenced":
        entries = parse_code_blocks(text)
    elif markup_format == "boilerplate":
        entries = parse_boilerplate(text)
    elif markup_format == "tags":
        if not whole_text:
            text = extract_section(text, section or settings.manifest_section)
        entries = to_file_manifest(text, name_attribute=settings.name_attribute)
    else:
        raise ValueError(f"Unknown markup format '{markup_format}'; expected one of {', '.join(MARKUP_FORMATS)}")

    destination = output_dir or settings.output_dir
    written = write_manifest(entries, destination, force=ctx.obj.get("force", False))
    logger.debug(f"unpack_main wrote {len(written)} file(s) to {destination}")

    if not quiet:
        if not written:
            rprint("[yellow]Manifest is empty; nothing written.[/yellow]")
        for entry, path in zip(entries, written):
            rprint(f"[green]Wrote[/green] [dim blue]{path}[/dim blue] ({len(entry.data)} chars)")
    return written, len(written)


def route_main(
    ctx: click.Context,
    input_file: str,
    output_dir: Optional[str],
    worker_path: str,
) -> Tuple[GeneratedRoute, int]:
    """
    Recover worker code and fetch wrappers; write them when ``output_dir`` is
    set, otherwise print the route as JSON and nothing else on stdout.
    """
    quiet = ctx.obj.get("quiet", False)
    route = parse_route_output(read_input(input_file))

    if not output_dir:
        click.echo(route.model_dump_json(indent=2))
        return route, len(route.fetch_implementations)

    if route.rejection:
        if not quiet:
            rprint(f"[yellow]Request rejected; nothing written:[/yellow] {route.rejection}")
        return route, 0

    written = write_manifest(
        route.to_manifest(worker_path=worker_path),
        output_dir,
        force=ctx.obj.get("force", False),
    )
    if not quiet:
        for path in written:
            rprint(f"[green]Wrote[/green] [dim blue]{path}[/dim blue]")
        if route.understanding:
            rprint(f"[cyan]Understanding:[/cyan] {route.understanding}")
    return route, len(route.fetch_implementations)
