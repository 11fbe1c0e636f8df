import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import click
from rich import print as rprint
from rich.table import Table

from .section_extractor import extract_named_sections, extract_section
from .tag_parser import ParsedTag, parse_tags

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 60


def read_input(input_file: str) -> str:
    """Read an input file, or stdin when given ``-``."""
    with click.open_file(input_file, "r", encoding="utf-8") as f:
        return f.read()


def _preview(content: str) -> str:
    flat = content.replace("\n", "\\n")
    return flat if len(flat) <= PREVIEW_CHARS else flat[:PREVIEW_CHARS - 3] + "..."


def tags_main(ctx: click.Context, input_file: str, as_json: bool) -> Tuple[List[ParsedTag], int]:
    """
    Handle the core logic for the 'tags' command.

    Args:
        ctx (click.Context): Click context carrying the global options.
        input_file (str): File holding model output, or ``-`` for stdin.
        as_json (bool): Print JSON records instead of a table.

    Returns:
        Tuple[List[ParsedTag], int]: The parsed tags and their count.
    """
    quiet = ctx.obj.get("quiet", False)
    tags = parse_tags(read_input(input_file))
    logger.debug(f"tags_main parsed {len(tags)} tag(s) from {input_file}")

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in tags], indent=2))
    elif not quiet:
        if not tags:
            rprint("[yellow]No tags found.[/yellow]")
        else:
            table = Table(title=f"Tags in {input_file}")
            table.add_column("#", justify="right")
            table.add_column("Tag", style="magenta")
            table.add_column("Attributes", style="cyan")
            table.add_column("Content")
            for i, tag in enumerate(tags, 1):
                attrs = " ".join(f'{k}="{v}"' for k, v in (tag.meta or {}).items())
                table.add_row(str(i), tag.tag, attrs, _preview(tag.content))
            rprint(table)
    return tags, len(tags)


def section_main(ctx: click.Context, input_file: str, section: str, output: Optional[str]) -> Tuple[str, int]:
    quiet = ctx.obj.get("quiet", False)
    body = extract_section(read_input(input_file), section)

    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        Path(output).write_text(body, encoding="utf-8")
        if not quiet:
            rprint(f"[green]Wrote <{section}> section to[/green] [dim blue]{output}[/dim blue]")
    else:
        click.echo(body)
    return body, 1


def sections_main(
    ctx: click.Context,
    input_file: str,
    sections: Sequence[str],
    as_json: bool,
) -> Tuple[Dict[str, str], int]:
    """Best-effort lookup of several sections; missing ones come back empty."""
    quiet = ctx.obj.get("quiet", False)
    found = extract_named_sections(read_input(input_file), sections)
    present = sum(1 for body in found.values() if body)

    if as_json:
        click.echo(json.dumps(found, indent=2))
    elif not quiet:
        for name, body in found.items():
            if body:
                rprint(f"[bold magenta]<{name}>[/bold magenta]")
                click.echo(body)
            else:
                rprint(f"[yellow]<{name}> not found[/yellow]")
    return found, present
