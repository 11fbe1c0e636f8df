"""
Read-only extraction commands (tags, section, sections).
"""
from typing import Optional, Tuple

import click

from ..core.errors import handle_error
from ..extract_main import sections_main, section_main, tags_main


@click.command("tags")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print tag records as JSON.")
@click.pass_context
def tags(ctx: click.Context, input_file: str, as_json: bool) -> Optional[Tuple]:
    """List every tag found in INPUT_FILE, in document order."""
    try:
        return tags_main(ctx, input_file, as_json)
    except Exception as e:
        handle_error(e, "tags", ctx.obj.get("quiet", False))
        return None


@click.command("section")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("name")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the section to this file instead of stdout.",
)
@click.pass_context
def section(ctx: click.Context, input_file: str, name: str, output: Optional[str]) -> Optional[Tuple]:
    """Print the mandatory <NAME> section of INPUT_FILE."""
    try:
        return section_main(ctx, input_file, name, output)
    except Exception as e:
        handle_error(e, "section", ctx.obj.get("quiet", False))
        return None


@click.command("sections")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("names", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the name to content mapping as JSON.")
@click.pass_context
def sections(ctx: click.Context, input_file: str, names: Tuple[str, ...], as_json: bool) -> Optional[Tuple]:
    """Look up several sections; missing ones are reported empty."""
    try:
        return sections_main(ctx, input_file, names, as_json)
    except Exception as e:
        handle_error(e, "sections", ctx.obj.get("quiet", False))
        return None
