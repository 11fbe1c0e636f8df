import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click
from rich import print as rprint

from .config import Settings
from .project_files import collect_project_files

logger = logging.getLogger(__name__)


def pack_main(ctx: click.Context, directory: str, output: Optional[str]) -> Tuple[List[Dict[str, str]], int]:
    """
    Build the base64 deployment manifest for ``directory`` and print it as
    JSON, or save it to ``output``.
    """
    settings: Settings = ctx.obj.get("settings") or Settings()
    quiet = ctx.obj.get("quiet", False)

    manifest = collect_project_files(directory, ignore_patterns=settings.ignore_patterns)
    payload = json.dumps(manifest, indent=2)

    if output:
        out_path = Path(output)
        if out_path.exists() and not ctx.obj.get("force", False):
            raise FileExistsError(f"{out_path} already exists (use --force to overwrite)")
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload, encoding="utf-8")
        if not quiet:
            rprint(f"[green]Packed {len(manifest)} file(s) into[/green] [dim blue]{output}[/dim blue]")
    else:
        click.echo(payload)

    logger.debug(f"pack_main collected {len(manifest)} file(s) from {directory}")
    return manifest, len(manifest)
