from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pathspec

from .errors import UnsafePathError
from .file_manifest import BASE64_ENCODING, FileEntry

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATTERNS = (".git/", "node_modules/")


def resolve_entry_path(output_dir: Path, relative: str) -> Path:
    """Resolve ``relative`` under ``output_dir``, refusing anything that escapes it."""
    if not relative or Path(relative).is_absolute() or relative.startswith(("/", "\\")):
        raise UnsafePathError(f"Refusing to write absolute or empty path: {relative!r}")
    root = output_dir.resolve()
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        raise UnsafePathError(f"Path {relative!r} escapes output directory {output_dir}")
    return target


def write_manifest(
    entries: Iterable[FileEntry],
    output_dir: Union[str, Path],
    force: bool = False,
) -> List[Path]:
    """
    Write manifest entries below ``output_dir``, creating parent directories.

    Every path is validated before anything is written, so a bad entry leaves
    the directory untouched.

    Args:
        entries: Files to write.
        output_dir: Destination root.
        force: Overwrite files that already exist.

    Returns:
        List[Path]: Written paths, in manifest order.

    Raises:
        UnsafePathError: An entry is absolute, escapes ``output_dir``, or
            resolves to the same file as an earlier entry.
        FileExistsError: A target exists and ``force`` is False.
    """
    root = Path(output_dir)
    planned = [(resolve_entry_path(root, entry.file), entry) for entry in entries]

    seen: Dict[Path, str] = {}
    for target, entry in planned:
        if target in seen:
            raise UnsafePathError(
                f"Paths {seen[target]!r} and {entry.file!r} both resolve to {target}"
            )
        seen[target] = entry.file

    if not force:
        for target, _ in planned:
            if target.exists():
                raise FileExistsError(f"{target} already exists (use --force to overwrite)")

    written: List[Path] = []
    for target, entry in planned:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(entry.data, encoding="utf-8")
        logger.debug("Wrote %s (%d chars)", target, len(entry.data))
        written.append(target)
    return written


def read_ignore_file(path: Path) -> List[str]:
    if not path.is_file():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def build_ignore_spec(patterns: Iterable[str]) -> pathspec.GitIgnoreSpec:
    """Compile gitignore lines (comments, negation and anchoring included)."""
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def is_ignored(relative: str, patterns: Iterable[str]) -> bool:
    """True when the POSIX path ``relative`` is excluded by ``patterns``."""
    return bool(build_ignore_spec(patterns).match_file(relative))


def collect_project_files(
    directory: Union[str, Path],
    ignore_patterns: Optional[Iterable[str]] = None,
) -> List[Dict[str, str]]:
    """
    Build a base64 upload manifest for every file under ``directory``.

    Dotfiles are included. Files matched by ``.gitignore``, the default
    ignore list, or ``ignore_patterns`` are left out, following git's own
    negation and anchoring rules.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")

    patterns = list(DEFAULT_IGNORE_PATTERNS)
    patterns.extend(read_ignore_file(root / ".gitignore"))
    if ignore_patterns:
        patterns.extend(ignore_patterns)
    spec = build_ignore_spec(patterns)

    manifest: List[Dict[str, str]] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            relative = (Path(dirpath) / filename).relative_to(root).as_posix()
            if spec.match_file(relative):
                continue
            manifest.append({
                "file": relative,
                "data": base64.b64encode((root / relative).read_bytes()).decode("ascii"),
                "encoding": BASE64_ENCODING,
            })

    manifest.sort(key=lambda item: item["file"])
    logger.debug("Collected %d file(s) from %s", len(manifest), root)
    return manifest
