from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .file_manifest import FileEntry

logger = logging.getLogger(__name__)

# ```typescript:src/app/page.tsx
_PATH_FENCE_RE = re.compile(r"```[\w-]+:([^\n]+?)\n(.+?)```", re.DOTALL)

# ================
# File: src/index.ts
# ================
_BOILERPLATE_FILE_RE = re.compile(r"File: ([^\n]+?)\n={16,}\n(.+?)(?=\n={16,}|\Z)", re.DOTALL)

DEFAULT_SKIP_PREFIXES = ("public/",)


def parse_code_blocks(text: str) -> List[FileEntry]:
    """
    Collect fenced blocks whose info string names a path, e.g.
    ```` ```ts:src/a.ts ````. Fences without a path are ignored.
    """
    entries: List[FileEntry] = []
    for match in _PATH_FENCE_RE.finditer(text):
        path = match.group(1).strip()
        code = match.group(2).strip()
        if path and code:
            entries.append(FileEntry(file=path, data=code))
    return entries


def parse_boilerplate(text: str, skip_prefixes: Iterable[str] = DEFAULT_SKIP_PREFIXES) -> List[FileEntry]:
    """
    Split a packed repository dump (``File: <path>`` headers between ``=`` rules)
    into file entries.

    Args:
        text: The dump.
        skip_prefixes: Path prefixes to drop, typically binary asset folders.

    Returns:
        List[FileEntry]: Entries in dump order with surrounding whitespace trimmed.
    """
    prefixes = tuple(skip_prefixes)
    entries: List[FileEntry] = []
    for match in _BOILERPLATE_FILE_RE.finditer(text):
        path = match.group(1).strip()
        if prefixes and path.startswith(prefixes):
            logger.debug("Skipping boilerplate asset %s", path)
            continue
        entries.append(FileEntry(file=path, data=match.group(2).strip()))
    return entries
