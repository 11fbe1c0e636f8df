from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from .errors import MissingRequiredAttribute
from .tag_parser import parse_tags

logger = logging.getLogger(__name__)

DEFAULT_NAME_ATTRIBUTE = "name"
BASE64_ENCODING = "base64"


@dataclass(frozen=True)
class FileEntry:
    """A relative path and the text that belongs at it."""
    file: str
    data: str

    def to_dict(self) -> Dict[str, str]:
        return {"file": self.file, "data": self.data}

    def encoded(self) -> Dict[str, str]:
        """Deployment-upload shape with base64 data."""
        return {
            "file": self.file,
            "data": base64.b64encode(self.data.encode("utf-8")).decode("ascii"),
            "encoding": BASE64_ENCODING,
        }


def to_file_manifest(text: str, name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> List[FileEntry]:
    """
    Turn every tag in ``text`` into a FileEntry keyed by its path attribute.

    The whole call fails if any tag lacks the attribute; a partial file set
    is never returned.

    Args:
        text: Model output containing ``<file name="path">...</file>`` blocks.
        name_attribute: Attribute that carries the relative path.

    Returns:
        List[FileEntry]: One entry per tag, in document order.

    Raises:
        MalformedMarkup: Propagated from the tag scan.
        MissingRequiredAttribute: A tag has no ``name_attribute``.
    """
    entries: List[FileEntry] = []
    for position, parsed in enumerate(parse_tags(text)):
        file_name = parsed.meta.get(name_attribute) if parsed.meta else None
        if not file_name:
            raise MissingRequiredAttribute(parsed.tag, name_attribute, position)
        entries.append(FileEntry(file=file_name, data=parsed.content))

    logger.debug("Built manifest with %d file(s)", len(entries))
    return entries


def encode_manifest(entries: Iterable[FileEntry]) -> List[Dict[str, str]]:
    return [entry.encoded() for entry in entries]
