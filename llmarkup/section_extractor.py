"""
Direct lookups of single well-known sections.

These do not go through the tag scan: a wrapper such as ``<project_files>``
legitimately contains other markup, so the start marker is located by name and
the section runs to the first matching ``</name>`` after it.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional

from .errors import MalformedMarkup, SectionNotFound
from .file_manifest import DEFAULT_NAME_ATTRIBUTE, FileEntry, to_file_manifest

logger = logging.getLogger(__name__)

PROJECT_FILES_SECTION = "project_files"
AGENT_SECTIONS = ("tasks", PROJECT_FILES_SECTION, "summary")


def _start_marker(section: str) -> re.Pattern:
    return re.compile(rf"<{re.escape(section)}(?:\s[^>]*)?>")


def _find_section(text: str, section: str) -> Optional[str]:
    start = _start_marker(section).search(text)
    if start is None:
        return None
    closing = f"</{section}>"
    end = text.find(closing, start.end())
    if end == -1:
        raise MalformedMarkup(f"Section <{section}> has no closing {closing}")
    return text[start.end():end].strip()


def extract_section(text: str, section: str) -> str:
    """
    Return the trimmed body of the first ``<section>...</section>`` region.

    Raises:
        SectionNotFound: The start marker is absent.
        MalformedMarkup: The start marker is present but never closed.
    """
    body = _find_section(text, section)
    if body is None:
        raise SectionNotFound(section)
    return body


def extract_named_sections(text: str, sections: Iterable[str]) -> Dict[str, str]:
    """Best-effort bulk lookup: a missing or unterminated section maps to ``""``."""
    result: Dict[str, str] = {}
    for section in sections:
        try:
            body = _find_section(text, section)
        except MalformedMarkup as e:
            logger.debug("Section <%s> unusable: %s", section, e)
            body = None
        result[section] = body if body is not None else ""
    return result


def parse_agent_sections(text: str) -> Dict[str, str]:
    return extract_named_sections(text, AGENT_SECTIONS)


def parse_project_files(
    text: str,
    section: str = PROJECT_FILES_SECTION,
    name_attribute: str = DEFAULT_NAME_ATTRIBUTE,
) -> List[FileEntry]:
    """Pull the wrapper section out of ``text`` and read its file manifest."""
    return to_file_manifest(extract_section(text, section), name_attribute=name_attribute)
