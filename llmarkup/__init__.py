"""Structured extraction of tags, sections and file manifests from LLM output."""

__version__ = "0.1.0"

from .code_blocks import parse_boilerplate, parse_code_blocks  # noqa: E402
from .errors import (  # noqa: E402
    MalformedMarkup,
    MarkupError,
    MissingRequiredAttribute,
    SectionNotFound,
    UnsafePathError,
)
from .file_manifest import FileEntry, encode_manifest, to_file_manifest  # noqa: E402
from .section_extractor import (  # noqa: E402
    extract_named_sections,
    extract_section,
    parse_agent_sections,
    parse_project_files,
)
from .tag_parser import ParsedTag, parse_tags  # noqa: E402

__all__ = [
    "__version__",
    "FileEntry",
    "MalformedMarkup",
    "MarkupError",
    "MissingRequiredAttribute",
    "ParsedTag",
    "SectionNotFound",
    "UnsafePathError",
    "encode_manifest",
    "extract_named_sections",
    "extract_section",
    "parse_agent_sections",
    "parse_boilerplate",
    "parse_code_blocks",
    "parse_project_files",
    "parse_tags",
    "to_file_manifest",
]
