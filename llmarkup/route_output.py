from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, Field

from .errors import MissingRequiredAttribute
from .file_manifest import FileEntry
from .section_extractor import extract_named_sections, extract_section
from .tag_parser import parse_tags

FETCH_SECTION = "fetch_implementations"
FETCH_TAG = "fetch_implementation"
ROUTE_ATTRIBUTE = "route"
REJECTION_SECTION = "rejection"
OPTIONAL_SECTIONS = ("understanding", "notes", "chain_of_thought", FETCH_SECTION)

DEFAULT_WORKER_PATH = "src/index.ts"
DEFAULT_FETCH_DIR = "fetch"


class FetchImplementation(BaseModel):
    """Client fetch wrapper generated for one server route."""
    route: str = Field(description="Route the wrapper calls, e.g. 'GET /users/:id'")
    code: str = Field(description="Fetch wrapper source including its usage example")

    def file_name(self, extension: str = ".ts") -> str:
        slug = re.sub(r"[^a-z0-9]+", "_", self.route.lower()).strip("_")
        return f"{slug or 'root'}{extension}"


class GeneratedRoute(BaseModel):
    """Structured form of a route-generation completion."""
    code: str = Field(description="Server worker source")
    understanding: str = ""
    notes: str = ""
    chain_of_thought: str = ""
    rejection: str = Field(default="", description="Why the model declined; empty when it generated code")
    fetch_implementations: List[FetchImplementation] = Field(default_factory=list)

    def to_manifest(
        self,
        worker_path: str = DEFAULT_WORKER_PATH,
        fetch_dir: str = DEFAULT_FETCH_DIR,
    ) -> List[FileEntry]:
        """Files to write for this route; a rejected route has none."""
        if self.rejection:
            return []
        entries = [FileEntry(file=worker_path, data=self.code)]
        for fetch in self.fetch_implementations:
            entries.append(FileEntry(file=f"{fetch_dir}/{fetch.file_name()}", data=fetch.code))
        return entries


def parse_route_output(text: str) -> GeneratedRoute:
    """
    Recover the worker code and per-route fetch wrappers from a completion.

    A ``<rejection>`` section means the model declined the request: it is
    returned as ``GeneratedRoute.rejection`` with empty code and no ``<code>``
    lookup. Otherwise the ``<code>`` section is mandatory; the explanatory
    sections and the ``<fetch_implementations>`` wrapper are optional.

    Raises:
        SectionNotFound: No ``<code>`` section and no rejection.
        MalformedMarkup: Broken markup in ``<code>`` or the fetch wrappers.
        MissingRequiredAttribute: A fetch block has no ``route`` attribute.
    """
    optional = extract_named_sections(text, OPTIONAL_SECTIONS + (REJECTION_SECTION,))
    explanation = {
        "understanding": optional["understanding"],
        "notes": optional["notes"],
        "chain_of_thought": optional["chain_of_thought"],
    }
    if optional[REJECTION_SECTION]:
        return GeneratedRoute(code="", rejection=optional[REJECTION_SECTION], **explanation)

    code = extract_section(text, "code")

    fetches: List[FetchImplementation] = []
    fetch_tags = [t for t in parse_tags(optional[FETCH_SECTION]) if t.tag == FETCH_TAG]
    for position, parsed in enumerate(fetch_tags):
        route = parsed.meta.get(ROUTE_ATTRIBUTE) if parsed.meta else None
        if not route:
            raise MissingRequiredAttribute(FETCH_TAG, ROUTE_ATTRIBUTE, position)
        fetches.append(FetchImplementation(route=route, code=parsed.content))

    return GeneratedRoute(code=code, fetch_implementations=fetches, **explanation)
