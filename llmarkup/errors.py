"""Exceptions raised while extracting structure from LLM output.

All of them derive from ``ValueError`` so callers that already guard model
output with ``except ValueError`` keep working.
"""


class MarkupError(ValueError):
    """Base class for every extraction failure."""


class MalformedMarkup(MarkupError):
    """An opening tag is unterminated or has no matching closing tag."""


class MissingRequiredAttribute(MarkupError):
    """A tag lacks an attribute the caller requires (e.g. a file ``name``)."""

    def __init__(self, tag: str, attribute: str, position: int):
        self.tag = tag
        self.attribute = attribute
        self.position = position
        super().__init__(
            f"<{tag}> tag #{position + 1} is missing the required '{attribute}' attribute"
        )


class SectionNotFound(MarkupError):
    """A mandatory section's start marker does not appear in the text."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Could not find <{section}> section in the content")


class UnsafePathError(MarkupError):
    """A manifest path would be written outside of its output directory."""
