from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .errors import MalformedMarkup

logger = logging.getLogger(__name__)

# Whitespace separates tokens except inside a double-quoted run, so
# route="GET /users" stays one token. A lone quote is kept as a literal.
_ATTR_TOKEN_RE = re.compile(r'(?:"[^"]*"|[^\s"]|")+')


@dataclass(frozen=True)
class ParsedTag:
    """One ``<tag attr="v">content</tag>`` region recovered from LLM output."""
    tag: str
    content: str
    meta: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tag": self.tag}
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        data["content"] = self.content
        return data


def normalize_content(content: str) -> str:
    """
    Strip one leading and one trailing whitespace run, but only at an edge
    where that run contains a newline.

    Indentation of the first line survives, as does everything between the
    two edges. Applying this twice gives the same result as applying it once.
    """
    if "\n" in content and not content.strip():
        return ""

    body = content.lstrip()
    leading = content[:len(content) - len(body)]
    if "\n" in leading:
        content = content[leading.rindex("\n") + 1:]

    body = content.rstrip()
    trailing = content[len(body):]
    if "\n" in trailing:
        cut = min(i for i, ch in enumerate(trailing) if ch in "\r\n")
        content = content[:len(body) + cut]
    return content


def _split_attribute(token: str) -> Optional[Tuple[str, str]]:
    if "=" not in token:
        return None
    key, raw_value = token.split("=", 1)
    if not key or not raw_value:
        return None
    return key, raw_value.strip('"')


def parse_opening_tag(inner: str) -> Tuple[str, Optional[Dict[str, str]]]:
    """
    Split the text between ``<`` and ``>`` into a tag name and its attributes.

    Tokens without ``=`` are ignored. Returns ``(name, None)`` when no
    attribute could be parsed.
    """
    tokens = _ATTR_TOKEN_RE.findall(inner.strip())
    if not tokens:
        return "", None

    meta: Dict[str, str] = {}
    for token in tokens[1:]:
        pair = _split_attribute(token)
        if pair is None:
            logger.debug("Ignoring attribute token without a value: %r", token)
            continue
        meta[pair[0]] = pair[1]
    return tokens[0], (meta or None)


def parse_tags(text: str) -> List[ParsedTag]:
    """
    Scan ``text`` once, left to right, and return every top-level tag in
    document order.

    Tag content is opaque: it is never parsed recursively, so ``<`` and ``>``
    inside generated code are fine as long as the exact closing delimiter of
    the open tag does not appear. A same-name tag nested inside another closes
    at the first ``</name>``.

    Args:
        text: Raw model output.

    Returns:
        List[ParsedTag]: Empty when the text contains no tags.

    Raises:
        MalformedMarkup: An opening tag has no ``>``, an empty name, or no
            matching closing tag anywhere in the rest of the text.
    """
    results: List[ParsedTag] = []
    cursor = 0
    length = len(text)

    while cursor < length:
        open_start = text.find("<", cursor)
        if open_start == -1:
            break

        open_end = text.find(">", open_start)
        if open_end == -1:
            raise MalformedMarkup(f"Unterminated opening tag at offset {open_start}")

        tag_name, meta = parse_opening_tag(text[open_start + 1:open_end])
        if not tag_name:
            raise MalformedMarkup(f"Empty tag name at offset {open_start}")

        if tag_name.startswith("/"):
            # Leftover closing delimiter, e.g. after a same-name nested block.
            logger.debug("Skipping stray closing tag <%s> at offset %d", tag_name, open_start)
            cursor = open_end + 1
            continue

        closing_tag = f"</{tag_name}>"
        close_start = text.find(closing_tag, open_end + 1)
        if close_start == -1:
            raise MalformedMarkup(
                f"Missing closing tag {closing_tag} for <{tag_name}> opened at offset {open_start}"
            )

        results.append(ParsedTag(
            tag=tag_name,
            content=normalize_content(text[open_end + 1:close_start]),
            meta=meta,
        ))
        cursor = close_start + len(closing_tag)

    logger.debug("Parsed %d tag(s) from %d characters", len(results), length)
    return results
