"""
Plain-text summary extraction from a raw wiki page.

Purely lexical: no DOM is built, tags and entity references are cut out
with regular expressions. The output only has to be plausible prose for
speech, so over-stripping on odd markup is tolerated.
"""

import re
from typing import Optional

from app.core.config import settings
from app.core.errors import MalformedInput, NoParagraphFound

PARAGRAPH_MARKER = "<p"
PARAGRAPH_PATTERN = re.compile(r"<p>([\w\W]*?)</p>")
TAG_PATTERN = re.compile(r"<.*?>")
ENTITY_PATTERN = re.compile(r"&.*?;")


def truncate(doc: str, window: Optional[int] = None) -> str:
    """
    Cut the document down to the region starting at the first paragraph
    marker, at most `window` characters long.
    """
    if window is None:
        window = settings.TRUNCATE_WINDOW
    if not doc:
        raise MalformedInput("Empty document")

    idx = doc.find(PARAGRAPH_MARKER)
    if idx < 0:
        raise MalformedInput(f"No '{PARAGRAPH_MARKER}' marker in document of {len(doc)} characters")
    return doc[idx:idx + window]


def first_paragraph(doc: str) -> str:
    """Return the first <p>...</p> block, tags included."""
    match = PARAGRAPH_PATTERN.search(doc)
    if match is None:
        raise NoParagraphFound(f"No <p>...</p> block in {len(doc)} characters of content")
    return match.group(0)


def strip_markup(block: str) -> str:
    """Remove tags, then entity references."""
    return ENTITY_PATTERN.sub("", TAG_PATTERN.sub("", block))


def process(doc: str) -> str:
    content = truncate(doc)
    print(f"CONTENT: {_preview(content)}")

    paragraph = first_paragraph(content)
    print(f"SELECTED PARAGRAPH: {_preview(paragraph)}")

    cleaned = strip_markup(paragraph)
    print(f"CLEANED CONTENT: {cleaned}")
    return cleaned


def _preview(text: str, limit: int = 500) -> str:
    # Keep trace lines readable for multi-kilobyte pages
    return text[:limit] + "... [truncated]" if len(text) > limit else text
