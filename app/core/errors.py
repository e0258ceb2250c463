"""
Failure types raised while fetching and extracting a topic summary.

Everything derives from WikiLookupError so the lookup service can capture
any pipeline failure in one place before flattening it to text.
"""
from typing import Optional


class WikiLookupError(Exception):
    """Base class for pipeline failures"""


class TransportError(WikiLookupError):
    """Connection could not be established or broke mid-stream."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason} ({url})")


class HttpStatusError(WikiLookupError):
    """Response status outside the 2xx range."""

    def __init__(self, status_code: int, target: str, detail: Optional[str] = None):
        self.status_code = status_code
        self.target = target
        message = f"{status_code}: {target}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TooManyRedirects(WikiLookupError):
    def __init__(self, location: str, max_redirects: int):
        self.location = location
        self.max_redirects = max_redirects
        super().__init__(f"Redirect limit of {max_redirects} reached, next location was {location}")


class LookupTimeout(WikiLookupError):
    def __init__(self, topic: str, seconds: float):
        self.topic = topic
        self.seconds = seconds
        super().__init__(f"Lookup of '{topic}' did not finish within {seconds:g}s")


class ExtractionError(WikiLookupError):
    """Raw page could not be turned into a summary"""


class MalformedInput(ExtractionError):
    """Document is empty or has no paragraph marker at all."""


class NoParagraphFound(ExtractionError):
    """No <p>...</p> block inside the truncated window."""
