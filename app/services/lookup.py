import asyncio
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from app.core.config import settings
from app.core.errors import LookupTimeout, TooManyRedirects
from app.fetch import extractor
from app.fetch.base import BaseFetcher, RedirectTo
from app.fetch.http_fetcher import HttpxFetcher

ERROR_MARKER = "Err:"
_TOPIC_SAFE_CHARS = "/:()',"


@dataclass
class LookupOutcome:
    topic: str
    url: str
    text: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_speech(self) -> str:
        if self.ok:
            return self.text
        return f"{ERROR_MARKER} {type(self.error).__name__}: {self.error}"


def build_topic_url(topic: str) -> str:
    """
    Join the wiki base URL and the topic. The topic goes in verbatim unless
    ENCODE_TOPIC is switched on.
    """
    if settings.ENCODE_TOPIC:
        topic = quote(topic, safe=_TOPIC_SAFE_CHARS)
    return settings.WIKI_BASE_URL + topic


async def fetch_document(url: str, fetcher: BaseFetcher, max_redirects: int) -> str:
    """Fetch url, following at most max_redirects 301 hops."""
    result = await fetcher.get(url)

    hops = 0
    while isinstance(result, RedirectTo):
        if hops >= max_redirects:
            raise TooManyRedirects(result.location, max_redirects)
        hops += 1
        print(f"FOLLOW REDIRECT to: {result.location}")
        result = await fetcher.get(result.location)

    return result.text


async def _run_pipeline(url: str, fetcher: BaseFetcher, max_redirects: int) -> str:
    html = await fetch_document(url, fetcher, max_redirects)
    print(f"HTML RECEIVED: {len(html)} characters")
    return extractor.process(html)


async def lookup_topic(
    topic: str,
    fetcher: Optional[BaseFetcher] = None,
    max_redirects: Optional[int] = None,
    deadline: Optional[float] = None,
) -> LookupOutcome:
    """
    Fetch the wiki page for a topic and extract its first paragraph.

    Failures are captured on the returned outcome rather than raised, so
    callers can inspect the error type before deciding how to present it.
    """
    if fetcher is None:
        fetcher = HttpxFetcher()
    if max_redirects is None:
        max_redirects = settings.MAX_REDIRECTS
    if deadline is None:
        deadline = settings.LOOKUP_DEADLINE_SECONDS

    url = build_topic_url(topic)
    print(f"LOOKUP '{topic}' -> {url}")

    try:
        pipeline = _run_pipeline(url, fetcher, max_redirects)
        if deadline:
            try:
                text = await asyncio.wait_for(pipeline, timeout=deadline)
            except asyncio.TimeoutError as e:
                raise LookupTimeout(topic, deadline) from e
        else:
            text = await pipeline
        return LookupOutcome(topic=topic, url=url, text=text)
    except Exception as e:
        print(f"ERROR looking up '{topic}': {type(e).__name__}: {e}")
        return LookupOutcome(topic=topic, url=url, error=e)


async def lookup(topic: str) -> str:
    """Summary text for a topic, or an 'Err:' line describing what went wrong."""
    outcome = await lookup_topic(topic)
    return outcome.as_speech()
