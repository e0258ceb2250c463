from typing import List, Optional
import httpx

from app.core.config import settings
from app.core.errors import HttpStatusError, TransportError
from .base import BaseFetcher, Body, FetchResult, RedirectTo

REDIRECT_STATUS = 301


class HttpxFetcher(BaseFetcher):
    """
    Single GET per call, no automatic redirect following.

    A 301 resolves to RedirectTo without touching the body; the caller
    decides whether to fetch the new location.
    """

    def __init__(
        self,
        timeout_sec: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_sec = settings.REQUEST_TIMEOUT if timeout_sec is None else timeout_sec
        self.transport = transport

    def _headers(self) -> dict:
        return {
            "User-Agent": settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.7",
        }

    async def get(self, url: str) -> FetchResult:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_sec,
                headers=self._headers(),
                follow_redirects=False,
                transport=self.transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    status = response.status_code

                    if status == REDIRECT_STATUS:
                        location = response.headers.get("location")
                        if not location:
                            raise HttpStatusError(status, _target(response), "redirect without Location header")
                        # Relative locations resolve against the URL just requested
                        return RedirectTo(str(response.url.join(location)))

                    if status < 200 or status >= 300:
                        raise HttpStatusError(status, _target(response))

                    chunks: List[str] = []
                    async for chunk in response.aiter_text():
                        chunks.append(chunk)
                    return Body("".join(chunks))
        except httpx.TimeoutException as e:
            raise TransportError(url, f"Timeout while fetching: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(url, f"{type(e).__name__}: {e}") from e


def _target(response: httpx.Response) -> str:
    request_url = response.request.url
    return f"{request_url.host} {request_url.raw_path.decode('ascii')}"
