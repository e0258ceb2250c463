from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Body:
    text: str

@dataclass(frozen=True)
class RedirectTo:
    location: str

FetchResult = Union[Body, RedirectTo]

class BaseFetcher:
    async def get(self, url: str) -> FetchResult:
        raise NotImplementedError
