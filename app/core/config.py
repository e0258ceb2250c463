import os
from typing import Optional


def _optional_seconds(raw: str) -> Optional[float]:
    value = float(raw)
    return value if value > 0 else None


class Settings:
    # Source wiki
    WIKI_BASE_URL: str = os.getenv("WIKI_BASE_URL", "https://en.wikipedia.org/wiki/")
    ENCODE_TOPIC: bool = os.getenv("ENCODE_TOPIC", "0").lower() in ("1", "true", "yes")

    # Fetching
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("USER_AGENT", "WikiTopicSummarizer/1.0 (voice skill backend)")
    MAX_REDIRECTS: int = int(os.getenv("MAX_REDIRECTS", "1"))

    # Whole lookup deadline; 0 disables it
    LOOKUP_DEADLINE_SECONDS: Optional[float] = _optional_seconds(os.getenv("LOOKUP_DEADLINE_SECONDS", "8"))

    # Extraction
    TRUNCATE_WINDOW: int = int(os.getenv("TRUNCATE_WINDOW", "32000"))

settings = Settings()
