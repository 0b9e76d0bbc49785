from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class NewsApiSettings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_country: str = "us"
    default_keyword: str = "news"


def get_settings() -> NewsApiSettings:
    """Build client settings from the environment (and a local .env file)."""
    load_dotenv()
    api_key = os.getenv("NEWSAPI_API_KEY")
    if not api_key:
        raise RuntimeError("Missing required env vars: NEWSAPI_API_KEY")
    return NewsApiSettings(
        api_key=api_key,
        base_url=os.getenv("NEWSAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        timeout_seconds=float(os.getenv("NEWSAPI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        default_country=os.getenv("NEWS_COUNTRY", "us"),
        default_keyword=os.getenv("NEWS_SEARCH_KEYWORD", "news"),
    )
