import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError

from ..config import NewsApiSettings
from ..models import Article
from ..result import FetchFailure, FetchResult, FetchSuccess

logger = logging.getLogger(__name__)


class NewsApiClient:
    """Client for fetching articles from the NewsAPI v2 endpoints.

    Every public call returns a ``FetchResult``; transport errors, timeouts and
    non-2xx responses are converted into ``FetchFailure`` and never raised.
    """

    def __init__(self, settings: NewsApiSettings, session: aiohttp.ClientSession | None = None):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    async def fetch_top_headlines(self, country: str | None = None) -> FetchResult:
        """Fetch top headlines for a two-letter country code."""
        country = country or self.settings.default_country
        logger.info(f"Fetching top headlines, country={country}")
        return await self._get("/top-headlines", {"country": country}, with_total=True)

    async def search_articles(self, keyword: str | None = None) -> FetchResult:
        """Search all articles matching a keyword, newest first."""
        keyword = keyword or self.settings.default_keyword
        logger.info(f"Searching articles, q={keyword!r}")
        params = {"q": keyword, "sortBy": "publishedAt"}
        return await self._get("/everything", params, with_total=False)

    async def _get(self, path: str, params: Dict[str, str], with_total: bool) -> FetchResult:
        url = f"{self.base_url}{path}"
        query = {**params, "apiKey": self.settings.api_key}
        try:
            if self.session is None:
                async with aiohttp.ClientSession(timeout=self.timeout) as session:
                    return await self._request(session, url, query, with_total)
            return await self._request(self.session, url, query, with_total)
        except asyncio.TimeoutError:
            message = f"timeout of {int(self.settings.timeout_seconds * 1000)}ms exceeded"
        except Exception as e:
            message = str(e) or f"Request to {path} failed ({e.__class__.__name__})"

        logger.error(f"Error fetching {path}: {message}")
        return FetchFailure(error=message)

    async def _request(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Dict[str, str],
        with_total: bool,
    ) -> FetchResult:
        async with session.get(url, params=params, timeout=self.timeout) as response:
            if not 200 <= response.status < 300:
                message = await self._error_message(response)
                logger.error(f"NewsAPI returned {response.status}: {message}")
                return FetchFailure(error=message)
            data = await response.json(content_type=None)

        if not isinstance(data, dict):
            return FetchFailure(error="Unexpected response body from NewsAPI")

        if data.get("status") == "error":
            message = data.get("message") or "Unknown error"
            logger.error(f"NewsAPI error: {message}")
            return FetchFailure(error=str(message))

        articles = self._parse_articles(data.get("articles") or [])
        total = _as_int(data.get("totalResults")) if with_total else None
        logger.info(f"Fetched {len(articles)} articles")
        return FetchSuccess(articles=tuple(articles), total=total)

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        fallback = f"Request failed with status code {response.status}"
        try:
            body = await response.json(content_type=None)
        except Exception:
            return fallback
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return fallback

    def _parse_articles(self, raw_articles: List[Any]) -> List[Article]:
        articles = []
        for raw in raw_articles:
            try:
                articles.append(Article.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed article: {e.error_count()} validation error(s)")
                continue
        return articles


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
