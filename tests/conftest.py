"""Shared fixtures: a fake aiohttp session and NewsAPI payloads."""

from typing import Any, Dict, List, Optional

import pytest

from news_feed.fetcher import Article, NewsApiSettings


class FakeResponse:
    def __init__(self, status: int = 200, body: Any = None, json_error: Optional[Exception] = None):
        self.status = status
        self._body = body
        self._json_error = json_error

    async def json(self, content_type=None):
        if self._json_error is not None:
            raise self._json_error
        return self._body


class FakeRequest:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[BaseException] = None):
        self._response = response
        self._error = error

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self._response

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; replays one outcome per call."""

    def __init__(self, *outcomes):
        self._outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            return FakeRequest(error=outcome)
        return FakeRequest(response=outcome)

    async def close(self):
        self.closed = True


@pytest.fixture
def settings() -> NewsApiSettings:
    return NewsApiSettings(api_key="test-key", base_url="https://newsapi.test/v2")


@pytest.fixture
def raw_articles() -> List[Dict[str, Any]]:
    return [
        {
            "source": {"id": None, "name": "Example Times"},
            "author": "Jane Doe",
            "title": "Markets rally",
            "description": "Stocks closed higher.\nBonds were flat.\nOil slipped.",
            "url": "https://example.com/markets",
            "urlToImage": "https://example.com/markets.jpg",
            "publishedAt": "2026-10-16T09:30:00Z",
            "content": "Stocks closed higher on Friday...",
        },
        {
            "source": {"id": None, "name": None},
            "author": None,
            "title": "No picture here",
            "description": None,
            "url": "https://example.com/no-picture",
            "urlToImage": None,
            "publishedAt": "2026-10-16T08:00:00Z",
            "content": None,
        },
        {
            "source": {"id": "wire", "name": "Wire"},
            "author": None,
            "title": "Blank picture",
            "description": "Whitespace only image",
            "url": "https://example.com/blank",
            "urlToImage": "   ",
            "publishedAt": "garbage",
            "content": None,
        },
    ]


def make_article(title: str, image: Optional[str] = "https://img.test/x.jpg", **extra) -> Article:
    payload = {"title": title, "url": f"https://example.com/{title.lower()}", "urlToImage": image}
    payload.update(extra)
    return Article.model_validate(payload)


@pytest.fixture
def article_factory():
    return make_article
