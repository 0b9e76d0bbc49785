"""Headline fetcher - wraps the NewsAPI endpoints behind a tagged result."""

from .config import NewsApiSettings, get_settings
from .models import Article, ArticleSource
from .result import FetchFailure, FetchResult, FetchSuccess
from .sources.newsapi import NewsApiClient

__all__ = [
    "NewsApiSettings",
    "get_settings",
    "Article",
    "ArticleSource",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "NewsApiClient",
]
