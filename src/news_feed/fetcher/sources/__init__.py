from .newsapi import NewsApiClient

__all__ = ["NewsApiClient"]
