"""news_feed - NewsAPI headline fetcher and in-memory feed presenter."""

__version__ = "0.1.0"
