from __future__ import annotations

from typing import Iterable, Optional, Tuple

import structlog

from ..fetcher.models import Article
from ..fetcher.result import FetchFailure, FetchResult, FetchSuccess
from .handoff import open_article_url
from .state import FeedState
from .views import ArticleCard, ArticleDetail, build_card, build_detail

logger = structlog.get_logger()

GENERIC_ERROR = "Failed to fetch news. Please try again."
UNEXPECTED_ERROR = "An unexpected error occurred."

HEADLINES = "headlines"
SEARCH = "search"


def filter_feed(articles: Iterable[Article]) -> Tuple[Article, ...]:
    """Keep, in order, only the articles with a non-blank image URL."""
    return tuple(article for article in articles if article.has_image)


class FeedPresenter:
    """Owns the in-memory feed and drives it from fetch results.

    Every fetch is numbered; a response that is not for the latest issued
    request is dropped, so overlapping refreshes cannot overwrite newer data.
    """

    def __init__(
        self,
        client,
        country: Optional[str] = None,
        keyword: Optional[str] = None,
        opener=None,
    ):
        self.client = client
        self.state = FeedState()
        self._opener = opener
        self._request: Tuple[str, Optional[str]] = (SEARCH, keyword) if keyword else (HEADLINES, country)
        self._sequence = 0

    @property
    def request(self) -> Tuple[str, Optional[str]]:
        return self._request

    async def load(self) -> bool:
        return await self._fetch(refreshing=False)

    async def refresh(self) -> bool:
        return await self._fetch(refreshing=True)

    async def retry(self) -> bool:
        """Re-issue the last fetch with the same arguments."""
        return await self._fetch(refreshing=False)

    async def headlines(self, country: Optional[str] = None) -> bool:
        self._request = (HEADLINES, country)
        return await self._fetch(refreshing=False)

    async def search(self, keyword: Optional[str]) -> bool:
        self._request = (SEARCH, keyword)
        return await self._fetch(refreshing=False)

    async def _call_client(self) -> FetchResult:
        kind, arg = self._request
        if kind == SEARCH:
            return await self.client.search_articles(arg)
        return await self.client.fetch_top_headlines(arg)

    async def _fetch(self, refreshing: bool) -> bool:
        self._sequence += 1
        sequence = self._sequence
        if refreshing:
            self.state.refreshing = True
        else:
            self.state.loading = True
        self.state.error = None

        try:
            result = await self._call_client()
        except Exception as exc:
            logger.error("feed_fetch_failed", error=str(exc), request=self._request)
            result = FetchFailure(error=str(exc) or UNEXPECTED_ERROR)

        if sequence != self._sequence:
            logger.info("stale_response_discarded", sequence=sequence, latest=self._sequence)
            return False

        if isinstance(result, FetchSuccess):
            self.state.articles = filter_feed(result.articles)
            logger.debug("feed_updated", received=len(result.articles), shown=len(self.state.articles))
        else:
            self.state.error = result.error or GENERIC_ERROR
            logger.warning("feed_error", error=self.state.error)

        self.state.loading = False
        self.state.refreshing = False
        return True

    def select(self, article: Article) -> None:
        self.state.selected_article = article

    def select_at(self, index: int) -> Optional[Article]:
        if not 0 <= index < len(self.state.articles):
            logger.warning("selection_out_of_range", index=index, size=len(self.state.articles))
            return None
        article = self.state.articles[index]
        self.select(article)
        return article

    def back(self) -> None:
        self.state.selected_article = None

    def open_selected(self) -> bool:
        article = self.state.selected_article
        if article is None:
            logger.warning("nothing_selected")
            return False
        return open_article_url(article.url, opener=self._opener)

    def cards(self) -> Tuple[ArticleCard, ...]:
        return tuple(build_card(article) for article in self.state.articles)

    def detail(self) -> Optional[ArticleDetail]:
        if self.state.selected_article is None:
            return None
        return build_detail(self.state.selected_article)
