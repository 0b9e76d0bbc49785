from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..fetcher.models import Article


@dataclass
class FeedState:
    loading: bool = True
    refreshing: bool = False
    error: Optional[str] = None
    articles: Tuple[Article, ...] = ()
    selected_article: Optional[Article] = None

    @property
    def screen(self) -> str:
        """Which view to show: detail, loading, error, empty or feed."""
        if self.selected_article is not None:
            return "detail"
        if self.articles:
            return "feed"
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        return "empty"
