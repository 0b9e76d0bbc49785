"""Feed presenter - in-memory feed state, view-models and browser hand-off."""

from .feed import FeedPresenter, filter_feed
from .handoff import can_open_url, open_article_url
from .state import FeedState
from .views import ArticleCard, ArticleDetail, format_card_date, format_published_at

__all__ = [
    "FeedPresenter",
    "filter_feed",
    "can_open_url",
    "open_article_url",
    "FeedState",
    "ArticleCard",
    "ArticleDetail",
    "format_card_date",
    "format_published_at",
]
