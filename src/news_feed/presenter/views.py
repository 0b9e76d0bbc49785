"""View-models for feed cards and the article detail view.

Date formatting here is the presentation boundary for malformed
``publishedAt`` values: anything that does not parse becomes ``UNKNOWN_DATE``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..fetcher.models import Article

UNKNOWN_DATE = "Unknown date"
UNKNOWN_SOURCE = "Unknown Source"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class ArticleCard:
    key: str
    source: str
    title: str
    description: str
    date: str
    image_url: Optional[str]


@dataclass(frozen=True)
class ArticleDetail:
    source: str
    title: str
    byline: Optional[str]
    description: Optional[str]
    content: Optional[str]
    published: str
    image_url: Optional[str]
    url: str


def parse_timestamp(value: object) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def format_published_at(value: object) -> str:
    """Format as e.g. ``Oct 16, 2026, 09:30 AM``, in the timestamp's own offset."""
    dt = parse_timestamp(value)
    if dt is None:
        return UNKNOWN_DATE
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {hour:02d}:{dt.minute:02d} {meridiem}"


def format_card_date(value: object) -> str:
    dt = parse_timestamp(value)
    if dt is None:
        return UNKNOWN_DATE
    return f"{dt.month}/{dt.day}/{dt.year}"


def truncate_text(text: Optional[str], max_lines: int = 2) -> str:
    if not text:
        return ""
    return "\n".join(text.split("\n")[:max_lines])


def build_card(article: Article) -> ArticleCard:
    return ArticleCard(
        key=article.url,
        source=article.source_name,
        title=article.title,
        description=truncate_text(article.description),
        date=format_card_date(article.published_at),
        image_url=article.url_to_image,
    )


def build_detail(article: Article) -> ArticleDetail:
    source = (article.source.name or "").strip() or UNKNOWN_SOURCE
    return ArticleDetail(
        source=source,
        title=article.title,
        byline=f"By {article.author}" if article.author else None,
        description=article.description or None,
        content=article.content or None,
        published=format_published_at(article.published_at),
        image_url=article.url_to_image,
        url=article.url,
    )
