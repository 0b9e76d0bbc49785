"""Tagged result of a NewsAPI fetch.

Callers branch on the concrete type (or on ``success``) instead of probing
optional fields, so both outcomes have to be handled explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, Union

from .models import Article


@dataclass(frozen=True)
class FetchSuccess:
    articles: Tuple[Article, ...] = ()
    total: Optional[int] = None
    success: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": True,
            "articles": [a.model_dump(by_alias=True) for a in self.articles],
        }
        if self.total is not None:
            data["total"] = self.total
        return data


@dataclass(frozen=True)
class FetchFailure:
    error: str
    success: Literal[False] = field(default=False, init=False)
    articles: Tuple[Article, ...] = field(default=(), init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error, "articles": []}


FetchResult = Union[FetchSuccess, FetchFailure]
