from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None


class Article(BaseModel):
    """
    Pydantic model for a single NewsAPI article.
    Accepts the camelCase keys of the wire format as well as field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    source: ArticleSource = Field(default_factory=ArticleSource)
    title: str = ""
    description: Optional[str] = None
    content: Optional[str] = None
    url: str = ""
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    author: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, v):
        if v is None:
            return ArticleSource()
        return v

    @field_validator("title", "url", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def source_name(self) -> str:
        name = (self.source.name or "").strip()
        return name or "Unknown"

    @property
    def has_image(self) -> bool:
        return bool(self.url_to_image and self.url_to_image.strip())
