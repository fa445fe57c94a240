"""
Structured payload models rendered by the article widgets.

The widget bundle reads camelCase keys (publicationDate, heroUrl,
generatedAt), so every model serializes by alias.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WidgetModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_structured(self) -> dict[str, Any]:
        """Dump as the JSON object sent in structuredContent."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WidgetArticle(_WidgetModel):
    """One article as the widgets render it."""

    id: str
    slug: str
    title: str
    lead: str = ""
    author: str
    publication_date: str
    url: str
    hero_url: str | None = None
    hero_alt: str | None = None


class ArticleListPayload(_WidgetModel):
    """Payload for the article-list widget."""

    heading: str
    articles: list[WidgetArticle] = Field(default_factory=list)
    summary: str
    total: int
    generated_at: str
    context: dict[str, Any] = Field(default_factory=dict)


class ArticlePreviewPayload(_WidgetModel):
    """Payload for the article-preview widget."""

    heading: str = "Article Preview"
    article: WidgetArticle
    generated_at: str
