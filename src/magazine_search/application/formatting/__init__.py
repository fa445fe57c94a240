"""Plain-text and structured rendering of article results."""

from __future__ import annotations

from .formatter import (
    NO_ARTICLES,
    NO_SUMMARY,
    create_list_payload,
    create_preview_payload,
    create_search_payload,
    describe_date_range,
    format_article_list,
    format_article_preview,
    format_article_url_list,
    format_long_date,
    format_month_year,
    format_short_date,
    iso_timestamp,
    to_widget_article,
)
from .payloads import ArticleListPayload, ArticlePreviewPayload, WidgetArticle

__all__ = [
    "NO_ARTICLES",
    "NO_SUMMARY",
    "ArticleListPayload",
    "ArticlePreviewPayload",
    "WidgetArticle",
    "create_list_payload",
    "create_preview_payload",
    "create_search_payload",
    "describe_date_range",
    "format_article_list",
    "format_article_preview",
    "format_article_url_list",
    "format_long_date",
    "format_month_year",
    "format_short_date",
    "iso_timestamp",
    "to_widget_article",
]
