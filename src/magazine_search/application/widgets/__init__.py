"""Widget asset resolution and self-contained HTML building."""

from __future__ import annotations

from .resolver import (
    ARTICLE_LIST,
    ARTICLE_PREVIEW,
    UNAVAILABLE_HTML,
    WIDGET_MIME_TYPE,
    WIDGET_SPECS,
    WidgetDescriptor,
    WidgetResolver,
    WidgetSpec,
    WidgetState,
    build_widget_html,
    escape_inline_script,
    escape_inline_style,
    render_widget_document,
    resolve_widget_asset,
    widget_descriptor_meta,
    widget_invocation_meta,
)

__all__ = [
    "ARTICLE_LIST",
    "ARTICLE_PREVIEW",
    "UNAVAILABLE_HTML",
    "WIDGET_MIME_TYPE",
    "WIDGET_SPECS",
    "WidgetDescriptor",
    "WidgetResolver",
    "WidgetSpec",
    "WidgetState",
    "build_widget_html",
    "escape_inline_script",
    "escape_inline_style",
    "render_widget_document",
    "resolve_widget_asset",
    "widget_descriptor_meta",
    "widget_invocation_meta",
]
