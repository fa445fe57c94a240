"""
MCP Resources - Widget markup, article documents and the tool reference

Resources:
- ui://widget/article-list.html      (text/html+skybridge)
- ui://widget/article-preview.html   (text/html+skybridge)
- blog://article/{slug}              (template, application/json)
- blog://article/<slug>              (newest articles, listed)
- blog://tools/reference
"""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import FunctionResource
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData

from magazine_search.application.corpus import DEFAULT_LISTED_RESOURCES, CorpusIndex
from magazine_search.application.widgets import (
    WIDGET_MIME_TYPE,
    WIDGET_SPECS,
    WidgetResolver,
    WidgetSpec,
    widget_descriptor_meta,
)
from magazine_search.core.exceptions import ArticleNotFoundError, InvalidSlugError
from magazine_search.domain.entities import Article, is_valid_slug

logger = logging.getLogger(__name__)

ARTICLE_URI_TEMPLATE = "blog://article/{slug}"
ARTICLE_MIME_TYPE = "application/json"
ARTICLE_URI_PREFIX = "blog://article/"

# JSON-RPC code for an unknown resource
RESOURCE_NOT_FOUND = -32002


def article_uri(slug: str) -> str:
    return ARTICLE_URI_TEMPLATE.format(slug=slug)


def article_json(article: Article) -> str:
    return json.dumps(article.to_dict(), indent=2, ensure_ascii=False)


def read_article(index: CorpusIndex, slug: str) -> str:
    """
    Article document for a slug.

    Raises:
        InvalidSlugError: If the slug has characters outside [a-z0-9-].
        ArticleNotFoundError: If no article has this slug.
    """
    if not is_valid_slug(slug):
        raise InvalidSlugError(slug)
    article = index.lookup_by_slug(slug)
    if article is None:
        raise ArticleNotFoundError(slug)
    return article_json(article)


def _install_article_reader(mcp: FastMCP, index: CorpusIndex):
    """
    Serve blog://article/ reads directly on the protocol server.

    Unknown or invalid slugs surface as resource-not-found (-32002).
    """
    fastmcp_read = mcp.read_resource

    @mcp._mcp_server.read_resource()
    async def read_resource(uri):
        uri_text = str(uri)
        if not uri_text.startswith(ARTICLE_URI_PREFIX):
            return await fastmcp_read(uri)

        slug = uri_text[len(ARTICLE_URI_PREFIX):]
        try:
            content = read_article(index, slug)
        except (InvalidSlugError, ArticleNotFoundError) as e:
            logger.info(f"Resource not found: {uri_text} ({e})")
            raise McpError(
                ErrorData(code=RESOURCE_NOT_FOUND, message="Resource not found", data={"uri": uri_text})
            ) from e
        return [ReadResourceContents(content=content, mime_type=ARTICLE_MIME_TYPE)]


def _register_widget_resource(mcp: FastMCP, spec: WidgetSpec, widgets: WidgetResolver):
    descriptor = widgets.resolve(spec.name)

    @mcp.resource(
        spec.template_uri,
        name=f"{spec.name}-widget",
        title=spec.title,
        description=spec.description,
        mime_type=WIDGET_MIME_TYPE,
        meta=widget_descriptor_meta(descriptor) if descriptor is not None else None,
    )
    def widget_document() -> str:
        return widgets.document(spec.name)


def register_resources(
    mcp: FastMCP,
    index: CorpusIndex,
    widgets: WidgetResolver,
    max_listed_resources: int = DEFAULT_LISTED_RESOURCES,
):
    """Register widget, article and reference resources."""
    from .tool_registry import TOOL_CATEGORIES

    for spec in WIDGET_SPECS.values():
        _register_widget_resource(mcp, spec, widgets)

    @mcp.resource(
        ARTICLE_URI_TEMPLATE,
        name="article",
        title="Unic magazine article",
        description=(
            "Read a specific article by slug. Use tools like search_articles to "
            "discover slugs, then read via blog://article/{slug}."
        ),
        mime_type=ARTICLE_MIME_TYPE,
    )
    def get_article(slug: str) -> str:
        return read_article(index, slug)

    listed = index.recent_for_listing(max_listed_resources)
    for article in listed:
        mcp.add_resource(
            FunctionResource(
                uri=article_uri(article.slug),
                name=article.title,
                description=article.lead or "No description available",
                mime_type=ARTICLE_MIME_TYPE,
                fn=lambda article=article: article_json(article),
            )
        )

    @mcp.resource("blog://tools/reference", mime_type=ARTICLE_MIME_TYPE)
    def get_tools_reference() -> str:
        """Reference for all available MCP tools, grouped by category."""
        return json.dumps(TOOL_CATEGORIES, indent=2, ensure_ascii=False)

    _install_article_reader(mcp, index)

    logger.info(f"Registered MCP resources: {len(WIDGET_SPECS)} widgets, {len(listed)} articles")
