"""
Application DI Container (dependency-injector).

Owns the process-wide singletons: the corpus index and the widget resolver.
Both are built lazily on first access and shared by every session.

Usage::

    from magazine_search.container import ApplicationContainer
    from magazine_search.infrastructure import Settings

    container = ApplicationContainer()
    container.config.from_dict(Settings.from_env().to_config())

    index = container.corpus_index()
    widgets = container.widget_resolver()

    # In tests, override any provider:
    container.corpus_index.override(providers.Object(CorpusIndex(articles)))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

logger = logging.getLogger(__name__)


def _create_corpus_index(blog_data_path: str) -> object:
    """Lazy factory for CorpusIndex (raises CorpusLoadError)."""
    from magazine_search.application.corpus import load_corpus

    return load_corpus(blog_data_path)


def _create_widget_resolver(ui_assets_dir: str, widget_prebuilt_dir: str | None) -> object:
    """Lazy factory for WidgetResolver."""
    from magazine_search.application.widgets import WidgetResolver

    return WidgetResolver(ui_assets_dir, widget_prebuilt_dir or None)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the Magazine Search MCP application.

    - ``corpus_index``: validated articles loaded from the corpus file
    - ``widget_resolver``: memoizing widget asset resolver
    """

    config = providers.Configuration()

    corpus_index = providers.Singleton(
        _create_corpus_index,
        blog_data_path=config.blog_data_path,
    )

    widget_resolver = providers.Singleton(
        _create_widget_resolver,
        ui_assets_dir=config.ui_assets_dir,
        widget_prebuilt_dir=config.widget_prebuilt_dir,
    )


__all__ = ["ApplicationContainer"]
