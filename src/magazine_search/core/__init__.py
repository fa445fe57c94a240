"""
Core module for Magazine Search MCP.

Provides the unified exception hierarchy shared by every layer.
"""

from .exceptions import (
    ArticleNotFoundError,
    ConfigurationError,
    CorpusLoadError,
    DataError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidDateError,
    InvalidSlugError,
    MagazineSearchError,
    NotFoundError,
    ValidationError,
    WidgetUnavailableError,
)

__all__ = [
    "MagazineSearchError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "InvalidDateError",
    "InvalidSlugError",
    "DataError",
    "NotFoundError",
    "ArticleNotFoundError",
    "CorpusLoadError",
    "WidgetUnavailableError",
    "ConfigurationError",
]
