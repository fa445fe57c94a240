"""
Unified Exception Hierarchy for Magazine Search MCP.

Exception Hierarchy:
    MagazineSearchError (base)
    ├── ValidationError
    │   ├── InvalidDateError
    │   └── InvalidSlugError
    ├── DataError
    │   ├── NotFoundError
    │   │   └── ArticleNotFoundError
    │   └── CorpusLoadError
    ├── WidgetUnavailableError
    └── ConfigurationError

Validation errors are reported back on the tool call that caused them.
Widget errors never leave the widget resolver. Corpus load errors are fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Recoverable, the call can be corrected
    ERROR = auto()        # The operation failed
    CRITICAL = auto()     # Cannot serve traffic


class ErrorCategory(Enum):
    """Categories for error classification."""
    VALIDATION = "validation"
    DATA = "data"
    WIDGET = "widget"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context for error messages."""
    tool_name: str | None = None
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    example: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def with_defaults(
        self,
        *,
        input_value: Any = None,
        suggestion: str | None = None,
        example: str | None = None,
    ) -> ErrorContext:
        """Return a copy where unset fields are filled from the given defaults."""
        return ErrorContext(
            tool_name=self.tool_name,
            operation=self.operation,
            input_value=self.input_value if self.input_value is not None else input_value,
            suggestion=self.suggestion or suggestion,
            example=self.example or example,
            metadata=self.metadata,
        )


class MagazineSearchError(Exception):
    """
    Base exception for all Magazine Search errors.

    Provides:
    - Structured error context
    - Severity classification
    - Agent-friendly formatting
    """

    __slots__ = ('context', 'severity', 'category')

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.DATA,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.tool_name:
            result["tool"] = self.context.tool_name
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.example:
            result["example"] = self.context.example
        return result

    def to_agent_message(self) -> str:
        """Format for Agent consumption (Markdown)."""
        parts = [f"❌ **Error**: {self}"]

        if self.context.suggestion:
            parts.append(f"💡 **Suggestion**: {self.context.suggestion}")
        if self.context.example:
            parts.append(f"📝 **Example**: `{self.context.example}`")

        return "\n".join(parts)


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(MagazineSearchError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class InvalidDateError(ValidationError):
    """Raised when a date bound cannot be parsed."""

    def __init__(
        self,
        value: Any,
        *,
        bound: str = "date",
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).with_defaults(
            input_value=value,
            suggestion="Use ISO format (YYYY-MM-DD)",
            example='filter_articles_by_date(startDate="2024-01-01", endDate="2024-06-30")',
        )
        super().__init__(
            f"Invalid {bound} format: {value}. Expected ISO format (YYYY-MM-DD)",
            context=ctx,
        )
        self.bound = bound


class InvalidSlugError(ValidationError):
    """Raised when an article slug has characters outside [a-z0-9-]."""

    def __init__(
        self,
        slug: Any,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).with_defaults(
            input_value=slug,
            suggestion="Slugs contain only letters, digits and hyphens",
            example="blog://article/value-added-ai-solutions",
        )
        super().__init__(f"Invalid article slug: {slug!r}", context=ctx)


# =============================================================================
# Data Errors
# =============================================================================

class DataError(MagazineSearchError):
    """Base class for data-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=severity,
            category=ErrorCategory.DATA,
        )


class NotFoundError(DataError):
    """Raised when requested data is not found."""

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        msg = f"{resource} not found"
        if identifier:
            msg = f"{resource} not found: {identifier}"

        ctx = (context or ErrorContext()).with_defaults(
            input_value=identifier,
            suggestion="Check the identifier and try again",
        )
        super().__init__(msg, context=ctx)
        self.identifier = identifier


class ArticleNotFoundError(NotFoundError):
    """Raised when no article exists for a slug (resource-not-found)."""

    def __init__(
        self,
        slug: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).with_defaults(
            suggestion="Use search_articles to discover valid slugs",
            example='search_articles(query="AI")',
        )
        super().__init__("Article", slug, context=ctx)


class CorpusLoadError(DataError):
    """Raised when the corpus file is missing or unparseable. Fatal at startup."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        full_msg = f"Corpus load failed: {message}"
        if path:
            full_msg = f"Corpus load failed ({path}): {message}"
        super().__init__(full_msg, context=context, severity=ErrorSeverity.CRITICAL)
        self.path = path


# =============================================================================
# Widget Errors
# =============================================================================

class WidgetUnavailableError(MagazineSearchError):
    """Raised inside the widget resolver when a widget cannot be built."""

    def __init__(
        self,
        widget_name: str,
        reason: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Widget '{widget_name}' unavailable: {reason}",
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.WIDGET,
        )
        self.widget_name = widget_name


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(MagazineSearchError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
