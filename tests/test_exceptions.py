"""Tests for exceptions.py: the exception hierarchy and agent formatting."""

from magazine_search.core.exceptions import (
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


class TestMagazineSearchError:
    def test_basic_creation(self):
        e = MagazineSearchError("test error")
        assert str(e) == "test error"
        assert e.severity == ErrorSeverity.ERROR
        assert e.category == ErrorCategory.DATA

    def test_to_dict(self):
        ctx = ErrorContext(tool_name="t", suggestion="s", example="e")
        d = MagazineSearchError("fail", context=ctx).to_dict()
        assert d == {
            "error": "fail",
            "category": "data",
            "severity": "error",
            "tool": "t",
            "suggestion": "s",
            "example": "e",
        }

    def test_to_agent_message(self):
        ctx = ErrorContext(suggestion="Check input", example="search_articles(query='x')")
        msg = MagazineSearchError("Something went wrong", context=ctx).to_agent_message()
        assert "❌ **Error**: Something went wrong" in msg
        assert "💡 **Suggestion**: Check input" in msg
        assert "📝 **Example**: `search_articles(query='x')`" in msg

    def test_agent_message_without_context(self):
        assert MagazineSearchError("plain").to_agent_message() == "❌ **Error**: plain"


class TestErrorContext:
    def test_with_defaults_keeps_explicit_values(self):
        ctx = ErrorContext(suggestion="mine").with_defaults(suggestion="default", example="ex")
        assert ctx.suggestion == "mine"
        assert ctx.example == "ex"


class TestValidationErrors:
    def test_invalid_date(self):
        e = InvalidDateError("2024-13-45", bound="end date")
        assert isinstance(e, ValidationError)
        assert str(e) == "Invalid end date format: 2024-13-45. Expected ISO format (YYYY-MM-DD)"
        assert e.severity == ErrorSeverity.WARNING
        assert e.category == ErrorCategory.VALIDATION
        assert e.context.input_value == "2024-13-45"
        assert "filter_articles_by_date" in e.context.example

    def test_invalid_slug(self):
        e = InvalidSlugError("bad slug")
        assert "'bad slug'" in str(e)
        assert e.context.example.startswith("blog://article/")


class TestDataErrors:
    def test_not_found(self):
        e = NotFoundError("Article")
        assert str(e) == "Article not found"
        assert isinstance(e, DataError)

    def test_article_not_found(self):
        e = ArticleNotFoundError("missing")
        assert str(e) == "Article not found: missing"
        assert e.identifier == "missing"
        assert "search_articles" in e.context.suggestion

    def test_corpus_load_is_critical(self):
        e = CorpusLoadError("file not found", path="/tmp/x.json")
        assert str(e) == "Corpus load failed (/tmp/x.json): file not found"
        assert e.severity == ErrorSeverity.CRITICAL
        assert e.path == "/tmp/x.json"


class TestOtherErrors:
    def test_widget_unavailable(self):
        e = WidgetUnavailableError("article-list", "missing .js asset")
        assert str(e) == "Widget 'article-list' unavailable: missing .js asset"
        assert e.category == ErrorCategory.WIDGET
        assert e.widget_name == "article-list"

    def test_configuration(self):
        e = ConfigurationError("bad config")
        assert e.severity == ErrorSeverity.CRITICAL
        assert e.category == ErrorCategory.CONFIGURATION
