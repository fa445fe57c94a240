"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from magazine_search.application.corpus import CorpusIndex
from magazine_search.domain.entities import normalize_record
from magazine_search.infrastructure import Settings

# ============================================================
# Environment Fixtures
# ============================================================


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================
# Corpus Fixtures
# ============================================================


@pytest.fixture
def sample_records():
    """Raw CMS records: four valid, four that must be rejected."""
    return [
        {
            "slug": "value-added-ai-solutions",
            "title": "Value-added AI solutions tailored to your company",
            "publicationDate": "2024-03-10",
            "lead": "How AI creates measurable value.",
            "author": {"name": "Jane Doe"},
            "link": "https://www.unic.com/en/magazine/value-added-ai-solutions",
            "keyvisual": {"cloudinaryAsset": [{"url": "https://img.example/ai.jpg", "alt": "AI"}]},
        },
        {
            "slug": "commerce-trends",
            "title": "Commerce trends 2024",
            "publicationDate": "2024-01-20T08:00:00Z",
            "lead": "Trends in digital commerce.",
            "author": "John Smith",
        },
        {
            "slug": "design-systems",
            "title": "Why design systems matter",
            "publicationDate": "2023-11-05",
            "heroUrl": "https://img.example/ds.jpg",
            "heroAlt": "Design",
        },
        {
            "slug": "ai-in-healthcare",
            "title": "AI in healthcare",
            "publicationDate": "2024-03-10",
            "lead": "Diagnostics and beyond.",
            "author": "Jane Doe-Miller",
        },
        {"slug": "bad slug!", "title": "Broken slug", "publicationDate": "2024-01-01"},
        {"title": "No slug", "publicationDate": "2024-01-01"},
        {"slug": "no-date", "title": "No date"},
        {"slug": "bad-date", "title": "Bad date", "publicationDate": "not-a-date"},
    ]


@pytest.fixture
def sample_articles(sample_records):
    """Validated articles in load order."""
    return [a for a in (normalize_record(r) for r in sample_records) if a is not None]


@pytest.fixture
def index(sample_articles):
    return CorpusIndex(sample_articles)


@pytest.fixture
def corpus_file(temp_dir, sample_records):
    """Corpus JSON file on disk."""
    path = temp_dir / "blogposts.en.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


# ============================================================
# Widget Fixtures
# ============================================================


@pytest.fixture
def assets_dir(temp_dir):
    """Built UI assets for both widgets, with two hashed list bundles."""
    dist = temp_dir / "dist"
    dist.mkdir()
    (dist / "article-list-aaa111.js").write_text("console.log('old');", encoding="utf-8")
    (dist / "article-list-bbb222.js").write_text("console.log('new');", encoding="utf-8")
    (dist / "article-list-bbb222.css").write_text("body { color: red; }", encoding="utf-8")
    (dist / "article-preview.js").write_text("render('</script>');", encoding="utf-8")
    (dist / "article-preview.css").write_text("p { margin: 0; }", encoding="utf-8")
    return dist


@pytest.fixture
def settings(corpus_file, assets_dir):
    return Settings(
        blog_data_path=corpus_file,
        ui_assets_dir=assets_dir,
        widget_prebuilt_dir=assets_dir,
    )


@pytest.fixture
def settings_without_widgets(corpus_file, temp_dir):
    missing = temp_dir / "missing-dist"
    return Settings(
        blog_data_path=corpus_file,
        ui_assets_dir=missing,
        widget_prebuilt_dir=missing,
    )
