"""
Magazine Search - MCP server for the Unic magazine article corpus

Exposes keyword search, date and author filters, recency listings and
single-article previews to MCP clients over streamable HTTP. Results are
rendered as interactive widgets when the built UI assets are available,
and as plain text otherwise.

Usage:
    from magazine_search import CorpusIndex, load_corpus

    index = load_corpus("blogposts.en.json")
    for article in index.search("AI", limit=5):
        print(f"{article.slug}: {article.title}")

Features:
    - Case-insensitive search in title, summary and author
    - Inclusive date range filtering, newest first
    - Self-contained widget documents built from hashed UI bundles
    - Per-request MCP sessions with CORS and Accept repair
"""

from .application.corpus import CorpusIndex, clamp_limit, load_corpus
from .domain.entities import Article, HeroMedia, normalize_record

__version__ = "1.0.0"

__all__ = [
    "Article",
    "CorpusIndex",
    "HeroMedia",
    "clamp_limit",
    "load_corpus",
    "normalize_record",
]
