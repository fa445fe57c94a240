"""Corpus loading and querying."""

from __future__ import annotations

from .index import (
    DEFAULT_LIMIT,
    DEFAULT_LISTED_RESOURCES,
    MAX_LIMIT,
    CorpusIndex,
    clamp_limit,
    parse_date_bound,
)
from .loader import load_corpus

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_LISTED_RESOURCES",
    "MAX_LIMIT",
    "CorpusIndex",
    "clamp_limit",
    "load_corpus",
    "parse_date_bound",
]
