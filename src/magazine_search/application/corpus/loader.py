"""
Corpus Loader - Reads the CMS export and builds the CorpusIndex.

A missing or unparseable file is fatal: the server must refuse to serve
rather than run on an empty corpus.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from magazine_search.core.exceptions import CorpusLoadError
from magazine_search.domain.entities import normalize_record

from .index import CorpusIndex

logger = logging.getLogger(__name__)


def load_corpus(path: str | Path) -> CorpusIndex:
    """
    Load and validate articles from a JSON array file.

    Records without a valid slug, title or publication date are skipped.

    Raises:
        CorpusLoadError: If the file is missing, unreadable, or not a JSON array.
    """
    corpus_path = Path(path)
    if not corpus_path.is_file():
        raise CorpusLoadError("file not found", path=str(corpus_path))

    try:
        raw = json.loads(corpus_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"cannot read file: {e}", path=str(corpus_path)) from e
    except json.JSONDecodeError as e:
        raise CorpusLoadError(f"invalid JSON: {e}", path=str(corpus_path)) from e

    if not isinstance(raw, list):
        raise CorpusLoadError(
            f"expected a JSON array, got {type(raw).__name__}", path=str(corpus_path)
        )

    articles = [a for a in (normalize_record(record) for record in raw) if a is not None]

    skipped = len(raw) - len(articles)
    if skipped:
        logger.info(f"Skipped {skipped} invalid article record(s)")
    logger.info(f"Loaded {len(articles)} blog articles from {corpus_path}")

    return CorpusIndex(articles)
