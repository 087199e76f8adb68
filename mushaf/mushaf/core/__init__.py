"""
Core modules for Mushaf library.

This package contains the query logic for:
- Point lookup, ranges and Juz/Hizb extraction
- Text and surah name search
- Argument and corpus structure validation
- Corpus statistics

Primary API:
    from mushaf.core import QueryEngine, get_verse

    # Simple usage (default store)
    verse = get_verse(2, 255)

    # Explicit corpus
    engine = QueryEngine(corpus)
    result = engine.search_text("الرحمن")
"""

# Primary API - what most users need
from mushaf.core.engine import (
    QueryEngine,
    get_chapter,
    get_chapters,
    get_chapters_by_revelation_type,
    get_corpus,
    get_default_engine,
    get_hizb,
    get_juz,
    get_prostration_verses,
    get_random_verse,
    get_statistics,
    get_verse,
    get_verse_range,
    search_chapters_by_name,
    search_text,
)

# Validation
from mushaf.core.validation import check_structure, validate_structure

# Text utilities
from mushaf.core.arabic import normalize_arabic

from mushaf.core.statistics import compute_statistics

__all__ = [
    # Primary API
    "QueryEngine",
    "get_default_engine",
    "get_verse",
    "get_chapter",
    "get_corpus",
    "get_chapters",
    "get_chapters_by_revelation_type",
    "search_text",
    "search_chapters_by_name",
    "get_random_verse",
    "get_prostration_verses",
    "get_verse_range",
    "get_juz",
    "get_hizb",
    "get_statistics",
    # Validation
    "check_structure",
    "validate_structure",
    # Text utilities
    "normalize_arabic",
    "compute_statistics",
]
