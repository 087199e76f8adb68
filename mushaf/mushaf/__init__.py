"""
Mushaf: offline, read-only access to the Quran text.

The corpus (114 surahs, 6,236 ayat) is loaded once from a JSON document
and queried through QueryEngine: ayah and range lookup, Juz and Hizb
extraction, text and surah name search, sajdah ayat and statistics.

Example:
    from mushaf import QueryEngine

    engine = QueryEngine.from_store()
    print(engine.get_verse(1, 1).text)
"""

import logging

from mushaf.config import MushafSettings, configure, get_settings
from mushaf.exceptions import (
    CorpusBuildError,
    CorpusLoadError,
    CorpusStructureError,
    InvalidArgumentError,
    MushafError,
    NotFoundError,
)
from mushaf.models import (
    Chapter,
    ChapterSearchResult,
    Corpus,
    DivisionKind,
    DivisionResult,
    ProstrationResult,
    RangeResult,
    RevelationType,
    SearchResult,
    StatisticsResult,
    Verse,
    VerseWithChapter,
)
from mushaf.core import QueryEngine
from mushaf.data import CorpusStore, get_default_store, load_corpus, set_default_store

__version__ = "1.1.0"

# Library logging is silent unless the application configures it
logging.getLogger("mushaf").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Engine and store
    "QueryEngine",
    "CorpusStore",
    "get_default_store",
    "set_default_store",
    "load_corpus",
    # Settings
    "MushafSettings",
    "configure",
    "get_settings",
    # Models
    "Verse",
    "Chapter",
    "RevelationType",
    "VerseWithChapter",
    "Corpus",
    "SearchResult",
    "ProstrationResult",
    "DivisionKind",
    "DivisionResult",
    "RangeResult",
    "ChapterSearchResult",
    "StatisticsResult",
    # Errors
    "MushafError",
    "CorpusLoadError",
    "CorpusStructureError",
    "InvalidArgumentError",
    "NotFoundError",
    "CorpusBuildError",
]
