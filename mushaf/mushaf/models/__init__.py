"""
Pydantic data models for the Mushaf library.

These models represent the core data structures used throughout the library:
- Verse: A single ayah
- Chapter: A surah with its metadata and ayat
- VerseWithChapter: An ayah joined with its surah
- Corpus: The complete text with derived metadata
- Result models returned by the query engine
"""

from mushaf.models.verse import Verse
from mushaf.models.chapter import Chapter, RevelationType
from mushaf.models.verse_with_chapter import VerseWithChapter
from mushaf.models.corpus import Corpus, CorpusMetadata, CorpusSummary
from mushaf.models.statistics import (
    ChapterCollectionStats,
    RevelationAnalysis,
    RevelationCharacteristics,
    StatisticsResult,
    VerseCollectionStats,
    VerseCountSummary,
    summarize_chapters,
    summarize_verses,
)
from mushaf.models.results import (
    ChapterSearchResult,
    DivisionKind,
    DivisionResult,
    ProstrationResult,
    RangeInfo,
    RangeResult,
    SearchResult,
    VerseCollection,
)

__all__ = [
    "Verse",
    "Chapter",
    "RevelationType",
    "VerseWithChapter",
    "Corpus",
    "CorpusMetadata",
    "CorpusSummary",
    # Results
    "VerseCollection",
    "SearchResult",
    "ProstrationResult",
    "DivisionKind",
    "DivisionResult",
    "RangeInfo",
    "RangeResult",
    "ChapterSearchResult",
    # Statistics
    "StatisticsResult",
    "VerseCountSummary",
    "RevelationAnalysis",
    "RevelationCharacteristics",
    "VerseCollectionStats",
    "ChapterCollectionStats",
    "summarize_verses",
    "summarize_chapters",
]
