"""
Query result models.

Every verse-bearing result shares the helpers on VerseCollection; the
concrete results only add their own header fields and wire keys.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from mushaf.constants import (
    DEFAULT_SOURCE,
    HIZB_PER_JUZ,
    TOTAL_PROSTRATION_VERSES,
    VERSES_PER_MINUTE,
)
from mushaf.models.chapter import Chapter, RevelationType
from mushaf.models.grouping import group_by
from mushaf.models.statistics import (
    ChapterCollectionStats,
    VerseCollectionStats,
    summarize_chapters,
    summarize_verses,
)
from mushaf.models.verse import Verse
from mushaf.models.verse_with_chapter import VerseWithChapter


def _distinct(values) -> list[int]:
    return list(dict.fromkeys(values))


class VerseCollection(BaseModel):
    """
    Base for results holding an ordered list of joined ayat.

    All helpers are computed on access; nothing is cached on the
    instance.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verses: list[VerseWithChapter] = Field(default_factory=list)
    source: str = DEFAULT_SOURCE

    @property
    def total(self) -> int:
        return len(self.verses)

    @property
    def has_results(self) -> bool:
        return bool(self.verses)

    @property
    def is_empty(self) -> bool:
        return not self.verses

    @property
    def first(self) -> Optional[VerseWithChapter]:
        return self.verses[0] if self.verses else None

    @property
    def last(self) -> Optional[VerseWithChapter]:
        return self.verses[-1] if self.verses else None

    def by_chapter(self) -> dict[int, list[VerseWithChapter]]:
        return group_by(self.verses, lambda v: v.chapter.id)

    def by_juz(self) -> dict[int, list[VerseWithChapter]]:
        return group_by(self.verses, lambda v: v.juz)

    def by_hizb(self) -> dict[int, list[VerseWithChapter]]:
        return group_by(self.verses, lambda v: v.hizb)

    def by_revelation_type(self) -> dict[RevelationType, list[VerseWithChapter]]:
        return group_by(self.verses, lambda v: v.chapter.revelation_type)

    def from_chapter(self, chapter_id: int) -> list[VerseWithChapter]:
        return [v for v in self.verses if v.chapter.id == chapter_id]

    def from_juz(self, juz_number: int) -> list[VerseWithChapter]:
        return [v for v in self.verses if v.juz == juz_number]

    def from_hizb(self, hizb_number: int) -> list[VerseWithChapter]:
        return [v for v in self.verses if v.hizb == hizb_number]

    def with_revelation_type(self, revelation_type: RevelationType | str) -> list[VerseWithChapter]:
        revelation_type = RevelationType(revelation_type)
        return [v for v in self.verses if v.chapter.revelation_type == revelation_type]

    def limit(self, count: int) -> list[VerseWithChapter]:
        return self.verses[: max(count, 0)]

    @property
    def chapter_ids(self) -> list[int]:
        return _distinct(v.chapter.id for v in self.verses)

    @property
    def juz_numbers(self) -> list[int]:
        return _distinct(v.juz for v in self.verses)

    @property
    def hizb_numbers(self) -> list[int]:
        return _distinct(v.hizb for v in self.verses)

    @property
    def prostration_verses(self) -> list[VerseWithChapter]:
        return [v for v in self.verses if v.prostration]

    @property
    def has_prostration(self) -> bool:
        return any(v.prostration for v in self.verses)

    @property
    def estimated_reading_minutes(self) -> float:
        return len(self.verses) / VERSES_PER_MINUTE

    @property
    def statistics(self) -> VerseCollectionStats:
        return summarize_verses(self.verses)


class SearchResult(VerseCollection):
    """
    Result of a substring search over the ayah text.

    Attributes:
        term: The search term as given
        total_results: Number of matching ayat
        verses: Matching ayat in mushaf order
    """

    term: str = Field(..., alias="searchTerm")
    total_results: int = Field(..., alias="totalResults", ge=0)
    verses: list[VerseWithChapter] = Field(default_factory=list, alias="results")

    def __str__(self) -> str:
        return f"SearchResult(term={self.term!r}, results={self.total_results})"


class ProstrationResult(VerseCollection):
    """All ayat carrying the sajdah marker."""

    total_prostration_verses: int = Field(..., alias="totalSajdahAyat", ge=0)
    verses: list[VerseWithChapter] = Field(default_factory=list, alias="sajdahAyat")

    @property
    def is_complete(self) -> bool:
        """True when all 15 sajdah ayat are present."""
        return self.total_prostration_verses == TOTAL_PROSTRATION_VERSES

    def __str__(self) -> str:
        return f"ProstrationResult(verses={self.total_prostration_verses})"


class DivisionKind(str, Enum):
    """Partitioning scheme of a DivisionResult."""

    JUZ = "juz"
    HIZB = "hizb"


class DivisionResult(VerseCollection):
    """
    The ayat of a single Juz or Hizb.

    Attributes:
        kind: Whether this is a Juz or a Hizb
        number: The Juz or Hizb number
        juz: Owning Juz (equal to number for Juz results)
        hizb: Hizb number for Hizb results, None for Juz results
        total_verses: Number of ayat in the division
        verses: Ayat of the division in mushaf order
    """

    kind: DivisionKind
    number: int = Field(..., ge=1, le=60)
    juz: int = Field(..., ge=1, le=30)
    total_verses: int = Field(..., alias="totalAyat", ge=0)
    verses: list[VerseWithChapter] = Field(default_factory=list, alias="ayat")

    @computed_field
    @property
    def hizb(self) -> Optional[int]:
        return self.number if self.is_hizb else None

    @property
    def is_hizb(self) -> bool:
        return self.kind == DivisionKind.HIZB

    @property
    def is_first_hizb_of_juz(self) -> bool:
        return self.is_hizb and self.number % HIZB_PER_JUZ == 1

    @property
    def is_second_hizb_of_juz(self) -> bool:
        return self.is_hizb and self.number % HIZB_PER_JUZ == 0

    @property
    def companion_hizb(self) -> Optional[int]:
        """The other Hizb in the same Juz, or None for Juz results."""
        if not self.is_hizb:
            return None
        return self.number + 1 if self.is_first_hizb_of_juz else self.number - 1

    def __str__(self) -> str:
        label = "Juz" if self.kind == DivisionKind.JUZ else "Hizb"
        return f"{label} {self.number}: {self.total_verses} verses in {len(self.chapter_ids)} chapters"


class RangeInfo(BaseModel):
    """Bounds of an ayah range (inclusive)."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=1)
    end: int = Field(..., ge=1)
    count: int = Field(..., ge=0)

    @property
    def is_single_verse(self) -> bool:
        return self.start == self.end

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end and self.count == self.end - self.start + 1


class RangeResult(BaseModel):
    """
    A contiguous run of ayat within one surah.

    Attributes:
        chapter: The surah (without its ayat)
        range: Start, end and count of the run
        verses: The ayat in order
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chapter: Chapter = Field(..., alias="surah")
    range: RangeInfo
    verses: list[Verse] = Field(default_factory=list, alias="ayat")
    source: str = DEFAULT_SOURCE

    @property
    def first(self) -> Optional[Verse]:
        return self.verses[0] if self.verses else None

    @property
    def last(self) -> Optional[Verse]:
        return self.verses[-1] if self.verses else None

    @property
    def prostration_verses(self) -> list[Verse]:
        return [v for v in self.verses if v.prostration]

    @property
    def has_prostration(self) -> bool:
        return any(v.prostration for v in self.verses)

    @property
    def juz_numbers(self) -> list[int]:
        return _distinct(v.juz for v in self.verses)

    @property
    def hizb_numbers(self) -> list[int]:
        return _distinct(v.hizb for v in self.verses)

    @property
    def spans_multiple_juz(self) -> bool:
        return len(self.juz_numbers) > 1

    @property
    def spans_multiple_hizb(self) -> bool:
        return len(self.hizb_numbers) > 1

    def by_juz(self) -> dict[int, list[Verse]]:
        return group_by(self.verses, lambda v: v.juz)

    def by_hizb(self) -> dict[int, list[Verse]]:
        return group_by(self.verses, lambda v: v.hizb)

    @property
    def is_complete_chapter(self) -> bool:
        return self.range.start == 1 and self.range.end == self.chapter.verse_count

    @property
    def is_single_verse(self) -> bool:
        return self.range.is_single_verse

    @property
    def estimated_reading_minutes(self) -> float:
        return len(self.verses) / VERSES_PER_MINUTE

    def __str__(self) -> str:
        return f"RangeResult({self.chapter.english_name} {self.range.start}-{self.range.end}, count={self.range.count})"


class ChapterSearchResult(BaseModel):
    """
    Result of a search over surah names.

    Attributes:
        term: The search term as given
        total_results: Number of matching surahs
        chapters: Matching surahs in mushaf order
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    term: str = Field(..., alias="searchTerm")
    total_results: int = Field(..., alias="totalResults", ge=0)
    chapters: list[Chapter] = Field(default_factory=list, alias="results")
    source: str = DEFAULT_SOURCE

    @property
    def has_results(self) -> bool:
        return bool(self.chapters)

    @property
    def is_empty(self) -> bool:
        return not self.chapters

    @property
    def meccan_results(self) -> list[Chapter]:
        return [c for c in self.chapters if c.is_meccan]

    @property
    def medinan_results(self) -> list[Chapter]:
        return [c for c in self.chapters if c.is_medinan]

    @property
    def by_revelation_order(self) -> list[Chapter]:
        return sorted(self.chapters, key=lambda c: c.revelation_order)

    @property
    def by_document_order(self) -> list[Chapter]:
        return sorted(self.chapters, key=lambda c: c.id)

    def by_length(self, descending: bool = False) -> list[Chapter]:
        return sorted(self.chapters, key=lambda c: c.verse_count, reverse=descending)

    @property
    def exact_match(self) -> Optional[Chapter]:
        """A surah whose name equals the term, if any."""
        term = self.term.strip().lower()
        for chapter in self.chapters:
            if chapter.english_name.lower() == term:
                return chapter
        return next((c for c in self.chapters if c.name == self.term.strip()), None)

    @property
    def statistics(self) -> ChapterCollectionStats:
        return summarize_chapters(self.chapters)

    def __str__(self) -> str:
        return f"ChapterSearchResult(term={self.term!r}, results={self.total_results})"
