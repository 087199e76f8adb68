"""
Statistics models.

StatisticsResult describes the whole corpus; VerseCollectionStats and
ChapterCollectionStats describe the contents of a single query result.
"""

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mushaf.constants import DEFAULT_SOURCE, READING_PLAN_DAYS, VERSES_PER_MINUTE
from mushaf.models.chapter import Chapter, RevelationType
from mushaf.models.grouping import frequency, most_frequent, percentage
from mushaf.models.verse_with_chapter import VerseWithChapter

# Upper bounds (inclusive) of the surah length categories
LENGTH_CATEGORIES: tuple[tuple[str, Optional[int]], ...] = (
    ("very_short", 10),
    ("short", 50),
    ("medium", 100),
    ("long", 200),
    ("very_long", None),
)


class VerseCountSummary(BaseModel):
    """
    Distribution of surah lengths (ayat per surah).

    Attributes:
        min: Fewest ayat in any surah
        max: Most ayat in any surah
        median: Median surah length
        mode: Most common surah length (first seen wins ties)
        distribution: Surah length -> number of surahs with that length
    """

    model_config = ConfigDict(frozen=True)

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)
    median: float = Field(..., ge=0)
    mode: int = Field(..., ge=0)
    distribution: dict[int, int] = Field(
        default_factory=dict,
        description="Surah length -> number of surahs (string keys on the wire)",
    )

    @property
    def range(self) -> int:
        return self.max - self.min

    @property
    def unique_lengths(self) -> int:
        return len(self.distribution)

    @property
    def length_categories(self) -> dict[str, int]:
        """Number of surahs in each length category."""
        categories = {name: 0 for name, _ in LENGTH_CATEGORIES}
        for length, count in self.distribution.items():
            for name, upper in LENGTH_CATEGORIES:
                if upper is None or length <= upper:
                    categories[name] += count
                    break
        return categories

    def __str__(self) -> str:
        return (
            f"VerseCountSummary(min={self.min}, max={self.max}, median={self.median}, "
            f"mode={self.mode}, unique_lengths={self.unique_lengths})"
        )


class RevelationCharacteristics(BaseModel):
    """Length figures for the surahs of one revelation period."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    average_length: float = Field(..., alias="averageLength", ge=0)
    total_verses: int = Field(..., alias="totalAyat", ge=0)
    shortest_length: int = Field(..., alias="shortestLength", ge=0)
    longest_length: int = Field(..., alias="longestLength", ge=0)

    @classmethod
    def from_chapters(cls, chapters: list[Chapter]) -> "RevelationCharacteristics":
        lengths = [chapter.verse_count for chapter in chapters]
        if not lengths:
            return cls(average_length=0.0, total_verses=0, shortest_length=0, longest_length=0)
        return cls(
            average_length=sum(lengths) / len(lengths),
            total_verses=sum(lengths),
            shortest_length=min(lengths),
            longest_length=max(lengths),
        )

    @property
    def length_range(self) -> int:
        return self.longest_length - self.shortest_length

    @property
    def length_variation_ratio(self) -> float:
        return self.longest_length / self.shortest_length if self.shortest_length else 0.0


class RevelationAnalysis(BaseModel):
    """Meccan versus Medinan surah lengths."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    meccan: RevelationCharacteristics = Field(..., alias="meccanCharacteristics")
    medinan: RevelationCharacteristics = Field(..., alias="medinanCharacteristics")

    @property
    def length_ratio(self) -> float:
        """Meccan average length divided by Medinan average length."""
        if not self.medinan.average_length:
            return 0.0
        return self.meccan.average_length / self.medinan.average_length

    @property
    def length_difference(self) -> float:
        """Medinan average length minus Meccan average length."""
        return self.medinan.average_length - self.meccan.average_length


class StatisticsResult(BaseModel):
    """
    Aggregate statistics over the whole corpus.

    Attributes:
        total_chapters: Number of surahs
        total_verses: Number of ayat
        meccan_chapters: Number of Meccan surahs
        medinan_chapters: Number of Medinan surahs
        average_verses_per_chapter: Mean surah length
        longest_chapter: Surah with the most ayat (first encountered on ties)
        shortest_chapter: Surah with the fewest ayat (first encountered on ties)
        verse_counts: Distribution of surah lengths
        revelation_analysis: Meccan versus Medinan lengths
        source: Source attribution for the text
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_chapters: int = Field(..., alias="totalSurahs", ge=0)
    total_verses: int = Field(..., alias="totalAyat", ge=0)
    meccan_chapters: int = Field(..., alias="meccanSurahs", ge=0)
    medinan_chapters: int = Field(..., alias="medinanSurahs", ge=0)
    average_verses_per_chapter: float = Field(..., alias="averageAyatPerSurah", ge=0)
    longest_chapter: Chapter = Field(..., alias="longestSurah")
    shortest_chapter: Chapter = Field(..., alias="shortestSurah")
    verse_counts: VerseCountSummary = Field(..., alias="ayatCounts")
    revelation_analysis: RevelationAnalysis = Field(..., alias="revelationAnalysis")
    source: str = DEFAULT_SOURCE

    @property
    def meccan_percentage(self) -> float:
        return percentage(self.meccan_chapters, self.total_chapters)

    @property
    def medinan_percentage(self) -> float:
        return percentage(self.medinan_chapters, self.total_chapters)

    @property
    def length_difference_ratio(self) -> float:
        """Longest surah length divided by shortest surah length."""
        return self.longest_chapter.verse_count / self.shortest_chapter.verse_count

    @property
    def total_reading_minutes(self) -> float:
        return self.total_verses / VERSES_PER_MINUTE

    @property
    def total_reading_hours(self) -> float:
        return self.total_reading_minutes / 60.0

    @property
    def daily_reading_minutes(self) -> float:
        """Reading time per day to finish the corpus in a 30-day plan."""
        return self.total_reading_minutes / READING_PLAN_DAYS

    def __str__(self) -> str:
        return (
            f"StatisticsResult(chapters={self.total_chapters}, verses={self.total_verses}, "
            f"meccan={self.meccan_chapters}, medinan={self.medinan_chapters}, "
            f"avg={self.average_verses_per_chapter:.1f})"
        )


class VerseCollectionStats(BaseModel):
    """Counts over the ayat of a result."""

    model_config = ConfigDict(frozen=True)

    total_verses: int = 0
    unique_chapters: int = 0
    unique_juz: int = 0
    meccan_verses: int = 0
    medinan_verses: int = 0
    prostration_verses: int = 0
    chapter_distribution: dict[int, int] = Field(default_factory=dict)
    juz_distribution: dict[int, int] = Field(default_factory=dict)
    hizb_distribution: dict[int, int] = Field(default_factory=dict)

    @property
    def meccan_percentage(self) -> float:
        return percentage(self.meccan_verses, self.total_verses)

    @property
    def medinan_percentage(self) -> float:
        return percentage(self.medinan_verses, self.total_verses)

    @property
    def average_per_chapter(self) -> float:
        return self.total_verses / self.unique_chapters if self.unique_chapters else 0.0

    @property
    def average_per_juz(self) -> float:
        return self.total_verses / self.unique_juz if self.unique_juz else 0.0

    @property
    def most_frequent_chapter(self) -> Optional[tuple[int, int]]:
        return most_frequent(self.chapter_distribution)

    @property
    def most_frequent_juz(self) -> Optional[tuple[int, int]]:
        return most_frequent(self.juz_distribution)

    @property
    def most_frequent_hizb(self) -> Optional[tuple[int, int]]:
        return most_frequent(self.hizb_distribution)


class ChapterCollectionStats(BaseModel):
    """Counts over the surahs of a result."""

    model_config = ConfigDict(frozen=True)

    total_chapters: int = 0
    meccan_chapters: int = 0
    medinan_chapters: int = 0
    total_verses: int = 0
    average_verses: float = 0.0
    min_verses: int = 0
    max_verses: int = 0

    @property
    def meccan_percentage(self) -> float:
        return percentage(self.meccan_chapters, self.total_chapters)

    @property
    def medinan_percentage(self) -> float:
        return percentage(self.medinan_chapters, self.total_chapters)


def summarize_verses(verses: Iterable[VerseWithChapter]) -> VerseCollectionStats:
    """Build VerseCollectionStats for a sequence of joined ayat."""
    verses = list(verses)
    chapter_distribution = frequency(verses, lambda v: v.chapter.id)
    juz_distribution = frequency(verses, lambda v: v.juz)
    meccan = sum(1 for v in verses if v.chapter.revelation_type == RevelationType.MECCAN)
    return VerseCollectionStats(
        total_verses=len(verses),
        unique_chapters=len(chapter_distribution),
        unique_juz=len(juz_distribution),
        meccan_verses=meccan,
        medinan_verses=len(verses) - meccan,
        prostration_verses=sum(1 for v in verses if v.prostration),
        chapter_distribution=chapter_distribution,
        juz_distribution=juz_distribution,
        hizb_distribution=frequency(verses, lambda v: v.hizb),
    )


def summarize_chapters(chapters: Iterable[Chapter]) -> ChapterCollectionStats:
    """Build ChapterCollectionStats for a sequence of surahs."""
    chapters = list(chapters)
    if not chapters:
        return ChapterCollectionStats()
    lengths = [chapter.verse_count for chapter in chapters]
    meccan = sum(1 for chapter in chapters if chapter.is_meccan)
    return ChapterCollectionStats(
        total_chapters=len(chapters),
        meccan_chapters=meccan,
        medinan_chapters=len(chapters) - meccan,
        total_verses=sum(lengths),
        average_verses=sum(lengths) / len(lengths),
        min_verses=min(lengths),
        max_verses=max(lengths),
    )
