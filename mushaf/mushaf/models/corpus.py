"""
Complete corpus data model.
"""

from collections.abc import Iterator
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from mushaf.constants import DEFAULT_SOURCE, DEFAULT_VERSION, VERSES_PER_MINUTE
from mushaf.models.chapter import Chapter, RevelationType
from mushaf.models.verse_with_chapter import VerseWithChapter


class CorpusMetadata(BaseModel):
    """Totals derived from the surahs when the corpus is parsed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_chapters: int = Field(..., alias="totalSurahs", ge=0)
    total_verses: int = Field(..., alias="totalAyat", ge=0)
    meccan_chapters: int = Field(..., alias="meccanSurahs", ge=0)
    medinan_chapters: int = Field(..., alias="medinanSurahs", ge=0)
    data_version: str = Field(default=DEFAULT_VERSION, alias="dataVersion")

    @classmethod
    def from_chapters(cls, chapters: list[Chapter], version: str = DEFAULT_VERSION) -> "CorpusMetadata":
        meccan = sum(1 for chapter in chapters if chapter.is_meccan)
        return cls(
            total_chapters=len(chapters),
            total_verses=sum(chapter.verse_count for chapter in chapters),
            meccan_chapters=meccan,
            medinan_chapters=len(chapters) - meccan,
            data_version=version,
        )

    @property
    def meccan_percentage(self) -> float:
        return self.meccan_chapters / self.total_chapters * 100 if self.total_chapters else 0.0

    @property
    def medinan_percentage(self) -> float:
        return self.medinan_chapters / self.total_chapters * 100 if self.total_chapters else 0.0

    @property
    def average_verses_per_chapter(self) -> float:
        return self.total_verses / self.total_chapters if self.total_chapters else 0.0


class CorpusSummary(BaseModel):
    """Summary figures about the corpus text."""

    model_config = ConfigDict(frozen=True)

    total_chapters: int
    total_verses: int
    total_characters: int
    meccan_chapters: int
    medinan_chapters: int
    prostration_verses: int
    longest_chapter_name: str
    shortest_chapter_name: str
    average_verses_per_chapter: float

    @computed_field
    @property
    def data_size_bytes(self) -> int:
        """Approximate in-memory size of the text (UTF-16)."""
        return self.total_characters * 2

    @property
    def data_size_kb(self) -> float:
        return self.data_size_bytes / 1024

    @property
    def data_size_mb(self) -> float:
        return self.data_size_kb / 1024

    @property
    def estimated_reading_minutes(self) -> float:
        return self.total_verses / VERSES_PER_MINUTE

    @property
    def estimated_reading_hours(self) -> float:
        return self.estimated_reading_minutes / 60.0


class Corpus(BaseModel):
    """
    The complete corpus: every surah with its ayat.

    A Corpus is built once from the serialized document and never
    modified. Surah lookup by id goes through an index built at
    construction time.

    Attributes:
        version: Version tag of the data format
        source: Source attribution for the text
        chapters: All surahs in mushaf order
        metadata: Totals derived from the surahs
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default=DEFAULT_VERSION)
    source: str = Field(default=DEFAULT_SOURCE)
    chapters: list[Chapter] = Field(..., alias="surahs")

    _index: dict[int, Chapter] = PrivateAttr(default_factory=dict)
    _metadata: Optional[CorpusMetadata] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._index = {chapter.id: chapter for chapter in self.chapters}
        # A "metadata" object in the document is ignored; totals always
        # come from the parsed surahs
        self._metadata = CorpusMetadata.from_chapters(self.chapters, self.version)

    @computed_field
    @property
    def metadata(self) -> CorpusMetadata:
        return self._metadata

    def get_chapter(self, chapter_id: int) -> Optional[Chapter]:
        """Get a surah by id, or None if there is no such surah."""
        return self._index.get(chapter_id)

    def iter_verses(self) -> Iterator[VerseWithChapter]:
        """Yield every ayah joined with its surah, in mushaf order."""
        for chapter in self.chapters:
            summary = chapter.summary()
            for verse in chapter.verses:
                yield VerseWithChapter(verse=verse, chapter=summary, source=self.source)

    def chapters_by_revelation_type(self, revelation_type: RevelationType | str) -> list[Chapter]:
        revelation_type = RevelationType(revelation_type)
        return [c for c in self.chapters if c.revelation_type == revelation_type]

    @property
    def meccan_chapters(self) -> list[Chapter]:
        return self.chapters_by_revelation_type(RevelationType.MECCAN)

    @property
    def medinan_chapters(self) -> list[Chapter]:
        return self.chapters_by_revelation_type(RevelationType.MEDINAN)

    @property
    def chapters_by_revelation_order(self) -> list[Chapter]:
        return sorted(self.chapters, key=lambda c: c.revelation_order)

    def chapters_by_length(self, descending: bool = False) -> list[Chapter]:
        # sorted() is stable, so equal lengths keep mushaf order
        return sorted(self.chapters, key=lambda c: c.verse_count, reverse=descending)

    @property
    def longest_chapter(self) -> Chapter:
        """Surah with the most ayat; the first one wins on ties."""
        return max(self.chapters, key=lambda c: c.verse_count)

    @property
    def shortest_chapter(self) -> Chapter:
        """Surah with the fewest ayat; the first one wins on ties."""
        return min(self.chapters, key=lambda c: c.verse_count)

    @property
    def chapters_with_prostration(self) -> list[Chapter]:
        return [c for c in self.chapters if c.has_prostration]

    @property
    def summary(self) -> CorpusSummary:
        total_characters = sum(len(v.text) for c in self.chapters for v in c.verses)
        prostration = sum(len(c.prostration_verses) for c in self.chapters)
        return CorpusSummary(
            total_chapters=self.metadata.total_chapters,
            total_verses=self.metadata.total_verses,
            total_characters=total_characters,
            meccan_chapters=self.metadata.meccan_chapters,
            medinan_chapters=self.metadata.medinan_chapters,
            prostration_verses=prostration,
            longest_chapter_name=self.longest_chapter.english_name,
            shortest_chapter_name=self.shortest_chapter.english_name,
            average_verses_per_chapter=self.metadata.average_verses_per_chapter,
        )

    def __str__(self) -> str:
        return (
            f"Corpus(version={self.version}, chapters={self.metadata.total_chapters}, "
            f"verses={self.metadata.total_verses})"
        )
