"""
Surah (chapter) data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mushaf.constants import DEFAULT_SOURCE
from mushaf.models.verse import Verse


class RevelationType(str, Enum):
    """Revelation period of a surah."""

    MECCAN = "Meccan"
    MEDINAN = "Medinan"


class Chapter(BaseModel):
    """
    Represents a Surah (chapter) of the Quran.

    Attributes:
        id: Surah number in mushaf order (1-114)
        name: Arabic name of the surah
        english_name: Latin-script display name
        revelation_type: Meccan or Medinan
        verse_count: Total number of ayat in this surah
        revelation_order: Chronological revelation rank (1-114)
        verses: The ayat of the surah, in order
        source: Attribution for the text
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "name": "الفاتحة",
                    "englishName": "Al-Fatiha",
                    "revelationType": "Meccan",
                    "numberOfAyahs": 7,
                    "revelationOrder": 5,
                    "ayat": [],
                    "source": DEFAULT_SOURCE,
                }
            ]
        },
    )

    id: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    name: str = Field(
        ...,
        description="Arabic name of the surah",
    )
    english_name: str = Field(
        ...,
        alias="englishName",
        description="Latin-script display name of the surah",
    )
    revelation_type: RevelationType = Field(
        ...,
        alias="revelationType",
        description="Revelation type: 'Meccan' or 'Medinan'",
    )
    verse_count: int = Field(
        ...,
        alias="numberOfAyahs",
        description="Total number of ayat in this surah",
        ge=1,
    )
    revelation_order: int = Field(
        ...,
        alias="revelationOrder",
        description="Chronological revelation order (1-114)",
        ge=1,
        le=114,
    )
    verses: list[Verse] = Field(
        default_factory=list,
        alias="ayat",
        description="Ayat of the surah in order",
    )
    source: str = Field(
        default=DEFAULT_SOURCE,
        description="Source attribution for the text",
    )

    @property
    def is_meccan(self) -> bool:
        return self.revelation_type == RevelationType.MECCAN

    @property
    def is_medinan(self) -> bool:
        return self.revelation_type == RevelationType.MEDINAN

    @property
    def prostration_verses(self) -> list[Verse]:
        """Ayat in this surah that carry the sajdah marker."""
        return [verse for verse in self.verses if verse.prostration]

    @property
    def has_prostration(self) -> bool:
        return any(verse.prostration for verse in self.verses)

    def get_verse(self, verse_id: int) -> Optional[Verse]:
        """
        Get an ayah by its number.

        Args:
            verse_id: Ayah number within the surah

        Returns:
            The Verse, or None if the number is out of bounds
        """
        if verse_id < 1 or verse_id > len(self.verses):
            return None
        verse = self.verses[verse_id - 1]
        if verse.id == verse_id:
            return verse
        return next((v for v in self.verses if v.id == verse_id), None)

    def summary(self) -> "Chapter":
        """Copy of this surah without its ayat, used as a reference inside results."""
        if not self.verses:
            return self
        return self.model_copy(update={"verses": []})

    def __str__(self) -> str:
        return f"Surah {self.id}: {self.english_name} ({self.name})"
