"""
Ayah (verse) data model.
"""

from pydantic import BaseModel, ConfigDict, Field


class Verse(BaseModel):
    """
    Represents a single ayah (verse) within a surah.

    Attributes:
        id: Ayah number within its surah (1-based)
        text: The Arabic text of the ayah
        prostration: Whether the ayah carries the sajdah marker
        juz: Juz (para) number the ayah belongs to (1-30)
        hizb: Hizb number the ayah belongs to (1-60)
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "text": "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
                    "sajdah": False,
                    "juz": 1,
                    "hizb": 1,
                }
            ]
        },
    )

    id: int = Field(
        ...,
        description="Ayah number within its surah (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The Arabic text of the ayah",
        min_length=1,
    )
    prostration: bool = Field(
        default=False,
        alias="sajdah",
        description="Whether this ayah carries the sajdah (prostration) marker",
    )
    juz: int = Field(
        ...,
        description="Juz number (1-30)",
        ge=1,
        le=30,
    )
    hizb: int = Field(
        ...,
        description="Hizb number (1-60)",
        ge=1,
        le=60,
    )

    def __str__(self) -> str:
        preview = self.text if len(self.text) <= 50 else self.text[:50] + "..."
        return f"Verse({self.id}, juz={self.juz}, hizb={self.hizb}): {preview}"

