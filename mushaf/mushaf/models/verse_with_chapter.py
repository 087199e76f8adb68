"""
Ayah joined with its owning surah.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from mushaf.constants import DEFAULT_SOURCE
from mushaf.models.chapter import Chapter
from mushaf.models.verse import Verse


class VerseWithChapter(BaseModel):
    """
    An ayah joined with the surah that owns it.

    The verse and its chapter are held side by side rather than merged.
    On the wire the verse fields are flattened next to a ``surah`` object
    and a ``source`` attribution:

        {"id": 255, "text": "...", "sajdah": false, "juz": 3, "hizb": 5,
         "surah": {...}, "source": "..."}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verse: Verse
    chapter: Chapter = Field(..., alias="surah")
    source: str = DEFAULT_SOURCE

    @model_validator(mode="before")
    @classmethod
    def _unflatten(cls, data: Any) -> Any:
        if isinstance(data, dict) and "verse" not in data and "text" in data:
            verse_keys = ("id", "text", "sajdah", "prostration", "juz", "hizb")
            verse = {k: data[k] for k in verse_keys if k in data}
            rest = {k: v for k, v in data.items() if k not in verse_keys}
            return {"verse": verse, **rest}
        return data

    @model_serializer(mode="wrap")
    def _flatten(self, handler, info) -> dict[str, Any]:
        data = handler(self)
        verse = data.pop("verse")
        return {**verse, **data}

    @classmethod
    def join(cls, verse: Verse, chapter: Chapter, source: str | None = None) -> "VerseWithChapter":
        """Join a verse with a reference to its chapter (without the chapter's verse list)."""
        return cls(
            verse=verse,
            chapter=chapter.summary(),
            source=source or chapter.source,
        )

    @property
    def id(self) -> int:
        return self.verse.id

    @property
    def text(self) -> str:
        return self.verse.text

    @property
    def prostration(self) -> bool:
        return self.verse.prostration

    @property
    def juz(self) -> int:
        return self.verse.juz

    @property
    def hizb(self) -> int:
        return self.verse.hizb

    @property
    def reference(self) -> str:
        """Conventional "surah:ayah" reference, e.g. "2:255"."""
        return f"{self.chapter.id}:{self.verse.id}"

    def __str__(self) -> str:
        preview = self.text if len(self.text) <= 30 else self.text[:30] + "..."
        return f"VerseWithChapter({self.chapter.english_name} {self.reference}): {preview}"
