"""
Build the corpus JSON document.

The surah tables, Hizb boundaries and sajdah positions come from
mushaf.data.metadata; only the ayah text is read from outside, from a
Tanzil "sura|aya|text" export (https://tanzil.net/download).
"""

import json
import logging
from bisect import bisect_right
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from mushaf.constants import DEFAULT_SOURCE, DEFAULT_VERSION, TOTAL_CHAPTERS
from mushaf.data.metadata import (
    CHAPTER_ENGLISH_NAMES,
    CHAPTER_NAMES,
    CHAPTER_REVELATION_ORDER,
    CHAPTER_VERSE_COUNTS,
    HIZB_STARTS,
    PROSTRATION_VERSES,
    juz_of_hizb,
    revelation_type_of,
)
from mushaf.exceptions import CorpusBuildError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_PROSTRATION_SET = frozenset(PROSTRATION_VERSES)


def read_tanzil_text(path: PathLike) -> dict[tuple[int, int], str]:
    """
    Read a Tanzil text export.

    Each line is "sura|aya|text". Blank lines and lines starting with "#"
    (the license footer) are skipped.

    Args:
        path: Path to the UTF-8 text file

    Returns:
        Dict mapping (surah, ayah) to the ayah text

    Raises:
        CorpusBuildError: If the file cannot be read or a line is malformed
    """
    path = Path(path)
    texts: dict[tuple[int, int], str] = {}

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            lines = f.readlines()
    except OSError as e:
        raise CorpusBuildError(f"Cannot read source text: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise CorpusBuildError(f"Source text is not UTF-8: {e}", path=path) from e

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split("|", 2)
        if len(parts) != 3:
            raise CorpusBuildError(
                "Expected 'sura|aya|text'", path=path, line_number=line_number
            )
        try:
            key = (int(parts[0]), int(parts[1]))
        except ValueError as e:
            raise CorpusBuildError(
                f"Invalid surah or ayah number: {parts[0]}|{parts[1]}",
                path=path,
                line_number=line_number,
            ) from e
        if not parts[2].strip():
            raise CorpusBuildError("Empty ayah text", path=path, line_number=line_number)
        if key in texts:
            raise CorpusBuildError(
                f"Duplicate ayah {key[0]}:{key[1]}", path=path, line_number=line_number
            )
        texts[key] = parts[2].strip()

    logger.info("Read %d ayat from %s", len(texts), path)
    return texts


def assign_hizb(chapter_id: int, verse_id: int) -> int:
    """
    Hizb number (1-60) of an ayah.

    Args:
        chapter_id: Surah number
        verse_id: Ayah number within the surah

    Returns:
        The Hizb whose start is the last one at or before the ayah
    """
    return bisect_right(HIZB_STARTS, (chapter_id, verse_id))


def assign_juz(chapter_id: int, verse_id: int) -> int:
    """Juz number (1-30) of an ayah."""
    return juz_of_hizb(assign_hizb(chapter_id, verse_id))


def build_document(
    texts: Mapping[tuple[int, int], str],
    *,
    version: str = DEFAULT_VERSION,
    source: str = DEFAULT_SOURCE,
) -> dict[str, Any]:
    """
    Build the corpus document from ayah texts and the metadata tables.

    Args:
        texts: Mapping of (surah, ayah) to ayah text; must cover all 6,236 ayat
        version: Version tag written to the document
        source: Source attribution written to the document and each surah

    Returns:
        The corpus document as a JSON-ready dict

    Raises:
        CorpusBuildError: If an ayah text is missing or an unknown ayah is given
    """
    for chapter_id, verse_id in texts:
        count = CHAPTER_VERSE_COUNTS.get(chapter_id)
        if count is None or not 1 <= verse_id <= count:
            raise CorpusBuildError(f"Unknown ayah {chapter_id}:{verse_id}")

    chapters = []
    for chapter_id in range(1, TOTAL_CHAPTERS + 1):
        verses = []
        for verse_id in range(1, CHAPTER_VERSE_COUNTS[chapter_id] + 1):
            text = texts.get((chapter_id, verse_id))
            if not text:
                raise CorpusBuildError(f"Missing text for ayah {chapter_id}:{verse_id}")
            hizb = assign_hizb(chapter_id, verse_id)
            verses.append(
                {
                    "id": verse_id,
                    "text": text,
                    "sajdah": (chapter_id, verse_id) in _PROSTRATION_SET,
                    "juz": juz_of_hizb(hizb),
                    "hizb": hizb,
                }
            )

        chapters.append(
            {
                "id": chapter_id,
                "name": CHAPTER_NAMES[chapter_id],
                "englishName": CHAPTER_ENGLISH_NAMES[chapter_id],
                "revelationType": revelation_type_of(chapter_id),
                "numberOfAyahs": CHAPTER_VERSE_COUNTS[chapter_id],
                "revelationOrder": CHAPTER_REVELATION_ORDER[chapter_id],
                "ayat": verses,
                "source": source,
            }
        )

    return {"version": version, "source": source, "surahs": chapters}


def write_document(document: Mapping[str, Any], path: PathLike) -> Path:
    """
    Write the corpus document as UTF-8 JSON.

    Args:
        document: Corpus document
        path: Output file (parent directories are created)

    Returns:
        The output path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False)
    logger.info("Wrote corpus document to %s", path)
    return path


def build_corpus(
    source_text: PathLike,
    output: PathLike,
    *,
    version: str = DEFAULT_VERSION,
    source: str = DEFAULT_SOURCE,
) -> dict[str, Any]:
    """
    Read a Tanzil export, build the document and write it.

    Args:
        source_text: Tanzil "sura|aya|text" file
        output: Path of the JSON document to write
        version: Version tag written to the document
        source: Source attribution

    Returns:
        The document that was written
    """
    document = build_document(read_tanzil_text(source_text), version=version, source=source)
    write_document(document, output)
    return document
