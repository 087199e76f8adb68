"""
Argument and corpus structure validation.

The argument validators are called at the start of every query, before
the corpus is scanned, and raise InvalidArgumentError with a message
naming the parameter and its valid range.

check_structure verifies a loaded corpus against the canonical layout:
114 surahs in order, 6,236 ayat numbered contiguously, every Juz and
Hizb used, 15 sajdah ayat and a complete revelation order.
"""

import logging
from typing import Any

from mushaf.constants import (
    MECCAN,
    MEDINAN,
    TOTAL_CHAPTERS,
    TOTAL_HIZB,
    TOTAL_JUZ,
    TOTAL_PROSTRATION_VERSES,
    TOTAL_VERSES,
)
from mushaf.exceptions import CorpusStructureError, InvalidArgumentError
from mushaf.models.corpus import Corpus

logger = logging.getLogger(__name__)


def _require_int(value: Any, parameter: str, label: str) -> None:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{label} must be an integer, got: {value!r}",
            parameter=parameter,
            value=value,
        )


def _require_in_range(value: Any, low: int, high: int, parameter: str, label: str) -> None:
    _require_int(value, parameter, label)
    if value < low or value > high:
        raise InvalidArgumentError(
            f"{label} must be between {low} and {high}, got: {value}",
            parameter=parameter,
            value=value,
        )


def validate_chapter_id(chapter_id: int) -> None:
    """Validate a surah id (1-114)."""
    _require_in_range(chapter_id, 1, TOTAL_CHAPTERS, "chapter_id", "Surah ID")


def validate_verse_id(verse_id: int, max_verses: int) -> None:
    """Validate an ayah number against the surah's ayah count."""
    _require_in_range(verse_id, 1, max_verses, "verse_id", "Ayah ID")


def validate_verse_range(start: int, end: int, max_verses: int) -> None:
    """
    Validate an inclusive ayah range within a surah.

    Args:
        start: First ayah of the range
        end: Last ayah of the range
        max_verses: Number of ayat in the surah

    Raises:
        InvalidArgumentError: If either bound is outside 1..max_verses,
            or start is greater than end
    """
    _require_in_range(start, 1, max_verses, "start", "Start ayah")
    _require_in_range(end, 1, max_verses, "end", "End ayah")
    if start > end:
        raise InvalidArgumentError(
            f"Start ayah ({start}) cannot be greater than end ayah ({end})",
            parameter="start",
            value=start,
        )


def validate_juz_number(juz_number: int) -> None:
    """Validate a Juz number (1-30)."""
    _require_in_range(juz_number, 1, TOTAL_JUZ, "juz_number", "Juz number")


def validate_hizb_number(hizb_number: int) -> None:
    """Validate a Hizb number (1-60)."""
    _require_in_range(hizb_number, 1, TOTAL_HIZB, "hizb_number", "Hizb number")


def validate_search_term(term: str) -> None:
    """Validate that a search term is a non-blank string."""
    if not isinstance(term, str):
        raise InvalidArgumentError(
            f"Search term must be a string, got: {term!r}",
            parameter="term",
            value=term,
        )
    if not term.strip():
        raise InvalidArgumentError("Search term cannot be empty", parameter="term", value=term)


def validate_revelation_type(revelation_type: str) -> None:
    """Validate a revelation type ("Meccan" or "Medinan")."""
    if revelation_type not in (MECCAN, MEDINAN):
        raise InvalidArgumentError(
            f'Revelation type must be "{MECCAN}" or "{MEDINAN}", got: {revelation_type}',
            parameter="revelation_type",
            value=revelation_type,
        )


def check_structure(corpus: Corpus) -> None:
    """
    Check a corpus against the canonical structure.

    Args:
        corpus: The corpus to check

    Raises:
        CorpusStructureError: Naming the first violated invariant
    """
    chapters = corpus.chapters

    if len(chapters) != TOTAL_CHAPTERS:
        raise CorpusStructureError(
            f"Expected {TOTAL_CHAPTERS} surahs, got: {len(chapters)}",
            invariant="chapter_count",
        )

    for position, chapter in enumerate(chapters, start=1):
        if chapter.id != position:
            raise CorpusStructureError(
                f"Expected surah ID {position}, got: {chapter.id}",
                invariant="chapter_order",
            )

    total_verses = sum(chapter.verse_count for chapter in chapters)
    if total_verses != TOTAL_VERSES:
        raise CorpusStructureError(
            f"Expected {TOTAL_VERSES} ayat in total, got: {total_verses}",
            invariant="total_verses",
        )

    juz_seen: set[int] = set()
    hizb_seen: set[int] = set()
    prostration_count = 0

    for chapter in chapters:
        if len(chapter.verses) != chapter.verse_count:
            raise CorpusStructureError(
                f"Surah {chapter.id}: ayat list length ({len(chapter.verses)}) "
                f"must match numberOfAyahs ({chapter.verse_count})",
                invariant="verse_count",
            )
        for position, verse in enumerate(chapter.verses, start=1):
            if verse.id != position:
                raise CorpusStructureError(
                    f"Surah {chapter.id}: expected ayah ID {position}, got: {verse.id}",
                    invariant="verse_order",
                )
            if not 1 <= verse.juz <= TOTAL_JUZ or not 1 <= verse.hizb <= TOTAL_HIZB:
                raise CorpusStructureError(
                    f"Ayah {chapter.id}:{verse.id} has juz={verse.juz}, hizb={verse.hizb}",
                    invariant="division_range",
                )
            juz_seen.add(verse.juz)
            hizb_seen.add(verse.hizb)
            if verse.prostration:
                prostration_count += 1

    if len(juz_seen) != TOTAL_JUZ or len(hizb_seen) != TOTAL_HIZB:
        raise CorpusStructureError(
            f"Expected all {TOTAL_JUZ} Juz and {TOTAL_HIZB} Hizb to be used, "
            f"got: {len(juz_seen)} Juz and {len(hizb_seen)} Hizb",
            invariant="division_coverage",
        )

    if prostration_count != TOTAL_PROSTRATION_VERSES:
        raise CorpusStructureError(
            f"Expected {TOTAL_PROSTRATION_VERSES} sajdah ayat, got: {prostration_count}",
            invariant="prostration_count",
        )

    orders = sorted(chapter.revelation_order for chapter in chapters)
    if orders != list(range(1, TOTAL_CHAPTERS + 1)):
        raise CorpusStructureError(
            "Revelation order must be a permutation of 1..114",
            invariant="revelation_order",
        )


def validate_structure(corpus: Corpus) -> bool:
    """
    Check a corpus against the canonical structure.

    Returns:
        True if every invariant holds, False otherwise (the reason is logged)
    """
    try:
        check_structure(corpus)
    except CorpusStructureError as e:
        logger.warning("Corpus structure check failed: %s", e)
        return False
    return True
