"""
Integration tests for Mushaf library.
These tests use the real corpus document and can be slower.

Build it first with:
    mushaf build-corpus quran-simple.txt -o mushaf/mushaf/data/quran.json
"""

import pytest

from mushaf.config import DEFAULT_DATA_PATH, MushafSettings
from mushaf.core import QueryEngine
from mushaf.core.arabic import normalize_arabic
from mushaf.core.validation import check_structure
from mushaf.data import CorpusStore

pytestmark = [
    pytest.mark.integration,
    pytest.mark.slow,
    pytest.mark.skipif(not DEFAULT_DATA_PATH.exists(), reason="corpus document not built"),
]


@pytest.fixture(scope="module")
def real_engine():
    settings = MushafSettings(data_path=DEFAULT_DATA_PATH, random_seed=1)
    return QueryEngine.from_store(CorpusStore(settings=settings))


class TestRealCorpus:
    """Integration tests with the real Quran text."""

    def test_structure(self, real_engine):
        check_structure(real_engine.get_corpus())

    @pytest.mark.parametrize("chapter_id,expected_count", [
        (1, 7),
        (2, 286),
        (114, 6),
    ])
    def test_chapter_lengths(self, real_engine, chapter_id, expected_count):
        """Test that loaded surahs have their canonical lengths."""
        chapter = real_engine.get_chapter(chapter_id)

        assert len(chapter.verses) == expected_count
        assert chapter.verses[0].id == 1

    def test_opening_verse(self, real_engine):
        verse = real_engine.get_verse(1, 1)
        assert normalize_arabic(verse.text) == "بسم الله الرحمن الرحيم"

    def test_throne_verse(self, real_engine):
        verse = real_engine.get_verse(2, 255)

        assert verse.juz == 3
        assert verse.hizb == 5
        assert not verse.prostration

    def test_search_finds_known_verse(self, real_engine):
        term = real_engine.get_verse(112, 1).text
        result = real_engine.search_text(term)

        assert "112:1" in [v.reference for v in result.verses]

    def test_prostration(self, real_engine):
        assert real_engine.get_prostration_verses().is_complete

    def test_statistics(self, real_engine):
        stats = real_engine.get_statistics()

        assert stats.total_verses == 6236
        assert stats.longest_chapter.id == 2
        assert stats.verse_counts.median == 39.0

    def test_hizb_partition(self, real_engine):
        total = sum(real_engine.get_hizb(n).total_verses for n in range(1, 61))
        assert total == 6236
