"""
Unit tests for grouping helpers and corpus statistics.
"""

import json

import pytest

from mushaf.core.statistics import compute_statistics, verse_count_summary
from mushaf.models import StatisticsResult
from mushaf.models.grouping import frequency, group_by, median, most_frequent, percentage


class TestGrouping:
    """Test the grouping helpers."""

    def test_group_by_keeps_first_seen_order(self):
        grouped = group_by([3, 1, 4, 1, 5, 9, 2, 6], lambda n: n % 2)

        assert list(grouped) == [1, 0]
        assert grouped[1] == [3, 1, 1, 5, 9]
        assert grouped[0] == [4, 2, 6]

    def test_group_by_empty(self):
        assert group_by([], lambda n: n) == {}

    def test_frequency(self):
        counts = frequency("abracadabra", lambda c: c)

        assert counts == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}
        assert list(counts) == ["a", "b", "r", "c", "d"]

    def test_most_frequent_tie_goes_to_first(self):
        assert most_frequent({8: 2, 11: 2, 3: 1}) == (8, 2)
        assert most_frequent({11: 2, 8: 2}) == (11, 2)

    def test_most_frequent_empty(self):
        assert most_frequent({}) is None

    @pytest.mark.parametrize("part,whole,expected", [
        (1, 4, 25.0),
        (0, 10, 0.0),
        (5, 0, 0.0),
    ])
    def test_percentage(self, part, whole, expected):
        assert percentage(part, whole) == pytest.approx(expected)

    @pytest.mark.parametrize("values,expected", [
        ([5], 5.0),
        ([3, 1, 2], 2.0),
        ([4, 1, 3, 2], 2.5),
        ([], 0.0),
    ])
    def test_median(self, values, expected):
        assert median(values) == expected


class TestVerseCountSummary:
    """Test surah length summaries."""

    def test_summary(self):
        summary = verse_count_summary([7, 3, 7, 120, 3])

        assert summary.min == 3
        assert summary.max == 120
        assert summary.median == 7.0
        # 7 and 3 both appear twice; 7 is seen first
        assert summary.mode == 7
        assert summary.distribution == {7: 2, 3: 2, 120: 1}
        assert summary.range == 117
        assert summary.unique_lengths == 3

    def test_length_categories(self):
        summary = verse_count_summary([10, 11, 50, 51, 100, 101, 200, 201])

        assert summary.length_categories == {
            "very_short": 1,
            "short": 2,
            "medium": 2,
            "long": 2,
            "very_long": 1,
        }

    def test_empty(self):
        summary = verse_count_summary([])

        assert summary.mode == 0
        assert summary.distribution == {}


class TestComputeStatistics:
    """Test statistics over the fixture corpus."""

    @pytest.fixture
    def stats(self, corpus):
        return compute_statistics(corpus)

    def test_totals(self, stats):
        assert stats.total_chapters == 114
        assert stats.total_verses == 6236
        assert stats.meccan_chapters == 86
        assert stats.medinan_chapters == 28
        assert stats.average_verses_per_chapter == pytest.approx(6236 / 114)

    def test_longest_and_shortest(self, stats):
        assert stats.longest_chapter.id == 2
        assert stats.longest_chapter.verse_count == 286
        # 103, 108 and 110 tie at 3 ayat; the first wins
        assert stats.shortest_chapter.id == 103
        assert stats.longest_chapter.verses == []
        assert stats.length_difference_ratio == pytest.approx(286 / 3)

    def test_verse_counts(self, stats):
        counts = stats.verse_counts

        assert counts.min == 3
        assert counts.max == 286
        assert counts.median == 39.0
        # 11 and 8 both occur five times; surah 62 (11 ayat) comes first
        assert counts.mode == 11
        assert sum(counts.distribution.values()) == 114

    def test_length_categories(self, stats):
        assert stats.verse_counts.length_categories == {
            "very_short": 19,
            "short": 48,
            "medium": 29,
            "long": 15,
            "very_long": 3,
        }

    def test_revelation_analysis(self, stats):
        analysis = stats.revelation_analysis

        assert analysis.meccan.total_verses + analysis.medinan.total_verses == 6236
        assert analysis.medinan.longest_length == 286
        assert analysis.meccan.shortest_length == 3
        assert analysis.medinan.average_length > analysis.meccan.average_length
        assert analysis.length_difference == pytest.approx(
            analysis.medinan.average_length - analysis.meccan.average_length
        )

    def test_percentages(self, stats):
        assert stats.meccan_percentage + stats.medinan_percentage == pytest.approx(100.0)
        assert stats.meccan_percentage == pytest.approx(86 / 114 * 100)

    def test_reading_time(self, stats):
        assert stats.total_reading_minutes == 3118.0
        assert stats.total_reading_hours == pytest.approx(3118.0 / 60)
        assert stats.daily_reading_minutes == pytest.approx(3118.0 / 30)

    def test_source_defaults_to_corpus(self, stats, corpus):
        assert stats.source == corpus.source
        assert compute_statistics(corpus, source="Local").source == "Local"

    def test_wire_keys(self, stats):
        """Test that the serialized result uses the document's keys."""
        data = json.loads(stats.model_dump_json(by_alias=True))

        assert data["totalSurahs"] == 114
        assert data["totalAyat"] == 6236
        assert data["longestSurah"]["englishName"] == "Al-Baqara"
        assert data["ayatCounts"]["distribution"]["286"] == 1
        assert set(data["revelationAnalysis"]) == {"meccanCharacteristics", "medinanCharacteristics"}

    def test_parses_back_from_json(self, stats):
        parsed = StatisticsResult.model_validate_json(stats.model_dump_json(by_alias=True))

        assert parsed == stats
        assert parsed.verse_counts.distribution[286] == 1
