"""
Corpus-wide statistics.
"""

from typing import Optional

from mushaf.models.corpus import Corpus
from mushaf.models.grouping import frequency, median, most_frequent
from mushaf.models.statistics import (
    RevelationAnalysis,
    RevelationCharacteristics,
    StatisticsResult,
    VerseCountSummary,
)


def verse_count_summary(lengths: list[int]) -> VerseCountSummary:
    """
    Summarize a list of surah lengths.

    The histogram keeps first-seen order, so the mode is the first length
    (in input order) that reaches the highest count.

    Args:
        lengths: Ayah count of each surah, in mushaf order

    Returns:
        VerseCountSummary with min, max, median, mode and distribution
    """
    if not lengths:
        return VerseCountSummary(min=0, max=0, median=0.0, mode=0, distribution={})
    distribution = frequency(lengths, lambda n: n)
    mode, _ = most_frequent(distribution)
    return VerseCountSummary(
        min=min(lengths),
        max=max(lengths),
        median=median(lengths),
        mode=mode,
        distribution=distribution,
    )


def compute_statistics(corpus: Corpus, source: Optional[str] = None) -> StatisticsResult:
    """
    Compute aggregate statistics for a corpus.

    Args:
        corpus: The loaded corpus
        source: Attribution for the result (defaults to the corpus source)

    Returns:
        StatisticsResult for the whole corpus
    """
    chapters = corpus.chapters
    lengths = [chapter.verse_count for chapter in chapters]
    meccan = corpus.meccan_chapters
    medinan = corpus.medinan_chapters

    return StatisticsResult(
        total_chapters=len(chapters),
        total_verses=sum(lengths),
        meccan_chapters=len(meccan),
        medinan_chapters=len(medinan),
        average_verses_per_chapter=sum(lengths) / len(lengths) if lengths else 0.0,
        longest_chapter=corpus.longest_chapter.summary(),
        shortest_chapter=corpus.shortest_chapter.summary(),
        verse_counts=verse_count_summary(lengths),
        revelation_analysis=RevelationAnalysis(
            meccan=RevelationCharacteristics.from_chapters(meccan),
            medinan=RevelationCharacteristics.from_chapters(medinan),
        ),
        source=source or corpus.source,
    )
