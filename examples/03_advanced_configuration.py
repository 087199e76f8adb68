"""
Advanced Configuration Example

This example demonstrates advanced usage:
- Custom configuration settings
- Independent engines over separate stores
- Surah name search with Arabic normalization
- Reproducible random ayat
- Corpus statistics
"""

from mushaf import CorpusStore, QueryEngine, configure
from mushaf._logging import configure_logging
from mushaf.data import get_loading_stats


def main():
    print("Advanced Mushaf Configuration Example")
    print("=" * 80)

    # Step 1: Configure global settings
    print("\nStep 1: Configuring Mushaf...")
    settings = configure(
        random_strategy="uniform",
        random_seed=114,
        normalize_arabic_names=True,
    )
    configure_logging(level="INFO")
    print("  Configuration complete")

    # Step 2: Load through an explicit store and report load figures
    print("\nStep 2: Loading corpus...")
    store = CorpusStore(settings=settings)
    loading = get_loading_stats(store)
    print(f"  {loading.total_verses} ayat, {loading.total_characters} characters "
          f"(~{loading.data_size_kb:.0f} KB) in {loading.loading_time_ms:.1f}ms")

    engine = QueryEngine.from_store(store)

    # Step 3: Name search ignores hamza and diacritics when normalization is on
    print("\nStep 3: Searching surah names...")
    for term in ("الاسراء", "kahf", "al-"):
        result = engine.search_chapters_by_name(term)
        names = ", ".join(c.english_name for c in result.chapters[:5])
        print(f"  {term!r}: {result.total_results} match(es) {names}")

    # Step 4: Seeded random ayat repeat across runs
    print("\nStep 4: Random ayat (seed 114)...")
    for _ in range(3):
        verse = engine.get_random_verse()
        print(f"  {verse.reference}: {verse.text[:50]}")

    # Step 5: Statistics
    print("\nStep 5: Corpus statistics...")
    stats = engine.get_statistics()
    print(f"  {stats}")
    print(f"  Longest: {stats.longest_chapter.english_name} ({stats.longest_chapter.verse_count} ayat)")
    print(f"  Shortest: {stats.shortest_chapter.english_name} ({stats.shortest_chapter.verse_count} ayat)")
    print(f"  Median length: {stats.verse_counts.median}, mode: {stats.verse_counts.mode}")
    for category, count in stats.verse_counts.length_categories.items():
        print(f"    {category:<11} {count}")
    analysis = stats.revelation_analysis
    print(f"  Meccan average: {analysis.meccan.average_length:.1f} ayat, "
          f"Medinan average: {analysis.medinan.average_length:.1f} ayat")
    print(f"  Full reading: {stats.total_reading_hours:.1f} hours, "
          f"{stats.daily_reading_minutes:.0f} minutes a day over 30 days")


if __name__ == "__main__":
    main()
