"""
Basic Usage Example for Mushaf

This example demonstrates the simplest way to use Mushaf:
1. Load the corpus
2. Look up an ayah and a surah
3. Search the text
4. Inspect the results
"""

from mushaf import QueryEngine


def main():
    # Step 1: Load the corpus (from settings.data_path, once per process)
    print("Step 1: Loading corpus...")
    engine = QueryEngine.from_store()
    metadata = engine.get_corpus().metadata
    print(f"  Loaded {metadata.total_chapters} surahs, {metadata.total_verses} ayat\n")

    # Step 2: Look up a single ayah
    print("Step 2: Ayat al-Kursi")
    verse = engine.get_verse(2, 255)
    print(f"  {verse.chapter.english_name} {verse.reference} (Juz {verse.juz}, Hizb {verse.hizb})")
    print(f"  {verse.text}\n")

    # Step 3: Look up a surah
    print("Step 3: Surah Al-Ikhlas")
    chapter = engine.get_chapter(112)
    print(f"  {chapter.name} / {chapter.english_name}: {chapter.verse_count} ayat, "
          f"{chapter.revelation_type.value}")
    for ayah in chapter.verses:
        print(f"  {ayah.id}. {ayah.text}")

    # Step 4: Search the text (exact substring, no normalization)
    print("\nStep 4: Searching...")
    result = engine.search_text(verse.text.split()[0])
    print(f"  {result.total_results} ayat contain '{result.term}'")
    print(f"  Found in {len(result.chapter_ids)} surahs across {len(result.juz_numbers)} Juz")
    for match in result.limit(5):
        print(f"    {match.reference}: {match.text[:60]}")

    # Step 5: Summary statistics of the search result
    print("\n" + "=" * 80)
    print("Result Statistics:")
    print("=" * 80)
    stats = result.statistics
    print(f"Meccan ayat: {stats.meccan_verses} ({stats.meccan_percentage:.1f}%)")
    print(f"Medinan ayat: {stats.medinan_verses} ({stats.medinan_percentage:.1f}%)")
    if stats.most_frequent_chapter:
        chapter_id, count = stats.most_frequent_chapter
        print(f"Most matches: surah {chapter_id} ({count} ayat)")


if __name__ == "__main__":
    main()
