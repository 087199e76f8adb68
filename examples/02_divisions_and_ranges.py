"""
Divisions and Ranges

This example walks the reading divisions of the mushaf:
- Juz: 30 parts of roughly equal length
- Hizb: 60 half-Juz parts
- Ranges: contiguous ayat within one surah
- Sajdah ayat: the 15 ayat of prostration
"""

from mushaf import QueryEngine


def describe_division(division):
    """Print a one-line summary of a Juz or Hizb."""
    print(f"  {division}")
    print(f"    starts {division.first.chapter.english_name} {division.first.reference}, "
          f"ends {division.last.chapter.english_name} {division.last.reference}")
    print(f"    ~{division.estimated_reading_minutes:.0f} minutes of recitation")


def main():
    engine = QueryEngine.from_store()

    print("Juz 30 and its two Hizb")
    print("=" * 80)
    describe_division(engine.get_juz(30))
    for number in (59, 60):
        hizb = engine.get_hizb(number)
        describe_division(hizb)
        print(f"    companion Hizb: {hizb.companion_hizb}")

    print("\nRange: Al-Baqara 250-260")
    print("=" * 80)
    result = engine.get_verse_range(2, 250, 260)
    print(f"  {result}")
    print(f"  Juz covered: {result.juz_numbers}, Hizb covered: {result.hizb_numbers}")
    for hizb_number, verses in result.by_hizb().items():
        print(f"    Hizb {hizb_number}: ayat {verses[0].id}-{verses[-1].id}")

    print("\nSajdah ayat")
    print("=" * 80)
    prostration = engine.get_prostration_verses()
    for verse in prostration.verses:
        print(f"  {verse.reference:>7}  {verse.chapter.english_name:<16} Juz {verse.juz}")
    print(f"  Complete: {prostration.is_complete}")


if __name__ == "__main__":
    main()
