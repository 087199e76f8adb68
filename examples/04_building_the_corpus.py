"""
Building the Corpus Document

The corpus JSON is built from a Tanzil text export ("sura|aya|text" per
line, https://tanzil.net/download) and the bundled surah, Hizb and sajdah
tables. This example builds it, validates it and runs a query against it.
"""

import sys
from pathlib import Path

from mushaf import CorpusStore, QueryEngine, configure
from mushaf.core import check_structure
from mushaf.data import build_corpus, load_corpus
from mushaf.exceptions import CorpusBuildError, CorpusStructureError


def main():
    source_text = Path(sys.argv[1] if len(sys.argv) > 1 else "quran-simple.txt")
    output = Path(sys.argv[2] if len(sys.argv) > 2 else "build/quran.json")

    print(f"Building {output} from {source_text}...")
    try:
        document = build_corpus(source_text, output)
    except CorpusBuildError as e:
        print(f"  Build failed: {e}")
        return 1
    print(f"  Wrote {len(document['surahs'])} surahs")

    print("\nValidating...")
    corpus = load_corpus(output, validate=False)
    try:
        check_structure(corpus)
    except CorpusStructureError as e:
        print(f"  Invalid ({e.invariant}): {e.message}")
        return 1
    print("  All structural checks passed")

    settings = configure(data_path=output)
    engine = QueryEngine.from_store(CorpusStore(settings=settings))
    verse = engine.get_verse(1, 1)
    print(f"\n{verse.reference}: {verse.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
