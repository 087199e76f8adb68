"""
Command line interface for the Mushaf library.

Every query subcommand prints its result as JSON in the corpus document
shape (camelCase keys).

Usage:
    mushaf verse 2 255
    mushaf range 1 1 7
    mushaf search "الرحمن" --limit 5
    mushaf chapters kahf
    mushaf validate path/to/quran.json
    mushaf build-corpus quran-uthmani.txt -o mushaf/mushaf/data/quran.json

Exit codes: 0 on success, 2 on an invalid argument, 1 when the corpus
cannot be loaded or built, or fails validation.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, TypeAdapter

from mushaf._logging import configure_logging
from mushaf.config import get_settings
from mushaf.core.engine import QueryEngine
from mushaf.core.validation import check_structure
from mushaf.data.builder import build_corpus
from mushaf.data.store import CorpusStore, get_default_store, load_corpus
from mushaf.exceptions import (
    CorpusBuildError,
    CorpusLoadError,
    CorpusStructureError,
    InvalidArgumentError,
)
from mushaf.models import Chapter

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGUMENT = 2


def _print_model(model: BaseModel) -> None:
    print(model.model_dump_json(by_alias=True, indent=2))


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _engine(args: argparse.Namespace) -> QueryEngine:
    settings = get_settings()
    store = CorpusStore(args.data, settings=settings) if args.data else get_default_store()
    return QueryEngine.from_store(store)


def cmd_verse(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_verse(args.chapter, args.verse))
    return EXIT_OK


def cmd_chapter(args: argparse.Namespace) -> int:
    chapter = _engine(args).get_chapter(args.chapter)
    _print_model(chapter.summary() if args.no_verses else chapter)
    return EXIT_OK


def cmd_range(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_verse_range(args.chapter, args.start, args.end))
    return EXIT_OK


def cmd_juz(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_juz(args.number))
    return EXIT_OK


def cmd_hizb(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_hizb(args.number))
    return EXIT_OK


def cmd_search(args: argparse.Namespace) -> int:
    result = _engine(args).search_text(args.term)
    if args.limit is not None:
        if args.limit < 0:
            raise InvalidArgumentError(
                f"Limit must be non-negative, got: {args.limit}",
                parameter="limit",
                value=args.limit,
            )
        # totalResults keeps the full match count
        result = result.model_copy(update={"verses": result.limit(args.limit)})
    _print_model(result)
    return EXIT_OK


def cmd_chapters(args: argparse.Namespace) -> int:
    _print_model(_engine(args).search_chapters_by_name(args.term))
    return EXIT_OK


def cmd_random(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_random_verse())
    return EXIT_OK


def cmd_prostration(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_prostration_verses())
    return EXIT_OK


def cmd_stats(args: argparse.Namespace) -> int:
    _print_model(_engine(args).get_statistics())
    return EXIT_OK


def cmd_list(args: argparse.Namespace) -> int:
    chapters = [chapter.summary() for chapter in _engine(args).get_chapters()]
    adapter = TypeAdapter(list[Chapter])
    print(adapter.dump_json(chapters, by_alias=True, indent=2).decode("utf-8"))
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    path = Path(args.path or args.data or get_settings().data_path)
    corpus = load_corpus(path, validate=False)
    try:
        check_structure(corpus)
    except CorpusStructureError as e:
        _print_json({"path": str(path), "valid": False, "invariant": e.invariant, "error": e.message})
        return EXIT_ERROR
    _print_json(
        {
            "path": str(path),
            "valid": True,
            "chapters": corpus.metadata.total_chapters,
            "verses": corpus.metadata.total_verses,
        }
    )
    return EXIT_OK


def cmd_build_corpus(args: argparse.Namespace) -> int:
    settings = get_settings()
    output = Path(args.output or args.data or settings.data_path)
    document = build_corpus(
        args.source_text,
        output,
        version=args.version,
        source=settings.default_source,
    )
    _print_json(
        {
            "output": str(output),
            "version": document["version"],
            "chapters": len(document["surahs"]),
            "verses": sum(len(chapter["ayat"]) for chapter in document["surahs"]),
        }
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mushaf",
        description="Offline, read-only queries over the Quran text.",
    )
    parser.add_argument("--data", type=Path, help="Path to the corpus JSON document")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("verse", help="Get one ayah")
    p.add_argument("chapter", type=int, help="Surah number (1-114)")
    p.add_argument("verse", type=int, help="Ayah number")
    p.set_defaults(func=cmd_verse)

    p = sub.add_parser("chapter", help="Get a surah")
    p.add_argument("chapter", type=int, help="Surah number (1-114)")
    p.add_argument("--no-verses", action="store_true", help="Omit the ayat")
    p.set_defaults(func=cmd_chapter)

    p = sub.add_parser("range", help="Get a range of ayat within a surah")
    p.add_argument("chapter", type=int, help="Surah number (1-114)")
    p.add_argument("start", type=int, help="First ayah (inclusive)")
    p.add_argument("end", type=int, help="Last ayah (inclusive)")
    p.set_defaults(func=cmd_range)

    p = sub.add_parser("juz", help="Get the ayat of a Juz")
    p.add_argument("number", type=int, help="Juz number (1-30)")
    p.set_defaults(func=cmd_juz)

    p = sub.add_parser("hizb", help="Get the ayat of a Hizb")
    p.add_argument("number", type=int, help="Hizb number (1-60)")
    p.set_defaults(func=cmd_hizb)

    p = sub.add_parser("search", help="Search the ayah text (exact substring)")
    p.add_argument("term", help="Text to search for")
    p.add_argument("--limit", type=int, help="Print at most this many ayat")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("chapters", help="Search surahs by name")
    p.add_argument("term", help="Name or part of a name")
    p.set_defaults(func=cmd_chapters)

    p = sub.add_parser("list", help="List all surahs (without ayat)")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("random", help="Get a random ayah")
    p.set_defaults(func=cmd_random)

    p = sub.add_parser("prostration", help="Get the sajdah ayat")
    p.set_defaults(func=cmd_prostration)

    p = sub.add_parser("stats", help="Corpus statistics")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("validate", help="Check a corpus document's structure")
    p.add_argument("path", nargs="?", type=Path, help="Corpus document (default: --data or settings)")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("build-corpus", help="Build the corpus document from a Tanzil text export")
    p.add_argument("source_text", type=Path, help="Tanzil 'sura|aya|text' file")
    p.add_argument("-o", "--output", type=Path, help="Output path (default: --data or settings)")
    p.add_argument("--version", default="1.1", help="Version tag to write (default: 1.1)")
    p.set_defaults(func=cmd_build_corpus)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else get_settings().log_level)

    try:
        return args.func(args)
    except InvalidArgumentError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except (CorpusLoadError, CorpusBuildError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
