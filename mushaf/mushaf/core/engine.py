"""
Query engine.

QueryEngine answers every read query over an explicit Corpus: point
lookup, ranges, Juz/Hizb extraction, text and name search, random
selection and statistics. Arguments are validated before the corpus is
touched, and no partial result is ever returned.
"""

import random
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Optional

from mushaf._logging import log_error, log_query
from mushaf.config import MushafSettings, get_settings
from mushaf.core.arabic import arabic_name_matches
from mushaf.core.statistics import compute_statistics
from mushaf.core.validation import (
    validate_chapter_id,
    validate_hizb_number,
    validate_juz_number,
    validate_revelation_type,
    validate_search_term,
    validate_verse_id,
    validate_verse_range,
)
from mushaf.data.metadata import juz_of_hizb
from mushaf.exceptions import NotFoundError
from mushaf.models import (
    Chapter,
    ChapterSearchResult,
    Corpus,
    DivisionKind,
    DivisionResult,
    ProstrationResult,
    RangeInfo,
    RangeResult,
    RevelationType,
    SearchResult,
    StatisticsResult,
    Verse,
    VerseWithChapter,
)

if TYPE_CHECKING:
    from mushaf.data.store import CorpusStore


class QueryEngine:
    """
    Read-only queries over a loaded corpus.

    Example:
        >>> engine = QueryEngine.from_store()
        >>> verse = engine.get_verse(2, 255)
        >>> verse.juz, verse.hizb
        (3, 5)
    """

    def __init__(
        self,
        corpus: Corpus,
        *,
        settings: Optional[MushafSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the engine.

        Args:
            corpus: The loaded corpus to query
            settings: Settings (default: the global settings)
            rng: Random generator for get_random_verse
                (default: seeded from settings.random_seed)
        """
        self.corpus = corpus
        self.settings = settings or get_settings()
        self._rng = rng if rng is not None else random.Random(self.settings.random_seed)

    @classmethod
    def from_store(
        cls,
        store: Optional["CorpusStore"] = None,
        *,
        settings: Optional[MushafSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> "QueryEngine":
        """
        Build an engine over the corpus of a store.

        Args:
            store: Store to load from (default: the default store)
            settings: Settings (default: the store's settings)
            rng: Random generator for get_random_verse

        Raises:
            CorpusLoadError: If the store cannot load its corpus
        """
        from mushaf.data.store import get_default_store

        store = store or get_default_store()
        return cls(store.load(), settings=settings or store.settings, rng=rng)

    # ============ Point lookup ============

    def _chapter(self, chapter_id: int) -> Chapter:
        validate_chapter_id(chapter_id)
        chapter = self.corpus.get_chapter(chapter_id)
        if chapter is None:
            log_error("Validated surah missing from corpus", chapter_id=chapter_id)
            raise NotFoundError(f"Surah {chapter_id} not found", chapter_id=chapter_id)
        return chapter

    def _join(self, verse, chapter: Chapter) -> VerseWithChapter:
        return VerseWithChapter.join(verse, chapter, source=self.corpus.source)

    def _select(self, predicate: Callable[[Verse], bool]) -> list[VerseWithChapter]:
        """Join the ayat that satisfy predicate with their surah, in mushaf order."""
        matches = []
        for chapter in self.corpus.chapters:
            summary = None
            for verse in chapter.verses:
                if not predicate(verse):
                    continue
                if summary is None:
                    summary = chapter.summary()
                matches.append(self._join(verse, summary))
        return matches

    def get_verse(self, chapter_id: int, verse_id: int) -> VerseWithChapter:
        """
        Get a single ayah joined with its surah.

        Args:
            chapter_id: Surah number (1-114)
            verse_id: Ayah number within the surah

        Returns:
            VerseWithChapter for the ayah

        Raises:
            InvalidArgumentError: If either number is out of range
        """
        log_query("get_verse", chapter_id=chapter_id, verse_id=verse_id)
        chapter = self._chapter(chapter_id)
        validate_verse_id(verse_id, chapter.verse_count)

        verse = chapter.get_verse(verse_id)
        if verse is None:
            log_error("Validated ayah missing from corpus", chapter_id=chapter_id, verse_id=verse_id)
            raise NotFoundError(
                f"Ayah {verse_id} not found in surah {chapter_id}",
                chapter_id=chapter_id,
                verse_id=verse_id,
            )
        return self._join(verse, chapter)

    def get_chapter(self, chapter_id: int) -> Chapter:
        """Get a surah with all of its ayat."""
        log_query("get_chapter", chapter_id=chapter_id)
        return self._chapter(chapter_id)

    def get_corpus(self) -> Corpus:
        return self.corpus

    def get_chapters(self) -> list[Chapter]:
        """All surahs in mushaf order."""
        return list(self.corpus.chapters)

    def get_chapters_by_revelation_type(self, revelation_type: RevelationType | str) -> list[Chapter]:
        """
        Surahs of one revelation period, in mushaf order.

        Raises:
            InvalidArgumentError: If the type is not "Meccan" or "Medinan"
        """
        if isinstance(revelation_type, RevelationType):
            revelation_type = revelation_type.value
        validate_revelation_type(revelation_type)
        return self.corpus.chapters_by_revelation_type(revelation_type)

    def iter_verses(self) -> Iterator[VerseWithChapter]:
        """Every ayah joined with its surah, in mushaf order."""
        return self.corpus.iter_verses()

    # ============ Search ============

    def search_text(self, term: str) -> SearchResult:
        """
        Find every ayah whose text contains the term.

        Matching is exact, case-sensitive substring containment; the term is
        not normalized.

        Args:
            term: Text to look for (must not be blank)

        Returns:
            SearchResult with the matching ayat in mushaf order
        """
        validate_search_term(term)
        log_query("search_text", term=term)

        matches = self._select(lambda verse: term in verse.text)
        return SearchResult(
            term=term,
            total_results=len(matches),
            verses=matches,
            source=self.corpus.source,
        )

    def search_chapters_by_name(self, term: str) -> ChapterSearchResult:
        """
        Find surahs by name.

        A surah matches when the lowercased, stripped term occurs in its
        lowercased Latin-script name, or the term as given occurs in its
        Arabic name. With settings.normalize_arabic_names the Arabic
        comparison is done on normalized text.

        Args:
            term: Name or part of a name (must not be blank)

        Returns:
            ChapterSearchResult with matching surahs in mushaf order
        """
        validate_search_term(term)
        log_query("search_chapters_by_name", term=term)

        needle = term.strip().lower()
        normalize = self.settings.normalize_arabic_names
        matches = [
            chapter
            for chapter in self.corpus.chapters
            if needle in chapter.english_name.lower()
            or arabic_name_matches(term, chapter.name, normalize=normalize)
        ]
        return ChapterSearchResult(
            term=term,
            total_results=len(matches),
            chapters=matches,
            source=self.corpus.source,
        )

    # ============ Selection ============

    def get_random_verse(self) -> VerseWithChapter:
        """
        Pick a random ayah.

        With the default "chapter_weighted" strategy a surah is picked
        uniformly and then an ayah within it, so ayat of short surahs are
        more likely than ayat of long ones. The "uniform" strategy gives
        every ayah the same chance.
        """
        chapters = self.corpus.chapters
        if self.settings.random_strategy == "uniform":
            index = self._rng.randrange(sum(len(c.verses) for c in chapters))
            for chapter in chapters:
                if index < len(chapter.verses):
                    return self._join(chapter.verses[index], chapter)
                index -= len(chapter.verses)

        chapter = self._rng.choice(chapters)
        return self._join(self._rng.choice(chapter.verses), chapter)

    def get_prostration_verses(self) -> ProstrationResult:
        """All ayat carrying the sajdah marker, in mushaf order."""
        log_query("get_prostration_verses")
        verses = self._select(lambda verse: verse.prostration)
        return ProstrationResult(
            total_prostration_verses=len(verses),
            verses=verses,
            source=self.corpus.source,
        )

    def get_verse_range(self, chapter_id: int, start: int, end: int) -> RangeResult:
        """
        Get a contiguous run of ayat within a surah.

        Args:
            chapter_id: Surah number (1-114)
            start: First ayah (inclusive)
            end: Last ayah (inclusive)

        Returns:
            RangeResult with the surah, the bounds and the ayat

        Raises:
            InvalidArgumentError: If the surah or either bound is out of
                range, or start is greater than end
        """
        log_query("get_verse_range", chapter_id=chapter_id, start=start, end=end)
        chapter = self._chapter(chapter_id)
        validate_verse_range(start, end, chapter.verse_count)

        verses = chapter.verses[start - 1 : end]
        return RangeResult(
            chapter=chapter.summary(),
            range=RangeInfo(start=start, end=end, count=end - start + 1),
            verses=verses,
            source=self.corpus.source,
        )

    def get_juz(self, juz_number: int) -> DivisionResult:
        """All ayat of a Juz (1-30), in mushaf order."""
        validate_juz_number(juz_number)
        log_query("get_juz", juz_number=juz_number)

        verses = self._select(lambda verse: verse.juz == juz_number)
        return DivisionResult(
            kind=DivisionKind.JUZ,
            number=juz_number,
            juz=juz_number,
            total_verses=len(verses),
            verses=verses,
            source=self.corpus.source,
        )

    def get_hizb(self, hizb_number: int) -> DivisionResult:
        """All ayat of a Hizb (1-60), in mushaf order, with the owning Juz."""
        validate_hizb_number(hizb_number)
        log_query("get_hizb", hizb_number=hizb_number)

        verses = self._select(lambda verse: verse.hizb == hizb_number)
        return DivisionResult(
            kind=DivisionKind.HIZB,
            number=hizb_number,
            juz=juz_of_hizb(hizb_number),
            total_verses=len(verses),
            verses=verses,
            source=self.corpus.source,
        )

    # ============ Statistics ============

    def get_statistics(self) -> StatisticsResult:
        """Aggregate statistics over the whole corpus."""
        log_query("get_statistics")
        return compute_statistics(self.corpus)


# Engine over the default store, rebuilt when the store's corpus changes
_default_engine: Optional[QueryEngine] = None


def get_default_engine() -> QueryEngine:
    """
    Get an engine bound to the default store (lazily created).

    Raises:
        CorpusLoadError: If the default store cannot load its corpus
    """
    global _default_engine
    from mushaf.data.store import get_default_store

    store = get_default_store()
    corpus = store.load()
    if _default_engine is None or _default_engine.corpus is not corpus:
        _default_engine = QueryEngine(corpus, settings=store.settings)
    return _default_engine


def get_verse(chapter_id: int, verse_id: int) -> VerseWithChapter:
    return get_default_engine().get_verse(chapter_id, verse_id)


def get_chapter(chapter_id: int) -> Chapter:
    return get_default_engine().get_chapter(chapter_id)


def get_corpus() -> Corpus:
    return get_default_engine().get_corpus()


def get_chapters() -> list[Chapter]:
    return get_default_engine().get_chapters()


def get_chapters_by_revelation_type(revelation_type: RevelationType | str) -> list[Chapter]:
    return get_default_engine().get_chapters_by_revelation_type(revelation_type)


def search_text(term: str) -> SearchResult:
    return get_default_engine().search_text(term)


def search_chapters_by_name(term: str) -> ChapterSearchResult:
    return get_default_engine().search_chapters_by_name(term)


def get_random_verse() -> VerseWithChapter:
    return get_default_engine().get_random_verse()


def get_prostration_verses() -> ProstrationResult:
    return get_default_engine().get_prostration_verses()


def get_verse_range(chapter_id: int, start: int, end: int) -> RangeResult:
    return get_default_engine().get_verse_range(chapter_id, start, end)


def get_juz(juz_number: int) -> DivisionResult:
    return get_default_engine().get_juz(juz_number)


def get_hizb(hizb_number: int) -> DivisionResult:
    return get_default_engine().get_hizb(hizb_number)


def get_statistics() -> StatisticsResult:
    return get_default_engine().get_statistics()
