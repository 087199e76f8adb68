"""
Corpus store.

Reads the corpus JSON document, parses it into models and memoizes the
result. The first load is guarded by a lock, so concurrent first callers
all receive the same Corpus instance.
"""

import json
import logging
import threading
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from mushaf._logging import log_corpus_loaded, log_error
from mushaf.config import MushafSettings, get_settings
from mushaf.constants import DEFAULT_SOURCE
from mushaf.core.validation import check_structure, validate_structure
from mushaf.exceptions import CorpusLoadError, CorpusStructureError
from mushaf.models import Corpus

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_document(path: PathLike) -> dict[str, Any]:
    """
    Read the corpus JSON document.

    Args:
        path: Path to a UTF-8 JSON file

    Returns:
        The decoded JSON object

    Raises:
        CorpusLoadError: If the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise CorpusLoadError("Corpus data file not found", path=path) from e
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus data file: {e}", path=path) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise CorpusLoadError(f"Corpus data file is not valid JSON: {e}", path=path) from e

    if not isinstance(document, dict):
        raise CorpusLoadError(
            f"Corpus document must be a JSON object, got: {type(document).__name__}",
            path=path,
        )
    return document


def parse_corpus(
    document: Mapping[str, Any],
    default_source: str = DEFAULT_SOURCE,
    path: Optional[PathLike] = None,
) -> Corpus:
    """
    Build a Corpus from the decoded document.

    Metadata totals are always derived from the surahs; a "metadata"
    object in the document is ignored.

    Args:
        document: Decoded corpus document
        default_source: Attribution used when the document has no source
        path: Origin of the document, reported in errors

    Returns:
        The parsed Corpus

    Raises:
        CorpusLoadError: If the document does not match the schema
    """
    if not isinstance(document, Mapping):
        raise CorpusLoadError(
            f"Corpus document must be a mapping, got: {type(document).__name__}",
            path=path,
        )

    data = dict(document)
    if not data.get("source"):
        data["source"] = default_source

    try:
        return Corpus.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise CorpusLoadError(
            f"Corpus document does not match the expected schema ({e.error_count()} errors)",
            path=path,
            context={"first_error": f"{location}: {first['msg']}"},
        ) from e


def load_corpus(
    path: Optional[PathLike] = None,
    *,
    validate: Optional[bool] = None,
    settings: Optional[MushafSettings] = None,
) -> Corpus:
    """
    Load a corpus from disk without memoization.

    Args:
        path: Corpus document path (default: settings.data_path)
        validate: Run the structure check (default: settings.validate_on_load)
        settings: Settings to use (default: the global settings)

    Returns:
        The loaded Corpus

    Raises:
        CorpusLoadError: If the document cannot be read or parsed
        CorpusStructureError: If validation is on and an invariant is violated
    """
    settings = settings or get_settings()
    path = Path(path) if path is not None else settings.data_path
    if validate is None:
        validate = settings.validate_on_load

    started = time.perf_counter()
    try:
        corpus = parse_corpus(read_document(path), settings.default_source, path=path)
        if validate:
            try:
                check_structure(corpus)
            except CorpusStructureError as e:
                raise CorpusStructureError(e.message, invariant=e.invariant, path=path) from e
    except CorpusLoadError as e:
        log_error("Failed to load corpus", path=path, reason=e.message)
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    log_corpus_loaded(path, corpus.metadata.total_chapters, corpus.metadata.total_verses, elapsed_ms)
    return corpus


class CorpusStore:
    """
    Memoizing loader for a single corpus document.

    Example:
        >>> store = CorpusStore("quran.json")
        >>> corpus = store.load()
        >>> store.load() is corpus
        True
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        settings: Optional[MushafSettings] = None,
    ):
        self._settings = settings or get_settings()
        self.path = Path(path) if path is not None else self._settings.data_path
        self._corpus: Optional[Corpus] = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> MushafSettings:
        return self._settings

    @property
    def is_loaded(self) -> bool:
        return self._corpus is not None

    def load(self) -> Corpus:
        """
        Load the corpus, reading the file only on the first call.

        Returns:
            The memoized Corpus

        Raises:
            CorpusLoadError: If the first load fails. Nothing is memoized in
                that case, so a later call tries again.
        """
        corpus = self._corpus
        if corpus is not None:
            return corpus

        with self._lock:
            if self._corpus is None:
                logger.debug("Loading corpus from %s", self.path)
                self._corpus = load_corpus(self.path, settings=self._settings)
            return self._corpus

    def clear(self) -> None:
        """Drop the memoized corpus; the next load() reads the file again."""
        with self._lock:
            self._corpus = None

    def __repr__(self) -> str:
        return f"CorpusStore(path={str(self.path)!r}, loaded={self.is_loaded})"


# Process-wide default store
_default_store: Optional[CorpusStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> CorpusStore:
    """
    Get the default store (lazily created from the global settings).

    Returns:
        CorpusStore: The default store
    """
    global _default_store
    if _default_store is None:
        with _default_store_lock:
            if _default_store is None:
                _default_store = CorpusStore()
    return _default_store


def set_default_store(store: Optional[CorpusStore]) -> None:
    """
    Replace the default store.

    Args:
        store: New default store, or None to recreate it from settings on next use
    """
    global _default_store
    with _default_store_lock:
        _default_store = store


class LoadingStats(BaseModel):
    """Load timing and content figures for a corpus."""

    model_config = ConfigDict(frozen=True)

    loading_time_ms: float
    total_chapters: int
    total_verses: int
    total_characters: int
    meccan_chapters: int
    medinan_chapters: int
    prostration_verses: int
    is_valid: bool
    data_size_bytes: int

    @property
    def data_size_kb(self) -> float:
        return self.data_size_bytes / 1024

    @property
    def data_size_mb(self) -> float:
        return self.data_size_kb / 1024

    @property
    def verses_per_ms(self) -> float:
        return self.total_verses / self.loading_time_ms if self.loading_time_ms else 0.0


def get_loading_stats(store: Optional[CorpusStore] = None) -> LoadingStats:
    """
    Load (or reuse) a corpus and report load time and content figures.

    Args:
        store: Store to load from (default: the default store)

    Returns:
        LoadingStats for the corpus
    """
    store = store or get_default_store()

    started = time.perf_counter()
    corpus = store.load()
    elapsed_ms = (time.perf_counter() - started) * 1000

    summary = corpus.summary
    return LoadingStats(
        loading_time_ms=elapsed_ms,
        total_chapters=summary.total_chapters,
        total_verses=summary.total_verses,
        total_characters=summary.total_characters,
        meccan_chapters=summary.meccan_chapters,
        medinan_chapters=summary.medinan_chapters,
        prostration_verses=summary.prostration_verses,
        is_valid=validate_structure(corpus),
        data_size_bytes=summary.data_size_bytes,
    )
