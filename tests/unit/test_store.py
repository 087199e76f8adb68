"""
Unit tests for the corpus store.
"""

import json
import threading

import pytest
from pydantic import ValidationError

from mushaf.config import MushafSettings, configure
from mushaf.constants import DEFAULT_SOURCE
from mushaf.core.validation import validate_structure
from mushaf.data import (
    CorpusStore,
    get_default_store,
    get_loading_stats,
    load_corpus,
    parse_corpus,
    read_document,
    set_default_store,
    write_document,
)
from mushaf.exceptions import CorpusLoadError, CorpusStructureError


class TestReadDocument:
    """Test reading the JSON document."""

    def test_read_fixture(self, corpus_file):
        document = read_document(corpus_file)
        assert len(document["surahs"]) == 114

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises CorpusLoadError with the cause chained."""
        path = tmp_path / "missing.json"

        with pytest.raises(CorpusLoadError, match="not found") as exc_info:
            read_document(path)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.context["path"] == str(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"surahs": [', encoding="utf-8")

        with pytest.raises(CorpusLoadError, match="not valid JSON") as exc_info:
            read_document(path)

        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(CorpusLoadError, match="JSON object"):
            read_document(path)


class TestParseCorpus:
    """Test building a Corpus from the decoded document."""

    def test_parse_fixture(self, corpus_document):
        corpus = parse_corpus(corpus_document)

        assert corpus.version == "1.1"
        assert corpus.metadata.total_verses == 6236

    def test_stale_metadata_ignored(self, corpus_document):
        """Test that document metadata is replaced by totals from the surahs."""
        corpus_document["metadata"] = {
            "totalSurahs": 1,
            "totalAyat": 7,
            "meccanSurahs": 1,
            "medinanSurahs": 0,
            "dataVersion": "0.1",
        }

        corpus = parse_corpus(corpus_document)

        assert corpus.metadata.total_chapters == 114
        assert corpus.metadata.total_verses == 6236
        assert corpus.metadata.medinan_chapters == 28
        assert corpus.metadata.data_version == "1.1"
        assert corpus.summary.total_verses == 6236
        assert validate_structure(corpus)

    def test_schema_mismatch(self, corpus_document):
        """Test that a validation error is wrapped and chained."""
        corpus_document["surahs"][0]["ayat"][0]["juz"] = 31

        with pytest.raises(CorpusLoadError, match="expected schema") as exc_info:
            parse_corpus(corpus_document)

        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert "juz" in exc_info.value.context["first_error"]

    def test_missing_source_uses_default(self, corpus_document):
        del corpus_document["source"]
        assert parse_corpus(corpus_document).source == DEFAULT_SOURCE

    def test_missing_source_uses_given_default(self, corpus_document):
        del corpus_document["source"]
        assert parse_corpus(corpus_document, default_source="Local copy").source == "Local copy"

    def test_non_mapping_rejected(self):
        with pytest.raises(CorpusLoadError):
            parse_corpus(["not", "a", "mapping"])


class TestLoadCorpus:
    """Test one-shot loading."""

    def test_load_fixture(self, corpus_file, settings):
        corpus = load_corpus(corpus_file, settings=settings)
        assert corpus.metadata.total_chapters == 114

    def test_load_defaults_to_settings_path(self, settings):
        corpus = load_corpus(settings=settings)
        assert corpus.metadata.total_chapters == 114

    def test_structure_violation_is_fatal(self, corpus_document, tmp_path, settings):
        corpus_document["surahs"][0]["ayat"][0]["sajdah"] = True
        path = write_document(corpus_document, tmp_path / "quran.json")

        with pytest.raises(CorpusStructureError) as exc_info:
            load_corpus(path, settings=settings)

        assert exc_info.value.invariant == "prostration_count"
        assert exc_info.value.context["path"] == str(path)

    def test_validation_can_be_skipped(self, corpus_document, tmp_path, settings):
        corpus_document["surahs"][0]["ayat"][0]["sajdah"] = True
        path = write_document(corpus_document, tmp_path / "quran.json")

        corpus = load_corpus(path, validate=False, settings=settings)
        assert corpus.summary.prostration_verses == 16

    def test_load_is_logged(self, corpus_file, settings, caplog):
        with caplog.at_level("INFO", logger="mushaf"):
            load_corpus(corpus_file, settings=settings)

        assert "Corpus loaded: 114 surahs, 6236 ayat" in caplog.text


class TestCorpusStore:
    """Test the memoizing store."""

    def test_load_is_memoized(self, corpus_file, settings):
        store = CorpusStore(corpus_file, settings=settings)
        assert not store.is_loaded

        first = store.load()

        assert store.is_loaded
        assert store.load() is first

    def test_path_defaults_to_settings(self, settings):
        assert CorpusStore(settings=settings).path == settings.data_path

    def test_clear_forces_reload(self, corpus_file, settings):
        store = CorpusStore(corpus_file, settings=settings)
        first = store.load()

        store.clear()

        assert not store.is_loaded
        second = store.load()
        assert second is not first
        assert second == first

    def test_failed_load_is_not_memoized(self, tmp_path, corpus_document, settings):
        """Test that load() can be retried after fixing the resource."""
        path = tmp_path / "quran.json"
        store = CorpusStore(path, settings=settings)

        with pytest.raises(CorpusLoadError):
            store.load()
        assert not store.is_loaded

        write_document(corpus_document, path)
        assert store.load().metadata.total_verses == 6236

    def test_concurrent_first_load_returns_same_corpus(self, corpus_file, settings):
        store = CorpusStore(corpus_file, settings=settings)
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(store.load())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(corpus is results[0] for corpus in results)


class TestDefaultStore:
    """Test the process-wide default store."""

    def test_created_from_settings(self, corpus_file):
        configure(data_path=corpus_file)

        store = get_default_store()

        assert store.path == corpus_file
        assert get_default_store() is store

    def test_set_default_store(self, corpus_file, settings):
        store = CorpusStore(corpus_file, settings=settings)
        set_default_store(store)

        assert get_default_store() is store


class TestLoadingStats:
    """Test load statistics."""

    def test_loading_stats(self, corpus_file, settings):
        stats = get_loading_stats(CorpusStore(corpus_file, settings=settings))

        assert stats.total_chapters == 114
        assert stats.total_verses == 6236
        assert stats.meccan_chapters == 86
        assert stats.medinan_chapters == 28
        assert stats.prostration_verses == 15
        assert stats.is_valid is True
        assert stats.loading_time_ms >= 0
        assert stats.data_size_bytes == stats.total_characters * 2
        assert stats.data_size_kb == pytest.approx(stats.data_size_bytes / 1024)

    def test_loading_stats_default_store(self, corpus_file):
        configure(data_path=corpus_file)
        assert get_loading_stats().total_verses == 6236

    def test_settings_are_isolated(self, corpus_file):
        settings = MushafSettings(data_path=str(corpus_file), validate_on_load=False)
        store = CorpusStore(settings=settings)

        assert store.path == corpus_file
        assert store.settings.validate_on_load is False
