"""
Corpus data: canonical metadata tables, the corpus store and the
document builder.
"""

from mushaf.data.builder import (
    assign_hizb,
    assign_juz,
    build_corpus,
    build_document,
    read_tanzil_text,
    write_document,
)
from mushaf.data.store import (
    CorpusStore,
    LoadingStats,
    get_default_store,
    get_loading_stats,
    load_corpus,
    parse_corpus,
    read_document,
    set_default_store,
)

__all__ = [
    "CorpusStore",
    "LoadingStats",
    "get_default_store",
    "set_default_store",
    "get_loading_stats",
    "load_corpus",
    "parse_corpus",
    "read_document",
    "read_tanzil_text",
    "assign_hizb",
    "assign_juz",
    "build_document",
    "write_document",
    "build_corpus",
]
