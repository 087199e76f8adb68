"""
Shared fixtures and test configuration for Mushaf tests.

The corpus text is not redistributed with the source tree, so unit tests
run against a fixture corpus built from the real metadata tables: the
real text of Al-Fatiha and a unique placeholder text for every other
ayah. It is structurally identical to the real corpus.
"""

import copy
import logging

import pytest

import mushaf.config
import mushaf.core.engine
from mushaf.config import MushafSettings
from mushaf.core import QueryEngine
from mushaf.data import build_document, parse_corpus, set_default_store, write_document
from mushaf.data.metadata import CHAPTER_VERSE_COUNTS

FATIHA = [
    "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
    "الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ",
    "الرَّحْمَٰنِ الرَّحِيمِ",
    "مَالِكِ يَوْمِ الدِّينِ",
    "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ",
    "اهْدِنَا الصِّرَاطَ الْمُسْتَقِيمَ",
    "صِرَاطَ الَّذِينَ أَنْعَمْتَ عَلَيْهِمْ غَيْرِ الْمَغْضُوبِ عَلَيْهِمْ وَلَا الضَّالِّينَ",
]


def placeholder_text(chapter_id: int, verse_id: int) -> str:
    return f"آية [{chapter_id}:{verse_id}]"


@pytest.fixture(scope="session")
def corpus_texts():
    """Ayah text for every (surah, ayah) of the fixture corpus."""
    texts = {
        (chapter_id, verse_id): placeholder_text(chapter_id, verse_id)
        for chapter_id, count in CHAPTER_VERSE_COUNTS.items()
        for verse_id in range(1, count + 1)
    }
    for verse_id, text in enumerate(FATIHA, start=1):
        texts[(1, verse_id)] = text
    return texts


@pytest.fixture(scope="session")
def _document(corpus_texts):
    return build_document(corpus_texts)


@pytest.fixture
def corpus_document(_document):
    """A fresh deep copy of the fixture document, safe to modify."""
    return copy.deepcopy(_document)


@pytest.fixture(scope="session")
def corpus_file(_document, tmp_path_factory):
    """The fixture document written to a temporary JSON file."""
    return write_document(_document, tmp_path_factory.mktemp("corpus") / "quran.json")


@pytest.fixture(scope="session")
def corpus(_document):
    """The parsed fixture corpus."""
    return parse_corpus(_document)


@pytest.fixture
def settings(corpus_file):
    """Settings pointing at the fixture corpus, with a fixed random seed."""
    return MushafSettings(data_path=corpus_file, random_seed=42)


@pytest.fixture
def engine(corpus, settings):
    """Query engine over the fixture corpus."""
    return QueryEngine(corpus, settings=settings)


@pytest.fixture(autouse=True)
def reset_defaults():
    """Drop the global settings, default store, default engine and log handlers after each test."""
    yield
    logger = logging.getLogger("mushaf")
    logger.handlers[:] = [logging.NullHandler()]
    logger.setLevel(logging.NOTSET)
    mushaf.config._default_settings = None
    mushaf.core.engine._default_engine = None
    set_default_store(None)


@pytest.fixture(scope="session")
def fatiha():
    """The real text of Al-Fatiha used in the fixture corpus."""
    return list(FATIHA)
