"""
Arabic text normalization utilities.

Used by surah name search when normalize_arabic_names is enabled, so that
a query typed without diacritics or with a plain alef still finds the
vocalized name.
"""

import re

# Tashkeel (U+064B-U+065F) plus superscript alef (U+0670)
DIACRITICS_PATTERN = re.compile(r"[\u064B-\u065F\u0670]")

TATWEEL = "\u0640"


def normalize_arabic(text: str) -> str:
    """
    Normalize Arabic text for comparison.

    Performs the following normalizations:
    - Replace all alef variants (أ إ آ ا ٱ) with plain alef (ا)
    - Replace alef maqsura (ى) with ya (ي)
    - Replace ta marbuta (ة) with ha (ه)
    - Replace hamza carriers (ؤ ئ) with their base letters
    - Remove diacritics and tatweel
    - Remove punctuation
    - Collapse multiple spaces

    Args:
        text: Arabic text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize_arabic("بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ")
        'بسم الله الرحمن الرحيم'
        >>> normalize_arabic("الإسراء")
        'الاسراء'
    """
    if not text:
        return ""

    # Normalize alef variants (including alef wasla ٱ U+0671)
    text = re.sub(r"[أإآاٱ]", "ا", text)

    text = text.replace("ى", "ي")
    text = text.replace("ة", "ه")

    # Hamza carriers: ؤ → و, ئ → ي
    text = text.replace("ؤ", "و")
    text = text.replace("ئ", "ي")

    text = DIACRITICS_PATTERN.sub("", text)
    text = text.replace(TATWEEL, "")

    # Remove punctuation (keeping letters and spaces)
    text = re.sub(r"[^\w\s]", "", text)

    return re.sub(r"\s+", " ", text).strip()


def arabic_name_matches(term: str, name: str, normalize: bool = False) -> bool:
    """
    Check whether a term occurs in an Arabic surah name.

    Args:
        term: Search term as typed
        name: Arabic surah name
        normalize: Compare normalized forms of both sides instead of raw text

    Returns:
        True if the term is contained in the name
    """
    if not normalize:
        return term in name
    needle = normalize_arabic(term)
    return bool(needle) and needle in normalize_arabic(name)
