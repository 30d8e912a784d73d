"""Shared text normalizations for IAST phoneme input."""
from __future__ import annotations

import unicodedata


def normalize_iast(text: str) -> str:
    """
    Compose IAST text to NFC and strip surrounding whitespace.

    Decomposed input such as "n" + U+0323 becomes the precomposed "ṇ" used in
    the Śivasūtra tables. Inner whitespace is kept so separate phonemes never
    merge into one. Transliteration from other scripts is not attempted.
    """
    if not text:
        return text
    return unicodedata.normalize("NFC", text).strip()


__all__ = ["normalize_iast"]
