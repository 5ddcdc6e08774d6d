"""Helpers for Korean initial consonants (chosung)."""

from __future__ import annotations

CHOSUNG_LIST = [
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
]

HANGUL_SYLLABLE_START = 0xAC00  # 가
HANGUL_SYLLABLE_END = 0xD7A3  # 힣
SYLLABLES_PER_CHOSUNG = 588  # 21 vowels * 28 finals


def is_korean_syllable(char: str) -> bool:
    """Return True if ``char`` is exactly one precomposed Hangul syllable."""

    if len(char) != 1:
        return False
    return HANGUL_SYLLABLE_START <= ord(char) <= HANGUL_SYLLABLE_END


def get_chosung(text: str) -> str:
    """Replace every Hangul syllable in ``text`` by its initial consonant."""

    if not text:
        return ""
    transformed = []
    for char in text:
        if is_korean_syllable(char):
            index = (ord(char) - HANGUL_SYLLABLE_START) // SYLLABLES_PER_CHOSUNG
            transformed.append(CHOSUNG_LIST[index])
        else:
            transformed.append(char)
    return "".join(transformed)


__all__ = ["CHOSUNG_LIST", "get_chosung", "is_korean_syllable"]
