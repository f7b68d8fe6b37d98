"""String recognisers: PPAP strings and palindromes up to one deletion."""

from __future__ import annotations

from enum import IntEnum


class PalindromeKind(IntEnum):
    """How close a word is to a palindrome."""

    PALINDROME = 0
    PSEUDO = 1
    NEITHER = 2


def is_ppap(text: str) -> bool:
    """Whether ``text`` reduces to "P" by repeatedly replacing "PPAP" with "P"."""
    if set(text) - {"P", "A"}:
        raise ValueError("text may hold only the letters P and A")
    stacked = 0
    chars = iter(text)
    for char in chars:
        if char == "P":
            stacked += 1
            continue
        if stacked < 2 or next(chars, None) != "P":
            return False
        stacked -= 1
    return stacked == 1


def _is_palindrome(word: str) -> bool:
    return word == word[::-1]


def palindrome_kind(word: str) -> PalindromeKind:
    """Classify ``word`` as a palindrome, one deletion away from one, or neither."""
    i, j = 0, len(word) - 1
    while i < j and word[i] == word[j]:
        i += 1
        j -= 1
    if i >= j:
        return PalindromeKind.PALINDROME
    if _is_palindrome(word[i + 1:j + 1]) or _is_palindrome(word[i:j]):
        return PalindromeKind.PSEUDO
    return PalindromeKind.NEITHER