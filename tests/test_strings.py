import pytest

from codedrills.strings import PalindromeKind, is_ppap, palindrome_kind


@pytest.mark.parametrize("text", ["P", "PPAP", "PPPAPAP", "PPAPPAP"])
def test_ppap_accepted(text):
    assert is_ppap(text) is True


@pytest.mark.parametrize("text", ["", "PP", "PPA", "PAP", "APPP", "PPAPAPP"])
def test_ppap_rejected(text):
    assert is_ppap(text) is False


def test_ppap_rejects_other_letters():
    with pytest.raises(ValueError):
        is_ppap("PPXP")


@pytest.mark.parametrize("word", ["abba", "a", "", "racecar"])
def test_palindromes(word):
    assert palindrome_kind(word) == PalindromeKind.PALINDROME


@pytest.mark.parametrize("word", ["summuus", "xabba", "abbax", "abca"])
def test_pseudo_palindromes(word):
    assert palindrome_kind(word) == PalindromeKind.PSEUDO


@pytest.mark.parametrize("word", ["abc", "xyabba", "abcdef"])
def test_not_palindromes(word):
    assert palindrome_kind(word) == PalindromeKind.NEITHER


@pytest.mark.parametrize("word", ["abcba", "abccba", "abcxba", "qwerty"])
def test_kind_is_symmetric_under_reversal(word):
    assert palindrome_kind(word) == palindrome_kind(word[::-1])


@pytest.mark.parametrize(
    "word,code",
    [("abba", 0), ("summuus", 1), ("xyabba", 2)],
)
def test_kind_values_match_output_codes(word, code):
    assert int(palindrome_kind(word)) == code