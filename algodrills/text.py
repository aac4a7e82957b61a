"""Puzzles over strings."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import takewhile, zip_longest

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same backwards, ignoring case."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral."""
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip_longest(values, values[1:], fillvalue=0):
        total += -current if current < following else current
    return total


def longest_common_prefix(words: Sequence[str]) -> str:
    """Return the longest prefix shared by every word."""
    if not words:
        return ""
    first, last = min(words), max(words)
    return "".join(a for a, _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, last)))


def repeated_character(s: str) -> str | None:
    """Return the first character whose second occurrence comes earliest, or None."""
    seen: set[str] = set()
    for char in s:
        if char in seen:
            return char
        seen.add(char)
    return None


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def find_the_difference(s: str, t: str) -> str:
    """Return the character added to a shuffle of ``s`` to form ``t``."""
    if len(t) != len(s) + 1:
        raise ValueError("t must be exactly one character longer than s")
    return chr(sum(map(ord, t)) - sum(map(ord, s)))


def reverse_str(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of every block of ``2k``."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    return "".join(
        s[start : start + k][::-1] + s[start + k : start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def reverse_words(s: str) -> str:
    """Reverse each space-separated word, keeping the spaces where they are."""
    return " ".join(word[::-1] for word in s.split(" "))


def add_binary(a: str, b: str) -> str:
    """Add two binary numerals; the result is at least as long as the longer one."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        if x not in "01" or y not in "01":
            raise ValueError(f"not a binary digit: {x if x not in '01' else y!r}")
        carry += int(x) + int(y)
        digits.append(str(carry % 2))
        carry //= 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def _is_palindrome_slice(s: str) -> bool:
    return s == s[::-1]


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` becomes a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return _is_palindrome_slice(s[i + 1 : j + 1]) or _is_palindrome_slice(s[i:j])
        i += 1
        j -= 1
    return True


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters from ``allowed``."""
    allowed_chars = set(allowed)
    return sum(1 for word in words if set(word) <= allowed_chars)