"""String puzzles: run-length compression, keypad codes, parsing and comparisons.

Functions that find nothing return None where the answer is a count, and a
sensible fallback where the puzzle defines one.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# Keys 2 to 9 of a phone keypad and how many letters each carries.
_KEYPAD_LAYOUT = ((2, 3), (3, 3), (4, 3), (5, 3), (6, 3), (7, 4), (8, 3), (9, 4))


def compress(chars: Iterable[str]) -> str:
    """Run-length encode characters: each run as its character, then its length if above one."""
    parts = []
    for ch, run in groupby(chars):
        length = sum(1 for _ in run)
        parts.append(ch if length == 1 else f"{ch}{length}")
    return "".join(parts)


def customer_walkaways(computers: int, sequence: str) -> int:
    """How many customers leave without a computer in a café with the given number of them.

    Each letter in the sequence is a customer's arrival the first time it is
    seen and their departure the next time.
    """
    if not sequence:
        return 0
    available = computers - 2
    seen = {sequence[0]}
    walked_away = 0
    for ch in sequence[1:]:
        if ch in seen:
            available += 1
            if available < 0:
                walked_away += 1
        else:
            available -= 1
        seen.add(ch)
    return walked_away


def duplicate_counts(text: str) -> dict[str, int]:
    """Letters occurring more than once, ignoring case, mapped to their counts.

    Keys are lower-case and in alphabetical order; other characters are ignored.
    """
    counts = Counter(
        ch.lower() for ch in text if ch.isascii() and ch.isalpha()
    )
    return {letter: count for letter, count in sorted(counts.items()) if count > 1}


def keypad_sequences() -> list[int]:
    """The keypad press sequence for each letter A to Z, as numbers (A is 2, B is 22, ...)."""
    sequences = []
    for key, letters in _KEYPAD_LAYOUT:
        sequences.extend(int(str(key) * presses) for presses in range(1, letters + 1))
    return sequences


def keypad_sequence(word: str) -> str:
    """The keypad presses that type word, letter sequences joined without separators.

    Letters of either case are accepted. Raises ValueError for any other character.
    """
    sequences = keypad_sequences()
    parts = []
    for ch in word:
        upper = ch.upper()
        if not ("A" <= upper <= "Z" and len(upper) == 1):
            raise ValueError(f"not a letter: {ch!r}")
        parts.append(str(sequences[ord(upper) - ord("A")]))
    return "".join(parts)


def decode_encrypted(text: str) -> str:
    """Expand text made of lower-case letter groups each followed by a repeat count.

    "ab2c3" becomes "ababccc". Other characters are ignored, and letters not
    followed by a positive count are dropped.
    """
    decoded = []
    pending = ""
    count = 0
    for ch in text:
        if "a" <= ch <= "z":
            if count > 0:
                decoded.append(pending * count)
                pending = ""
                count = 0
            pending += ch
        elif ch in _DIGITS:
            count = count * 10 + int(ch)
    if count > 0:
        decoded.append(pending * count)
    return "".join(decoded)


def is_palindrome(text: str) -> bool:
    """Whether text reads the same forwards and backwards."""
    return text == text[::-1]


def reverse_words(text: str) -> str:
    """The space-separated words of text in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in text.split(" ") if word]))


def roman_to_decimal(text: str) -> int:
    """The value of a Roman numeral, using the subtractive rule.

    Raises ValueError for an empty string or a character that is not a numeral.
    """
    if not text:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_VALUES[ch] for ch in text]
    except KeyError as error:
        raise ValueError(f"not a Roman numeral: {error.args[0]!r}") from None
    total = sum(
        -value if value < following else value
        for value, following in zip(values, values[1:])
    )
    return total + values[-1]


def count_balanced_splits(text: str) -> int | None:
    """How many prefixes of a binary string hold as many '0's as other characters.

    This is the number of pieces it splits into with each piece balanced;
    None when there is no such prefix.
    """
    zeros = ones = splits = 0
    for ch in text:
        if ch == "0":
            zeros += 1
        else:
            ones += 1
        if zeros == ones:
            splits += 1
    return splits or None


def is_valid_shuffle(candidate: str, first: str, second: str) -> bool:
    """Whether candidate is no longer than first and second together and holds each of their characters."""
    if len(candidate) > len(first) + len(second):
        return False
    present = set(candidate)
    return all(ch in present for ch in first + second)


def is_subsequence(first: str, second: str) -> bool:
    """Whether first can be obtained from second by deleting characters."""
    remaining = iter(second)
    return all(ch in remaining for ch in first)


def longest_common_prefix(words: Sequence[str]) -> str:
    """The longest prefix shared by every word.

    Raises ValueError for an empty list of words.
    """
    if not words:
        raise ValueError("longest_common_prefix() of no words")
    shared = takewhile(lambda column: len(set(column)) == 1, zip(*words))
    return "".join(column[0] for column in shared)


def parse_int(text: str) -> int:
    """Parse a signed decimal integer, clamped to the 32-bit range.

    Spaces are skipped, a sign must be followed by a digit (and '-' by no other
    sign), and parsing stops at the end of the first run of digits or at any
    other character. Malformed signs give 0.
    """
    negative = False
    value = 0
    for i, ch in enumerate(text):
        following = text[i + 1 : i + 2]
        if ch == "-":
            if following in _SIGNS:
                return 0
            negative = True
        elif ch == "+":
            if following in _SIGNS or following not in _DIGITS:
                return 0
            negative = False
        elif ch in _DIGITS:
            value = value * 10 + int(ch)
            if following not in _DIGITS:
                break
        elif ch != " ":
            break
    if negative:
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def first_unique_character(text: str) -> str:
    """The first character occurring exactly once, or the first character if none does.

    Raises ValueError for an empty string.
    """
    if not text:
        raise ValueError("first_unique_character() of an empty string")
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), text[0])