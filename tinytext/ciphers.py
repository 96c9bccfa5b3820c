"""Simple character-level ciphers and case tricks for ASCII text."""

from __future__ import annotations

import random
import string

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_LETTERS = _UPPER | _LOWER
_VOWELS = frozenset("aeiouAEIOU")


def as_all_caps(text: str) -> str:
    """Subtract 0x20 from the code of every ASCII letter.

    Lower-case letters become upper case; upper-case letters are shifted
    down into the punctuation range, exactly as the raw arithmetic implies.
    """
    return "".join(chr(ord(ch) - 0x20) if ch in _LETTERS else ch for ch in text)


def bin_string(value: int) -> str:
    """Return the eight-bit binary representation of a byte value."""
    return format(value & 0xFF, "08b")


def _rotate(ch: str, shift: int) -> str:
    if ch in _UPPER:
        base = ord("A")
    elif ch in _LOWER:
        base = ord("a")
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


def caesar_shift(text: str, shift: int) -> str:
    """Rotate every ASCII letter by ``shift`` places, keeping its case."""
    return "".join(_rotate(ch, shift) for ch in text)


def rot13(text: str) -> str:
    """Apply ROT13 to the ASCII letters of ``text``."""
    return caesar_shift(text, 13)


def caesar_encode(text: str) -> str:
    """Classic Caesar cipher: shift letters three places forward."""
    return caesar_shift(text, 3)


def caesar_decode(text: str) -> str:
    """Undo :func:`caesar_encode`."""
    return caesar_shift(text, -3)


def shift_between(a: str, b: str) -> int:
    """Return the shift that maps letter ``b`` onto letter ``a``."""
    for arg in (a, b):
        if len(arg) != 1:
            raise ValueError(f"argument must be a single character: {arg!r}")
    return ord(a) - ord(b)


def to_lower_ascii(text: str) -> str:
    """Lower-case ASCII capitals by setting bit 0x20."""
    return "".join(chr(ord(ch) | 0x20) if ch in _UPPER else ch for ch in text)


def to_upper_ascii(text: str) -> str:
    """Upper-case ASCII small letters by clearing bit 0x20."""
    return "".join(chr(ord(ch) & 0xDF) if ch in _LOWER else ch for ch in text)


def mask_vowels(text: str) -> str:
    """Replace every vowel (either case) with an asterisk."""
    return "".join("*" if ch in _VOWELS else ch for ch in text)


def ransom_case(text: str, rng: random.Random | None = None) -> str:
    """Give every ASCII letter a randomly chosen case."""
    source = random if rng is None else rng
    return "".join(
        (ch.upper() if source.randrange(2) == 0 else ch.lower()) if ch in _LETTERS else ch
        for ch in text
    )