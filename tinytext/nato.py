"""Spelling text with the NATO phonetic alphabet and reading it back."""

from __future__ import annotations

import string

NATO = (
    "Alfa", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf",
    "Hotel", "India", "Juliett", "Kilo", "Lima", "Mike", "November",
    "Oscar", "Papa", "Quebec", "Romeo", "Sierra", "Tango", "Uniform",
    "Victor", "Whiskey", "Xray", "Yankee", "Zulu",
)
MAX_WORD = 64
_LETTERS = frozenset(string.ascii_letters)


class WordTooLongError(ValueError):
    """Raised when a word exceeds the supported length."""


def nato_word(letter: str) -> str:
    """Return the code word for an ASCII letter."""
    if len(letter) != 1 or letter not in _LETTERS:
        raise ValueError(f"not an ASCII letter: {letter!r}")
    return NATO[ord(letter.upper()) - ord("A")]


def spell(text: str) -> str:
    """Concatenate the code words for every letter in ``text``."""
    return "".join(nato_word(ch) for ch in text if ch in _LETTERS)


def spell_lines(text: str) -> str:
    """Spell ``text`` line by line, keeping newlines and ending with one."""
    return "".join(
        nato_word(ch) if ch in _LETTERS else ch
        for ch in text
        if ch in _LETTERS or ch == "\n"
    ) + "\n"


def term_letter(term: str) -> str | None:
    """Return the letter whose code word starts ``term``, ignoring case."""
    lowered = term.lower()
    for word in NATO:
        if lowered.startswith(word.lower()):
            return word[0]
    return None


def decode_phrase(text: str) -> str:
    """Read back space-separated code words into letters."""
    letters = (term_letter(tok) for tok in text.split(" ") if tok)
    return "".join(letter for letter in letters if letter)


def _alpha_runs(text: str):
    word: list[str] = []
    for ch in text:
        if ch in _LETTERS:
            word.append(ch)
            if len(word) >= MAX_WORD:
                raise WordTooLongError("Buffer overflow")
        elif word:
            yield "".join(word)
            word = []
    if word:
        yield "".join(word)


def decode_words(text: str) -> str:
    """Read back code words from free text, split on any non-letter."""
    letters = (term_letter(word) for word in _alpha_runs(text))
    return "".join(letter for letter in letters if letter)