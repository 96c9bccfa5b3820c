"""Word splitting, random words and a file of sayings."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from pathlib import Path

WORD_SIZE = 64
VOCABULARY = (
    "orange", "grape", "apple", "banana",
    "coffee", "tea", "juice", "beverage",
    "happy", "grumpy", "bashful", "sleepy",
)


def split_words(text: str, size: int = WORD_SIZE) -> Iterator[str]:
    """Yield whitespace-separated words, cut into pieces of ``size - 1``."""
    limit = size - 1
    if limit < 1:
        raise ValueError("size must be at least 2")
    word: list[str] = []
    for ch in text:
        if ch.isspace():
            if word:
                yield "".join(word)
            word = []
            continue
        word.append(ch)
        if len(word) == limit:
            yield "".join(word)
            word = []
    if word:
        yield "".join(word)


def tokens(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [tok for tok in text.split(" ") if tok]


def random_words(count: int = 3, rng: random.Random | None = None) -> list[str]:
    """Draw ``count`` words from the vocabulary, with repetition."""
    source = random if rng is None else rng
    return [source.choice(VOCABULARY) for _ in range(count)]


def load_sayings(path: str | Path) -> list[str]:
    """Read a sayings file, one saying per line, newlines kept."""
    with open(path, encoding="utf-8") as handle:
        return handle.readlines()


def pick_saying(sayings: Sequence[str], rng: random.Random | None = None) -> str:
    """Return one saying at random."""
    if not sayings:
        raise ValueError("no sayings to choose from")
    source = random if rng is None else rng
    return source.choice(sayings)