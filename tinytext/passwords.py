"""Random password generators and a brute-force search over letter words."""

from __future__ import annotations

import random
import string

PRINTABLE = "".join(chr(code) for code in range(ord("!"), ord("~") + 1))
SYMBOLS = "!@#-_%"
WORD_LENGTH = 8


def _source(rng: random.Random | None):
    return random if rng is None else rng


def random_printable(length: int = 10, rng: random.Random | None = None) -> str:
    """Return ``length`` characters drawn from the printable range ``!``..``~``."""
    if length < 0:
        raise ValueError("length must not be negative")
    source = _source(rng)
    return "".join(source.choice(PRINTABLE) for _ in range(length))


def structured_password(rng: random.Random | None = None) -> str:
    """Return a ten-character password in random order.

    It holds one capital, six small letters, one digit from 0 to 8 and
    two symbols from ``!@#-_%``.
    """
    source = _source(rng)
    pickers = (
        (1, lambda: source.choice(string.ascii_uppercase)),
        (6, lambda: source.choice(string.ascii_lowercase)),
        (1, lambda: str(source.randrange(9))),
        (2, lambda: source.choice(SYMBOLS)),
    )
    total = sum(quota for quota, _ in pickers)
    used = dict.fromkeys(range(len(pickers)), 0)
    chars: list[str] = []
    while len(chars) < total:
        kind = source.randrange(len(pickers))
        quota, pick = pickers[kind]
        if used[kind] == quota:
            continue
        used[kind] += 1
        chars.append(pick())
    return "".join(chars)


def index_to_word(index: int, length: int = WORD_LENGTH) -> str:
    """Spell ``index`` in base 26 with ``a`` as zero, least significant first."""
    if not 0 <= index < 26**length:
        raise ValueError(f"index {index} does not fit in {length} letters")
    letters = []
    for _ in range(length):
        index, digit = divmod(index, 26)
        letters.append(chr(ord("a") + digit))
    return "".join(letters)


def brute_force(target: str) -> int:
    """Enumerate every word of the target's length and return its index."""
    if not target or any(ch not in string.ascii_lowercase for ch in target):
        raise ValueError("target must be a non-empty word of lower-case letters")
    length = len(target)
    return next(
        index for index in range(26**length) if index_to_word(index, length) == target
    )