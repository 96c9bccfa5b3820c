"""Morse code for letters and digits."""

from __future__ import annotations

import string

MORSE_ALPHA = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..",
    ".---", "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.",
    "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
)
MORSE_DIGIT = (
    "-----", ".----", "..---", "...--", "....-",
    ".....", "-....", "--...", "---..", "----.",
)


def to_morse(char: str) -> str:
    """Return the code for one character.

    Spaces and newlines become a newline; anything else unknown is dropped.
    """
    if char in string.ascii_letters:
        return MORSE_ALPHA[ord(char.upper()) - ord("A")]
    if char in string.digits:
        return MORSE_DIGIT[ord(char) - ord("0")]
    if char in (" ", "\n"):
        return "\n"
    return ""


def encode(text: str) -> str:
    """Encode ``text`` one character after another."""
    return "".join(to_morse(ch) for ch in text)