"""Unicode text samples, small tables and locale helpers."""

from __future__ import annotations

import locale
import struct
from pathlib import Path

ALPHA = 0x391
OMEGA = 0x3A9
NO_SIGMA = 0x3A2
SUITS = (0x2660, 0x2665, 0x2663, 0x2666)
CRISP_PRICE = 1.4


def greek_alphabet() -> str:
    """Return the 24 capital Greek letters, Alpha to Omega."""
    return "".join(chr(code) for code in range(ALPHA, OMEGA + 1) if code != NO_SIGMA)


def write_alphabet(path: str | Path) -> str:
    """Write the Greek alphabet and a newline to ``path``; return the alphabet."""
    alphabet = greek_alphabet()
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(alphabet + "\n")
    return alphabet


def read_first_line(path: str | Path, length: int = 100) -> str:
    """Read at most ``length - 1`` characters of the first line of ``path``."""
    if length < 1:
        raise ValueError("length must be at least 1")
    with open(path, encoding="utf-8") as handle:
        return handle.readline(length - 1)


def card_suits() -> str:
    """Return the four card-suit symbols."""
    return "".join(chr(code) for code in SUITS)


def wide_greetings() -> list[str]:
    """Return sample lines in several scripts."""
    return [
        "\u041f\u0440\u0438\u0432\u0435\u0442!\n",
        "\u4f31\u597d\n",
        "\U0001f44b\n",
        "I \u2665 to code.\n",
        "This will be \u00a5500\n",
        "hello, wide world!\n\u4f60",
    ]


def extended_ascii_table() -> str:
    """Tabulate the characters 0x80 to 0xFF, sixteen per row."""
    lines = [" " + "".join(f"{x:X}" for x in range(16))]
    for row in range(0x80, 0x100, 0x10):
        cells = "".join(f" {chr(row + col)} " for col in range(16))
        lines.append(f" 0x{row:2x} {cells}")
    return "\n".join(lines) + "\n"


def limits_report() -> str:
    """Describe the integer ranges of a 64-bit LP64 platform."""
    return (
        "Char:\n"
        "\tNumber of bits:8\n"
        "\tSigned minimum:-128\n"
        "\tSigned maximum:127\n"
        "\tUnsigned max:255\n"
        "Short:\n"
        "\tSigned minimum: -32768\n"
        "\tSigned maximum: 32767\n"
        "\tUnsigned max:65535\n"
        "Int:\n"
        "\tSigned minimum: -2147483648\n"
        "\tSigned minimax: 2147483647\n"
        "\tUnSigned max: 4294967295\n"
        "Long:\n"
        "\tSigned minimum: -9223372036854775808\n"
        "\tSigned minimax: 9223372036854775807\n"
        "\tUnSigned max: 18446744073709551615\n"
        "Long Long:\n"
        "\tSigned minimum: -9223372036854775808\n"
        "\tSigned minimax: 9223372036854775807\n"
        "\tUnSigned max: 18446744073709551615\n"
    )


def crisps_price(quantity: int) -> str:
    """Price ``quantity`` bags of crisps, in pounds, single precision."""
    (total,) = struct.unpack("f", struct.pack("f", quantity * CRISP_PRICE))
    return f"That'll be \u00a3 {total:.2f}"


def current_locale() -> str | None:
    """Adopt the environment's locale and return its name, or None on failure."""
    try:
        return locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        return None