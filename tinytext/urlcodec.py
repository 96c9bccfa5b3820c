"""Percent-encoding of bytes, form style (space becomes '+')."""

from __future__ import annotations

import string

_SAFE = frozenset(b"-._*" + string.ascii_letters.encode() + string.digits.encode())
_HEX = frozenset(string.hexdigits)


def url_encode(data: bytes) -> str:
    """Percent-encode ``data``; alphanumerics and ``-._*`` pass unchanged."""
    out = []
    for byte in data:
        if byte in _SAFE:
            out.append(chr(byte))
        elif byte == 0x20:
            out.append("+")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def url_decode(data: str) -> bytes:
    """Decode ``%XX`` escapes; other characters are kept as UTF-8.

    A truncated escape at the end is dropped. ``+`` is left as it is.
    """
    out = bytearray()
    chars = iter(data)
    for ch in chars:
        if ch != "%":
            out.extend(ch.encode("utf-8"))
            continue
        pair = "".join(next(chars, "") for _ in range(2))
        if len(pair) < 2:
            break
        if not set(pair) <= _HEX:
            raise ValueError(f"invalid percent escape: %{pair}")
        out.append(int(pair, 16))
    return bytes(out)