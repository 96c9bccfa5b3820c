"""The HEX ENCODE text format, raw hex filters and byte checksums."""

from __future__ import annotations

import re
import warnings

HEADER_PREFIX = "HEX ENCODE"
END_MARKER = "HEX ENCODE END"
_VERSIONS = {1: ("HEX ENCODE v1.0", 18, False), 2: ("HEX ENCODE v2.0", 17, True)}
_V2_HEADER = "HEX ENCODE v2.0"
_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{1,2}")
_FILTER_WIDTH = 80
_NIBBLES = "0123456789ABCDEF"


class HexFormatError(ValueError):
    """Raised when HEX ENCODE data is malformed."""


class ChecksumWarning(UserWarning):
    """Issued when a v2.0 line fails its checksum."""


def checksum(data: bytes) -> int:
    """Return the sum of the bytes modulo 256."""
    return sum(data) % 0x100


def checksum_report(data: bytes) -> str:
    """List the bytes in hex followed by their checksum."""
    listing = "".join(f" {b:02X}" for b in data)
    return f"{listing}\nChecksum = {checksum(data):02X}\n"


def _hex_pairs(data: bytes) -> str:
    return "".join(f" {b:02X}" for b in data)


def hex_encode(data: bytes, version: int = 1) -> str:
    """Encode ``data`` in HEX ENCODE format, version 1 or 2."""
    try:
        header, per_line, with_sum = _VERSIONS[version]
    except KeyError:
        raise ValueError(f"unsupported HEX ENCODE version: {version!r}") from None

    full = len(data) // per_line * per_line
    parts = [header, "\n"]
    for start in range(0, full, per_line):
        chunk = data[start : start + per_line]
        parts.append(_hex_pairs(chunk))
        if with_sum:
            parts.append(f" {checksum(chunk):02X}")
        parts.append("\n")
    rest = data[full:]
    parts.append(_hex_pairs(rest))
    if with_sum:
        parts.append(f" {checksum(rest):02X}")
    parts.append("\n")
    parts.append(END_MARKER)
    parts.append("\n")
    return "".join(parts)


def _parse_byte(field: str) -> int:
    if not _HEX_BYTE.fullmatch(field):
        raise HexFormatError(f"invalid hex byte: {field!r}")
    return int(field, 16)


def hex_decode(text: str) -> bytes:
    """Decode HEX ENCODE text; v2.0 lines have their checksums verified."""
    lines = text.splitlines()
    if not lines or not lines[0].startswith(HEADER_PREFIX):
        raise HexFormatError("Invalid HEX ENCODE data")
    verify = lines[0].startswith(_V2_HEADER)

    out = bytearray()
    for line in lines[1:]:
        if line.startswith(END_MARKER[:13]):
            break
        values = [_parse_byte(field) for field in line.split(" ") if field]
        if not values:
            continue
        if verify:
            *payload, expected = values
            actual = sum(payload) % 0x100
            if actual != expected:
                warnings.warn(
                    f"invalid checksum {actual:02X}, {expected:02X}",
                    ChecksumWarning,
                    stacklevel=2,
                )
            out.extend(payload)
        else:
            out.extend(values)
    return bytes(out)


def hex_filter(data: bytes) -> str:
    """Write each byte as two hex digits, wrapping before 80 columns.

    Newline bytes pass through unchanged.
    """
    out = []
    width = 0
    for byte in data:
        if byte == 0x0A:
            out.append("\n")
            continue
        width += 2
        if width >= _FILTER_WIDTH:
            width = 0
            out.append("\n")
        out.append(f"{byte:02X}")
    return "".join(out)


def hex_unfilter(text: str) -> bytes:
    """Turn pairs of upper-case hex digits back into bytes.

    Decoding stops at the first character that is not a hex digit.
    """
    out = bytearray()
    chars = iter(text)
    for high in chars:
        low = next(chars, None)
        if high not in _NIBBLES or low is None or low not in _NIBBLES:
            break
        out.append(_NIBBLES.index(high) << 4 | _NIBBLES.index(low))
    return bytes(out)