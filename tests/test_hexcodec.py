import pytest

from tinytext.hexcodec import (
    ChecksumWarning,
    HexFormatError,
    checksum,
    checksum_report,
    hex_decode,
    hex_encode,
    hex_filter,
    hex_unfilter,
)

SOURCE_BYTES = bytes([0x41, 0x42, 0x43, 0x44, 0x45, 0x46, 0x47, 0x48, 0x49, 0x4A])


def test_checksum_of_source_bytes():
    assert checksum(SOURCE_BYTES) == 0xB7


def test_checksum_is_byte():
    data = bytes(range(256)) * 3
    assert 0 <= checksum(data) < 256
    assert checksum(data) == sum(data) % 256


def test_checksum_report_layout():
    report = checksum_report(SOURCE_BYTES)
    first, second, tail = report.split("\n")
    assert first.startswith(" 41 42 43")
    assert first.split() == [f"{b:02X}" for b in SOURCE_BYTES]
    assert second == f"Checksum = {checksum(SOURCE_BYTES):02X}"
    assert tail == ""


@pytest.mark.parametrize("version", [1, 2])
@pytest.mark.parametrize("size", [0, 1, 17, 18, 19, 34, 36, 100])
def test_round_trip(version, size):
    data = bytes((i * 7 + 3) % 256 for i in range(size))
    assert hex_decode(hex_encode(data, version)) == data


def test_v1_framing():
    encoded = hex_encode(b"hello", 1)
    assert encoded.startswith("HEX ENCODE v1.0\n")
    assert encoded.endswith("\nHEX ENCODE END\n")


def test_v2_framing_and_checksums():
    data = bytes(range(40))
    encoded = hex_encode(data, 2)
    lines = encoded.splitlines()
    assert lines[0] == "HEX ENCODE v2.0"
    assert lines[-1] == "HEX ENCODE END"
    for line in lines[1:-1]:
        values = [int(tok, 16) for tok in line.split()]
        assert len(values) <= 18
        assert sum(values[:-1]) % 256 == values[-1]


def test_v1_line_width():
    encoded = hex_encode(bytes(50), 1)
    for line in encoded.splitlines()[1:-1]:
        assert len(line.split()) <= 18


def test_unknown_version():
    with pytest.raises(ValueError):
        hex_encode(b"x", 3)


def test_bad_header():
    with pytest.raises(HexFormatError):
        hex_decode("NOT HEX\n 41\n")
    with pytest.raises(HexFormatError):
        hex_decode("")


def test_bad_token():
    with pytest.raises(HexFormatError):
        hex_decode("HEX ENCODE v1.0\n 4G\nHEX ENCODE END\n")


def test_checksum_mismatch_warns_but_decodes():
    encoded = hex_encode(b"AB", 2)
    lines = encoded.splitlines()
    tokens = lines[1].split()
    tokens[-1] = f"{(int(tokens[-1], 16) + 1) % 256:02X}"
    lines[1] = " " + " ".join(tokens)
    with pytest.warns(ChecksumWarning):
        assert hex_decode("\n".join(lines) + "\n") == b"AB"


def test_decode_stops_at_end_marker():
    text = hex_encode(b"xy", 1) + " 41 42\n"
    assert hex_decode(text) == b"xy"


def test_hex_filter_keeps_newlines():
    assert hex_filter(b"A\nB") == "41\n42"


def test_hex_filter_width():
    data = bytes(range(1, 10)) * 30
    output = hex_filter(data)
    lines = output.split("\n")
    assert all(len(line) <= 80 for line in lines)
    assert "".join(lines) == data.hex().upper()


@pytest.mark.parametrize("data", [b"", b"\x00\x09\x90", b"Hello there", bytes(range(11, 39))])
def test_unfilter_round_trip(data):
    assert hex_unfilter(hex_filter(data)) == data


def test_unfilter_stops_at_non_hex():
    assert hex_unfilter("4142zz43") == b"AB"
    assert hex_unfilter("414") == b"A"