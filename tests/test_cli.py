import io

import pytest

from tinytext import ciphers, hexcodec, morse, nato
from tinytext.cli import main, read_two_letters
from tinytext.wide import card_suits, limits_report


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


def test_read_two_letters():
    assert read_two_letters(io.StringIO("x\n")) == ("x", "\n")


def test_read_two_letters_at_end_of_input():
    assert read_two_letters(io.StringIO("")) == ("", "")


def test_letters_command(monkeypatch, capsys):
    _stdin(monkeypatch, b"ab")
    assert main(["letters"]) == 0
    assert capsys.readouterr().out == "Type a  letter:Type a  letter:a='a', b='b'\n"


@pytest.mark.parametrize(
    "command, function",
    [("rot13", ciphers.rot13), ("vowels", ciphers.mask_vowels),
     ("morse", morse.encode), ("nato", nato.spell_lines)],
)
def test_text_filters(monkeypatch, capsys, command, function):
    text = "Hello World 42\n"
    _stdin(monkeypatch, text.encode())
    assert main([command]) == 0
    assert capsys.readouterr().out == function(text)


def test_caesar_with_letters(monkeypatch, capsys):
    _stdin(monkeypatch, b"abc xyz")
    assert main(["caesar", "D", "A"]) == 0
    assert capsys.readouterr().out == "a: D b: A shift: 3" + ciphers.caesar_encode("abc xyz")


def test_caesar_decode(monkeypatch, capsys):
    _stdin(monkeypatch, ciphers.caesar_encode("Secret Text").encode())
    assert main(["caesar", "--decode"]) == 0
    assert capsys.readouterr().out == "Secret Text"


def test_caesar_rejects_long_argument(monkeypatch, capsys):
    _stdin(monkeypatch, b"abc")
    assert main(["caesar", "AB", "A"]) == 1
    assert capsys.readouterr().err != ""


def test_hexencode_round_trip(monkeypatch, capsys):
    payload = b"The quick brown fox jumps over the lazy dog"
    _stdin(monkeypatch, payload)
    assert main(["hexencode", "--version", "2"]) == 0
    assert hexcodec.hex_decode(capsys.readouterr().out) == payload


def test_hexdecode_invalid_header(monkeypatch, capsys):
    _stdin(monkeypatch, b"garbage\n")
    assert main(["hexdecode"]) == 1
    assert "Invalid HEX ENCODE data" in capsys.readouterr().err


def test_url_round_trip(monkeypatch, capsys):
    _stdin(monkeypatch, b"a%20b")
    assert main(["urldecode"]) == 0
    assert capsys.readouterr().out == "a b"


def test_moon_command(monkeypatch, capsys):
    assert main(["moon"]) == 0
    assert capsys.readouterr().out.startswith("current moon phase is ")


def test_suits_and_limits(capsys):
    assert main(["suits"]) == 0
    assert capsys.readouterr().out == card_suits() + "\n"
    assert main(["limits"]) == 0
    assert capsys.readouterr().out == limits_report()


def test_unknown_command():
    with pytest.raises(SystemExit):
        main(["bogus"])