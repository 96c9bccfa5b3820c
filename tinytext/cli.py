"""Command-line front end for the text tools."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import TextIO

from tinytext import ciphers, clock, hexcodec, morse, nato, passwords, urlcodec, wide

_TEXT_FILTERS = {
    "allcaps": ciphers.as_all_caps,
    "rot13": ciphers.rot13,
    "vowels": ciphers.mask_vowels,
    "ransom": ciphers.ransom_case,
    "morse": morse.encode,
    "nato": nato.spell_lines,
}


def read_two_letters(stream: TextIO) -> tuple[str, str]:
    """Read two single characters from ``stream``; empty strings at end of input."""
    first = stream.read(1)
    second = stream.read(1)
    return first, second


def _write_bytes(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinytext", description="Small text tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    for name in _TEXT_FILTERS:
        commands.add_parser(name, help=f"{name} filter from stdin")

    caesar = commands.add_parser("caesar", help="Caesar cipher from stdin")
    caesar.add_argument("a", nargs="?")
    caesar.add_argument("b", nargs="?")
    caesar.add_argument("--decode", action="store_true")

    hexenc = commands.add_parser("hexencode", help="HEX ENCODE stdin")
    hexenc.add_argument("--version", type=int, choices=(1, 2), default=1)
    commands.add_parser("hexdecode", help="decode HEX ENCODE from stdin")
    commands.add_parser("urlencode", help="percent-encode stdin")
    commands.add_parser("urldecode", help="percent-decode stdin")

    greet = commands.add_parser("greet", help="say hello")
    greet.add_argument("name", nargs="?")
    greet.add_argument("--date", action="store_true")
    goodday = commands.add_parser("goodday", help="greet by time of day")
    goodday.add_argument("name", nargs="?")
    commands.add_parser("moon", help="show the moon phase")
    commands.add_parser("clock", help="show the time fields")
    commands.add_parser("now", help="show the current timestamp")

    generator = commands.add_parser("password", help="make a random string")
    generator.add_argument("--simple", action="store_true")

    commands.add_parser("letters", help="read two letters")
    commands.add_parser("suits", help="print card suits")
    commands.add_parser("limits", help="print integer limits")
    commands.add_parser("ascii", help="print the extended ASCII table")
    return parser


def _caesar(args: argparse.Namespace) -> int:
    text_in = sys.stdin
    if args.a is None or args.b is None:
        transform = ciphers.caesar_decode if args.decode else ciphers.caesar_encode
        sys.stdout.write(transform(text_in.read()))
        return 0
    try:
        shift = ciphers.shift_between(args.a, args.b)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(f"a: {args.a} b: {args.b} shift: {shift}")
    sys.stdout.write(ciphers.caesar_shift(text_in.read(), shift))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one tool named on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    command = args.command
    now = datetime.now()

    if command in _TEXT_FILTERS:
        sys.stdout.write(_TEXT_FILTERS[command](sys.stdin.read()))
    elif command == "caesar":
        return _caesar(args)
    elif command == "hexencode":
        sys.stdout.write(hexcodec.hex_encode(sys.stdin.buffer.read(), args.version))
    elif command == "hexdecode":
        try:
            _write_bytes(hexcodec.hex_decode(sys.stdin.read()))
        except hexcodec.HexFormatError as exc:
            print(exc, file=sys.stderr)
            return 1
    elif command == "urlencode":
        sys.stdout.write(urlcodec.url_encode(sys.stdin.buffer.read()))
    elif command == "urldecode":
        try:
            _write_bytes(urlcodec.url_decode(sys.stdin.read()))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    elif command == "greet":
        if args.date:
            sys.stdout.write(clock.dated_greeting(now, args.name))
        else:
            print(clock.greeting(args.name))
    elif command == "goodday":
        print(clock.time_of_day_greeting(now.hour, args.name))
    elif command == "moon":
        print(f"current moon phase is {clock.moon_phase_name(now.year, now.month - 1, now.day)}")
    elif command == "clock":
        sys.stdout.write(clock.time_details(now))
    elif command == "now":
        sys.stdout.write(clock.timestamp_report(now))
    elif command == "password":
        if args.simple:
            print(passwords.random_printable())
        else:
            generated = passwords.structured_password()
            print(f"password:{generated}")
    elif command == "letters":
        sys.stdout.write("Type a  letter:Type a  letter:")
        a, b = read_two_letters(sys.stdin)
        sys.stdout.write(f"a='{a}', b='{b}'\n")
    elif command == "suits":
        print(wide.card_suits())
    elif command == "limits":
        sys.stdout.write(wide.limits_report())
    elif command == "ascii":
        sys.stdout.write(wide.extended_ascii_table())
    return 0


if __name__ == "__main__":
    sys.exit(main())