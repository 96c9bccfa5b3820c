# tinytext

Small text filters and toys for the command line and for Python code:
simple ciphers, hex and URL codecs, NATO and Morse spelling, word
splitting, random passwords, clock-based greetings and a few Unicode
samples.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides a `tinytext` command. It always takes a
subcommand:

```
tinytext rot13 < message.txt
tinytext hexencode --version 2 < data.bin
tinytext greet Alice --date
```

Filters that read standard input and write the result to standard output:

| Subcommand  | What it does |
|-------------|--------------|
| `allcaps`   | subtracts 0x20 from every ASCII letter (`as_all_caps`) |
| `rot13`     | ROT13 on ASCII letters |
| `vowels`    | replaces every vowel with `*` |
| `ransom`    | gives each letter a random case |
| `morse`     | Morse code; spaces and newlines become newlines |
| `nato`      | spells letters with NATO code words, line by line |
| `caesar [A B] [--decode]` | without `A B`, shifts letters three places (back with `--decode`); with two single characters, prints `a: A b: B shift: N` and shifts by `ord(A) - ord(B)` |
| `hexencode [--version 1\|2]` | writes input bytes in the `HEX ENCODE` format |
| `hexdecode` | reads `HEX ENCODE` text and writes the bytes |
| `urlencode` | form-style percent encoding of input bytes |
| `urldecode` | decodes `%XX` escapes |

Other subcommands:

| Subcommand  | What it does |
|-------------|--------------|
| `greet [NAME] [--date]` | says hello; `--date` adds the date and 12-hour time |
| `goodday [NAME]` | good morning, afternoon or evening by the current hour |
| `moon`      | the estimated current moon phase |
| `clock`     | the fields of the current local time |
| `now`       | the current time as seconds since the epoch and in ctime form |
| `password [--simple]` | a structured ten-character password, or ten random printable characters with `--simple` |
| `letters`   | prompts twice, reads two characters and echoes them |
| `suits`     | the four card-suit symbols |
| `limits`    | integer ranges of a 64-bit platform |
| `ascii`     | a table of the characters 0x80 to 0xFF |

A bad `HEX ENCODE` header, an invalid percent escape, or a `caesar`
argument that is not a single character is reported on standard error
with exit status 1.

## Library

### Ciphers (`tinytext.ciphers`)

```python
from tinytext.ciphers import rot13, caesar_encode, caesar_decode, caesar_shift, bin_string

rot13("Hello")              # 'Uryyb'
caesar_decode(caesar_encode("abc"))  # 'abc'
caesar_shift("Hello", 3)    # 'Khoor'
bin_string(ord("A"))        # '01000001'
```

Also `as_all_caps`, `shift_between(a, b)` (raises `ValueError` unless
both are single characters), `to_lower_ascii`, `to_upper_ascii`,
`mask_vowels`, and `ransom_case(text, rng=None)`, which takes an optional
`random.Random`.

### Hex encoding (`tinytext.hexcodec`)

`hex_encode(data, version=1)` produces the line-based `HEX ENCODE`
format: 18 bytes per line in version 1, 17 bytes plus a checksum byte in
version 2. `hex_decode(text)` reads it back, raising `HexFormatError` for
a missing header or a bad hex field, and issuing a `ChecksumWarning` when
a version 2 line's checksum does not match. `hex_filter` writes bytes as
hex digits wrapped before 80 columns (newlines pass through), and
`hex_unfilter` turns upper-case hex pairs back into bytes, stopping at the
first other character. `checksum` is the byte sum modulo 256 and
`checksum_report` lists the bytes with their checksum.

### URL encoding (`tinytext.urlcodec`)

`url_encode(data)` keeps alphanumerics and `-._*`, writes a space as `+`
and everything else as `%XX`. `url_decode(data)` decodes `%XX` escapes,
leaves `+` as it is, drops a truncated escape at the end and raises
`ValueError` for non-hex escapes.

### NATO alphabet (`tinytext.nato`)

```python
from tinytext.nato import spell, decode_words

spell("abc")                       # 'AlfaBravoCharlie'
decode_words("Alfa Bravo Charlie") # 'ABC'
```

Also `nato_word`, `spell_lines`, `term_letter` and `decode_phrase`.
`decode_words` raises `WordTooLongError` for a run of 64 or more letters.

### Morse code (`tinytext.morse`)

`to_morse(char)` returns the code for one letter or digit, a newline for
a space or newline, and an empty string otherwise; `encode(text)` applies
it to a whole text.

### Words (`tinytext.words`)

`split_words(text, size=64)` yields whitespace-separated words cut into
pieces of at most `size - 1` characters; `tokens` splits on spaces;
`random_words` draws from a small vocabulary; `load_sayings(path)` reads
a file of one saying per line and `pick_saying` chooses one at random.

### Passwords (`tinytext.passwords`)

`random_printable`, `structured_password`, `index_to_word` (base 26,
`a` as zero, least significant letter first) and `brute_force(target)`,
which enumerates words of the target's length and returns its index.

### Clock (`tinytext.clock`)

`greeting`, `dated_greeting`, `time_of_day_greeting`, `time_details`,
`timestamp_report`, and `moon_phase` / `moon_phase_name`, which take a
`datetime` or date fields rather than reading the clock themselves.

### Wide characters (`tinytext.wide`)

`greek_alphabet`, `write_alphabet(path)`, `read_first_line(path, length=100)`,
`card_suits`, `wide_greetings`, `extended_ascii_table`, `limits_report`,
`crisps_price(quantity)` and `current_locale`.

## What it does not do

Writing and reading the Greek alphabet file, the crisps price, the locale
name, the Unicode sample lines, the sayings file and the brute-force
search are library functions only; the `tinytext` command has no
subcommands for them.