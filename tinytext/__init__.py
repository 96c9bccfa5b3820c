"""Small text filters: ciphers, hex and URL codecs, NATO and Morse spelling, and more."""

__version__ = "0.1.0"