"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(char, int) and not isinstance(char, bool):
        char = chr(char & 0xFF)
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` unchanged."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    _target(stream).write(str(number))