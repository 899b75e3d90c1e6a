"""A small printf with the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer argument, got {type(value).__name__}") from None


def _signed32(value: Any) -> int:
    value = _as_int(value) & _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _hex(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def _render(conv: str, args: Iterator[Any]) -> str:
    if conv == "%":
        return "%"
    if conv not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{conv}") from None
    if conv == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value) & 0xFF)
    if conv == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if conv in "di":
        return str(_signed32(value))
    if conv == "u":
        return str(_as_int(value) & _MASK32)
    if conv == "x":
        return _hex(_as_int(value) & _MASK32, _LOWER_HEX)
    if conv == "X":
        return _hex(_as_int(value) & _MASK32, _UPPER_HEX)
    address = 0 if value is None else (_as_int(value) if isinstance(value, int) else id(value))
    return "0x" + _hex(address & _MASK64, _LOWER_HEX)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    An unknown conversion character is consumed and produces nothing.
    """
    arguments = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conv = next(chars, None)
        if conv is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_render(conv, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)