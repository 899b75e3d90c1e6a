"""String helpers: integer parsing and formatting, splitting, searching and trimming."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _check_single_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def atoi(text: str) -> int:
    """Parse a 32-bit signed integer from ``text``.

    Leading whitespace and one sign are allowed. Parsing stops at the first
    non-digit. The result is 0 when the value leaves the 32-bit range, or when
    the digits are followed by anything other than a space or the end of text.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < len(text) and text[pos] in _DIGITS:
        total = total * 10 + int(text[pos])
        if not INT_MIN <= total * sign <= INT_MAX:
            return 0
        pos += 1
    if pos < len(text) and text[pos] != " ":
        return 0
    return total * sign


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_single_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; ``"\\0"`` matches the end of text."""
    _check_single_char(char)
    if char == "\0":
        found = text.find(char)
        return len(text) if found < 0 else found
    found = text.find(char)
    return None if found < 0 else found


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; ``"\\0"`` matches the end of text."""
    _check_single_char(char)
    if char == "\0" and char not in text:
        return len(text)
    found = text.rfind(char)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    found = haystack.find(needle, 0, length)
    return None if found < 0 else found


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters; return the code difference at the first mismatch."""
    _check_non_negative("length", length)
    for pos in range(length):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When ``size``
    does not exceed ``len(dst)``, ``dst`` is unchanged and the length reported
    is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``; empty if ``start`` is past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each character in place.

    A non-None return value replaces the character at that index.
    """
    for index, char in enumerate(chars):
        result = func(index, char)
        if result is not None:
            chars[index] = result
    return chars


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)