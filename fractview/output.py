"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from fractview.strings import int_to_str

CharLike = Union[str, int]


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character (or the character with the given code) to ``stream``.

    Returns the number of characters written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _stream(stream).write(ch)
    return 1


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` to ``stream``; None writes nothing.

    Returns the number of characters written.
    """
    if text is None:
        return 0
    _stream(stream).write(text)
    return len(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline. Returns the characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_number(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of a 32-bit signed integer.

    Raises OverflowError for values outside the 32-bit range.
    """
    return put_str(int_to_str(n), stream)