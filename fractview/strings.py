"""String helpers: bounded copying and searching, parsing, splitting, trimming.

Positions are returned as indexes, or None where nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _char(c: CharLike) -> str:
    """Normalise a character or integer code the way a C ``char`` cast would."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def truncated_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; truncation
    happened when that length is ``size`` or more.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def truncated_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation
    would have had. If ``dst`` already fills the buffer, it is returned
    unchanged and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the NUL character matches the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the code difference at the first mismatch, or 0 when the
    compared parts are equal. The end of a string counts as code 0.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    i = 0
    while _code_at(a, i) and _code_at(b, i) and i < n - 1:
        if a[i] != b[i]:
            break
        i += 1
    return _code_at(a, i) - _code_at(b, i)


def find_bounded(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n``
    characters of ``haystack``, or None. An empty needle matches at 0."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not needle:
        return 0
    if n == 0 or not haystack:
        return None
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, C ``atoi`` style.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0. The result wraps to
    a 32-bit signed integer.
    """
    i = 0
    length = len(text)
    while i < length and (text[i] == " " or "\t" <= text[i] <= "\r"):
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = result * 10 + (ord(text[i]) - ord("0"))
        i += 1
    return _wrap_int32(result * sign)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``;
    empty when ``start`` is at or past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(a: str, b: str) -> str:
    """The concatenation of ``a`` and ``b``."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("both arguments must be strings")
    return a + b


def trim(text: str, charset: str) -> str:
    """``text`` without leading and trailing characters found in ``charset``."""
    if not text:
        return ""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    ch = _char(sep)
    return [word for word in text.split(ch) if word]


def int_to_str(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iterate_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each element of ``chars`` in place.

    A non-None return value replaces the element.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement