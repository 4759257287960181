"""A small formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

SPECIFIERS = frozenset("cspdiuxX%")
_DIGITS = "0123456789abcdef"


def is_specifier(c: str) -> bool:
    """True if ``c`` is a conversion character this formatter understands."""
    return c in SPECIFIERS and len(c) == 1


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects a character or an integer, got {type(value).__name__}")


def _format_pointer(value: Optional[int]) -> str:
    if not value:
        return "(nil)"
    if value < 0:
        raise ValueError("pointer value must not be negative")
    return "0x" + format(value, "x")


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(_uint32(int(value)))
    if spec == "x":
        return format(_uint32(int(value)), "x")
    if spec == "X":
        return format(_uint32(int(value)), "X")
    return _format_pointer(value)


def format_text(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args``.

    A '%' followed by an unknown character is dropped and the character
    kept; a trailing '%' is dropped. Too few arguments raise TypeError.
    """
    if not isinstance(template, str):
        raise TypeError("template must be a string")
    values = iter(args)
    pieces = []
    i = 0
    length = len(template)
    while i < length:
        ch = template[i]
        if ch != "%":
            pieces.append(ch)
            i += 1
            continue
        spec = template[i + 1] if i + 1 < length else ""
        if not spec or not is_specifier(spec):
            i += 1
            continue
        if spec == "%":
            pieces.append("%")
        else:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_convert(spec, value))
        i += 2
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``template`` to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_text(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)