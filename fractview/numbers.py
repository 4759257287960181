"""Checking and parsing the decimal numbers given on the command line."""

from __future__ import annotations


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_valid_decimal(text: str) -> bool:
    """True for an optional sign, digits and at most one dot, with at least
    one digit and not starting with the dot."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.startswith("."):
        return False
    has_digit = False
    has_dot = False
    for ch in body:
        if _is_digit(ch):
            has_digit = True
        elif ch == "." and not has_dot:
            has_dot = True
        else:
            return False
    return has_digit


def parse_decimal(text: str) -> float:
    """Parse a leading decimal number, skipping leading whitespace.

    Parsing stops at the first character that does not fit; text without
    digits gives 0.0.
    """
    i = 0
    length = len(text)
    while i < length and (text[i] == " " or "\t" <= text[i] <= "\r"):
        i += 1
    sign = 1.0
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1.0
        i += 1
    result = 0.0
    while i < length and _is_digit(text[i]):
        result = result * 10 + (ord(text[i]) - ord("0"))
        i += 1
    if i < length and text[i] == ".":
        i += 1
        fraction = 0.0
        divisor = 1.0
        while i < length and _is_digit(text[i]):
            divisor /= 10
            fraction += (ord(text[i]) - ord("0")) * divisor
            i += 1
        result += fraction
    return result * sign