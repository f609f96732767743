"""Low-level tokenising helpers for line-oriented text formats."""

from __future__ import annotations

_WHITESPACE = " \t\n\r"
_NUMBER_START = frozenset("-.0123456789")
_NUMBER_BODY = frozenset("-.0123456789eE")


def get_extension(filename: str) -> str:
    """The text after the last dot of ``filename``, or an empty string."""
    pos = filename.rfind(".")
    return filename[pos + 1 :] if pos != -1 else ""


def strip_leading_whitespace(s: str) -> str:
    """Drop leading spaces, tabs, newlines and carriage returns."""
    return s.lstrip(_WHITESPACE)


def strip_leading_special_whitespace(s: str, special: str, special2: str) -> str:
    """Drop leading whitespace and any of the two extra characters given."""
    return s.lstrip(_WHITESPACE + special + special2)


def strip_leading_token(s: str) -> tuple[str, str]:
    """Split off the leading run of non-whitespace characters.

    Returns ``(token, rest)`` where ``rest`` starts at the next
    non-whitespace character.
    """
    end = next((i for i, c in enumerate(s) if c in _WHITESPACE), len(s))
    return s[:end], strip_leading_whitespace(s[end:])


def strip_leading_numerical_token(s: str) -> tuple[str, str]:
    """Extract the number held in the next token, skipping commas and parentheses.

    Returns ``(number_text, rest)``. The number text is the first run of
    digits, dots, minus signs and exponent markers inside the token; it is
    empty when the token holds no number.
    """
    cleaned = strip_leading_special_whitespace(s, ",", "(")
    token, rest = strip_leading_token(cleaned)
    start = next((i for i, c in enumerate(token) if c in _NUMBER_START), len(token))
    end = next(
        (i for i in range(start, len(token)) if token[i] not in _NUMBER_BODY), len(token)
    )
    return token[start:end], rest