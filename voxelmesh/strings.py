"""Small string and file-name helpers used by the model loaders."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_ATOF_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_NUMERIC_CHARS = frozenset(".-0123456789")
_TRIM_CHARS = " \r\n"


def _find_first_of(s: str, chars: str, start: int = 0) -> int:
    """Index of the first character of ``s`` at or after ``start`` that is in ``chars``."""
    return next((i for i in range(start, len(s)) if s[i] in chars), -1)


def _find_first_not_of(s: str, chars: str) -> int:
    return next((i for i, c in enumerate(s) if c not in chars), -1)


def str_filebase(s: str) -> str:
    """Return ``s`` without the extension that follows its last dot."""
    pos = s.rfind(".")
    return s[:pos] if pos != -1 else s


def str_filepath(s: str) -> str:
    """Return the part of ``s`` up to and including its last backslash.

    A string without a backslash is returned unchanged.
    """
    pos = s.rfind("\\")
    return s[: pos + 1] if pos != -1 else s


def str_to_i(s: str) -> int:
    """Read a leading integer from ``s``; 0 when there is none."""
    match = _INT_PREFIX.match(s)
    return int(match.group(1)) if match else 0


def str_to_f(s: str) -> float:
    """Read a leading decimal number from ``s``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(s)
    return float(match.group(1)) if match else 0.0


def str_to_num(s: str) -> float:
    """Read the longest leading number of ``s`` the way ``atof`` does; 0.0 if none."""
    match = _ATOF_PREFIX.match(s)
    return float(match.group(1)) if match else 0.0


def str_parse(s: str, lsep: str, rsep: str) -> tuple[str, str]:
    """Cut the text strictly between a ``lsep`` and a following ``rsep`` character.

    Returns ``(inner, remainder)`` where the remainder has the separators and
    the inner text removed. When no such pair exists, returns ``("", s)``.
    """
    left = _find_first_of(s, lsep)
    if left != -1:
        right = _find_first_of(s, rsep, left + 1)
        if right != -1:
            return s[left + 1 : right], s[:left] + s[right + 1 :]
    return "", s


def str_get(s: str, lsep: str, rsep: str) -> str | None:
    """Return the text between a ``lsep`` and a following ``rsep`` character, or None."""
    left = _find_first_of(s, lsep)
    if left != -1:
        right = _find_first_of(s, rsep, left + 1)
        if right != -1:
            return s[left + 1 : right]
    return None


def str_split(s: str, sep: str) -> tuple[str, str]:
    """Split off the first field delimited by any character of ``sep``.

    Leading separators are skipped. Returns ``(field, rest)``; when no
    separator follows, the whole string is the field and the rest is empty.
    """
    start = _find_first_not_of(s, sep)
    if start == -1:
        start = 0
    end = _find_first_of(s, sep, start)
    if end != -1:
        return s[start:end], s[end + 1 :]
    return s, ""


def str_sub(s: str, first: int, cnt: int, cmp: str) -> bool:
    """Whether the ``cnt`` characters of ``s`` starting at ``first`` equal ``cmp``."""
    if first < 0 or first > len(s):
        raise IndexError(f"start {first} is outside a string of length {len(s)}")
    return s[first : first + cnt] == cmp


def str_replace(s: str, delim: str, ins: str) -> str:
    """Replace every character of ``s`` that occurs in ``delim`` by ``ins``."""
    return "".join(ins if c in delim else c for c in s)


def str_trim(s: str) -> str:
    """Strip spaces, carriage returns and newlines from both ends."""
    return s.strip(_TRIM_CHARS)


def str_left(s: str, n: int) -> str:
    """The first ``n`` characters of ``s``; a negative ``n`` keeps everything."""
    return s if n < 0 else s[:n]


def str_right(s: str, n: int) -> str:
    """The last ``n`` characters of ``s``; empty if ``s`` is shorter than ``n``."""
    if n < 0 or len(s) < n:
        return ""
    return s[len(s) - n :]


def str_extract(s: str, options: Sequence[str]) -> tuple[int, str]:
    """Remove the first occurrence of the first option found in ``s``.

    Returns ``(index of the option, new string)``, or ``(-1, s)`` if none occurs.
    """
    for n, option in enumerate(options):
        found = s.find(option)
        if found != -1:
            return n, s[:found] + s[found + len(option) :]
    return -1, s


def str_to_id(s: str) -> int:
    """Pack the first four characters of ``s`` (space padded) into a 32-bit id."""
    padded = s + "    "
    result = 0
    for c in padded[:4]:
        result = (result << 8) | (ord(c) & 0xFF)
    return result


def str_is_num(s: str) -> float | None:
    """Return the value of ``s`` if it holds only digits, dots and minus signs."""
    if not s or any(c not in _NUMERIC_CHARS for c in s):
        return None
    return str_to_num(s)


def str_to_vec(
    s: str, lsep: str, insep: str, rsep: str, count: int = 3
) -> tuple[list[float] | None, str]:
    """Read up to ``count`` numbers between ``lsep`` and ``rsep``, split by ``insep[0]``.

    Returns ``(values, remainder)``; ``values`` is None when no non-empty
    bracketed text was found.
    """
    if not insep:
        raise ValueError("an inner separator is required")
    sep = insep[0]
    inner, rest = str_parse(s, lsep, rsep)
    if not inner:
        return None, rest
    values: list[float] = []
    field = ""
    for c in inner:
        if c == sep:
            values.append(str_to_num(field))
            if len(values) >= count:
                return values, rest
            field = ""
        else:
            field += c
    if field:
        values.append(str_to_num(field))
    return values, rest


def str_to_vec3(s: str, lsep: str, insep: str, rsep: str) -> tuple[list[float] | None, str]:
    """:func:`str_to_vec` reading up to three numbers."""
    return str_to_vec(s, lsep, insep, rsep, 3)


def str_to_vec4(s: str, lsep: str, insep: str, rsep: str) -> tuple[list[float] | None, str]:
    """:func:`str_to_vec` reading up to four numbers."""
    return str_to_vec(s, lsep, insep, rsep, 4)


def get_file_size(path: str | os.PathLike[str]) -> int:
    """Size of the file at ``path`` in bytes."""
    return os.path.getsize(path)


def get_file_location(filename: str, search_paths: Sequence[str]) -> str | None:
    """Find ``filename`` as given, or prefixed by each non-empty search path.

    Search paths are joined by plain concatenation, so they should end with a
    separator. Returns the first path that names a readable file, or None.
    """
    candidates = [filename] + [prefix + filename for prefix in search_paths if prefix]
    for candidate in candidates:
        if os.path.isfile(candidate) and os.access(candidate, os.R_OK):
            return candidate
    return None