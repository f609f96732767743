"""A line-oriented text file reader with whitespace tokenising helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from typing import IO, Any

from .matrix import Matrix4F
from .strings import get_file_location, str_to_i, str_to_num
from .tokens import (
    strip_leading_numerical_token,
    strip_leading_token,
    strip_leading_whitespace,
)
from .vectors import Vector4DF

logger = logging.getLogger(__name__)

# At most this many characters are read per call, so longer lines are split.
_MAX_LINE = 1022


class ParseError(Exception):
    """Raised when a file cannot be located, opened or understood."""


class Parser:
    """Reads a text file line by line and hands out tokens from the current line.

    Blank lines and lines starting with ``#`` are skipped by default. The
    parser can be used as a context manager, which closes the file on exit.
    """

    def __init__(self) -> None:
        self._file: IO[str] | None = None
        self._closed = True
        self._line_number = 0
        self._qualified_name: str | None = None
        self._name = ""
        self._directory = ""
        self._file_size = -1
        self._line = ""
        self._pos = ""

    def __enter__(self) -> Parser:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if not self._closed:
            self.close_file()

    # -- file handling ------------------------------------------------------

    def parse_file(self, filename: str, paths: Sequence[str] = ()) -> None:
        """Locate ``filename`` (as given or under a search path) and open it."""
        location = get_file_location(filename, paths)
        if location is None:
            raise ParseError(f"Parser unable to find '{filename}'")
        try:
            self._file = open(location, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            raise ParseError(f"Unable to open file '{location}'") from exc
        self._closed = False
        self._line_number = 0
        self._qualified_name = location
        cut = max(location.rfind("/"), location.rfind("\\"))
        self._name = location[cut + 1 :]
        self._directory = location[: cut + 1]
        try:
            self._file_size = os.path.getsize(location)
        except OSError:
            self._file_size = -1

    def close_file(self) -> None:
        """Close the underlying file; later reads return None."""
        if self._file is not None:
            self._file.close()
        self._closed = True

    def _read_raw(self) -> str | None:
        if self._closed or self._file is None:
            return None
        line = self._file.readline(_MAX_LINE)
        if not line:
            return None
        self._line_number += 1
        return line

    def read_next_line(self, discard_blanks: bool = True) -> str | None:
        """Read the next line and return it without leading whitespace.

        Returns None at the end of the file or once it is closed. With
        ``discard_blanks`` set, empty lines and comment lines are skipped.
        """
        while True:
            raw = self._read_raw()
            if raw is None:
                return None
            if not discard_blanks:
                break
            stripped = strip_leading_whitespace(raw)
            if stripped and not stripped.startswith("#"):
                break
        newline = raw.rfind("\n")
        if newline != -1:
            raw = raw[:newline]
        self._line = raw
        self._pos = strip_leading_whitespace(raw)
        return self._pos

    # -- information --------------------------------------------------------

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def current_line(self) -> str:
        """The as-yet-unprocessed part of the current line."""
        return self._pos

    @property
    def unprocessed_line(self) -> str:
        """The whole current line."""
        return self._line

    @property
    def is_file_valid(self) -> bool:
        return self._file is not None

    @property
    def file_name(self) -> str:
        """The file name without its directory."""
        return self._name

    @property
    def qualified_file_name(self) -> str | None:
        return self._qualified_name

    @property
    def file_directory(self) -> str:
        """The directory part of the path, including its trailing separator."""
        return self._directory

    @property
    def file_size(self) -> int:
        return self._file_size

    # -- tokens -------------------------------------------------------------

    def get_token(self) -> str:
        """Return the next whitespace-delimited token of the current line."""
        token, self._pos = strip_leading_token(self._pos)
        return token

    def get_lower_case_token(self) -> str:
        return self.get_token().lower()

    def get_upper_case_token(self) -> str:
        return self.get_token().upper()

    def _numeric_text(self) -> str:
        text, self._pos = strip_leading_numerical_token(self._pos)
        return text

    def get_integer(self) -> int:
        """Read the next number on the line as an integer (0 if none)."""
        return str_to_i(self._numeric_text())

    def get_unsigned(self) -> int:
        """Read the next number as a 32-bit unsigned integer."""
        return str_to_i(self._numeric_text()) & 0xFFFFFFFF

    def get_float(self) -> float:
        return str_to_num(self._numeric_text())

    def get_double(self) -> float:
        return str_to_num(self._numeric_text())

    def get_vec4(self) -> Vector4DF:
        x = self.get_float()
        y = self.get_float()
        z = self.get_float()
        w = self.get_float()
        return Vector4DF(x, y, z, w)

    def get_vec3(self) -> Vector4DF:
        """Read three numbers into a 4D vector with w = 0."""
        x = self.get_float()
        y = self.get_float()
        z = self.get_float()
        return Vector4DF(x, y, z, 0.0)

    def get_4x4_matrix(self) -> Matrix4F:
        """Read sixteen numbers in column-major order."""
        return Matrix4F([self.get_float() for _ in range(16)])

    def reset_processing_for_current_line(self) -> None:
        """Start handing out tokens from the beginning of the current line again."""
        self._pos = strip_leading_whitespace(self._line)

    # -- messages -----------------------------------------------------------

    def _message(self, msg: str, param: str | None) -> str:
        text = msg % param if param is not None else msg
        return f"{text} ({self._name}, line {self._line_number})"

    def warning_message(self, msg: str, param: str | None = None) -> str:
        """Log a warning naming the file and line; returns the logged text."""
        full = "Warning: " + self._message(msg, param)
        logger.warning(full)
        return full

    def error_message(self, msg: str, param: str | None = None) -> None:
        """Raise a ParseError naming the file and line."""
        raise ParseError(self._message(msg, param))


class CallbackParser(Parser):
    """A parser that calls a registered function for each line whose keyword matches.

    Keywords match without regard to case. Each callback receives the parser,
    positioned just after the keyword. At most 32 callbacks are kept; further
    registrations are ignored.
    """

    MAX_CALLBACKS = 32

    def __init__(self) -> None:
        super().__init__()
        self._callbacks: list[tuple[str, Callable[[CallbackParser], Any]]] = []

    def parse_file(self, filename: str, paths: Sequence[str] = ()) -> None:
        """Open ``filename`` and parse it completely."""
        super().parse_file(filename, paths)
        self.parse()

    def set_callback(self, token: str, func: Callable[[CallbackParser], Any]) -> None:
        if len(self._callbacks) >= self.MAX_CALLBACKS:
            return
        self._callbacks.append((token.lower(), func))

    def parse(self) -> None:
        """Dispatch every remaining line to its callbacks, then close the file."""
        while self.read_next_line() is not None:
            keyword = self.get_lower_case_token()
            for token, func in self._callbacks:
                if keyword == token:
                    func(self)
        self.close_file()