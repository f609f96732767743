"""A 4x4 single-matrix type stored in column-major order."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator
from typing import Any

from .vectors import Vector3D, Vector3DF, Vector4DF

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _elements(op: Any) -> list[float]:
    """Return the 16 column-major elements of a matrix or flat sequence."""
    data = op.data if isinstance(op, Matrix4F) else op
    values = [float(v) for v in data]
    if len(values) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
    return values


class Matrix4F:
    """A 4x4 matrix whose ``data`` list holds the elements column by column.

    Element ``(row, col)`` lives at ``data[4 * col + row]``. A new matrix is
    the identity unless sixteen values, or one iterable of sixteen values,
    are given.
    """

    __slots__ = ("data",)
    rows = 4
    cols = 4

    def __init__(self, *values: Any) -> None:
        if not values:
            self.data = list(_IDENTITY)
        elif len(values) == 1 and isinstance(values[0], Iterable):
            self.data = _elements(values[0])
        elif len(values) == 16:
            self.data = [float(v) for v in values]
        else:
            raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")

    # -- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return 16

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        if isinstance(key, tuple):
            row, col = key
            return self.data[4 * col + row]
        return self.data[key]

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        if isinstance(key, tuple):
            row, col = key
            self.data[4 * col + row] = float(value)
        else:
            self.data[key] = float(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix4F):
            return self.data == other.data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4F({', '.join(repr(v) for v in self.data)})"

    def copy(self) -> Matrix4F:
        return Matrix4F(self.data)

    def fill(self, c: float) -> Matrix4F:
        """Set every element to ``c``."""
        self.data = [float(c)] * 16
        return self

    # -- element-wise scalar operations -------------------------------------

    def __iadd__(self, op: Any) -> Any:
        if isinstance(op, Vector3D):
            return self.translate_in_place(op)
        if isinstance(op, numbers.Real):
            value = float(op)
            self.data = [d + value for d in self.data]
            return self
        return NotImplemented

    def __isub__(self, op: Any) -> Any:
        if isinstance(op, numbers.Real):
            value = float(op)
            self.data = [d - value for d in self.data]
            return self
        return NotImplemented

    def __imul__(self, op: Any) -> Any:
        if isinstance(op, Vector3D):
            return self.scale_in_place(op)
        if isinstance(op, numbers.Real):
            value = float(op)
            self.data = [d * value for d in self.data]
            return self
        if isinstance(op, (Matrix4F, Iterable)):
            return self.multiply_in_place(op)
        return NotImplemented

    def __itruediv__(self, op: Any) -> Any:
        if isinstance(op, numbers.Real):
            value = float(op)
            self.data = [d / value for d in self.data]
            return self
        return NotImplemented

    def __mul__(self, op: Any) -> Any:
        if isinstance(op, Vector3D):
            return self.transform_point(op)
        if isinstance(op, numbers.Real):
            # Only the upper-left 3x3 block is scaled.
            s = float(op)
            d = self.data
            return Matrix4F(
                d[0] * s, d[1] * s, d[2] * s, d[3],
                d[4] * s, d[5] * s, d[6] * s, d[7],
                d[8] * s, d[9] * s, d[10] * s, d[11],
                d[12], d[13], d[14], d[15],
            )
        return NotImplemented

    def __matmul__(self, op: Any) -> Any:
        if isinstance(op, Matrix4F):
            return self.copy().multiply_in_place(op)
        return NotImplemented

    # -- matrix products ----------------------------------------------------

    def multiply_in_place(self, op: Any) -> Matrix4F:
        """Set this matrix M to M*op."""
        rhs = _elements(op)
        orig = self.data
        self.data = [
            sum(rhs[4 * i + k] * orig[4 * k + j] for k in range(4))
            for i in range(4)
            for j in range(4)
        ]
        return self

    def left_multiply_in_place(self, mtx: Any) -> Matrix4F:
        """Set this matrix M to mtx*M."""
        left = _elements(mtx)
        right = self.data
        self.data = [
            sum(left[4 * j + i] * right[4 * k + j] for j in range(4))
            for k in range(4)
            for i in range(4)
        ]
        return self

    def transform_point(self, v: Any) -> Vector3DF:
        """Return this matrix applied to the point (v.x, v.y, v.z, 1)."""
        d = self.data
        x, y, z = float(v.x), float(v.y), float(v.z)
        return Vector3DF(
            d[0] * x + d[4] * y + d[8] * z + d[12],
            d[1] * x + d[5] * y + d[9] * z + d[13],
            d[2] * x + d[6] * y + d[10] * z + d[14],
        )

    # -- whole-matrix updates -----------------------------------------------

    def transpose(self) -> Matrix4F:
        d = self.data
        self.data = [d[4 * col + row] for row in range(4) for col in range(4)]
        return self

    def identity(self) -> Matrix4F:
        self.data = list(_IDENTITY)
        return self

    def invert_trs(self) -> Matrix4F:
        """Invert this matrix (a general 4x4 inverse).

        A matrix with determinant 0 is left unchanged.
        """
        (m0, m1, m2, m3, m4, m5, m6, m7,
         m8, m9, m10, m11, m12, m13, m14, m15) = self.data
        inv = [
            -m11 * m14 * m5 + m10 * m15 * m5 + m11 * m13 * m6
            - m10 * m13 * m7 - m15 * m6 * m9 + m14 * m7 * m9,
            m1 * m11 * m14 - m1 * m10 * m15 - m11 * m13 * m2
            + m10 * m13 * m3 + m15 * m2 * m9 - m14 * m3 * m9,
            -m15 * m2 * m5 + m14 * m3 * m5 + m1 * m15 * m6
            - m13 * m3 * m6 - m1 * m14 * m7 + m13 * m2 * m7,
            m11 * m2 * m5 - m10 * m3 * m5 - m1 * m11 * m6
            + m1 * m10 * m7 + m3 * m6 * m9 - m2 * m7 * m9,
            m11 * m14 * m4 - m10 * m15 * m4 - m11 * m12 * m6
            + m10 * m12 * m7 + m15 * m6 * m8 - m14 * m7 * m8,
            -m0 * m11 * m14 + m0 * m10 * m15 + m11 * m12 * m2
            - m10 * m12 * m3 - m15 * m2 * m8 + m14 * m3 * m8,
            m15 * m2 * m4 - m14 * m3 * m4 - m0 * m15 * m6
            + m12 * m3 * m6 + m0 * m14 * m7 - m12 * m2 * m7,
            -m11 * m2 * m4 + m10 * m3 * m4 + m0 * m11 * m6
            - m0 * m10 * m7 - m3 * m6 * m8 + m2 * m7 * m8,
            -m11 * m13 * m4 + m11 * m12 * m5 - m15 * m5 * m8
            + m13 * m7 * m8 + m15 * m4 * m9 - m12 * m7 * m9,
            -m1 * m11 * m12 + m0 * m11 * m13 + m1 * m15 * m8
            - m13 * m3 * m8 - m0 * m15 * m9 + m12 * m3 * m9,
            -m1 * m15 * m4 + m13 * m3 * m4 + m0 * m15 * m5
            - m12 * m3 * m5 + m1 * m12 * m7 - m0 * m13 * m7,
            m1 * m11 * m4 - m0 * m11 * m5 + m3 * m5 * m8
            - m1 * m7 * m8 - m3 * m4 * m9 + m0 * m7 * m9,
            m10 * m13 * m4 - m10 * m12 * m5 + m14 * m5 * m8
            - m13 * m6 * m8 - m14 * m4 * m9 + m12 * m6 * m9,
            m1 * m10 * m12 - m0 * m10 * m13 - m1 * m14 * m8
            + m13 * m2 * m8 + m0 * m14 * m9 - m12 * m2 * m9,
            m1 * m14 * m4 - m13 * m2 * m4 - m0 * m14 * m5
            + m12 * m2 * m5 - m1 * m12 * m6 + m0 * m13 * m6,
            -m1 * m10 * m4 + m0 * m10 * m5 - m2 * m5 * m8
            + m1 * m6 * m8 + m2 * m4 * m9 - m0 * m6 * m9,
        ]
        det = m0 * inv[0] + m1 * inv[4] + m2 * inv[8] + m3 * inv[12]
        if det == 0:
            return self
        rcp = 1.0 / det
        self.data = [v * rcp for v in inv]
        return self

    # -- composing operations -----------------------------------------------

    def pre_translate(self, t: Any) -> Matrix4F:
        """Set this matrix M to M*T, where T translates by ``t``."""
        d = self.data
        tx, ty, tz = float(t.x), float(t.y), float(t.z)
        d[12] += d[0] * tx + d[4] * ty + d[8] * tz
        d[13] += d[1] * tx + d[5] * ty + d[9] * tz
        d[14] += d[2] * tx + d[6] * ty + d[10] * tz
        return self

    def translate_in_place(self, translation: Any) -> Matrix4F:
        """Set this matrix M to T*M, where T translates by ``translation``."""
        d = self.data
        d[12] += float(translation.x)
        d[13] += float(translation.y)
        d[14] += float(translation.z)
        return self

    def scale_in_place(self, scale: Any) -> Matrix4F:
        """Set this matrix M to S*M, with S = diag(scale.x, scale.y, scale.z, 1)."""
        factors = (float(scale.x), float(scale.y), float(scale.z), 1.0)
        self.data = [v * factors[n % 4] for n, v in enumerate(self.data)]
        return self

    def inv_translate_in_place(self, translation: Any) -> Matrix4F:
        """Set this matrix M to T^-1 * M."""
        return self.translate_in_place(
            Vector3DF(-float(translation.x), -float(translation.y), -float(translation.z))
        )

    def inv_left_multiply_in_place(self, mtx: Any) -> Matrix4F:
        """Set this matrix M to mtx^-1 * M; ``mtx`` itself is not changed."""
        inverse = Matrix4F(_elements(mtx)).invert_trs()
        return self.left_multiply_in_place(inverse)

    def inv_scale_in_place(self, scale: Any) -> Matrix4F:
        """Set this matrix M to S^-1 * M."""
        return self.scale_in_place(
            Vector3DF(1.0 / float(scale.x), 1.0 / float(scale.y), 1.0 / float(scale.z))
        )

    # -- queries and output -------------------------------------------------

    @staticmethod
    def get_t(mat: Any) -> Vector4DF:
        """Return the translation column of ``mat`` as a point with w = 1."""
        d = _elements(mat)
        return Vector4DF(d[12], d[13], d[14], 1.0)

    def _rows(self) -> Iterator[tuple[float, float, float, float]]:
        d = self.data
        for row in range(4):
            yield d[row], d[row + 4], d[row + 8], d[row + 12]

    def print(self) -> None:
        """Print the matrix row by row, followed by a blank line."""
        lines = ["%04.3f %04.3f %04.3f %04.3f" % row for row in self._rows()]
        print("\n".join(lines) + "\n")

    def write_to_str(self) -> str:
        """Return the matrix as four indented rows."""
        return "".join("   %f %f %f %f\n" % row for row in self._rows())