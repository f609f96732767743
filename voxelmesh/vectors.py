"""Three- and four-component vectors used for geometry and colour work."""

from __future__ import annotations

import math
import numbers
import operator
import random as _random
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_Number = numbers.Real


def min3(a: T, b: T, c: T) -> T:
    """Return the smallest of three values."""
    if a < b:
        return a if a < c else c
    return b if b < c else c


def max3(a: T, b: T, c: T) -> T:
    """Return the largest of three values."""
    if a > b:
        return a if a > c else c
    return b if b > c else c


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _matrix_data(matrix: Any) -> list[float]:
    """Return the 16 column-major elements of a matrix or flat sequence."""
    data = getattr(matrix, "data", matrix)
    values = [float(v) for v in data]
    if len(values) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
    return values


def _is_matrix(op: Any) -> bool:
    return hasattr(op, "data") or (
        isinstance(op, Sequence) and not isinstance(op, str) and len(op) == 16
    )


class Vector3D:
    """A mutable 3D column vector whose components share one numeric type.

    When multiplied with a 4x4 matrix it is treated as the point (x, y, z, 1).
    """

    __slots__ = ("x", "y", "z")
    component_type: Callable[[Any], Any] = float

    def __init__(self, x: Any = 0, y: Any = 0, z: Any = 0) -> None:
        cast = self.component_type
        self.x = cast(x)
        self.y = cast(y)
        self.z = cast(z)

    def set(self, x: Any, y: Any, z: Any) -> Vector3D:
        """Assign all three components and return this vector."""
        cast = self.component_type
        self.x, self.y, self.z = cast(x), cast(y), cast(z)
        return self

    def copy(self) -> Vector3D:
        return type(self)(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector3D):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # -- arithmetic ---------------------------------------------------------

    def _operands(self, op: Any) -> tuple[Any, Any, Any] | None:
        if isinstance(op, (Vector3D, Vector4DF)):
            values = (op.x, op.y, op.z)
        elif isinstance(op, _Number):
            values = (op, op, op)
        else:
            return None
        cast = self.component_type
        return cast(values[0]), cast(values[1]), cast(values[2])

    def _divide(self, a: Any, b: Any) -> Any:
        if self.component_type is int:
            return _truncating_div(a, b)
        return a / b

    def _combine(self, op: Any, fn: Callable[[Any, Any], Any]) -> tuple[Any, Any, Any] | None:
        other = self._operands(op)
        if other is None:
            return None
        return fn(self.x, other[0]), fn(self.y, other[1]), fn(self.z, other[2])

    def _binary(self, op: Any, fn: Callable[[Any, Any], Any]) -> Any:
        values = self._combine(op, fn)
        if values is None:
            return NotImplemented
        return type(self)(*values)

    def _inplace(self, op: Any, fn: Callable[[Any, Any], Any]) -> Any:
        values = self._combine(op, fn)
        if values is None:
            return NotImplemented
        return self.set(*values)

    def __add__(self, op: Any) -> Any:
        return self._binary(op, operator.add)

    def __sub__(self, op: Any) -> Any:
        return self._binary(op, operator.sub)

    def __mul__(self, op: Any) -> Any:
        return self._binary(op, operator.mul)

    def __truediv__(self, op: Any) -> Any:
        return self._binary(op, self._divide)

    def __iadd__(self, op: Any) -> Any:
        return self._inplace(op, operator.add)

    def __isub__(self, op: Any) -> Any:
        return self._inplace(op, operator.sub)

    def __imul__(self, op: Any) -> Any:
        if not isinstance(op, (_Number, Vector3D, Vector4DF)) and _is_matrix(op):
            return self.transform(op)
        return self._inplace(op, operator.mul)

    def __itruediv__(self, op: Any) -> Any:
        return self._inplace(op, self._divide)

    # -- geometry -----------------------------------------------------------

    def cross(self, v: Any) -> Vector3D:
        """Replace this vector by its cross product with ``v``."""
        ax, ay, az = float(self.x), float(self.y), float(self.z)
        vx, vy, vz = float(v.x), float(v.y), float(v.z)
        return self.set(ay * vz - az * vy, -ax * vz + az * vx, ax * vy - ay * vx)

    def dot(self, v: Any) -> float:
        return float(self.x) * float(v.x) + float(self.y) * float(v.y) + float(self.z) * float(v.z)

    def dist(self, v: Any) -> float:
        """Euclidean distance to ``v``."""
        distsq = self.dist_sq(v)
        return math.sqrt(distsq) if distsq != 0 else 0.0

    def dist_sq(self, v: Any) -> float:
        """Squared Euclidean distance to ``v``."""
        a = float(self.x) - float(v.x)
        b = float(self.y) - float(v.y)
        c = float(self.z) - float(v.z)
        return a * a + b * b + c * c

    def random(
        self,
        x1: float = 0.0,
        x2: float = 1.0,
        y1: float = 0.0,
        y2: float = 1.0,
        z1: float = 0.0,
        z2: float = 1.0,
    ) -> Vector3D:
        """Set each component to a random value between its two bounds."""
        return self.set(
            x1 + _random.random() * (x2 - x1),
            y1 + _random.random() * (y2 - y1),
            z1 + _random.random() * (z2 - z1),
        )

    def random_between(self, a: Any, b: Any) -> Vector3D:
        """Set each component to a random value between ``a`` and ``b``."""
        return self.random(a.x, b.x, a.y, b.y, a.z, b.z)

    def rgb_to_hsv(self) -> Vector3D:
        """Return the HSV form of this RGB colour."""
        x, y, z = self.x, self.y, self.z
        minv = min3(x, y, z)
        maxv = max3(x, y, z)
        if minv == maxv:
            return type(self)(0, 0, maxv)
        s = (maxv - minv) / maxv
        if x == minv:
            f, i = y - z, 3
        elif y == minv:
            f, i = z - x, 5
        else:
            f, i = x - y, 1
        h = (i - f / (maxv - minv)) / 6
        return type(self)(h, s, maxv)

    def hsv_to_rgb(self) -> Vector3D:
        """Return the RGB form of this HSV colour."""
        h, s, v = self.x, self.y, self.z
        i = math.floor(h * 6)
        f = h * 6 - i
        if i % 2 == 0:
            f = 1 - f
        m = v * (1 - s)
        n = v * (1 - s * f)
        cls = type(self)
        if i in (0, 6):
            return cls(v, n, m)
        if i == 1:
            return cls(n, v, m)
        if i == 2:
            return cls(m, v, n)
        if i == 3:
            return cls(m, n, v)
        if i == 4:
            return cls(n, m, v)
        if i == 5:
            return cls(v, m, n)
        return cls(1, 1, 1)

    def normalize(self) -> Vector3D:
        """Scale to unit length; integer vectors are scaled to length 255 and truncated.

        A zero vector is left unchanged.
        """
        n = self.length_sq()
        if n == 0.0:
            return self
        if self.component_type is int:
            n = math.sqrt(n)
            return self.set(
                int(float(self.x) * 255.0 / n),
                int(float(self.y) * 255.0 / n),
                int(float(self.z) * 255.0 / n),
            )
        rcp = 1.0 / math.sqrt(n)
        return self.set(self.x * rcp, self.y * rcp, self.z * rcp)

    def clamp(self, a: Any, b: Any) -> Vector3D:
        """Clamp each component to the range [a, b]."""

        def one(c: Any) -> Any:
            return a if c < a else (b if c > b else c)

        return self.set(one(self.x), one(self.y), one(self.z))

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        dx, dy, dz = float(self.x), float(self.y), float(self.z)
        return dx * dx + dy * dy + dz * dz

    def transform(self, matrix: Any) -> Vector3D:
        """Replace this point by ``matrix`` times (x, y, z, 1), keeping x, y, z."""
        d = _matrix_data(matrix)
        x, y, z = float(self.x), float(self.y), float(self.z)
        return self.set(
            x * d[0] + y * d[4] + z * d[8] + d[12],
            x * d[1] + y * d[5] + z * d[9] + d[13],
            x * d[2] + y * d[6] + z * d[10] + d[14],
        )


class Vector3DF(Vector3D):
    """A 3D vector of floats."""

    __slots__ = ()
    component_type = float


class Vector3DI(Vector3D):
    """A 3D vector of integers; values are truncated toward zero."""

    __slots__ = ()
    component_type = int


class Vector4DF:
    """A mutable 4-component column vector of floats."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def set(self, x: float, y: float, z: float, w: float = 1.0) -> Vector4DF:
        """Assign the components; ``w`` defaults to 1."""
        self.x, self.y, self.z, self.w = float(x), float(y), float(z), float(w)
        return self

    def copy(self) -> Vector4DF:
        return Vector4DF(self.x, self.y, self.z, self.w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __repr__(self) -> str:
        return f"Vector4DF({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector4DF):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # -- arithmetic ---------------------------------------------------------

    def _combine(
        self, op: Any, fn: Callable[[float, float], float], keep_w: bool
    ) -> tuple[float, float, float, float] | None:
        other: tuple[float | None, ...]
        if isinstance(op, Vector4DF):
            other = (op.x, op.y, op.z, op.w)
        elif isinstance(op, Vector3D):
            # A 3D vector widens to w = 0; in-place updates leave w alone.
            other = (float(op.x), float(op.y), float(op.z), None if keep_w else 0.0)
        elif isinstance(op, _Number):
            value = float(op)
            other = (value, value, value, value)
        else:
            return None
        a, b, c, d = (mine if o is None else fn(mine, o) for mine, o in zip(self, other))
        return a, b, c, d

    def _binary(self, op: Any, fn: Callable[[float, float], float]) -> Any:
        values = self._combine(op, fn, keep_w=False)
        if values is None:
            return NotImplemented
        return Vector4DF(*values)

    def _inplace(self, op: Any, fn: Callable[[float, float], float]) -> Any:
        values = self._combine(op, fn, keep_w=True)
        if values is None:
            return NotImplemented
        return self.set(*values)

    def __add__(self, op: Any) -> Any:
        return self._binary(op, operator.add)

    def __sub__(self, op: Any) -> Any:
        return self._binary(op, operator.sub)

    def __mul__(self, op: Any) -> Any:
        return self._binary(op, operator.mul)

    def __truediv__(self, op: Any) -> Any:
        return self._binary(op, operator.truediv)

    def __iadd__(self, op: Any) -> Any:
        return self._inplace(op, operator.add)

    def __isub__(self, op: Any) -> Any:
        return self._inplace(op, operator.sub)

    def __imul__(self, op: Any) -> Any:
        if not isinstance(op, (_Number, Vector3D, Vector4DF)) and _is_matrix(op):
            return self.transform(op)
        return self._inplace(op, operator.mul)

    def __itruediv__(self, op: Any) -> Any:
        return self._inplace(op, operator.truediv)

    # -- geometry -----------------------------------------------------------

    def cross(self, v: Vector4DF) -> Vector4DF:
        """Replace x, y, z by the cross product with ``v`` and set w to 0."""
        ax, ay, az = self.x, self.y, self.z
        return self.set(ay * v.z - az * v.y, -ax * v.z + az * v.x, ax * v.y - ay * v.x, 0.0)

    def dot(self, v: Vector4DF) -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z + self.w * v.w

    def dist(self, v: Vector4DF) -> float:
        distsq = self.dist_sq(v)
        return math.sqrt(distsq) if distsq != 0 else 0.0

    def dist_sq(self, v: Vector4DF) -> float:
        a = self.x - v.x
        b = self.y - v.y
        c = self.z - v.z
        d = self.w - v.w
        return a * a + b * b + c * c + d * d

    def normalize(self) -> Vector4DF:
        """Scale to unit length; a zero vector is left unchanged."""
        n = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        if n != 0.0:
            n = math.sqrt(n)
            self.set(self.x / n, self.y / n, self.z / n, self.w / n)
        return self

    def length(self) -> float:
        n = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        return math.sqrt(n) if n != 0.0 else 0.0

    def clamp(self, xc: float, yc: float, zc: float, wc: float) -> Vector4DF:
        """Limit each component from above by the matching bound."""
        return self.set(min(self.x, xc), min(self.y, yc), min(self.z, zc), min(self.w, wc))

    def transform(self, matrix: Any) -> Vector4DF:
        """Replace this vector by ``matrix`` times it (column-major 4x4)."""
        d = _matrix_data(matrix)
        x, y, z, w = self.x, self.y, self.z, self.w
        return self.set(
            x * d[0] + y * d[4] + z * d[8] + w * d[12],
            x * d[1] + y * d[5] + z * d[9] + w * d[13],
            x * d[2] + y * d[6] + z * d[10] + w * d[14],
            x * d[3] + y * d[7] + z * d[11] + w * d[15],
        )