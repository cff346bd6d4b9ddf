#
# PROJECT: raykernel
# MODULE: raykernel/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from numbers import Real

from .fuzzy import FuzzyEq, fuzzy_eq


class NotAVectorError(ValueError):
    """Raised when a vector-only operation receives a point or other tuple."""


class Tuple(FuzzyEq):
    """
    Immutable homogeneous coordinate (x, y, z, w).

    Points carry w=1 and vectors w=0. There is no separate tag: the kind
    is read from w at call time, so arithmetic on the general constructor
    may produce tuples that are neither (point + point gives w=2). The
    algebra does not reject those; callers are responsible for them.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def point(cls, x: float, y: float, z: float) -> 'Tuple':
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> 'Tuple':
        return cls(x, y, z, 0.0)

    def __repr__(self):
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Tuple index out of range")

    def __eq__(self, other):
        if isinstance(other, Tuple):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def is_point(self) -> bool:
        return fuzzy_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return fuzzy_eq(self.w, 0.0)

    def __add__(self, other):
        if isinstance(other, Tuple):
            return Tuple(self.x + other.x, self.y + other.y,
                         self.z + other.z, self.w + other.w)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Tuple):
            return Tuple(self.x - other.x, self.y - other.y,
                         self.z - other.z, self.w - other.w)
        return NotImplemented

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar):
        if isinstance(scalar, Real):
            return Tuple(self.x * scalar, self.y * scalar,
                         self.z * scalar, self.w * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, Real):
            return Tuple(self.x / scalar, self.y / scalar,
                         self.z / scalar, self.w / scalar)
        return NotImplemented

    def _require_vector(self, operation: str):
        if not self.is_vector():
            raise NotAVectorError(
                f"{operation} requires a vector (w=0), got {self!r}")

    def magnitude(self) -> float:
        """Euclidean length over all four components. Vectors only."""
        self._require_vector("magnitude")
        return math.sqrt(self.x * self.x + self.y * self.y +
                         self.z * self.z + self.w * self.w)

    def normalize(self) -> 'Tuple':
        """Unit vector in the same direction.

        The zero vector has no direction and normalizes to itself.
        """
        m = self.magnitude()
        if m == 0:
            return Tuple.vector(0, 0, 0)
        return self / m

    def dot(self, other: 'Tuple') -> float:
        return (self.x * other.x + self.y * other.y +
                self.z * other.z + self.w * other.w)

    def cross(self, other: 'Tuple') -> 'Tuple':
        self._require_vector("cross")
        other._require_vector("cross")
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple.vector(x, y, z)
