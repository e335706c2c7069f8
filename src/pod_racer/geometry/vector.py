"""Vector2 — immutable 2D vector in track-plane coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A 2D vector used for positions, velocities and headings.

    Units are whatever the host environment supplies (track units, units per
    turn).  Every operation returns a new value; instances are hashable.
    Operators mirror the named methods: ``a + b``, ``a - b``, ``-a``,
    ``a * s`` and ``a / s``.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector2:
        """Heading of a pod whose angle is 0 degrees."""
        return cls(1.0, 0.0)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def neg(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> Vector2:
        """Divide both components by *scalar*.

        Raises
        ------
        ValueError
            If *scalar* is zero.  Use :meth:`normalized` for the guarded
            unit-vector case.
        """
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    __add__ = add
    __sub__ = sub
    __neg__ = neg
    __mul__ = scale
    __rmul__ = scale
    __truediv__ = divide

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def rotate(self, radians: float) -> Vector2:
        """Rotate counter-clockwise by *radians*."""
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def rotate_degrees(self, degrees: float) -> Vector2:
        return self.rotate(math.radians(degrees))

    # ------------------------------------------------------------------
    # Products and length
    # ------------------------------------------------------------------

    def outer_product(self, other: Vector2) -> float:
        """Signed z component of the 3D cross product (positive = CCW)."""
        return self.x * other.y - self.y * other.x

    def inner_product(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.inner_product(self))

    def normalized(self) -> Vector2:
        """Return the unit vector in the same direction.

        The zero vector is returned unchanged rather than producing NaN.
        """
        length = self.norm()
        if length == 0:
            return Vector2(self.x, self.y)
        return Vector2(self.x / length, self.y / length)

    def distance_to(self, other: Vector2) -> float:
        return (self - other).norm()

    def is_close(self, other: Vector2, tol: float = 1e-9) -> bool:
        """True if both components are within *tol* of *other*'s."""
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
