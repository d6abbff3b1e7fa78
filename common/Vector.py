"""
2D Vector Mathematics Utility

This module provides the 2D vector value used by the rotate-and-project
geometry. Each vector carries both its Cartesian components (x, y) and its
polar form (r, a), and the two are always kept consistent.

**Key Operations**:
- Two constructors: Cartesian (Vector(x, y)) and polar (Vector.polar(r, a))
- Rotation by an angle in radians
- Scaling to a magnitude and normalization to unit length
- Component-wise translation and vector addition/subtraction

**Angle Convention**: the angle is derived with single-argument arctangent,
so it always lies in (-pi/2, pi/2] and r is negative for x < 0. A vector with
x == 0 has a == 0 and r == 0 regardless of y.

**Floating Point**: no input validation is done. Rotation and polar
construction go through numpy so that an infinite angle gives NaN instead of
raising the way math.cos does.
"""

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class Vector:
    """
    Immutable 2D vector with Cartesian and polar coordinates.

    **Purpose**: Represent positions and displacements around a square's center

    **Fields**:
    1. **x, y**: Cartesian components, set directly by the constructor
    2. **r**: Signed magnitude, x / cos(a)
    3. **a**: Angle in radians, atan(y / x)

    **Common Usage Patterns**:
    - Positions: Vector(x - c, y - c)
    - Rotation: Vector(1, 1).rotate(math.pi / 2)
    - Directions: (rotated - turtle).a
    """
    x: float
    y: float
    r: float = field(init=False)
    a: float = field(init=False)

    def __post_init__(self):
        x, y = float(self.x), float(self.y)
        if x == 0:
            a = 0.0
            r = 0.0
        else:
            # a stays within [-pi/2, pi/2] or NaN, which math handles without raising
            a = math.atan(y / x)
            r = x / math.cos(a)
        self._set_fields(x, y, r, a)

    def _set_fields(self, x: float, y: float, r: float, a: float) -> None:
        # Frozen dataclass, so fields go through object.__setattr__
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "a", a)

    @classmethod
    def polar(cls, r: float, a: float) -> "Vector":
        """Build a vector from magnitude r and angle a (radians), keeping r and a as given."""
        with np.errstate(all="ignore"):
            x = float(np.float64(r) * np.cos(a))
            y = float(np.float64(r) * np.sin(a))
        vector = cls(x, y)
        vector._set_fields(x, y, float(r), float(a))
        return vector

    def normalized(self) -> "Vector":
        """
        Return unit vector at the same angle.
        The zero vector comes back unchanged instead of being rebuilt from angle 0.
        """
        if self.x == 0 and self.y == 0:
            return Vector(self.x, self.y)
        return Vector.polar(1.0, self.a)

    def add(self, dx: float, dy: float) -> "Vector":
        """Translate by (dx, dy)."""
        return Vector(self.x + dx, self.y + dy)

    def scaled(self, r: float) -> "Vector":
        return Vector.polar(r, self.a)

    def rotate(self, angle: float) -> "Vector":
        """
        Rotate about the origin by angle in radians.
        No degree conversion happens here; callers pass radians.
        """
        with np.errstate(all="ignore"):
            cos = float(np.cos(angle))
            sin = float(np.sin(angle))
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def __add__(self, other: "Vector") -> "Vector":
        """Add two vectors component-wise. Used for position + displacement."""
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        """Subtract vectors to get displacement from other to self."""
        return Vector(self.x - other.x, self.y - other.y)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length. Unlike r this is never negative."""
        return math.hypot(self.x, self.y)

    def __repr__(self) -> str:
        return f"Vector(x={self.x:.4f}, y={self.y:.4f}, r={self.r:.4f}, a={self.a:.4f})"
