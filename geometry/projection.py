"""
Rotate-and-Project Geometry

Rotates a point 90 degrees about the center of a square and projects the
rotated point outward to the nearest wall, along the direction from the
original point to the rotated one. Works in any reference frame with a square
boundary of known half-width.

**Algorithm**:
1. **Turtle**: t = (x - c, y - c), the point relative to the center
2. **Rotation**: a = (-t.y, t.x), t turned +90 degrees
3. **Direction**: d_ta = a - t, whose angle is the projection ray's angle
4. **Wall Selection**: the sign of cos(2 * angle + pi) picks the axis
5. **Projection**: walk from a along the ray until x = +-c or y = +-c
6. **Result**: d = p - t, displacement from turtle to projected point

**Known Limitation**: the wall is chosen from the direction angle alone. A
path that would pass through three quadrants before reaching a wall is not
handled; the closest axis is assumed to be the one nearest the turtle.

**Floating Point**: nothing is validated. Degenerate inputs (c == 0, a turtle
at the exact center) produce NaN or infinity instead of raising.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

import numpy as np

from common.Vector import Vector
from config.projection_config import DEFAULT_CONFIG


class WallAxis(Enum):
    """Which pair of walls a projection lands on"""
    X = "x"  # Vertical walls, x = +-c
    Y = "y"  # Horizontal walls, y = +-c


@dataclass(frozen=True)
class Projection:
    """
    Every intermediate point of one rotate-and-project run.

    All points are relative to the square's center.
    """
    turtle: Vector
    rotated: Vector
    direction: Vector
    projected: Vector
    displacement: Vector
    axis: WallAxis
    half_width: float

    def on_boundary(self, tolerance: Optional[float] = None) -> bool:
        """
        Check that the projected point lies on one of the lines x = +-c or y = +-c.

        Args:
            tolerance: Allowed absolute error, defaults to the configured boundary tolerance

        Returns:
            bool: False for NaN coordinates
        """
        if tolerance is None:
            tolerance = DEFAULT_CONFIG.tolerance.BOUNDARY_TOLERANCE
        c = abs(self.half_width)
        p = self.projected
        return bool(abs(abs(p.x) - c) <= tolerance or abs(abs(p.y) - c) <= tolerance)


def _sign(value: float) -> float:
    # sign(0) is 0 and NaN stays NaN
    return float(np.sign(value))


def nearest_wall_axis(angle: float) -> WallAxis:
    """
    Pick the wall axis for a projection ray at the given angle.

    cos(2 * angle + pi) is negative when |angle| < pi/4 (closer to the x axis)
    and positive when |angle| > pi/4. Computed literally, the ties land on
    different sides: +pi/4 gives a tiny negative value (X), -pi/4 a tiny
    positive one (Y). Zero or NaN select X.
    """
    band = math.cos(2 * angle + math.pi)
    if band > 0:
        return WallAxis.Y
    return WallAxis.X


def project_rotation(x: float, y: float, c: float) -> Projection:
    """
    Rotate a point 90 degrees about the square's center and project it onto a wall.

    Args:
        x: Point's x position; c is subtracted to get the turtle position
        y: Point's y position; c is subtracted to get the turtle position
        c: Distance from the center to each wall

    Returns:
        Projection: turtle, rotated and projected points plus the displacement
    """
    turtle = Vector(x - c, y - c)
    rotated = Vector(-turtle.y, turtle.x)
    direction = rotated - turtle
    angle = direction.a
    axis = nearest_wall_axis(angle)

    slope = math.tan(angle)
    wall = _sign(direction.x) * c
    if axis is WallAxis.X:
        pax = wall - rotated.x
        pay = pax * slope
    else:
        pay = wall - rotated.y
        pax = pay * slope

    projected = rotated.add(pax, pay)
    return Projection(
        turtle=turtle,
        rotated=rotated,
        direction=direction,
        projected=projected,
        displacement=projected - turtle,
        axis=axis,
        half_width=c,
    )


def rotate_and_project(x: float, y: float, c: float) -> Vector:
    """Displacement from the turtle position to its rotated wall projection."""
    return project_rotation(x, y, c).displacement


def rotate_and_project_many(points: Iterable[Tuple[float, float]], c: float) -> np.ndarray:
    """
    Run rotate_and_project over many points.

    Returns:
        np.ndarray: shape (N, 2), one (dx, dy) row per input point
    """
    rows = []
    for x, y in points:
        d = rotate_and_project(x, y, c)
        rows.append((d.x, d.y))
    return np.array(rows, dtype=float).reshape(-1, 2)
