"""
Tests for rotate_and_project.

This script tests:
1. Intermediate points for a known case on each wall axis
2. The projected point lies on a wall (the core property)
3. Wall selection at the +-45 degree ties
4. Degenerate inputs (c == 0, turtle at center, NaN) do not raise
5. The numpy batch helper
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import math

import numpy as np

from geometry.projection import (
    WallAxis,
    nearest_wall_axis,
    project_rotation,
    rotate_and_project,
    rotate_and_project_many,
)


def close(a, b, tol=1e-9):
    return math.isclose(a, b, rel_tol=tol, abs_tol=tol)


def test_known_case_x_wall():
    """Half-width 1 with the point at (0.5, 0.5), so the turtle sits at (-0.5, -0.5)"""
    print("Testing known case on the x walls...")
    projection = project_rotation(0.5, 0.5, 1)

    assert (projection.turtle.x, projection.turtle.y) == (-0.5, -0.5)
    assert (projection.rotated.x, projection.rotated.y) == (0.5, -0.5)
    assert (projection.direction.x, projection.direction.y) == (1.0, 0.0)
    assert projection.axis is WallAxis.X
    assert (projection.projected.x, projection.projected.y) == (1.0, -0.5)

    d = rotate_and_project(0.5, 0.5, 1)
    assert math.isfinite(d.x) and math.isfinite(d.y)
    assert (d.x, d.y) == (1.5, 0.0), f"Unexpected displacement {d}"
    print("✓ Known x-wall case passed\n")


def test_known_case_y_wall():
    print("Testing known case on the y walls...")
    projection = project_rotation(1.5, 0.9, 1)

    assert projection.axis is WallAxis.Y, f"Direction angle {projection.direction.a} should pick Y"
    assert close(projection.projected.y, -1.0)
    assert close(projection.projected.x, 2.35)
    assert close(projection.displacement.x, 1.85)
    assert close(projection.displacement.y, -0.9)
    assert projection.on_boundary()
    print("✓ Known y-wall case passed\n")


def test_displacement_reconstructs_projected_point():
    print("Testing d + t == p...")
    for x, y, c in [(0.5, 0.5, 1), (1.5, 0.9, 1), (0.2, 1.7, 1), (30, 80, 50)]:
        projection = project_rotation(x, y, c)
        p = projection.displacement + projection.turtle
        assert close(p.x, projection.projected.x) and close(p.y, projection.projected.y)
    print("✓ d + t == p passed\n")


def test_projection_lands_on_wall():
    """Grid of points inside the square; every projection with a defined direction hits x = +-c or y = +-c"""
    print("Testing wall membership over a grid...")
    for c in (1.0, 50.0):
        checked = 0
        for i in range(1, 20):
            for j in range(1, 20):
                x = 2 * c * i / 20
                y = 2 * c * j / 20
                projection = project_rotation(x, y, c)
                if projection.direction.x == 0:
                    # sign(0) == 0 puts the wall at the center line
                    continue
                p = projection.projected
                assert projection.on_boundary(1e-9 * c), f"{p} is not on a wall of half-width {c}"
                if projection.axis is WallAxis.X:
                    assert close(abs(p.x), c)
                else:
                    assert close(abs(p.y), c)
                checked += 1
        print(f"  c = {c}: {checked} projections on a wall")
        assert checked > 300
    print("✓ Wall membership passed\n")


def test_wall_axis_bands():
    print("Testing wall axis selection...")
    assert nearest_wall_axis(0.0) is WallAxis.X
    assert nearest_wall_axis(0.3) is WallAxis.X
    assert nearest_wall_axis(-0.7) is WallAxis.X
    assert nearest_wall_axis(0.9) is WallAxis.Y
    assert nearest_wall_axis(-1.2) is WallAxis.Y
    assert nearest_wall_axis(math.pi / 2) is WallAxis.Y
    assert nearest_wall_axis(float("nan")) is WallAxis.X
    print("✓ Wall axis selection passed\n")


def test_wall_axis_ties():
    """At exactly 45 degrees the sign of cos(2 * angle + pi) decides: +45 picks X, -45 picks Y"""
    print("Testing 45 degree ties...")
    assert nearest_wall_axis(math.pi / 4) is WallAxis.X
    assert nearest_wall_axis(-math.pi / 4) is WallAxis.Y

    # Turtle (0, -1) rotates to (1, 0); direction (1, 1)
    positive = project_rotation(1, 0, 1)
    assert (positive.direction.x, positive.direction.y) == (1.0, 1.0)
    assert positive.axis is WallAxis.X
    assert (positive.projected.x, positive.projected.y) == (1.0, 0.0)

    # Turtle (-1, 0) rotates to (0, -1); direction (1, -1)
    negative = project_rotation(0, 1, 1)
    assert (negative.direction.x, negative.direction.y) == (1.0, -1.0)
    assert negative.axis is WallAxis.Y
    assert close(negative.projected.y, 1.0)
    assert close(negative.projected.x, -2.0)
    print("✓ 45 degree ties passed\n")


def test_zero_half_width():
    """Boundary collapses to the center: p shares a coordinate with a and sits on x = 0"""
    print("Testing c == 0...")
    projection = project_rotation(0.5, 0.5, 0)
    p = projection.projected
    a = projection.rotated
    assert p.x == 0.0
    assert p.x == a.x or p.y == a.y
    assert p.y == a.y
    print("✓ c == 0 passed\n")


def test_turtle_at_center():
    print("Testing turtle at the center...")
    d = rotate_and_project(1, 1, 1)
    assert (d.x, d.y) == (0.0, 0.0), f"Unexpected displacement {d}"
    print("✓ Turtle at center passed\n")


def test_nan_propagates():
    print("Testing NaN input...")
    projection = project_rotation(float("nan"), 0, 1)
    assert math.isnan(projection.displacement.x)
    assert not projection.on_boundary()
    print("✓ NaN input passed\n")


def test_rotate_and_project_many():
    print("Testing batch projection...")
    result = rotate_and_project_many([(0.5, 0.5), (1.5, 0.9)], 1)
    assert isinstance(result, np.ndarray)
    assert result.shape == (2, 2)
    assert result[0].tolist() == [1.5, 0.0]
    single = rotate_and_project(1.5, 0.9, 1)
    assert np.allclose(result[1], [single.x, single.y])

    empty = rotate_and_project_many([], 1)
    assert empty.shape == (0, 2)
    print("✓ Batch projection passed\n")


def run_projection_tests():
    """Run all projection tests"""
    print("=" * 50)
    print("TESTING ROTATE AND PROJECT")
    print("=" * 50)

    tests = [
        test_known_case_x_wall,
        test_known_case_y_wall,
        test_displacement_reconstructs_projected_point,
        test_projection_lands_on_wall,
        test_wall_axis_bands,
        test_wall_axis_ties,
        test_zero_half_width,
        test_turtle_at_center,
        test_nan_propagates,
        test_rotate_and_project_many,
    ]

    passed = 0
    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            print(f"ERROR {test.__name__} failed: {e}")

    print("=" * 50)
    print(f"{passed}/{len(tests)} tests passed")
    print("=" * 50)
    return passed == len(tests)


if __name__ == "__main__":
    success = run_projection_tests()
    sys.exit(0 if success else 1)
