"""
Projection Rendering

Draws a rotate-and-project run onto a pygame surface: the square boundary,
the turtle, the rotated point, the ray to the wall and the projected point.
World coordinates are centered on the square with y pointing up; screen
coordinates follow pygame with y pointing down.
"""

import math
from typing import Tuple

import pygame

from config.projection_config import VisualConfig
from geometry.projection import Projection

SCREEN_CLIP = 100000


class SquareView:
    """
    Maps square-centered world coordinates onto a pygame surface.

    **Purpose**: Visual check of the projection; not used by the geometry itself

    **Layout**:
    - The square is centered in the window
    - `margin` pixels stay free on the shorter side for points outside the square
    """

    def __init__(self, half_width: float, visual: VisualConfig = VisualConfig()):
        if not math.isfinite(half_width) or half_width <= 0:
            raise ValueError(f"Cannot draw a square with half-width {half_width}")
        self.half_width = half_width
        self.visual = visual
        self.center = (visual.WIDTH / 2, visual.HEIGHT / 2)
        drawable = min(visual.WIDTH, visual.HEIGHT) / 2 - visual.MARGIN
        if drawable <= 0:
            raise ValueError("Margin leaves no room to draw the square")
        self.scale = drawable / half_width  # Pixels per world unit

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        sx = self.center[0] + x * self.scale
        sy = self.center[1] - y * self.scale
        # pygame needs 32-bit coordinates; far projections are clipped
        return (
            int(round(max(-SCREEN_CLIP, min(SCREEN_CLIP, sx)))),
            int(round(max(-SCREEN_CLIP, min(SCREEN_CLIP, sy)))),
        )

    def draw(self, surface, projection: Projection) -> None:
        surface.fill(self.visual.BACKGROUND_COLOR)
        self.draw_square(surface)
        self.draw_projection(surface, projection)

    def draw_square(self, surface):
        c = self.half_width
        left, top = self.to_screen(-c, c)
        right, bottom = self.to_screen(c, -c)
        pygame.draw.rect(surface, self.visual.SQUARE_COLOR,
                         pygame.Rect(left, top, right - left, bottom - top), self.visual.LINE_THICKNESS)
        # Center cross
        cx, cy = self.to_screen(0, 0)
        pygame.draw.line(surface, self.visual.SQUARE_COLOR, (cx - 5, cy), (cx + 5, cy), 1)
        pygame.draw.line(surface, self.visual.SQUARE_COLOR, (cx, cy - 5), (cx, cy + 5), 1)

    def draw_projection(self, surface, projection: Projection):
        points = [projection.turtle, projection.rotated, projection.projected]
        if not all(math.isfinite(p.x) and math.isfinite(p.y) for p in points):
            # Degenerate projection, only the square is drawn
            return

        turtle = self.to_screen(projection.turtle.x, projection.turtle.y)
        rotated = self.to_screen(projection.rotated.x, projection.rotated.y)
        projected = self.to_screen(projection.projected.x, projection.projected.y)

        pygame.draw.line(surface, self.visual.TURTLE_COLOR, turtle, rotated, 1)
        pygame.draw.line(surface, self.visual.PROJECTED_COLOR, rotated, projected, self.visual.LINE_THICKNESS)

        radius = self.visual.POINT_RADIUS
        pygame.draw.circle(surface, self.visual.TURTLE_COLOR, turtle, radius)
        pygame.draw.circle(surface, self.visual.ROTATED_COLOR, rotated, radius)
        pygame.draw.circle(surface, self.visual.PROJECTED_COLOR, projected, radius)
