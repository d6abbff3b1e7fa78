"""
Rotate-and-Project Configuration Constants

This module centralizes the constants used by the geometry demo: the size of
the square, the tolerance for boundary checks, the demonstration inputs and
the pygame rendering settings.

**Categories**:
1. **Square**: Half-width of the bounding square
2. **Tolerance**: Floating point slack for wall-membership checks
3. **Demo**: Inputs for the command-line demonstration
4. **Visual**: Window size, margins, colors
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SquareConfig:
    """Square boundary constants"""
    HALF_WIDTH: float = 1.0  # Distance from center to each wall


@dataclass(frozen=True)
class ToleranceConfig:
    """Floating point tolerances"""
    BOUNDARY_TOLERANCE: float = 1e-9


@dataclass(frozen=True)
class DemoConfig:
    """Command-line demonstration inputs"""
    START_X: float = 1.0
    START_Y: float = 1.0
    ROTATE_ANGLE: float = 90.0  # Radians, passed to Vector.rotate as-is
    SWEEP_SIZE: int = 9


@dataclass(frozen=True)
class VisualConfig:
    """Visual rendering constants"""
    WIDTH: int = 600
    HEIGHT: int = 600
    MARGIN: int = 150  # Screen pixels between window edge and square
    FPS: int = 30
    POINT_RADIUS: int = 6
    LINE_THICKNESS: int = 2
    BACKGROUND_COLOR: Tuple[int, int, int] = (34, 139, 34)  # Green
    SQUARE_COLOR: Tuple[int, int, int] = (255, 255, 255)  # White
    TURTLE_COLOR: Tuple[int, int, int] = (255, 0, 0)  # Red
    ROTATED_COLOR: Tuple[int, int, int] = (0, 0, 255)  # Blue
    PROJECTED_COLOR: Tuple[int, int, int] = (255, 255, 0)  # Yellow


class ProjectionConfig:
    """
    Central configuration container.

    **Usage**:
    ```python
    from config.projection_config import ProjectionConfig

    config = ProjectionConfig()
    c = config.square.HALF_WIDTH
    tolerance = config.tolerance.BOUNDARY_TOLERANCE
    ```
    """

    def __init__(self):
        self.square = SquareConfig()
        self.tolerance = ToleranceConfig()
        self.demo = DemoConfig()
        self.visual = VisualConfig()

    @classmethod
    def create_default(cls) -> 'ProjectionConfig':
        """Create default configuration"""
        return cls()

    @classmethod
    def create_large_square(cls, half_width: float = 100.0) -> 'ProjectionConfig':
        """Create configuration for a square measured in larger units"""
        config = cls()
        # Override specific values; tolerance grows with the coordinates
        object.__setattr__(config.square, 'HALF_WIDTH', half_width)
        object.__setattr__(config.tolerance, 'BOUNDARY_TOLERANCE', 1e-9 * half_width)
        object.__setattr__(config.demo, 'START_X', half_width)
        object.__setattr__(config.demo, 'START_Y', half_width)
        return config


DEFAULT_CONFIG = ProjectionConfig.create_default()
