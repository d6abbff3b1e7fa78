"""
Rotate-and-Project demonstration entry point

Without arguments this reproduces the original demonstration: build
Vector(1, 1) and print it rotated by 90. The 90 is passed to rotate() as
radians, not degrees.

Other modes:
- --project X Y C: print every step of rotate_and_project for one point
- --sweep N: run the projection over an N x N grid inside the square
- --show: open a pygame window drawing the --project case
"""

import argparse
import sys

from common.Vector import Vector
from config.projection_config import DEFAULT_CONFIG, ProjectionConfig
from geometry.projection import project_rotation, rotate_and_project_many


def build_parser(config: ProjectionConfig = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rotate a point about a square's center and project it to a wall")
    parser.add_argument("--angle", type=float, default=config.demo.ROTATE_ANGLE,
                        help="Rotation for the Vector demo, in radians")
    parser.add_argument("--project", type=float, nargs=3, metavar=("X", "Y", "C"),
                        help="Run rotate_and_project for point (X, Y) and half-width C")
    parser.add_argument("--sweep", type=int, nargs="?", const=config.demo.SWEEP_SIZE, metavar="N",
                        help="Project an N x N grid of points and count wall hits")
    parser.add_argument("--show", action="store_true",
                        help="Draw the --project case in a pygame window")
    return parser


def run_vector_demo(angle: float, config: ProjectionConfig = DEFAULT_CONFIG) -> Vector:
    vector = Vector(config.demo.START_X, config.demo.START_Y)
    rotated = vector.rotate(angle)
    print(rotated)
    return rotated


def run_projection(x: float, y: float, c: float):
    projection = project_rotation(x, y, c)
    print(f"Turtle:       {projection.turtle}")
    print(f"Rotated:      {projection.rotated}")
    print(f"Direction:    {projection.direction}")
    print(f"Wall axis:    {projection.axis.value}")
    print(f"Projected:    {projection.projected}")
    print(f"Displacement: {projection.displacement}")
    if not projection.on_boundary():
        print("Warning: projected point is not on a wall")
    return projection


def run_sweep(size: int, config: ProjectionConfig = DEFAULT_CONFIG):
    """Project a size x size grid of points strictly inside the square."""
    c = config.square.HALF_WIDTH
    step = 2 * c / (size + 1)
    # Inputs are offset by c, so (c, c) is the center and (0, 2c) spans the square
    points = [((i + 1) * step, (j + 1) * step) for i in range(size) for j in range(size)]
    displacements = rotate_and_project_many(points, c)
    on_wall = sum(project_rotation(x, y, c).on_boundary(config.tolerance.BOUNDARY_TOLERANCE) for x, y in points)
    print(f"Projected {len(points)} points, {on_wall} landed on a wall")
    if len(displacements):
        print(f"Mean displacement: ({displacements[:, 0].mean():.4f}, {displacements[:, 1].mean():.4f})")
    return displacements


def show_projection(projection, config: ProjectionConfig = DEFAULT_CONFIG):
    import pygame

    from drawing.drawing import SquareView

    view = SquareView(projection.half_width, config.visual)

    # === PYGAME WINDOW SETUP ===
    pygame.init()
    screen = pygame.display.set_mode((config.visual.WIDTH, config.visual.HEIGHT))
    pygame.display.set_caption("Rotate and Project")
    clock = pygame.time.Clock()

    # === MAIN LOOP ===
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        view.draw(screen, projection)
        pygame.display.flip()
        clock.tick(config.visual.FPS)
    pygame.quit()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.project is None and args.sweep is None:
        run_vector_demo(args.angle)
        return 0

    if args.project is not None:
        projection = run_projection(*args.project)
        if args.show:
            show_projection(projection)
    elif args.show:
        print("--show needs --project X Y C")

    if args.sweep is not None:
        if args.sweep < 1:
            print(f"Sweep size must be positive, got {args.sweep}")
            return 2
        run_sweep(args.sweep)

    return 0


if __name__ == "__main__":
    sys.exit(main())
