"""
Projectile Demo
===============
Fires a projectile through an environment with gravity and wind, one tick at
a time, and draws its path onto a Canvas.

The canvas origin is the top-left corner, so the y coordinate is flipped
(`row = canvas.height - int(y)`). Positions that leave the canvas are simply
dropped by `Canvas.write_pixel`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt

from raytracer.model.color import WHITE, Color
from raytracer.model.tuples import Point, Vector

if TYPE_CHECKING:
    from raytracer.model.canvas import Canvas

logger = logging.getLogger(__name__)

MAX_TICKS: int = 10_000


@dataclass(frozen=True)
class Environment:
    gravity: Vector = field(default_factory=lambda: Vector(0.0, -0.1, 0.0))
    wind: Vector = field(default_factory=lambda: Vector(-0.01, 0.0, 0.0))


@dataclass(frozen=True)
class Projectile:
    position: Point = field(default_factory=lambda: Point(0.0, 1.0, 0.0))
    velocity: Vector = field(default_factory=lambda: Vector(1.0, 1.8, 0.0).normalize() * 11.25)

    def __str__(self) -> str:
        return f"(pos: {self.position}, vel: {self.velocity})"


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position, velocity)


def simulate(
    environment: Environment,
    projectile: Projectile,
    max_ticks: int = MAX_TICKS,
) -> Iterator[Projectile]:
    """
    Yield the projectile at every tick until it reaches the ground.

    The starting state is yielded first and the first state with y <= 0
    is yielded last.

    Args:
        environment: Gravity and wind applied each tick.
        projectile: Initial position and velocity.
        max_ticks: Upper bound on the number of ticks, for environments
            in which the projectile never comes down.
    """
    yield projectile
    ticks = 0
    while projectile.position.y > 0.0:
        if ticks >= max_ticks:
            logger.warning(f"Projectile still airborne after {max_ticks} ticks, stopping.")
            return
        projectile = tick(environment, projectile)
        ticks += 1
        logger.debug(f"Tick {ticks}: {projectile}")
        yield projectile


def plot_to_canvas(
    canvas: Canvas,
    path: list[Projectile],
    color: Color = WHITE,
) -> int:
    """
    Draw every position in `path` onto `canvas`.

    Returns:
        The number of positions that landed inside the canvas.
    """
    drawn = 0
    for projectile in path:
        x = int(projectile.position.x)
        y = canvas.height - int(projectile.position.y)
        if canvas.in_bounds(x, y):
            drawn += 1
        canvas.write_pixel(x, y, color)
    logger.info(f"Drew {drawn} of {len(path)} positions onto {canvas}.")
    return drawn


def plot_trajectory(path: list[Projectile], filepath: Optional[str] = None) -> None:
    """
    Plot the trajectory with matplotlib.

    Args:
        path: Projectile states as returned by `simulate`.
        filepath: If given, the figure is saved there instead of shown.
    """
    xs = [p.position.x for p in path]
    ys = [p.position.y for p in path]

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))

    plt.plot(xs, ys, 'r', lw=2)

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    plt.title("Projectile Trajectory")
    plt.xlabel("Distance")
    plt.ylabel("Height")

    if filepath:
        fig.savefig(filepath)
        plt.close(fig)
    else:
        plt.show()
