#
# PROJECT: raykernel
# MODULE: raykernel/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import dataclass

from .canvas import Canvas
from .color import Color
from .config import DemoConfig
from .math_utils import Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(env: Environment, proj: Projectile, dt: float = 0.01) -> Projectile:
    """Advance the projectile by one timestep."""
    return Projectile(
        position=proj.position + proj.velocity * dt,
        velocity=proj.velocity + env.gravity + env.wind,
    )


class DemoApp:
    """
    Fires a projectile and plots its trajectory onto a canvas.

    World coordinates are y-up; the canvas is y-down, so positions are
    scaled by config.scale and flipped before plotting. Positions that
    land outside the canvas are not plotted.
    """

    def __init__(self, config: DemoConfig):
        self.config = config

        color = Color.from_hex(config.color)
        if color is None:
            raise ValueError(f"Invalid color {config.color!r}, expected #RRGGBB")
        self.color = color

        self.canvas = Canvas(config.width, config.height)
        self.env = Environment(gravity=Tuple.vector(*config.gravity),
                               wind=Tuple.vector(*config.wind))
        self.projectile = Projectile(position=Tuple.point(*config.start),
                                     velocity=Tuple.vector(*config.velocity))
        self.plotted = 0

    def to_canvas(self, position: Tuple):
        """Map a world-space point to (x, y) canvas coordinates."""
        scale = self.config.scale
        return (int(round(position.x * scale)),
                self.canvas.height - int(round(position.y * scale)))

    def plot(self, position: Tuple) -> bool:
        x, y = self.to_canvas(position)
        if not self.canvas.contains(x, y):
            return False
        self.canvas.write_pixel(x, y, self.color)
        self.plotted += 1
        return True

    def run(self) -> Canvas:
        self.plot(self.projectile.position)
        for step in range(self.config.steps):
            self.projectile = tick(self.env, self.projectile, self.config.dt)
            position = self.projectile.position
            logger.debug("step %d: position = %r", step, position)
            if position.y < 0:
                logger.info("Projectile hit the ground after %d steps", step + 1)
                break
            self.plot(position)
        logger.info("Plotted %d of the trajectory points", self.plotted)
        return self.canvas

    def save(self):
        self.canvas.save_ppm(self.config.output)


def main(config: DemoConfig):
    """Run the simulation and write the canvas to config.output."""
    app = DemoApp(config)
    app.run()
    app.save()
    return app
