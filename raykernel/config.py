#
# PROJECT: raykernel
# MODULE: raykernel/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass


@dataclass
class DemoConfig:
    """Configuration for the projectile demo."""
    width: int = 1000
    height: int = 1000
    steps: int = 100
    dt: float = 0.01
    scale: float = 10.0          # canvas pixels per world unit
    output: str = 'output.ppm'
    start: tuple = (0.0, 20.0, 0.0)
    velocity: tuple = (10.0, 0.0, 0.0)
    gravity: tuple = (0.0, -9.8, 0.0)
    wind: tuple = (-0.01, 0.0, 0.0)
    color: str = '#FFFFFF'

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.steps <= 0:
            raise ValueError(f"steps must be positive, got {self.steps}")
        if self.dt <= 0 or self.scale <= 0:
            raise ValueError("dt and scale must be positive")

    @classmethod
    def from_env(cls) -> 'DemoConfig':
        """
        Build a default config, overridden by RAYKERNEL_WIDTH,
        RAYKERNEL_HEIGHT, RAYKERNEL_STEPS and RAYKERNEL_OUTPUT when set.
        Non-numeric values raise ValueError.
        """
        defaults = cls()
        env = os.environ
        return cls(
            width=int(env.get('RAYKERNEL_WIDTH', defaults.width)),
            height=int(env.get('RAYKERNEL_HEIGHT', defaults.height)),
            steps=int(env.get('RAYKERNEL_STEPS', defaults.steps)),
            output=env.get('RAYKERNEL_OUTPUT', defaults.output),
        )
