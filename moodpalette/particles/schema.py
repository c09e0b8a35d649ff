"""
Particle types. Particles are mutated in place every tick and recycled at the
surface edge rather than respawned.
"""
import math
from dataclasses import dataclass


@dataclass
class Confetti:
    """Falling, swaying, rotating square."""
    x: float
    y: float
    size: float
    color: str           # hex, drawn from the live palette
    speed_x: float       # horizontal drift
    speed_y: float       # fall speed
    rotation: float      # degrees

    def update(self, height: float) -> None:
        self.y += self.speed_y
        # Sway follows vertical position, not elapsed time
        self.x += math.sin(self.y * 0.01) + self.speed_x
        self.rotation += 2
        if self.y > height:
            self.y = -20


@dataclass
class Rain:
    """Vertical streak."""
    x: float
    y: float
    length: float
    speed: float
    opacity: float       # stored only; rain is drawn with one shared stroke

    def update(self, height: float) -> None:
        self.y += self.speed
        if self.y > height:
            self.y = -self.length
