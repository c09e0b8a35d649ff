"""
Particle engine: owns the live particle set and the animation loop.
activate_effect() replaces the particle set wholesale and restarts the loop;
each frame clears the surface, then updates and draws every particle.
"""
import logging
import random

from ..palette.schema import EffectKind, Palette
from ..scheduling import RepeatingTask
from .schema import Confetti, Rain
from .surface import Surface

logger = logging.getLogger(__name__)

CONFETTI_COUNT = 100
RAIN_COUNT = 200

# One shared stroke for every rain streak; per-particle opacity is not applied
RAIN_STROKE = (255, 255, 255, 128)
RAIN_LINE_WIDTH = 1


class ParticleEngine:
    """
    Effect state machine over {confetti, rain, none}. The animation loop is a single
    RepeatingTask paced at `fps`; with animate=False frames are stepped manually via tick().
    """

    def __init__(
        self,
        surface: Surface,
        *,
        fps: float = 60,
        rng: random.Random | None = None,
        animate: bool = True,
    ):
        self.surface = surface
        self.rng = rng or random.Random()
        self.animate = animate
        self.effect = EffectKind.NONE
        self.particles: list[Confetti | Rain] = []
        self._loop = RepeatingTask(self.tick, 1.0 / fps, name="animation-loop")

    @property
    def animating(self) -> bool:
        return self._loop.running

    def activate_effect(self, kind: "str | EffectKind", palette: Palette) -> None:
        """Cancel the running loop, rebuild the particle set for `kind` and restart the loop."""
        self._loop.cancel()
        self.effect = EffectKind.resolve(kind)
        if self.effect is EffectKind.CONFETTI:
            self.particles = [self._create_confetti(palette) for _ in range(CONFETTI_COUNT)]
        elif self.effect is EffectKind.RAIN:
            self.particles = [self._create_rain() for _ in range(RAIN_COUNT)]
        else:
            self.particles = []
            self.surface.clear()
            logger.debug("Effect %r: particles cleared", kind)
            return
        logger.debug("Effect %s: %d particles", self.effect.value, len(self.particles))
        if self.animate:
            self._loop.start()

    def stop(self) -> None:
        """Cancel the animation loop. Particles and the last frame are left as they are."""
        self._loop.cancel()

    def resize(self, width: int, height: int) -> None:
        self.surface.resize(width, height)

    def tick(self) -> None:
        """One frame: clear, then update and draw every live particle."""
        self.surface.clear()
        if self.effect is EffectKind.CONFETTI:
            self._step_confetti()
        elif self.effect is EffectKind.RAIN:
            self._step_rain()

    def _create_confetti(self, palette: Palette) -> Confetti:
        w, h = self.surface.width, self.surface.height
        r = self.rng.random
        return Confetti(
            x=r() * w,
            y=r() * h - h,
            size=r() * 10 + 5,
            color=palette[int(r() * len(palette))],
            speed_x=r() * 2 - 1,
            speed_y=r() * 3 + 2,
            rotation=r() * 360,
        )

    def _create_rain(self) -> Rain:
        w, h = self.surface.width, self.surface.height
        r = self.rng.random
        return Rain(
            x=r() * w,
            y=r() * h,
            length=r() * 20 + 10,
            speed=r() * 5 + 5,
            opacity=r() * 0.5 + 0.1,
        )

    def _step_confetti(self) -> None:
        h = self.surface.height
        for p in self.particles:
            p.update(h)
            self.surface.fill_rotated_square(p.x, p.y, p.size, p.rotation, p.color)

    def _step_rain(self) -> None:
        h = self.surface.height
        for p in self.particles:
            p.update(h)
            self.surface.line((p.x, p.y), (p.x, p.y + p.length), RAIN_STROKE, RAIN_LINE_WIDTH)
