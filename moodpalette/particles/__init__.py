# Particle simulation: confetti and rain effects on a redrawn surface

from .engine import CONFETTI_COUNT, RAIN_COUNT, RAIN_STROKE, ParticleEngine
from .schema import Confetti, Rain
from .surface import Surface

__all__ = [
    "CONFETTI_COUNT",
    "RAIN_COUNT",
    "RAIN_STROKE",
    "Confetti",
    "ParticleEngine",
    "Rain",
    "Surface",
]
