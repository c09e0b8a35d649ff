"""
Palette generator: emotion → 5-color palette.
Tries the remote palette service first; on any failure uses the procedural harmony,
which is deterministic and needs no network.
"""
import logging

from ..color import hsl_to_hex, rgb_to_hsl
from .data.emotions import EMOTION_PROFILES
from .schema import EmotionProfile, Palette
from .service import PaletteService, PaletteServiceError

logger = logging.getLogger(__name__)


class UnknownEmotionError(KeyError):
    """No profile for the requested emotion name."""


def get_profile(emotion: str) -> EmotionProfile:
    try:
        return EMOTION_PROFILES[emotion]
    except KeyError:
        raise UnknownEmotionError(emotion) from None


def procedural_palette(seed: tuple[int, int, int]) -> Palette:
    """
    House harmony from a seed RGB: monochrome + analogous + complementary mix.
    Order: darker, base, bright analogous, very bright analogous, light complementary.
    """
    h, s, l = rgb_to_hsl(*seed)
    return Palette((
        hsl_to_hex(h, s, max(10, l - 30)),
        hsl_to_hex(h, s, l),
        hsl_to_hex((h + 20) % 360, max(0, s - 10), min(100, l + 20)),
        hsl_to_hex((h - 20 + 360) % 360, s, min(100, l + 40)),
        hsl_to_hex((h + 180) % 360, 20, 90),
    ))


def generate_palette(emotion: str, *, service: PaletteService | None = None) -> Palette:
    """
    Palette for an emotion. Never raises on network failure: a missing, disabled or
    failing service yields the procedural palette for the emotion's seed.
    """
    seed = get_profile(emotion).seed_color
    if service is not None and service.enabled:
        try:
            palette = service.fetch(seed)
            logger.debug("Remote palette for %s: %s", emotion, palette.to_list())
            return palette
        except PaletteServiceError as e:
            logger.info("Falling back to procedural palette for %s: %s", emotion, e)
    return procedural_palette(seed)
