# Palette derivation: emotion profiles, remote service, procedural fallback

from .data import EMOTION_ORDER, EMOTION_PROFILES
from .generator import UnknownEmotionError, generate_palette, get_profile, procedural_palette
from .schema import PLACEHOLDER_PALETTE, EffectKind, EmotionProfile, Palette
from .service import PaletteService, PaletteServiceError

__all__ = [
    "EMOTION_ORDER",
    "EMOTION_PROFILES",
    "EffectKind",
    "EmotionProfile",
    "Palette",
    "PLACEHOLDER_PALETTE",
    "PaletteService",
    "PaletteServiceError",
    "UnknownEmotionError",
    "generate_palette",
    "get_profile",
    "procedural_palette",
]
