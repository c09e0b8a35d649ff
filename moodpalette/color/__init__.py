# Color math: hex / RGB / HSL conversions and perceptual brightness

from .convert import (
    get_brightness,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)

__all__ = [
    "get_brightness",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
]
