"""
Color math: RGB <-> HSL and hex encoding. Pure functions, no state.
HSL is expressed as (hue 0-360, saturation 0-100, lightness 0-100).
"""
import math
import re

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _channel(value: float) -> int:
    return max(0, min(255, _round_half_up(value)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode an RGB triple as '#rrggbb'. Channels are rounded and clamped to 0-255."""
    return "#{:02x}{:02x}{:02x}".format(_channel(r), _channel(g), _channel(b))


def hex_to_rgb(hex_color: str) -> tuple[int, int, int] | None:
    """
    Decode '#rrggbb' (leading '#' optional, case-insensitive) into (r, g, b).
    Shorthand ('#abc'), alpha ('#rrggbbaa') and anything malformed return None.
    """
    if not isinstance(hex_color, str):
        return None
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        return None
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB (0-255) to HSL. Achromatic colors (r == g == b) get hue and saturation 0."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    lightness = (mx + mn) / 2
    if mx == mn:
        return 0.0, 0.0, lightness * 100
    d = mx - mn
    sat = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
    if mx == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    hue /= 6
    return (hue * 360) % 360, sat * 100, lightness * 100


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert HSL back to an RGB triple (0-255, rounded half-up)."""
    l /= 100
    a = s * min(l, 1 - l) / 100

    def f(n: int) -> int:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return _channel(255 * color)

    return f(0), f(8), f(4)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to '#rrggbb'. Round-trips rgb_to_hsl within ±1 per channel."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def get_brightness(rgb: tuple[int, int, int]) -> float:
    """Perceptual luma 0-255: 0.299 r + 0.587 g + 0.114 b."""
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000
