"""
Theme applicator: palette → swatch slots, background gradient and text contrast mode.
"""
from dataclasses import dataclass, field

from ..color import get_brightness, hex_to_rgb
from ..palette.schema import PLACEHOLDER_PALETTE, Palette

LIGHT_MODE_TEXT = "light-mode-text"
DARK_MODE_TEXT = "dark-mode-text"

# Brightness of palette[0] strictly above this selects light mode
CONTRAST_THRESHOLD = 128

SLOT_NAMES: tuple[str, ...] = ("c1", "c2", "c3", "c4", "c5")


@dataclass
class RadialGradient:
    """Radial background gradient: list of (color, stop percent) from center outwards."""
    stops: list[tuple[str, int]] = field(default_factory=list)

    def to_css(self) -> str:
        parts = ", ".join(f"{color} {pct}%" for color, pct in self.stops)
        return f"radial-gradient(circle at 50% 50%, {parts})"


@dataclass
class ThemeState:
    """Shared UI theme: named swatches, gradient and text contrast class."""
    slots: dict[str, str] = field(default_factory=lambda: dict(zip(SLOT_NAMES, PLACEHOLDER_PALETTE)))
    gradient: RadialGradient = field(default_factory=RadialGradient)
    contrast_mode: str = DARK_MODE_TEXT

    def css_variables(self) -> dict[str, str]:
        return {f"--{name}": color for name, color in self.slots.items()}


def contrast_mode_for(color: str) -> str:
    """Text contrast mode for a background color. Hard threshold, no hysteresis."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        raise ValueError(f"Invalid hex color: {color!r}")
    return LIGHT_MODE_TEXT if get_brightness(rgb) > CONTRAST_THRESHOLD else DARK_MODE_TEXT


def apply_palette(palette: Palette, theme: ThemeState) -> None:
    """Assign palette[0..4] to the swatch slots, rebuild the gradient and pick the contrast mode."""
    theme.slots = dict(zip(SLOT_NAMES, palette))
    theme.gradient = RadialGradient([(palette[2], 0), (palette[1], 40), (palette[0], 100)])
    theme.contrast_mode = contrast_mode_for(palette[0])
