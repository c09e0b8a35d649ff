# Theme: palette → swatches, gradient, text contrast

from .applicator import (
    DARK_MODE_TEXT,
    LIGHT_MODE_TEXT,
    RadialGradient,
    ThemeState,
    apply_palette,
    contrast_mode_for,
)

__all__ = [
    "DARK_MODE_TEXT",
    "LIGHT_MODE_TEXT",
    "RadialGradient",
    "ThemeState",
    "apply_palette",
    "contrast_mode_for",
]
