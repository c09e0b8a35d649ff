"""
Drawing surface for the particle layer: transparent RGBA canvas backed by Pillow.
Exposes the handful of primitives the engine needs plus a numpy view for recording.
"""
import math

import numpy as np
from PIL import Image, ImageDraw

from ..color import hex_to_rgb

TRANSPARENT = (0, 0, 0, 0)


class Surface:
    """RGBA canvas the particle engine clears and redraws every frame."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self._image = Image.new("RGBA", (self.width, self.height), TRANSPARENT)
        self._draw = ImageDraw.Draw(self._image)

    def resize(self, width: int, height: int) -> None:
        """Match a new window size. Content is discarded."""
        self.width = int(width)
        self.height = int(height)
        self._image = Image.new("RGBA", (self.width, self.height), TRANSPARENT)
        self._draw = ImageDraw.Draw(self._image)

    def clear(self) -> None:
        self._draw.rectangle([0, 0, self.width, self.height], fill=TRANSPARENT)

    def fill_rotated_square(self, cx: float, cy: float, size: float, angle_deg: float, color: str) -> None:
        """Filled square of side `size` centred on (cx, cy), rotated by angle_deg."""
        rgb = hex_to_rgb(color) or (255, 255, 255)
        rad = math.radians(angle_deg)
        c, s = math.cos(rad), math.sin(rad)
        half = size / 2
        corners = [(-half, -half), (half, -half), (half, half), (-half, half)]
        points = [(cx + x * c - y * s, cy + x * s + y * c) for x, y in corners]
        self._draw.polygon(points, fill=(*rgb, 255))

    def line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: tuple[int, int, int, int],
        width: int = 1,
    ) -> None:
        self._draw.line([start, end], fill=color, width=width)

    def to_array(self) -> np.ndarray:
        """(H, W, 4) uint8 copy of the current pixels."""
        return np.asarray(self._image).copy()

    def to_rgb_array(self, background: tuple[int, int, int] = (0, 0, 0)) -> np.ndarray:
        """(H, W, 3) uint8 frame composited over a solid background (for video export)."""
        base = Image.new("RGBA", (self.width, self.height), (*background, 255))
        base.alpha_composite(self._image)
        return np.asarray(base.convert("RGB")).copy()

    def is_blank(self) -> bool:
        return not np.asarray(self._image).any()

    @property
    def image(self) -> Image.Image:
        return self._image
