"""
Client for the remote palette service (Colormind-style API).
POST {"model": ..., "input": [seed, "N", "N", "N", "N"]} → {"result": [[r, g, b] × 5]}.
One request, no retry: the caller falls back to the procedural palette on any failure.
"""
import logging
from typing import Any

from ..api_client import APIError, api_post
from ..color import rgb_to_hex
from .schema import PALETTE_SIZE, Palette

logger = logging.getLogger(__name__)

FREE_SLOT = "N"


class PaletteServiceError(Exception):
    """Remote palette unavailable: transport error, bad status or malformed result."""


class PaletteService:
    """Remote palette source. Seed is submitted as a fixed color followed by four free slots."""

    def __init__(
        self,
        api_base: str = "http://colormind.io",
        path: str = "/api/",
        *,
        model: str = "default",
        timeout: float | None = 10,
        enabled: bool = True,
    ):
        self.api_base = api_base
        self.path = path
        self.model = model
        self.timeout = timeout
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: dict[str, Any] | None) -> "PaletteService":
        cfg = (config or {}).get("palette_service", {})
        return cls(
            cfg.get("api_base", "http://colormind.io"),
            cfg.get("path", "/api/"),
            model=cfg.get("model", "default"),
            timeout=cfg.get("timeout_seconds", 10),
            enabled=bool(cfg.get("enabled", True)),
        )

    def fetch(self, seed: tuple[int, int, int]) -> Palette:
        """Request a palette anchored on seed. Raises PaletteServiceError on any failure."""
        payload = {
            "model": self.model,
            "input": [list(seed)] + [FREE_SLOT] * (PALETTE_SIZE - 1),
        }
        try:
            data = api_post(self.api_base, self.path, data=payload, timeout=self.timeout)
        except APIError as e:
            raise PaletteServiceError(str(e)) from e
        return _parse_result(data)


def _parse_result(data: Any) -> Palette:
    result = data.get("result") if isinstance(data, dict) else None
    if not isinstance(result, list) or len(result) != PALETTE_SIZE:
        raise PaletteServiceError(f"Malformed palette response: {str(data)[:200]}")
    colors = []
    for rgb in result:
        if (
            not isinstance(rgb, (list, tuple))
            or len(rgb) != 3
            or not all(isinstance(c, (int, float)) and 0 <= c <= 255 for c in rgb)
        ):
            raise PaletteServiceError(f"Malformed color in palette response: {rgb!r}")
        colors.append(rgb_to_hex(rgb[0], rgb[1], rgb[2]))
    return Palette(tuple(colors))
