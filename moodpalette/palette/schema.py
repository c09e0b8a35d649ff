"""
Palette and emotion profile types.
"""
from dataclasses import dataclass
from enum import Enum

from ..color import hex_to_rgb

PALETTE_SIZE = 5


class EffectKind(str, Enum):
    """Particle effect categories the engine can run."""
    CONFETTI = "confetti"
    RAIN = "rain"
    NONE = "none"

    @classmethod
    def resolve(cls, label: "str | EffectKind | None") -> "EffectKind":
        """Map an effect label to a kind; labels without a particle effect ('pulse', 'fog') are NONE."""
        if isinstance(label, EffectKind):
            return label
        try:
            return cls((label or "none").lower())
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class Palette:
    """Ordered 5-color palette. Index 0 is the darkest/seed-anchored entry, index 2 the bright accent."""
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if len(colors) != PALETTE_SIZE:
            raise ValueError(f"Palette needs exactly {PALETTE_SIZE} colors, got {len(colors)}")
        for c in colors:
            if hex_to_rgb(c) is None or not c.startswith("#"):
                raise ValueError(f"Invalid palette color: {c!r}")
        object.__setattr__(self, "colors", tuple(c.lower() for c in colors))

    def __getitem__(self, index: int) -> str:
        return self.colors[index]

    def __iter__(self):
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def to_list(self) -> list[str]:
        return list(self.colors)


# Live before the first mood is finalized
PLACEHOLDER_PALETTE = Palette(("#333333", "#444444", "#555555", "#666666", "#777777"))


@dataclass(frozen=True)
class EmotionProfile:
    """Fixed per-emotion data: seed color, effect label and music vibe."""
    name: str
    seed_color: tuple[int, int, int]
    effect: str = "none"   # confetti | rain | pulse | fog | none
    vibe: str = ""

    @property
    def effect_kind(self) -> EffectKind:
        return EffectKind.resolve(self.effect)

    @property
    def display_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]
