"""
CSS export: palette as a :root custom-property block.
"""
from pathlib import Path

from ..palette.schema import Palette


def palette_to_css(palette: Palette, emotion: str) -> str:
    lines = [f"/* MoodPalette: {emotion} */", ":root {"]
    lines += [f"    --color-{i}: {color};" for i, color in enumerate(palette, start=1)]
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_css(palette: Palette, emotion: str, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(palette_to_css(palette, emotion), encoding="utf-8")
    return output_path
