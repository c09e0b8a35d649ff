"""
Palette card: square PNG with the palette as vertical bars, the emotion label on top
and hex codes underneath. Uses Pillow only.
Layout is defined on a 1080px card and scaled to `size`.
"""
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..color import hex_to_rgb
from ..palette.schema import Palette

_BASE = 1080


def _font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("arial.ttf", size)
    except (OSError, IOError):
        try:
            return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", size)
        except (OSError, IOError):
            return ImageFont.load_default(size=size)


def _centered_text(draw: ImageDraw.ImageDraw, text: str, cx: float, baseline: float, font) -> None:
    """Draw white text horizontally centred on cx with its bottom at baseline."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text((cx - (right - left) / 2 - left, baseline - bottom), text, font=font, fill=(255, 255, 255))


def render_palette_card(palette: Palette, emotion: str, size: int = _BASE) -> Image.Image:
    scale = size / _BASE
    card = Image.new("RGB", (size, size), hex_to_rgb(palette[0]))
    draw = ImageDraw.Draw(card)

    bar_w = size / len(palette)
    top, bottom = int(200 * scale), int(800 * scale)
    for i, color in enumerate(palette):
        x0 = int(round(i * bar_w))
        x1 = int(round((i + 1) * bar_w)) - 1
        draw.rectangle([x0, top, x1, bottom - 1], fill=hex_to_rgb(color))

    _centered_text(draw, emotion.upper(), size / 2, 150 * scale, _font(max(1, int(80 * scale))))
    code_font = _font(max(1, int(30 * scale)))
    for i, color in enumerate(palette):
        _centered_text(draw, color, i * bar_w + bar_w / 2, 850 * scale, code_font)
    return card


def save_palette_card(palette: Palette, emotion: str, output_dir: Path, size: int = _BASE) -> Path:
    """Write MoodPalette-<emotion>.png into output_dir. Returns the path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"MoodPalette-{emotion}.png"
    render_palette_card(palette, emotion, size).save(path)
    return path
