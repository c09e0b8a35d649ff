# Export: CSS block, palette card image, effect recording

from .css import palette_to_css, write_css
from .image import render_palette_card, save_palette_card
from .recording import record_effect

__all__ = ["palette_to_css", "record_effect", "render_palette_card", "save_palette_card", "write_css"]
