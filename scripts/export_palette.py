#!/usr/bin/env python3
"""
CLI: palette for one emotion → CSS block and/or palette card PNG.
Usage:
  python scripts/export_palette.py happy
  python scripts/export_palette.py sad --offline --css out/sad.css --card
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from moodpalette.config import get_output_dir, load_config
from moodpalette.export import palette_to_css, save_palette_card, write_css
from moodpalette.palette import EMOTION_ORDER, PaletteService, generate_palette


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate the palette for an emotion and export it.")
    parser.add_argument("emotion", choices=EMOTION_ORDER)
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--offline", action="store_true", help="Use the procedural palette only.")
    parser.add_argument("--css", type=Path, default=None, help="Write the CSS block to this file.")
    parser.add_argument("--card", action="store_true", help="Write MoodPalette-<emotion>.png to the export dir.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    config = load_config(args.config)
    service = None if args.offline else PaletteService.from_config(config)
    palette = generate_palette(args.emotion, service=service)

    print(palette_to_css(palette, args.emotion))
    if args.css:
        print(f"CSS: {write_css(palette, args.emotion, args.css)}")
    if args.card:
        size = int(config.get("export", {}).get("image_size", 1080))
        print(f"Card: {save_palette_card(palette, args.emotion, get_output_dir(config), size=size)}")


if __name__ == "__main__":
    main()
