#!/usr/bin/env python3
"""
CLI: render an emotion's particle effect offline to a GIF or MP4.
Usage:
  python scripts/render_effect.py happy --frames 120 -o output/happy.gif
  python scripts/render_effect.py sad --frames 90 -o output/sad.mp4 --seed 7
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging
import random

from moodpalette.config import load_config, resolve_surface_config
from moodpalette.export import record_effect
from moodpalette.palette import EMOTION_ORDER, get_profile, procedural_palette
from moodpalette.particles import ParticleEngine, Surface


def main() -> None:
    parser = argparse.ArgumentParser(description="Record an emotion's particle effect (procedural palette).")
    parser.add_argument("emotion", choices=EMOTION_ORDER)
    parser.add_argument("--output", "-o", type=Path, required=True, help="Output .gif or .mp4 path.")
    parser.add_argument("--frames", type=int, default=120, help="Number of frames (default: 120).")
    parser.add_argument("--fps", type=float, default=30, help="Output frame rate (default: 30).")
    parser.add_argument("--seed", type=int, default=None, help="Optional random seed for reproducibility.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    surface_cfg = resolve_surface_config(load_config(args.config))
    profile = get_profile(args.emotion)
    palette = procedural_palette(profile.seed_color)

    engine = ParticleEngine(
        Surface(surface_cfg["width"], surface_cfg["height"]),
        rng=random.Random(args.seed),
        animate=False,
    )
    engine.activate_effect(profile.effect_kind, palette)
    path = record_effect(engine, args.output, frames=args.frames, fps=args.fps, background=palette[0])
    print(f"Effect: {profile.effect_kind.value} ({len(engine.particles)} particles)")
    print(f"Done. Video: {path}")


if __name__ == "__main__":
    main()
