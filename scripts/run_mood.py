#!/usr/bin/env python3
"""
CLI: scan for a dominant emotion, lock it, print the palette and run its particle effect.
Usage:
  python scripts/run_mood.py --replay samples/happy.json
  python scripts/run_mood.py --camera 0            (needs: pip install -e .[camera])
  python scripts/run_mood.py --replay samples/sad.json --offline --seconds 3
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import asyncio
import logging

from moodpalette.config import get_output_dir, load_config, resolve_surface_config
from moodpalette.detection import (
    CameraFrameSource,
    DeepFaceDetector,
    DetectorUnavailableError,
    ReplayDetector,
)
from moodpalette.export import palette_to_css, save_palette_card
from moodpalette.orchestrator import MoodOrchestrator
from moodpalette.palette import PaletteService
from moodpalette.particles import ParticleEngine, Surface

logger = logging.getLogger(__name__)


async def _run(args: argparse.Namespace, config: dict) -> int:
    frame_source = None
    try:
        if args.replay:
            detector = ReplayDetector.from_json(args.replay)
        else:
            # Camera is opened last
            detector = DeepFaceDetector()
            frame_source = CameraFrameSource(args.camera)
    except DetectorUnavailableError as e:
        logger.error("Detector init failed: %s", e)
        print("CAMERA ACCESS DENIED OR ERROR")
        return 1

    surface_cfg = resolve_surface_config(config)
    engine = ParticleEngine(
        Surface(surface_cfg["width"], surface_cfg["height"]),
        fps=float(surface_cfg.get("fps", 60)),
    )
    service = PaletteService.from_config(config)
    if args.offline:
        service.enabled = False
    orchestrator = MoodOrchestrator.from_config(
        config, detector, engine,
        frame_source=frame_source,
        palette_service=service,
    )

    try:
        orchestrator.start_scanning()
        print(f"{orchestrator.context.status} {orchestrator.context.detail}")
        reading = await orchestrator.wait_locked(args.timeout)
        if reading is None:
            print("No confident emotion detected.")
            return 2
        print(f"{reading.display_name}: {reading.confidence_text}")
        print(f"Effect: {reading.effect.value}  |  Listen to: {reading.vibe} ({reading.music_url})")
        print(f"Text contrast: {orchestrator.context.theme.contrast_mode}")
        print(palette_to_css(reading.palette, reading.emotion))
        if args.card:
            path = save_palette_card(
                reading.palette, reading.emotion, get_output_dir(config),
                size=int(config.get("export", {}).get("image_size", 1080)),
            )
            print(f"Card: {path}")
        # Let the effect animate for a while before exiting
        await asyncio.sleep(args.seconds)
        print(f"Live particles: {len(engine.particles)}")
        return 0
    finally:
        orchestrator.shutdown()
        if frame_source is not None:
            frame_source.release()


def main() -> None:
    parser = argparse.ArgumentParser(description="Detect a mood and derive its palette and particle effect.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--replay", type=Path, help="JSON list of recorded expression maps.")
    source.add_argument("--camera", type=int, help="Webcam index (DeepFace + OpenCV).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--offline", action="store_true", help="Skip the remote palette service.")
    parser.add_argument("--timeout", type=float, default=30.0, help="Give up scanning after N seconds (default: 30).")
    parser.add_argument("--seconds", type=float, default=2.0, help="Animate the effect for N seconds (default: 2).")
    parser.add_argument("--card", action="store_true", help="Also write the palette card PNG.")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")
    config = load_config(args.config)
    sys.exit(asyncio.run(_run(args, config)))


if __name__ == "__main__":
    main()
