"""
Record a particle effect to a video or GIF by stepping the engine frame by frame.
MP4 streams through the ffmpeg writer; GIF frames are buffered and written with Pillow.
"""
from pathlib import Path

import numpy as np

from ..color import hex_to_rgb
from ..particles import ParticleEngine


def record_effect(
    engine: ParticleEngine,
    output_path: Path,
    *,
    frames: int,
    fps: float = 30,
    background: str = "#000000",
) -> Path:
    """Tick the engine `frames` times and write each composited frame. The engine's own loop is stopped first."""
    try:
        import imageio
        import imageio.v3 as iio
    except ImportError:
        raise ImportError(
            "Recording needs 'imageio'. Install with: pip install imageio imageio-ffmpeg"
        ) from None

    engine.stop()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    bg = hex_to_rgb(background) or (0, 0, 0)

    if output_path.suffix.lower() == ".mp4":
        writer = imageio.get_writer(str(output_path), fps=fps, codec="libx264", quality=8)
        try:
            for _ in range(frames):
                engine.tick()
                writer.append_data(engine.surface.to_rgb_array(bg))
        finally:
            writer.close()
        return output_path

    captured = []
    for _ in range(frames):
        engine.tick()
        captured.append(engine.surface.to_rgb_array(bg))
    iio.imwrite(output_path, np.stack(captured), duration=int(1000 / fps), loop=0)
    return output_path
