"""
Load and expose app config (YAML). Used by the orchestrator, palette service and scripts
to get surface size, scan timing, palette service endpoint and export dir.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


_QUALITY_PRESETS: dict[str, tuple[int, int, int]] = {
    "draft": (640, 360, 30),
    "standard": (1280, 720, 60),
    "high": (1920, 1080, 60),
}


def _defaults() -> dict[str, Any]:
    return {
        "surface": {
            "width": 1280,
            "height": 720,
            "fps": 60,
            "quality": None,
        },
        "scan": {
            "poll_interval_seconds": 0.5,
            "confidence_threshold": 0.65,
        },
        "palette_service": {
            "enabled": True,
            "api_base": "http://colormind.io",
            "path": "/api/",
            "model": "default",
            "timeout_seconds": 10,
        },
        "export": {"dir": "output", "image_size": 1080},
    }


def resolve_surface_config(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve surface config: quality preset overrides width/height/fps if set."""
    out = dict(config.get("surface", {}))
    quality = out.get("quality")
    if quality and quality in _QUALITY_PRESETS:
        w, h, fps = _QUALITY_PRESETS[quality]
        out["width"] = w
        out["height"] = h
        out["fps"] = fps
    return out


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve export directory (relative to project root if needed)."""
    out = config.get("export", {})
    d = out.get("dir", "output")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
