"""
Detector boundary. The emotion detector is a black box: detect(frame) returns a list of
detections, each a mapping with an "expressions" label → score (0-1) map.
Includes label normalisation, dominant-emotion selection, a replay detector for the CLI
and tests, and an optional DeepFace + OpenCV camera adapter.
"""
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Iterable, Mapping, Protocol

from .palette.data.emotions import EMOTION_ORDER

logger = logging.getLogger(__name__)

Detection = Mapping[str, Any]


class DetectorUnavailableError(RuntimeError):
    """Detector backend or camera could not be initialised. Fatal at startup."""


class Detector(Protocol):
    def detect(self, frame: Any) -> "list[Detection] | Awaitable[list[Detection]]":
        ...


_ALIASES = {
    "happiness": "happy",
    "joy": "happy",
    "sadness": "sad",
    "anger": "angry",
    "fear": "fearful",
    "scared": "fearful",
    "disgust": "disgusted",
    "surprise": "surprised",
    "neutrality": "neutral",
}


def normalise_emotion_label(label: str) -> str | None:
    """Map detector vocabularies onto profile names. Unknown labels return None."""
    label = (label or "").strip().lower()
    if label in EMOTION_ORDER:
        return label
    return _ALIASES.get(label)


def dominant_emotion(scores: Mapping[str, float]) -> tuple[str, float] | None:
    """
    Highest-scoring known emotion. Ties go to the earlier name in EMOTION_ORDER.
    Aliases of the same emotion keep their highest score.
    """
    best: dict[str, float] = {}
    for label, score in scores.items():
        name = normalise_emotion_label(label)
        if name is None:
            continue
        best[name] = max(float(score), best.get(name, float("-inf")))
    if not best:
        return None
    name = max(best, key=lambda n: (best[n], -EMOTION_ORDER.index(n)))
    return name, best[name]


class ReplayDetector:
    """Replays recorded expression maps, one per detect() call. Exhausted → no detections."""

    def __init__(self, frames: Iterable[Mapping[str, float] | None]):
        self._frames = list(frames)
        self._index = 0

    @classmethod
    def from_json(cls, path: Path) -> "ReplayDetector":
        """JSON list of expression maps; null entries mean 'no face in frame'."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Replay file must hold a JSON list, got {type(data).__name__}")
        return cls(data)

    def detect(self, frame: Any = None) -> list[Detection]:
        del frame
        if self._index >= len(self._frames):
            return []
        scores = self._frames[self._index]
        self._index += 1
        if not scores:
            return []
        return [{"expressions": dict(scores)}]


class CameraFrameSource:
    """OpenCV webcam capture. Raises DetectorUnavailableError when the camera cannot be opened."""

    def __init__(self, camera_index: int = 0):
        try:
            import cv2
        except ImportError:
            raise DetectorUnavailableError(
                "Camera capture needs 'opencv-python'. Install with: pip install moodpalette[camera]"
            ) from None
        self._cv2 = cv2
        self._cap = cv2.VideoCapture(camera_index)
        if not self._cap.isOpened():
            raise DetectorUnavailableError(f"Cannot open camera {camera_index}")

    def __call__(self) -> Any:
        ok, frame = self._cap.read()
        if not ok:
            return None
        return self._cv2.flip(frame, 1)

    def release(self) -> None:
        self._cap.release()


class DeepFaceDetector:
    """DeepFace emotion analysis on a BGR frame. Scores are normalised from percent to 0-1."""

    def __init__(self):
        try:
            from deepface import DeepFace
        except ImportError:
            raise DetectorUnavailableError(
                "Emotion detection needs 'deepface'. Install with: pip install moodpalette[camera]"
            ) from None
        self._deepface = DeepFace

    def detect(self, frame: Any) -> list[Detection]:
        if frame is None or getattr(frame, "size", 0) == 0:
            return []
        results = self._deepface.analyze(frame, actions=["emotion"], enforce_detection=False)
        if isinstance(results, dict):
            results = [results]
        detections = []
        for res in results or []:
            emos = res.get("emotion") or {}
            # enforce_detection=False reports a whole-frame "face" with confidence 0 when none is found
            if not emos or res.get("face_confidence", 1.0) == 0:
                continue
            scale = 100.0 if any(float(v) > 1.0 for v in emos.values()) else 1.0
            detections.append({
                "expressions": {k: max(0.0, min(1.0, float(v) / scale)) for k, v in emos.items()},
            })
        return detections
