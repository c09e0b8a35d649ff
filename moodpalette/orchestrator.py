"""
Mood orchestrator: scan → lock state machine.
Polls the detector while scanning; the first dominant emotion above the confidence
threshold locks the mood, derives and applies its palette and starts its particle effect.
All mutable app state lives in one MoodContext owned by the orchestrator.
"""
import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable
from urllib.parse import quote

from .detection import Detector, dominant_emotion
from .palette import PLACEHOLDER_PALETTE, EffectKind, Palette, PaletteService, generate_palette, get_profile
from .particles import ParticleEngine
from .scheduling import RepeatingTask
from .theme import ThemeState, apply_palette

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.5
CONFIDENCE_THRESHOLD = 0.65
MUSIC_SEARCH_URL = "https://open.spotify.com/search/"


class ScanState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    LOCKED = "locked"


@dataclass
class MoodReading:
    """Outcome of a locked mood."""
    emotion: str
    confidence: float
    palette: Palette
    effect: EffectKind
    vibe: str = ""

    @property
    def display_name(self) -> str:
        return self.emotion[:1].upper() + self.emotion[1:]

    @property
    def confidence_text(self) -> str:
        return f"{round(self.confidence * 100)}% Confidence"

    @property
    def music_url(self) -> str:
        return MUSIC_SEARCH_URL + quote(self.vibe, safe="")


@dataclass
class MoodContext:
    scan_state: ScanState = ScanState.IDLE
    emotion: str = "neutral"
    confidence: float = 0.0
    palette: Palette = PLACEHOLDER_PALETTE
    theme: ThemeState = field(default_factory=ThemeState)
    status: str = ""
    detail: str = ""
    reading: MoodReading | None = None


class MoodOrchestrator:
    def __init__(
        self,
        detector: Detector,
        engine: ParticleEngine,
        *,
        frame_source: Callable[[], Any] | None = None,
        palette_service: PaletteService | None = None,
        context: MoodContext | None = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        confidence_threshold: float = CONFIDENCE_THRESHOLD,
        on_reading: Callable[[MoodReading], None] | None = None,
    ):
        self.detector = detector
        self.engine = engine
        self.frame_source = frame_source or (lambda: None)
        self.palette_service = palette_service
        self.context = context or MoodContext()
        self.confidence_threshold = confidence_threshold
        self.on_reading = on_reading
        self._poller = RepeatingTask(self.poll_once, poll_interval, name="detector-poll")
        self._locked = asyncio.Event()
        # Bumped on every scan, lock and shutdown; a palette fetch only applies if it is unchanged
        self._session = 0

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        detector: Detector,
        engine: ParticleEngine,
        **kwargs: Any,
    ) -> "MoodOrchestrator":
        scan = config.get("scan", {})
        kwargs.setdefault("palette_service", PaletteService.from_config(config))
        return cls(
            detector,
            engine,
            poll_interval=float(scan.get("poll_interval_seconds", POLL_INTERVAL_SECONDS)),
            confidence_threshold=float(scan.get("confidence_threshold", CONFIDENCE_THRESHOLD)),
            **kwargs,
        )

    @property
    def state(self) -> ScanState:
        return self.context.scan_state

    @property
    def polling(self) -> bool:
        return self._poller.running

    def start_scanning(self) -> None:
        """Enter SCANNING from any state. A stale poll task is cancelled before the new one starts."""
        self._poller.cancel()
        self._session += 1
        self.context.scan_state = ScanState.SCANNING
        self.context.status = "Reading Face..."
        self.context.detail = "Hold still"
        self._locked.clear()
        self._poller.start()
        logger.debug("Scanning started")

    recalibrate = start_scanning

    async def poll_once(self) -> None:
        """One detector poll. Locks the mood when the dominant score clears the threshold."""
        if self.context.scan_state is not ScanState.SCANNING:
            return
        # Frame grabs and sync inference block, so both run off the loop
        frame = await asyncio.to_thread(self.frame_source)
        if inspect.iscoroutinefunction(self.detector.detect):
            detections = await self.detector.detect(frame)
        else:
            detections = await asyncio.to_thread(self.detector.detect, frame)
            if inspect.isawaitable(detections):
                detections = await detections
        # Recalibration or another finalize may have happened while the detector ran
        if self.context.scan_state is not ScanState.SCANNING or not detections:
            return
        picked = dominant_emotion(detections[0].get("expressions") or {})
        if picked is None:
            return
        emotion, score = picked
        if score > self.confidence_threshold:
            self._poller.cancel()
            await self.finalize_mood(emotion, score)

    async def finalize_mood(self, emotion: str, confidence: float) -> MoodReading:
        """Lock the mood: palette → theme → particle effect."""
        profile = get_profile(emotion)
        self._poller.cancel()
        ctx = self.context
        ctx.scan_state = ScanState.LOCKED
        self._session += 1
        session = self._session
        ctx.emotion = emotion
        ctx.confidence = confidence
        logger.info("Mood locked: %s (%.2f)", emotion, confidence)

        # Blocking HTTP runs off the loop so the animation keeps its frame rate
        palette = await asyncio.to_thread(generate_palette, emotion, service=self.palette_service)
        reading = MoodReading(emotion, confidence, palette, profile.effect_kind, profile.vibe)
        if session != self._session or ctx.scan_state is not ScanState.LOCKED:
            logger.debug("Superseded while fetching palette; dropping %s", emotion)
            return reading
        ctx.palette = palette
        apply_palette(palette, ctx.theme)
        self.engine.activate_effect(profile.effect_kind, palette)

        ctx.reading = reading
        ctx.status = reading.display_name
        ctx.detail = reading.confidence_text
        self._locked.set()
        if self.on_reading is not None:
            self.on_reading(reading)
        return reading

    async def wait_locked(self, timeout: float | None = None) -> MoodReading | None:
        """Wait until a mood is locked. Returns None on timeout."""
        try:
            await asyncio.wait_for(self._locked.wait(), timeout)
        except asyncio.TimeoutError:
            return None
        return self.context.reading

    def shutdown(self) -> None:
        """Cancel polling and animation and return to IDLE."""
        self._poller.cancel()
        self._session += 1
        self.engine.stop()
        self.context.scan_state = ScanState.IDLE
