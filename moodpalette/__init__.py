# MoodPalette: emotion → palette, theme and particle effect

from .orchestrator import MoodContext, MoodOrchestrator, MoodReading, ScanState

__all__ = ["MoodContext", "MoodOrchestrator", "MoodReading", "ScanState"]
