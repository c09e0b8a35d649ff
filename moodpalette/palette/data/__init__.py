# Static emotion data

from .emotions import EMOTION_ORDER, EMOTION_PROFILES

__all__ = ["EMOTION_ORDER", "EMOTION_PROFILES"]
