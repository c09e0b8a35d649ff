"""
Our data: one profile per detectable emotion (seed RGB 0-255, effect label, music vibe).
"""
from ..schema import EmotionProfile

# Fixed enumeration order; also the tie-break order for equal detector scores
EMOTION_ORDER: tuple[str, ...] = (
    "neutral",
    "happy",
    "sad",
    "angry",
    "fearful",
    "disgusted",
    "surprised",
)

EMOTION_PROFILES: dict[str, EmotionProfile] = {
    "happy": EmotionProfile("happy", (255, 200, 0), "confetti", "uplifting summer pop"),        # yellow/gold
    "sad": EmotionProfile("sad", (50, 80, 120), "rain", "melancholy lofi rainy"),                # muted blue
    "angry": EmotionProfile("angry", (200, 20, 20), "pulse", "aggressive phonk metal"),          # red
    "surprised": EmotionProfile("surprised", (255, 0, 255), "confetti", "hyperpop energetic"),   # magenta
    "fearful": EmotionProfile("fearful", (30, 0, 60), "fog", "dark ambient suspense"),           # dark purple
    "disgusted": EmotionProfile("disgusted", (80, 100, 50), "none", "experimental grunge"),      # sickly green
    "neutral": EmotionProfile("neutral", (200, 190, 180), "none", "chill acoustic coffee"),      # beige
}
