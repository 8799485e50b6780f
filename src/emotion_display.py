"""Best-effort keyword heuristics over the free-text emotion label.

The label comes back from the model as free text, so none of this is
authoritative parsing: it picks an icon and decides whether to suggest a
better photo.
"""
from src.constants import (
    CLEARER_IMAGE_MARKERS,
    DEFAULT_EMOTION_EMOJI,
    EMOTION_EMOJI_GROUPS,
)


def emotion_emoji(label: str) -> str:
    lowered = label.lower()
    return next(
        (
            emoji
            for keywords, emoji in EMOTION_EMOJI_GROUPS
            if any(k in lowered for k in keywords)
        ),
        DEFAULT_EMOTION_EMOJI,
    )


def needs_clearer_image_hint(label: str) -> bool:
    """True when the label says no face/emotion could be made out."""
    lowered = label.lower()
    return any(marker in lowered for marker in CLEARER_IMAGE_MARKERS)
