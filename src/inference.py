"""EmotionAnalyzer: one vision call per request, failures folded into values."""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.constants import (
    API_KEY_ERROR_MARKERS,
    EMOTION_ANALYSIS_PROMPT,
    MSG_CLIENT_NOT_INITIALIZED,
    MSG_EMPTY_RESPONSE,
    MSG_ERR_API,
    MSG_ERR_API_KEY,
    MSG_ERR_RATE_LIMIT,
    MSG_ERR_TIMEOUT,
    MSG_ERR_UNKNOWN,
    MSG_INFERENCE_ERROR,
    RATE_LIMIT_ERROR_MARKERS,
    TIMEOUT_ERROR_MARKERS,
)
from src.vision.client import VisionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    emotion: str


@dataclass(frozen=True)
class Failure:
    message: str


InferenceResult = Union[Success, Failure]


def _mentions(text: str, markers: tuple[str, ...]) -> bool:
    return any(m in text for m in markers)


def classify_error(exc: BaseException) -> str:
    """Map an SDK/transport error to a user-facing message by substring match."""
    raw = str(exc)
    lowered = raw.lower()
    match raw:
        case "":
            return MSG_ERR_UNKNOWN
        case _ if _mentions(lowered, API_KEY_ERROR_MARKERS):
            return MSG_ERR_API_KEY
        case _ if _mentions(lowered, RATE_LIMIT_ERROR_MARKERS):
            return MSG_ERR_RATE_LIMIT
        case _ if _mentions(lowered, TIMEOUT_ERROR_MARKERS):
            return MSG_ERR_TIMEOUT
        case _:
            return MSG_ERR_API % raw


class EmotionAnalyzer:
    """Asks the configured vision backend for the primary emotion in an image.

    Exactly one attempt per call: no retry, no timeout override beyond the SDK
    default. Without a backend every call fails fast with a configuration error.
    """

    def __init__(self, vision_client: Optional[VisionClient]) -> None:
        self._vision_client = vision_client

    @property
    def enabled(self) -> bool:
        return self._vision_client is not None

    async def analyze(self, image_base64: str, mime_type: str) -> InferenceResult:
        match self._vision_client:
            case None:
                return Failure(MSG_CLIENT_NOT_INITIALIZED)
            case client:
                pass

        try:
            text = await client.generate(image_base64, mime_type, EMOTION_ANALYSIS_PROMPT)
        except Exception as exc:
            logger.exception(MSG_INFERENCE_ERROR)
            return Failure(classify_error(exc))

        match (text or "").strip():
            case "":
                return Success(MSG_EMPTY_RESPONSE)
            case emotion:
                return Success(emotion)
