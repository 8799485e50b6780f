"""EmotionSession — per-browser state machine: Idle → Ready → Analyzing → Settled."""
import enum
import logging
import time
from dataclasses import dataclass, replace
from typing import Optional

from src.constants import (
    MSG_ANALYSIS_DISCARDED,
    MSG_ANALYSIS_DONE,
    MSG_ANALYSIS_FAILED,
    MSG_ANALYSIS_IN_FLIGHT,
    MSG_NO_IMAGE_DATA,
    MSG_UPLOAD_ACCEPTED,
    MSG_UPLOAD_REJECTED,
)
from src.inference import EmotionAnalyzer, Failure, Success
from src.upload import EncodedImage, UploadCandidate, UploadError, encode_upload

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    READY = "ready"
    ANALYZING = "analyzing"
    SETTLED = "settled"


@dataclass(frozen=True)
class SelectedFile:
    name: str
    size_bytes: int
    mime_type: str


@dataclass
class InteractionState:
    selected_file: Optional[SelectedFile] = None
    preview_url: Optional[str] = None
    encoded_image: Optional[EncodedImage] = None
    detected_emotion: Optional[str] = None
    is_loading: bool = False
    error_message: Optional[str] = None


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view handed to the presentation layer."""
    phase: Phase
    selected_file: Optional[SelectedFile]
    preview_url: Optional[str]
    has_image: bool
    detected_emotion: Optional[str]
    is_loading: bool
    error_message: Optional[str]
    can_analyze: bool


class EmotionSession:
    """Owns one InteractionState and applies user actions to it.

    Each transition runs to completion on the event loop before the next one
    is processed; the only suspension points are the upload read and the
    vision call. While a request is in flight, further analysis requests and
    file selections are ignored.
    """

    def __init__(self, analyzer: EmotionAnalyzer) -> None:
        self._analyzer = analyzer
        self._state = InteractionState()

    # ── read-only views ───────────────────────────────────────────────────────

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def phase(self) -> Phase:
        s = self._state
        match (s.is_loading, s.encoded_image, s.detected_emotion, s.error_message):
            case (True, _, _, _):
                return Phase.ANALYZING
            case (False, None, _, _):
                return Phase.IDLE
            case (False, _, None, None):
                return Phase.READY
            case _:
                return Phase.SETTLED

    @property
    def can_analyze(self) -> bool:
        return self._state.encoded_image is not None and not self._state.is_loading

    def snapshot(self) -> StateSnapshot:
        s = self._state
        return StateSnapshot(
            phase=self.phase,
            selected_file=s.selected_file,
            preview_url=s.preview_url,
            has_image=s.encoded_image is not None,
            detected_emotion=s.detected_emotion,
            is_loading=s.is_loading,
            error_message=s.error_message,
            can_analyze=self.can_analyze,
        )

    # ── transitions ───────────────────────────────────────────────────────────

    async def select_file(self, candidate: UploadCandidate) -> bool:
        """Validate and encode a new upload. Returns True when it was accepted."""
        if self._state.is_loading:
            logger.warning(MSG_ANALYSIS_IN_FLIGHT)
            return False

        try:
            encoded = await encode_upload(candidate)
        except UploadError as exc:
            logger.info(MSG_UPLOAD_REJECTED, candidate.filename, exc)
            self._state = InteractionState(error_message=str(exc))
            return False

        logger.info(
            MSG_UPLOAD_ACCEPTED,
            candidate.filename,
            candidate.size_bytes,
            encoded.mime_type,
        )
        self._state = InteractionState(
            selected_file=SelectedFile(
                name=candidate.filename,
                size_bytes=candidate.size_bytes,
                mime_type=encoded.mime_type,
            ),
            preview_url=encoded.data_url,
            encoded_image=encoded,
        )
        return True

    async def request_analysis(self) -> bool:
        """Run one analysis for the selected image. Returns False when not started."""
        match (self._state.is_loading, self._state.encoded_image):
            case (True, _):
                logger.warning(MSG_ANALYSIS_IN_FLIGHT)
                return False
            case (False, None) | (False, EncodedImage(base64_payload="")):
                self._state = replace(self._state, error_message=MSG_NO_IMAGE_DATA)
                return False
            case (False, image):
                pass

        self._state = replace(
            self._state, is_loading=True, error_message=None, detected_emotion=None
        )
        started = time.monotonic()
        result = None
        try:
            result = await self._analyzer.analyze(image.base64_payload, image.mime_type)
        finally:
            elapsed = time.monotonic() - started
            # Cleared or replaced while in flight.
            stale = not self._state.is_loading or self._state.encoded_image is not image
            match (stale, result):
                case (True, _):
                    logger.info(MSG_ANALYSIS_DISCARDED, elapsed)
                case (False, Success(emotion=emotion)):
                    logger.info(MSG_ANALYSIS_DONE, elapsed, emotion)
                    self._state = replace(
                        self._state, is_loading=False, detected_emotion=emotion
                    )
                case (False, Failure(message=message)):
                    logger.info(MSG_ANALYSIS_FAILED, elapsed, message)
                    self._state = replace(
                        self._state, is_loading=False, error_message=message
                    )
                case _:
                    self._state = replace(self._state, is_loading=False)
        return True

    def clear(self) -> None:
        self._state = InteractionState()

    def dismiss_error(self) -> None:
        self._state = replace(self._state, error_message=None)
