import logging
import secrets
from collections import OrderedDict

from src.constants import MAX_SESSIONS, MSG_SESSION_EVICTED
from src.inference import EmotionAnalyzer
from src.session import EmotionSession

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return secrets.token_urlsafe(16)


class SessionStore:
    """In-memory map of session id → EmotionSession; least recently used dropped first."""

    def __init__(self, analyzer: EmotionAnalyzer, max_sessions: int = MAX_SESSIONS) -> None:
        self._analyzer = analyzer
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, EmotionSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> EmotionSession | None:
        match self._sessions.get(session_id):
            case None:
                return None
            case session:
                self._sessions.move_to_end(session_id)
                return session

    def get_or_create(self, session_id: str) -> EmotionSession:
        match self.get(session_id):
            case None:
                session = EmotionSession(self._analyzer)
                self._sessions[session_id] = session
                self._evict()
                return session
            case session:
                return session

    def _evict(self) -> None:
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info(MSG_SESSION_EVICTED, evicted)
