"""FastAPI surface — renders the page and dispatches user actions to the session."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from src.constants import (
    ACCEPTED_IMAGE_TYPES,
    APP_TITLE,
    MAX_FILE_SIZE_MB,
    MAX_SESSIONS,
    MSG_CLEARER_IMAGE_HINT,
    SESSION_COOKIE_NAME,
)
from src.emotion_display import emotion_emoji, needs_clearer_image_hint
from src.inference import EmotionAnalyzer
from src.session import EmotionSession, StateSnapshot
from src.session_store import SessionStore, new_session_id
from src.upload import UploadCandidate

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


# ── pure helpers ──────────────────────────────────────────────────────────────


def snapshot_to_dict(snapshot: StateSnapshot, analysis_enabled: bool) -> dict:
    """JSON view of a snapshot. Never includes the encoded image payload."""
    emotion = snapshot.detected_emotion
    file = snapshot.selected_file
    return {
        "phase": snapshot.phase.value,
        "file": (
            {"name": file.name, "size_bytes": file.size_bytes, "mime_type": file.mime_type}
            if file
            else None
        ),
        "has_preview": snapshot.preview_url is not None,
        "detected_emotion": emotion,
        "emoji": emotion_emoji(emotion) if emotion else None,
        "show_hint": needs_clearer_image_hint(emotion) if emotion else False,
        "is_loading": snapshot.is_loading,
        "error_message": snapshot.error_message,
        "can_analyze": snapshot.can_analyze,
        "analysis_enabled": analysis_enabled,
    }


# ── app factory ───────────────────────────────────────────────────────────────


def create_app(analyzer: EmotionAnalyzer, max_sessions: int = MAX_SESSIONS) -> FastAPI:
    app = FastAPI(title=APP_TITLE)
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    store = SessionStore(analyzer, max_sessions=max_sessions)
    app.state.sessions = store

    def _session(request: Request) -> tuple[str, EmotionSession]:
        session_id = request.cookies.get(SESSION_COOKIE_NAME) or new_session_id()
        return session_id, store.get_or_create(session_id)

    def _with_cookie(response: Response, session_id: str) -> Response:
        response.set_cookie(SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
        return response

    def _back_to_page(session_id: str) -> Response:
        return _with_cookie(RedirectResponse("/", status_code=303), session_id)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> Response:
        session_id, session = _session(request)
        snapshot = session.snapshot()
        emotion = snapshot.detected_emotion
        response = templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": APP_TITLE,
                "state": snapshot,
                "emoji": emotion_emoji(emotion) if emotion else None,
                "hint": (
                    MSG_CLEARER_IMAGE_HINT
                    if emotion and needs_clearer_image_hint(emotion)
                    else None
                ),
                "accepted_types": ",".join(ACCEPTED_IMAGE_TYPES),
                "max_size_mb": MAX_FILE_SIZE_MB,
                "analysis_enabled": analyzer.enabled,
            },
        )
        return _with_cookie(response, session_id)

    @app.post("/upload")
    async def upload(request: Request, file: Optional[UploadFile] = File(None)) -> Response:
        session_id, session = _session(request)
        match file:
            case None:
                pass
            case upload_file:
                try:
                    await session.select_file(UploadCandidate.from_upload_file(upload_file))
                finally:
                    await upload_file.close()
        return _back_to_page(session_id)

    @app.post("/analyze")
    async def analyze(request: Request) -> Response:
        session_id, session = _session(request)
        await session.request_analysis()
        return _back_to_page(session_id)

    @app.post("/clear")
    async def clear(request: Request) -> Response:
        session_id, session = _session(request)
        session.clear()
        return _back_to_page(session_id)

    @app.post("/dismiss-error")
    async def dismiss_error(request: Request) -> Response:
        session_id, session = _session(request)
        session.dismiss_error()
        return _back_to_page(session_id)

    @app.get("/api/state")
    async def state(request: Request) -> Response:
        session_id, session = _session(request)
        body = snapshot_to_dict(session.snapshot(), analyzer.enabled)
        return _with_cookie(JSONResponse(body), session_id)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "analysis_enabled": analyzer.enabled}

    return app
