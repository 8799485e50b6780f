from unittest.mock import MagicMock

from src.session import EmotionSession
from src.session_store import SessionStore, new_session_id


def _store(max_sessions: int = 3) -> SessionStore:
    return SessionStore(MagicMock(), max_sessions=max_sessions)


def test_get_unknown_returns_none():
    assert _store().get("nope") is None


def test_get_or_create_reuses_session():
    store = _store()

    first = store.get_or_create("abc")
    second = store.get_or_create("abc")

    assert isinstance(first, EmotionSession)
    assert first is second
    assert len(store) == 1


def test_sessions_are_independent():
    store = _store()
    assert store.get_or_create("a") is not store.get_or_create("b")


def test_least_recently_used_session_is_evicted():
    store = _store(max_sessions=2)
    store.get_or_create("a")
    store.get_or_create("b")
    store.get("a")

    store.get_or_create("c")

    assert store.get("b") is None
    assert store.get("a") is not None
    assert store.get("c") is not None
    assert len(store) == 2


def test_new_session_ids_are_unique():
    ids = {new_session_id() for _ in range(50)}
    assert len(ids) == 50
