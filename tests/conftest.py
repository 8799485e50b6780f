import pytest

from src.upload import UploadCandidate


def make_candidate(
    data: bytes = b"\xff\xd8\xff fake jpeg",
    mime_type: str = "image/jpeg",
    size_bytes: int | None = None,
    filename: str = "face.jpg",
) -> UploadCandidate:
    async def _read() -> bytes:
        return data

    return UploadCandidate(
        filename=filename,
        declared_mime_type=mime_type,
        size_bytes=len(data) if size_bytes is None else size_bytes,
        read=_read,
    )


@pytest.fixture
def candidate_factory():
    return make_candidate
