"""Upload validation and base64 encoding. No network I/O, single read."""
import base64
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from fastapi import UploadFile

from src.constants import (
    ACCEPTED_IMAGE_TYPES,
    MAX_FILE_SIZE_BYTES,
    MSG_FILE_TOO_LARGE,
    MSG_INVALID_FILE_TYPE,
    MSG_READ_FAILED,
    MSG_UPLOAD_EMPTY,
    MSG_UPLOAD_READ_ERROR,
)

logger = logging.getLogger(__name__)


class UploadError(ValueError):
    """Raised when an upload is rejected; the message is shown to the user as-is."""


@dataclass(frozen=True)
class UploadCandidate:
    filename: str
    declared_mime_type: str
    size_bytes: int
    read: Callable[[], Awaitable[bytes]]

    @classmethod
    def from_upload_file(cls, upload: UploadFile) -> "UploadCandidate":
        return cls(
            filename=upload.filename or "",
            declared_mime_type=upload.content_type or "",
            size_bytes=upload.size or 0,
            read=upload.read,
        )


@dataclass(frozen=True)
class EncodedImage:
    base64_payload: str
    mime_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_payload}"


def validate_upload(size_bytes: int, mime_type: str) -> None:
    """Raise UploadError when the file is over the size ceiling or not an accepted type."""
    match (size_bytes > MAX_FILE_SIZE_BYTES, mime_type in ACCEPTED_IMAGE_TYPES):
        case (True, _):
            raise UploadError(MSG_FILE_TOO_LARGE)
        case (_, False):
            raise UploadError(MSG_INVALID_FILE_TYPE)
        case _:
            pass


async def encode_upload(candidate: UploadCandidate) -> EncodedImage:
    """Validate, read once and base64-encode. Raises UploadError on any failure."""
    validate_upload(candidate.size_bytes, candidate.declared_mime_type)
    try:
        raw = await candidate.read()
    except OSError as exc:
        logger.warning(MSG_UPLOAD_READ_ERROR, candidate.filename, exc)
        raise UploadError(MSG_READ_FAILED) from exc

    match len(raw):
        case 0:
            logger.warning(MSG_UPLOAD_EMPTY, candidate.filename)
            raise UploadError(MSG_READ_FAILED)
        case size:
            # The host may not report a size up front.
            validate_upload(size, candidate.declared_mime_type)
    return EncodedImage(
        base64_payload=base64.standard_b64encode(raw).decode(),
        mime_type=candidate.declared_mime_type,
    )
