"""Acceptance rules for uploaded media files."""

from dataclasses import dataclass
from pathlib import Path

from domain.model.errors import ValidationError

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

ALLOWED_EXTENSIONS = {'.jpeg', '.jpg', '.png', '.gif', '.mp3', '.mp4', '.pdf'}

ALLOWED_CONTENT_TYPES = {
    'image/jpeg',
    'image/jpg',
    'image/png',
    'image/gif',
    'audio/mpeg',
    'audio/mp3',
    'video/mp4',
    'application/pdf',
}


@dataclass(frozen=True)
class Upload:
    """File received from a multipart form, already read into memory."""
    filename: str
    content_type: str
    data: bytes

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()


def validate_upload(upload: Upload, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Reject files outside the extension/MIME allow-list or over the size cap."""
    content_type = (upload.content_type or '').split(';')[0].strip().lower()
    if upload.extension not in ALLOWED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
        raise ValidationError("Only images, audio, video, and PDF files are allowed")
    if len(upload.data) > max_bytes:
        raise ValidationError(f"File exceeds the {max_bytes // (1024 * 1024)}MB limit")
