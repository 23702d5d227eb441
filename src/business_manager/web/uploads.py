"""Receipt upload policy and storage."""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import MAX_UPLOAD_BYTES
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_UPLOADS = {
    "image/jpeg": {".jpg", ".jpeg"},
    "image/png": {".png"},
    "application/pdf": {".pdf"},
}

REJECTED_TYPE = "يُسمح فقط بملفات الصور و PDF"
TOO_LARGE = "حجم الملف أكبر من الحد المسموح (10 ميغابايت)"


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    path: Path

    @property
    def url(self) -> str:
        return f"/uploads/{self.filename}"


def _size_of(file: FileStorage) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def validate_upload(file: FileStorage, *, max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """Check MIME type, extension and size. Returns the normalized extension."""
    mimetype = (file.mimetype or "").lower()
    extension = os.path.splitext(secure_filename(file.filename or ""))[1].lower()

    allowed_extensions = ALLOWED_UPLOADS.get(mimetype)
    if not allowed_extensions or extension not in allowed_extensions:
        raise ValidationError(REJECTED_TYPE)

    if _size_of(file) > max_bytes:
        raise ValidationError(TOO_LARGE)
    return extension


def save_upload(file: FileStorage, folder: str | Path, *, max_bytes: int = MAX_UPLOAD_BYTES) -> StoredUpload:
    extension = validate_upload(file, max_bytes=max_bytes)
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)

    filename = f"{uuid.uuid4().hex}{extension}"
    path = folder / filename
    file.save(path)
    logger.info("stored upload %s (%s)", filename, file.mimetype)
    return StoredUpload(filename=filename, path=path)


def discard_upload(stored: StoredUpload) -> None:
    try:
        stored.path.unlink()
    except FileNotFoundError:
        pass
    logger.info("discarded upload %s", stored.filename)
