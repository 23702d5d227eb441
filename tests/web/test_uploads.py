from __future__ import annotations

import io

import pytest
from werkzeug.datastructures import FileStorage

from business_manager.core.exceptions import ValidationError
from business_manager.web.uploads import REJECTED_TYPE, discard_upload, save_upload, validate_upload


def _file(name: str, content_type: str, size: int = 16) -> FileStorage:
    return FileStorage(stream=io.BytesIO(b"x" * size), filename=name, content_type=content_type)


@pytest.mark.parametrize(
    "name, content_type",
    [("receipt.jpg", "image/jpeg"), ("receipt.JPEG", "image/jpeg"), ("r.png", "image/png"), ("r.pdf", "application/pdf")],
)
def test_accepts_images_and_pdf(name, content_type):
    validate_upload(_file(name, content_type))


@pytest.mark.parametrize(
    "name, content_type",
    [
        ("script.exe", "application/octet-stream"),
        ("receipt.gif", "image/gif"),
        ("receipt.pdf", "image/png"),
        ("receipt", "application/pdf"),
    ],
)
def test_rejects_other_types(name, content_type):
    with pytest.raises(ValidationError) as exc:
        validate_upload(_file(name, content_type))
    assert str(exc.value) == REJECTED_TYPE


def test_rejects_oversized_files():
    with pytest.raises(ValidationError):
        validate_upload(_file("big.pdf", "application/pdf", size=101), max_bytes=100)


def test_save_uses_random_name_and_discard_removes(tmp_path):
    stored = save_upload(_file("../../etc/passwd.png", "image/png"), tmp_path)

    assert stored.path.parent == tmp_path
    assert stored.path.exists()
    assert stored.filename.endswith(".png")
    assert "passwd" not in stored.filename
    assert stored.url == f"/uploads/{stored.filename}"

    discard_upload(stored)
    assert not stored.path.exists()
