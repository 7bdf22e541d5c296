"""Storage of product images sent as multipart uploads."""

from __future__ import annotations

import logging
import secrets
import shutil
import time
from pathlib import Path

from starlette.datastructures import UploadFile

from catalog_service.config import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


def ensure_upload_dir(upload_dir: Path) -> Path:
    if not upload_dir.exists():
        upload_dir.mkdir(parents=True)
        logger.info("Diretório de uploads criado em %s", upload_dir)
    return upload_dir


def generate_filename(original: str) -> str:
    """Millisecond timestamp plus a random token, keeping the original extension."""
    extension = Path(original).suffix
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}{extension}"


def save_upload(upload, upload_dir: Path) -> str | None:
    """Write ``upload`` into ``upload_dir`` and return its public URL path.

    Returns None when the form part is absent, is a plain text field, or
    carries no filename. No type or size checks are made.
    """
    if not isinstance(upload, UploadFile) or not upload.filename:
        return None

    filename = generate_filename(upload.filename)
    destination = upload_dir / filename
    upload.file.seek(0)
    with destination.open("wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("Imagem %s salva como %s", upload.filename, destination)
    return f"{UPLOAD_URL_PREFIX}/{filename}"
