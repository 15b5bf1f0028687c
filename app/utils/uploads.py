import logging
import os
import shutil
import time
from typing import Optional

from fastapi import UploadFile

from config import UPLOAD_DIR, UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


def ensure_upload_dir() -> str:
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    return UPLOAD_DIR


def has_file(upload: Optional[UploadFile]) -> bool:
    """Multipart forms send an empty part when no file was picked"""
    return upload is not None and bool(upload.filename)


def save_upload(upload: UploadFile) -> str:
    """
    Store an uploaded file as <epoch-millis><ext> and return its public path
    """
    ensure_upload_dir()
    extension = os.path.splitext(upload.filename or "")[1]
    filename = f"{int(time.time() * 1000)}{extension}"

    with open(os.path.join(UPLOAD_DIR, filename), "wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info(f"Stored upload {upload.filename} as {filename}")
    return f"{UPLOAD_URL_PREFIX}/{filename}"
