import logging
import os
import re
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from exceptions import UploadError
from utils import timestamp
from config import ALLOWED_IMAGE_TYPES, MAX_UPLOAD_BYTES, MSG_IMAGE_TOO_LARGE, UPLOAD_URL_PREFIX


logger = logging.getLogger(__name__)


def has_file(upload: Optional[UploadFile]) -> bool:
    """Browsers send an empty part with no filename when nothing was picked."""
    return upload is not None and bool(upload.filename)


class ImageStorage:
    """Writes uploaded images to disk and hands back their public path.

    Files are named after the upload time in milliseconds plus the original
    extension. Nothing removes a file if the post that references it is
    never written.
    """

    def __init__(self, upload_dir: str, url_prefix: str = UPLOAD_URL_PREFIX,
                 max_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes
        self.allowed = re.compile(ALLOWED_IMAGE_TYPES)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def is_allowed(self, filename: str, content_type: Optional[str]) -> bool:
        extension = os.path.splitext(filename)[1].lower()
        return bool(self.allowed.search(extension)) and bool(self.allowed.search(content_type or ""))

    async def save(self, upload: UploadFile) -> str:
        filename = upload.filename or ""
        if not self.is_allowed(filename, upload.content_type):
            logger.info("Rejected upload %r (%s)", filename, upload.content_type)
            raise UploadError()

        data = await upload.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            logger.info("Rejected upload %r: larger than %d bytes", filename, self.max_bytes)
            raise UploadError(MSG_IMAGE_TOO_LARGE)

        stored_name = f"{timestamp()}{os.path.splitext(filename)[1]}"
        await run_in_threadpool((self.upload_dir / stored_name).write_bytes, data)
        logger.info("Stored upload %s (%d bytes)", stored_name, len(data))
        return f"{self.url_prefix}/{stored_name}"
