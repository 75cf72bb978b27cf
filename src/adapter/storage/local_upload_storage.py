"""Local-disk implementation of UploadStorage.

Files are written under ``upload_dir`` and served by the API at /uploads.
"""

import logging
import random
import time
from pathlib import Path

from domain.model.upload import Upload

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = '/uploads'


class LocalUploadStorage:
    def __init__(self, upload_dir: str | Path):
        self.upload_dir = Path(upload_dir)

    def _unique_name(self, upload: Upload) -> str:
        return f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}{upload.extension}"

    def save(self, upload: Upload) -> str:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = self._unique_name(upload)
        (self.upload_dir / filename).write_bytes(upload.data)
        logger.info("Upload stored", extra={"file": filename, "bytes": len(upload.data)})
        return f"{PUBLIC_PREFIX}/{filename}"
