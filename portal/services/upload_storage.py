from contextlib import suppress
import datetime
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from fastapi import Depends, UploadFile
from starlette.concurrency import run_in_threadpool

from portal.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"

# form field name -> directory under the upload root
UPLOAD_AREAS = {
    "syllabus": "syllabus",
    "mentor_photo": "mentors",
}


@dataclass
class StoredFile:
    field_name: str
    path: Path
    public_path: str


class UploadStorage:
    """Writes attachment uploads under fixed per-field directories."""

    def __init__(self, root):
        self.root = Path(root)

    def ensure_directories(self) -> None:
        for area in UPLOAD_AREAS.values():
            (self.root / area).mkdir(parents=True, exist_ok=True)

    def destination_for(self, field_name: str) -> Path:
        try:
            return self.root / UPLOAD_AREAS[field_name]
        except KeyError:
            raise ValueError(f"No upload area for field '{field_name}'")

    @staticmethod
    def stored_filename(original_name: str, now: Optional[datetime.datetime] = None) -> str:
        """
        Build a collision-resistant name: creation time in epoch milliseconds,
        then the original basename with whitespace runs replaced by underscores.
        """
        now = now or datetime.datetime.now(datetime.timezone.utc)
        millis = int(now.timestamp() * 1000)
        safe_name = re.sub(r"\s+", "_", Path(original_name).name)
        return f"{millis}_{safe_name}"

    async def save(self, field_name: str, file: Optional[UploadFile]) -> Optional[StoredFile]:
        """Persist one uploaded file verbatim. Returns None when nothing was sent."""
        if file is None or not file.filename:
            return None

        destination = self.destination_for(field_name)
        destination.mkdir(parents=True, exist_ok=True)
        filename = self.stored_filename(file.filename)

        file_bytes = await file.read()
        path = destination / filename
        try:
            await run_in_threadpool(path.write_bytes, file_bytes)
        except OSError:
            with suppress(OSError):
                path.unlink(missing_ok=True)
            raise

        public_path = f"{PUBLIC_PREFIX}/{UPLOAD_AREAS[field_name]}/{filename}"
        logger.info("Stored %s upload as %s (%d bytes)", field_name, public_path, len(file_bytes))
        return StoredFile(field_name=field_name, path=path, public_path=public_path)

    def remove(self, stored_files: Iterable[StoredFile]) -> None:
        """Delete files written for a request whose insert did not happen."""
        for stored in stored_files:
            try:
                stored.path.unlink(missing_ok=True)
                logger.info("Removed orphaned upload %s", stored.public_path)
            except OSError as e:
                logger.warning("Could not remove orphaned upload %s: %s", stored.path, e)


def get_upload_storage(settings: Settings = Depends(get_settings)) -> UploadStorage:
    return UploadStorage(settings.upload_root)
