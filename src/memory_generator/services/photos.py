"""Photo asset validation and storage."""

import logging
import random
import re
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Protocol

from memory_generator.domain.profiles import PhotoUpload
from memory_generator.errors import ValidationError

ALLOWED_EXTENSIONS = frozenset({".jpeg", ".jpg", ".png", ".webp"})
_ALLOWED_CONTENT_TYPE = re.compile(r"jpeg|jpg|png|webp")

_logger = logging.getLogger(__name__)


class PhotoStorage(Protocol):
    """Interface for persisting uploaded photo files."""

    def save(self, filename: str, content: bytes) -> str:
        """Write a file and return its relative access path."""

    def delete(self, path: str) -> bool:
        """Remove the file behind an access path, returning False if missing."""


@dataclass
class PhotoService:
    """Validates uploads and manages the files backing profile photos."""

    storage: PhotoStorage
    max_photo_bytes: int = 5 * 1024 * 1024
    max_photos_per_request: int = 10

    def check_count(self, count: int) -> None:
        """Reject a request carrying more files than allowed."""
        if count > self.max_photos_per_request:
            raise ValidationError(
                f"Too many files. Maximum is {self.max_photos_per_request} photos"
            )

    def check_size(self, size: int) -> None:
        """Reject a single file larger than the per-file limit."""
        if size > self.max_photo_bytes:
            max_mb = self.max_photo_bytes // (1024 * 1024)
            raise ValidationError(f"File too large. Maximum size is {max_mb} MB")

    def check_type(self, filename: str, content_type: str | None) -> None:
        """Reject a file whose extension or declared type is not an image."""
        if not is_allowed_image(filename, content_type):
            raise ValidationError("Only image files (jpeg, jpg, png, webp) are allowed")

    def validate(self, uploads: list[PhotoUpload]) -> None:
        """Reject the whole batch if any upload breaks the limits."""
        self.check_count(len(uploads))
        for upload in uploads:
            self.check_type(upload.filename, upload.content_type)
            self.check_size(len(upload.content))

    def save_all(self, uploads: list[PhotoUpload]) -> list[str]:
        """Validate and store every upload, returning their access paths."""
        self.validate(uploads)
        saved: list[str] = []
        try:
            for upload in uploads:
                saved.append(
                    self.storage.save(_unique_filename(upload.filename), upload.content)
                )
        except Exception:
            self.delete_all(saved)
            raise
        return saved

    def delete_all(self, paths: Iterable[str]) -> None:
        """Delete stored photos; files that are already gone are skipped."""
        for path in paths:
            if not self.storage.delete(path):
                _logger.debug("Photo already missing: %s", path)


def is_allowed_image(filename: str, content_type: str | None) -> bool:
    """Return True when both extension and declared type are images."""
    extension = PurePosixPath(filename or "").suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        return False
    return bool(content_type and _ALLOWED_CONTENT_TYPE.search(content_type))


def _unique_filename(original: str) -> str:
    """Build a timestamp-plus-random name that keeps the original extension."""
    suffix = PurePosixPath(original).suffix
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"  # noqa: S311
