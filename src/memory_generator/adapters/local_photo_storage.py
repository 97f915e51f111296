"""Filesystem-backed photo storage."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from memory_generator.services.photos import PhotoStorage

_logger = logging.getLogger(__name__)


@dataclass
class LocalPhotoStorage(PhotoStorage):
    """Stores photos as individual files in a single uploads directory."""

    directory: Path
    url_prefix: str = "/uploads"

    def ensure_directory(self) -> None:
        """Create the uploads directory if it does not exist."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def save(self, filename: str, content: bytes) -> str:
        """Write the photo and return the path it is served under."""
        self.ensure_directory()
        (self.directory / filename).write_bytes(content)
        return f"{self.url_prefix.rstrip('/')}/{filename}"

    def delete(self, path: str) -> bool:
        """Remove a stored photo; only the final path component is used."""
        name = PurePosixPath(path).name
        if not name:
            return False
        try:
            (self.directory / name).unlink()
        except FileNotFoundError:
            return False
        except OSError:
            _logger.warning("Failed to delete photo %s", path, exc_info=True)
            return False
        return True
