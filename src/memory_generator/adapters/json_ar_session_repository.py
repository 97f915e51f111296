"""JSON-file backed AR session repository."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from memory_generator.errors import StorageError
from memory_generator.services.ar_sessions import ArSessionRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonArSessionRepository(ArSessionRepository):
    """Stores sessions as a single `{"sessions": [...]}` document."""

    path: Path

    def initialize(self) -> None:
        """Write an empty document when the file is missing."""
        if self.path.exists():
            return
        self.save_sessions([])

    def load_sessions(self) -> list[dict[str, object]]:
        """Read sessions, falling back to an empty list on any read failure."""
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            _logger.warning("AR sessions file %s does not exist", self.path)
            return []
        except (OSError, ValueError):
            _logger.exception("Error reading AR sessions from %s", self.path)
            return []
        sessions = payload.get("sessions") if isinstance(payload, dict) else None
        if not isinstance(sessions, list):
            _logger.error("AR sessions document %s has no session list", self.path)
            return []
        return sessions

    def save_sessions(self, sessions: list[dict[str, object]]) -> None:
        """Atomically replace the document with the given sessions."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump({"sessions": sessions}, handle, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            _logger.exception("Error writing AR sessions to %s", self.path)
            raise StorageError("Failed to write AR sessions") from exc
