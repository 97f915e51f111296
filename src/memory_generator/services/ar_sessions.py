"""Bounded append-only log of AR session records."""

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from memory_generator.domain.models import utc_timestamp
from memory_generator.errors import StorageError, ValidationError

DEFAULT_SESSION_LIMIT = 1000


class ArSessionRepository(Protocol):
    """Persistence interface for the AR session document."""

    def initialize(self) -> None:
        """Create an empty document if none exists yet."""

    def load_sessions(self) -> list[dict[str, object]]:
        """Return stored sessions, or an empty list if they cannot be read."""

    def save_sessions(self, sessions: list[dict[str, object]]) -> None:
        """Replace the stored sessions, raising StorageError on failure."""


@dataclass
class ArSessionService:
    """Sole writer of the AR session log."""

    repository: ArSessionRepository
    limit: int = DEFAULT_SESSION_LIMIT
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def initialize(self) -> None:
        """Make sure the backing document exists."""
        with self._lock:
            self.repository.initialize()

    def append(self, record: object) -> int:
        """Store a session record and return the number of stored sessions."""
        if not isinstance(record, Mapping) or not record.get("sessionId"):
            raise ValidationError("Invalid session data")
        with self._lock:
            sessions = self.repository.load_sessions()
            sessions.append({**record, "savedAt": utc_timestamp()})
            # Oldest entries go first once the log is over its limit.
            sessions = sessions[-self.limit :]
            try:
                self.repository.save_sessions(sessions)
            except StorageError as exc:
                raise StorageError("Failed to save session") from exc
        return len(sessions)

    def list_all(self) -> list[dict[str, object]]:
        """Return a copy of every stored session."""
        with self._lock:
            return list(self.repository.load_sessions())

    def clear(self) -> None:
        """Remove every stored session."""
        with self._lock:
            try:
                self.repository.save_sessions([])
            except StorageError as exc:
                raise StorageError("Failed to clear sessions") from exc
