"""Tests for the AR session log service."""

import pytest

from memory_generator.errors import StorageError, ValidationError
from memory_generator.services.ar_sessions import ArSessionService
from tests.conftest import InMemoryArSessionRepository


def test_append_adds_saved_at_and_returns_total() -> None:
    repository = InMemoryArSessionRepository()
    service = ArSessionService(repository)

    total = service.append({"sessionId": "s-1", "savedAt": "caller", "x": 1})

    assert total == 1
    [stored] = repository.sessions
    assert stored["sessionId"] == "s-1"
    assert stored["x"] == 1
    assert stored["savedAt"] != "caller"
    assert str(stored["savedAt"]).endswith("Z")


@pytest.mark.parametrize("record", [None, [], "s-1", {}, {"sessionId": ""}])
def test_append_requires_session_id(record) -> None:
    repository = InMemoryArSessionRepository()
    service = ArSessionService(repository)

    with pytest.raises(ValidationError, match="Invalid session data"):
        service.append(record)

    assert repository.sessions == []


def test_append_keeps_only_most_recent_sessions() -> None:
    repository = InMemoryArSessionRepository()
    service = ArSessionService(repository)

    for index in range(1005):
        total = service.append({"sessionId": f"s-{index}"})

    assert total == 1000
    assert len(repository.sessions) == 1000
    assert repository.sessions[0]["sessionId"] == "s-5"
    assert repository.sessions[-1]["sessionId"] == "s-1004"


def test_list_all_returns_copy() -> None:
    repository = InMemoryArSessionRepository()
    service = ArSessionService(repository)
    service.append({"sessionId": "s-1"})

    sessions = service.list_all()
    sessions.clear()

    assert len(service.list_all()) == 1


def test_clear_empties_log() -> None:
    repository = InMemoryArSessionRepository()
    service = ArSessionService(repository)
    service.append({"sessionId": "s-1"})

    service.clear()

    assert service.list_all() == []


def test_write_failures_are_reported() -> None:
    repository = InMemoryArSessionRepository(
        save_error=StorageError("Failed to write AR sessions")
    )
    service = ArSessionService(repository)

    with pytest.raises(StorageError, match="Failed to save session"):
        service.append({"sessionId": "s-1"})
    with pytest.raises(StorageError, match="Failed to clear sessions"):
        service.clear()


def test_initialize_delegates_to_repository() -> None:
    repository = InMemoryArSessionRepository()

    ArSessionService(repository).initialize()

    assert repository.initialized
