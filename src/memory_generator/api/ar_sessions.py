"""AR session log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Request

if TYPE_CHECKING:
    from memory_generator.containers import AppContainer

router = APIRouter(prefix="/api/ar", tags=["ar"])


@router.post("/session")
async def save_session(
    request: Request, record: Any = Body(default=None)  # noqa: ANN401
) -> dict[str, object]:
    """Append a caller-defined session record to the log."""
    container: AppContainer = request.app.state.container
    total = container.ar_session_service.append(record)
    return {"success": True, "message": "Session saved", "totalSessions": total}


@router.get("/sessions")
async def list_sessions(request: Request) -> dict[str, object]:
    """Return every stored session."""
    container: AppContainer = request.app.state.container
    sessions = container.ar_session_service.list_all()
    return {"success": True, "sessions": sessions, "totalSessions": len(sessions)}


@router.delete("/sessions")
async def clear_sessions(request: Request) -> dict[str, object]:
    """Remove every stored session."""
    container: AppContainer = request.app.state.container
    container.ar_session_service.clear()
    return {"success": True, "message": "All sessions cleared"}
