"""
History Routes
==============

Undo and redo for the exercise.
"""

from __future__ import annotations

from fastapi import APIRouter, Cookie, Request

from ui.render import render_panel
from ui.session_manager import session_manager

router = APIRouter(prefix="/history", tags=["history"])


@router.post("/undo")
async def undo(request: Request, session_id: str = Cookie(None)):
    """Undo the last change and return the restored panel."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.undo()
    return render_panel(request, app, session_id, created)


@router.post("/redo")
async def redo(request: Request, session_id: str = Cookie(None)):
    """Redo the last undone change and return the restored panel."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.redo()
    return render_panel(request, app, session_id, created)
