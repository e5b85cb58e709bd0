"""
Review Routes
=============

Routes for the review/results screen.
"""

from __future__ import annotations

from html import escape

from fastapi import APIRouter, Cookie
from fastapi.responses import HTMLResponse, PlainTextResponse

from ui.render import attach_session_cookie
from ui.session_manager import session_manager

router = APIRouter(prefix="/review", tags=["review"])


@router.get("/summary")
async def summary(session_id: str = Cookie(None)):
    """Markdown summary of the core values and statements."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    response = PlainTextResponse(app.get_review_summary(), media_type="text/markdown")
    attach_session_cookie(response, session_id, created)
    return response


@router.get("/journal")
async def journal(session_id: str = Cookie(None)):
    """Chronological session log."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    response = PlainTextResponse(app.get_journal_content(), media_type="text/markdown")
    attach_session_cookie(response, session_id, created)
    return response


@router.post("/export")
async def export_summary(session_id: str = Cookie(None)):
    """Save the summary to the session directory."""
    session_id, app, created = session_manager.get_or_create_app(session_id)

    try:
        path = app.export_summary()
        response = HTMLResponse(content=f"""
        <span style="color: var(--accent-green); font-weight: 600;">
            ✅ Saved to {escape(path.name)}
        </span>
        """)
    except OSError as e:
        response = HTMLResponse(content=f"""
        <span style="color: var(--danger);">
            ❌ Error: {escape(str(e))}
        </span>
        """)
    attach_session_cookie(response, session_id, created)
    return response
