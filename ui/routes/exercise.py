"""
Exercise Routes
===============

Routes for sorting cards, custom values, descriptions, statements and the
stage transitions. Every mutating route re-renders the exercise panel.
"""

from __future__ import annotations

import asyncio
from typing import Literal

from fastapi import APIRouter, Cookie, Form, Request
from fastapi.responses import Response

from ui.render import attach_session_cookie, render_panel
from ui.session_manager import session_manager

router = APIRouter(prefix="/exercise", tags=["exercise"])

# asyncio may run a timer up to one clock tick early
_COMMIT_MARGIN_SECONDS = 0.05


@router.get("/panel")
async def panel(request: Request, session_id: str = Cookie(None)):
    """Current exercise panel fragment."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.commit_due_statements()
    return render_panel(request, app, session_id, created)


@router.post("/move")
async def move_card(
    request: Request,
    card_id: int = Form(...),
    column: str = Form(...),
    session_id: str = Cookie(None),
):
    """Move a card to another column."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.move_card(card_id, column)
    return render_panel(request, app, session_id, created)


@router.post("/advance")
async def advance(request: Request, session_id: str = Cookie(None)):
    """Continue to the next part."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.advance()
    return render_panel(request, app, session_id, created)


@router.post("/finish")
async def finish(request: Request, session_id: str = Cookie(None)):
    """Finish part 4 and show the review."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.finish()
    return render_panel(request, app, session_id, created)


@router.post("/custom")
async def add_custom_value(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    session_id: str = Cookie(None),
):
    """Add a user-authored value card."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.add_custom_value(name, description)
    return render_panel(request, app, session_id, created)


@router.post("/description/start")
async def start_editing_description(
    request: Request,
    card_id: int = Form(...),
    session_id: str = Cookie(None),
):
    """Put a card's description into edit mode."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.start_editing_description(card_id)
    return render_panel(request, app, session_id, created)


@router.post("/description/save")
async def save_description_edit(
    request: Request,
    card_id: int = Form(...),
    text: str = Form(""),
    session_id: str = Cookie(None),
):
    """Save the edited description."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.save_description_edit(card_id, text)
    return render_panel(request, app, session_id, created)


@router.post("/description/cancel")
async def cancel_description_edit(request: Request, session_id: str = Cookie(None)):
    """Leave description edit mode without saving."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.cancel_description_edit()
    return render_panel(request, app, session_id, created)


@router.post("/statement")
async def submit_statement(
    card_id: int = Form(...),
    text: str = Form(""),
    session_id: str = Cookie(None),
):
    """Record statement input; it commits after the debounce window."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.submit_statement(card_id, text)
    # Fires once the input has been quiet; a later keystroke pushes the write back
    asyncio.get_running_loop().call_later(
        app.statements.wait_seconds + _COMMIT_MARGIN_SECONDS, app.commit_due_statements
    )
    response = Response(status_code=204)
    attach_session_cookie(response, session_id, created)
    return response


@router.post("/restart")
async def restart(
    request: Request,
    confirmed: bool = Form(False),
    session_id: str = Cookie(None),
):
    """Start the exercise over with the current value set."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.restart(confirm=lambda title, message: confirmed)
    return render_panel(request, app, session_id, created)


@router.post("/value-set")
async def select_value_set(
    request: Request,
    value_set: Literal["limited", "all"] = Form(...),
    confirmed: bool = Form(False),
    session_id: str = Cookie(None),
):
    """Switch between the limited and full value sets."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    app.select_value_set(value_set, confirm=lambda title, message: confirmed)
    return render_panel(request, app, session_id, created)
