"""
Event Routes
============

Server-sent events announcing state changes, so other open views of the same
session can refresh.
"""

from __future__ import annotations

import asyncio
import json
from typing import AsyncIterator

from fastapi import APIRouter, Cookie
from sse_starlette.sse import EventSourceResponse

from ui.render import attach_session_cookie
from ui.session_manager import session_manager

router = APIRouter(prefix="/events", tags=["events"])


def state_event(app, state) -> dict:
    """SSE payload describing a state change."""
    return {
        "event": "state",
        "data": json.dumps({
            "part": state.current_part,
            "value_set": state.value_set,
            "cards": len(state.cards),
            "can_undo": app.can_undo(),
            "can_redo": app.can_redo(),
        }),
    }


async def state_events(app) -> AsyncIterator[dict]:
    """
    Yield a ``state`` event for every change to ``app``.

    The listener is registered on first iteration and removed when the
    stream is closed.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def on_change(state) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, state_event(app, state))

    unsubscribe = app.subscribe(on_change)
    try:
        while True:
            yield await queue.get()
    finally:
        unsubscribe()


@router.get("")
async def stream_events(session_id: str = Cookie(None)):
    """Stream a ``state`` event after every commit, undo and redo."""
    session_id, app, created = session_manager.get_or_create_app(session_id)
    response = EventSourceResponse(state_events(app))
    attach_session_cookie(response, session_id, created)
    return response
