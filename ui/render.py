"""
Panel Rendering
===============

Shared template setup and the context every exercise fragment is rendered
from.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.templating import Jinja2Templates

from data.journal import card_description
from engine.workflow import PART_TITLES
from state.models import (
    ADDITIONAL,
    CORE,
    IMPORTANT,
    NOT_IMPORTANT,
    UNASSIGNED,
    VERY_IMPORTANT,
    columns_for,
)
from ui.styles import EXERCISE_CSS

if TYPE_CHECKING:
    from ui.app import ValuesApp

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["description"] = card_description

COLUMN_LABELS = {
    UNASSIGNED: "Unsorted",
    VERY_IMPORTANT: "Very Important",
    IMPORTANT: "Important",
    NOT_IMPORTANT: "Not Important",
    CORE: "Core Values",
    ADDITIONAL: "Also Something I Want",
}

PART_INSTRUCTIONS = {
    "part1": "Sort every value by how important it is to you.",
    "part2": "Sort your very important values again, more strictly this time.",
    "part3": "Choose at most {limit} core values. Move the rest to 'Also Something I Want'.",
    "part4": "Describe what each core value means to you.",
    "review": "Here are your core values.",
}


def attach_session_cookie(response, session_id: str, created: bool) -> None:
    """Persist session id when we had to create a new app."""
    if created:
        response.set_cookie("session_id", session_id, httponly=True, max_age=7200)


def panel_context(app: "ValuesApp") -> dict:
    """Everything the exercise panel template needs."""
    state = app.state
    part = state.current_part
    columns = [] if part in ("part4", "review") else list(columns_for(part))

    grouped = {
        column: sorted(state.cards_in(column), key=lambda card: card.order)
        for column in columns_for(part)
    }

    return {
        "state": state,
        "part": part,
        "part_title": PART_TITLES[part].capitalize(),
        "instructions": PART_INSTRUCTIONS[part].format(limit=app.config.core_limit),
        "columns": columns,
        "column_labels": COLUMN_LABELS,
        "grouped": grouped,
        "core_cards": sorted(state.cards_in(CORE), key=lambda card: card.name),
        "additional_cards": state.cards_in(ADDITIONAL),
        "statements": {**state.final_statements, **app.statements.pending},
        "core_limit": app.config.core_limit,
        "can_undo": app.can_undo(),
        "can_redo": app.can_redo(),
        "notifications": app.drain_notifications(),
    }


def render_panel(request: Request, app: "ValuesApp", session_id: str, created: bool):
    """Re-render the exercise panel fragment for an HTMX swap."""
    response = templates.TemplateResponse(request, "panel.html", panel_context(app))
    attach_session_cookie(response, session_id, created)
    return response


def render_page(request: Request, app: "ValuesApp", session_id: str, created: bool):
    """Render the full exercise page."""
    context = panel_context(app)
    context["css"] = EXERCISE_CSS
    response = templates.TemplateResponse(request, "index.html", context)
    attach_session_cookie(response, session_id, created)
    return response
