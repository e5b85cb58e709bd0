"""
Valuesort FastAPI Routes
========================

Route modules for the Valuesort application.
"""

from .exercise import router as exercise_router
from .history import router as history_router
from .review import router as review_router
from .events import router as events_router

__all__ = ["exercise_router", "history_router", "review_router", "events_router"]
