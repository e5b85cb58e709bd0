"""
Valuesort State Module
======================

Exercise state, linear undo/redo and session persistence.
"""

from .models import AppState, ValueCard
from .undo_stack import LinearUndoStack
from .session import ExerciseStore
from .debounce import DebouncedStatements

__all__ = ["AppState", "ValueCard", "LinearUndoStack", "ExerciseStore", "DebouncedStatements"]
