"""
Valuesort UI Module
===================

FastAPI + HTMX user interface.
"""

from .app import ValuesApp

__all__ = ["ValuesApp"]
