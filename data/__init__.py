"""
Valuesort Data Module
=====================

Handles value definitions and session journaling.
"""

from .value_definitions import ALL_VALUE_DEFINITIONS, ValueDefinition, definitions_for
from .journal import Journal

__all__ = ["ALL_VALUE_DEFINITIONS", "ValueDefinition", "definitions_for", "Journal"]
