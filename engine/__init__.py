"""
Valuesort Engine Module
=======================

Workflow rules, commands and the controller that commits them.
"""

from .controller import CommandResult, WorkflowController
from .errors import WorkflowRejection

__all__ = ["CommandResult", "WorkflowController", "WorkflowRejection"]
