"""
Workflow Rejections
===================

Validation failures raised by the workflow rules. They are user-facing
reasons, not faults: the controller catches them at dispatch, leaves state
untouched and surfaces the message.
"""

from __future__ import annotations


class WorkflowRejection(Exception):
    """Base class for every rejected command."""

    title = "Not allowed"
    severity = "warning"

    @property
    def reason(self) -> str:
        return str(self)


class IncompleteSortError(WorkflowRejection):
    """Unassigned cards remain before a forward transition."""

    title = "Unsorted values"

    def __init__(self, count: int, destination: str = "the next part"):
        self.count = count
        super().__init__(
            f"Please sort all {count} unassigned value(s) before proceeding to {destination}."
        )


class CoreOverflowError(WorkflowRejection):
    """Too many cards classified core."""

    title = "Too many core values"

    def __init__(self, count: int, limit: int = 5):
        self.count = count
        self.limit = limit
        super().__init__(
            f"You can only have {limit} core values! You currently have {count}. "
            "Move some values to 'Also Something I Want' before continuing."
        )


class MissingStatementError(WorkflowRejection):
    """Core cards lack a statement at finish time."""

    title = "Missing statements"

    def __init__(self, names: list[str]):
        self.names = list(names)
        super().__init__(
            "Please provide a statement for all core values. "
            f"Missing: {', '.join(self.names)}"
        )


class DuplicateNameError(WorkflowRejection):
    """A custom value's name collides with an existing card."""

    title = "Duplicate value"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'A value named "{name}" already exists.')


class EmptyFieldError(WorkflowRejection):
    """A custom value is missing its name or description."""

    title = "Missing field"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Please enter a {field} for the value.")


class StageMismatchError(WorkflowRejection):
    """The command does not apply to the current part of the exercise."""

    title = "Not available here"

    def __init__(self, part: str, action: str):
        self.part = part
        self.action = action
        super().__init__(f"Cannot {action} during {part}.")
