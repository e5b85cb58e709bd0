"""Shared fixtures for the Valuesort test suite."""

import pytest

from config import ValuesortConfig
from engine.controller import WorkflowController
from engine.workflow import default_state
from state.models import AppState, ValueCard
from ui.app import ValuesApp


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_state(part, columns, statements=None, value_set="limited"):
    """
    Build an AppState from (name, column) pairs.

    Cards get ids 1..n and orders 0..n-1 in the given sequence.
    """
    cards = [
        ValueCard(id=index + 1, name=name, column=column, order=index)
        for index, (name, column) in enumerate(columns)
    ]
    return AppState(
        current_part=part,
        cards=cards,
        final_statements=dict(statements or {}),
        value_set=value_set,
    )


@pytest.fixture
def build_state():
    return make_state


@pytest.fixture
def fresh_state():
    """Default limited exercise: 10 unassigned cards in part1."""
    return default_state("limited")


@pytest.fixture
def controller_for():
    """Factory for a controller starting from a given state."""
    def _make(state=None, **kwargs):
        return WorkflowController(state, **kwargs)
    return _make


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app_config(tmp_path):
    return ValuesortConfig(save_dir=str(tmp_path), statement_debounce_seconds=0.5)


@pytest.fixture
def values_app(tmp_path, app_config, clock):
    """A ValuesApp on a fresh session directory with a fake clock."""
    return ValuesApp(session_dir=str(tmp_path / "session"), config=app_config, clock=clock)
