"""Shared fixtures for unit tests."""

import pytest

from pestle.context import Session
from pestle.types import TestResult


class RecordingReporter:
    """Reporter that records every callback in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []
        self.failures: list[TestResult] = []
        self.tests: list[TestResult] = []

    def on_block_enter(self, qualified_name: str) -> None:
        self.events.append(("enter", qualified_name))

    def on_block_exit(self, qualified_name: str) -> None:
        self.events.append(("exit", qualified_name))

    def on_block_failure(self, result: TestResult) -> None:
        self.failures.append(result)
        self.events.append(("failure", result.scope))

    def on_test_complete(self, result: TestResult) -> None:
        self.tests.append(result)
        self.events.append(("test", result.name))


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def session(tmp_path, recorder) -> Session:
    """Provide a session whose test drives live under tmp_path."""
    s = Session(root=tmp_path / "drives", reporters=[recorder])
    yield s
    s.close()
