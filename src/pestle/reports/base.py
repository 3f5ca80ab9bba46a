"""Base reporter protocol for pestle output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pestle.types import TestResult


class Reporter(Protocol):
    """Protocol defining the interface for session observers.

    Sessions look each callback up by name, so a reporter may implement only
    the ones it cares about.
    """

    def on_block_enter(self, qualified_name: str) -> None:
        """Called when a describe block starts, before its setup hooks."""
        ...

    def on_block_exit(self, qualified_name: str) -> None:
        """Called after a describe block has released its resources."""
        ...

    def on_block_failure(self, result: TestResult) -> None:
        """Called once for a failure that escaped a describe block."""
        ...

    def on_test_complete(self, result: TestResult) -> None:
        """Called after each test unit is recorded."""
        ...
