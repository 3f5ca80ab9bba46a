"""Shared types for the pestle testing framework."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TestStatus(Enum):
    """Outcome of a test unit or of a describe block."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    PENDING = "pending"


class TestResult(BaseModel):
    """A single entry in the session result log.

    Attributes:
    ----------
    name : str
        Qualified test name, or ``BLOCK_FAILURE_NAME`` for block-level failures
    scope : str
        Qualified name of the describe block that produced the record
    status : TestStatus
        Final status
    message : str | None
        Failure description
    location : str | None
        ``file:line`` of the frame that raised
    stack_trace : str | None
        Formatted traceback of the failure
    duration_ms : float | None
        Wall time spent in the body, when measured
    """

    model_config = ConfigDict(frozen=True)

    __test__ = False

    name: str
    scope: str = ""
    status: TestStatus
    message: str | None = None
    location: str | None = None
    stack_trace: str | None = None
    duration_ms: float | None = None

    @property
    def failed(self) -> bool:
        return self.status is TestStatus.FAILED
