"""Run-scoped state shared by every describe block of a test run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pestle.testing.hooks import HookRegistry
from pestle.testing.mocks import DEFAULT, MockRegistry
from pestle.testing.test_drive import TestDrive
from pestle.types import TestResult, TestStatus

if TYPE_CHECKING:
    from pestle.config import PestleConfig
    from pestle.reports.base import Reporter

logger = logging.getLogger(__name__)

SCOPE_SEPARATOR = "::"


def _as_strings(value: str | Iterable[str] | None) -> Iterable[str]:
    if isinstance(value, str):
        return [value]
    return value or ()


@dataclass
class Session:
    """Filters, scope stack and result log for one test run.

    Attributes
    ----------
    root
        Directory under which test drives are created. ``None`` uses the
        system temporary directory.
    name_filter
        Glob patterns a describe name must match (any of them).
    tag_filter
        Tags of which a describe block must carry at least one.
    exclude_tag_filter
        Tags that exclude a describe block.
    reporters
        Observers notified of block entry/exit, block failures and test results.
    scope_stack
        Names of the active describe blocks, innermost last.
    results
        Append-only result log.
    """

    root: Path | None = None
    name_filter: list[str] = field(default_factory=list)
    tag_filter: set[str] = field(default_factory=set)
    exclude_tag_filter: set[str] = field(default_factory=set)
    reporters: list[Reporter] = field(default_factory=list)
    scope_stack: list[str] = field(default_factory=list)
    results: list[TestResult] = field(default_factory=list)
    hooks: HookRegistry = field(default_factory=HookRegistry, repr=False)
    mocks: MockRegistry = field(default_factory=MockRegistry, repr=False)
    test_drive: TestDrive = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.root is not None:
            self.root = Path(self.root)
        self.name_filter = list(_as_strings(self.name_filter))
        self.tag_filter = set(_as_strings(self.tag_filter))
        self.exclude_tag_filter = set(_as_strings(self.exclude_tag_filter))
        self.test_drive = TestDrive(self.root)

    @classmethod
    def from_config(cls, config: PestleConfig, **overrides: Any) -> Session:
        """Build a session from project configuration.

        Reporters named in the configuration are resolved through the reporter
        registry unless ``reporters`` is passed explicitly.
        """
        from pestle.reports.registry import resolve_reporters

        reporters = overrides.pop("reporters", None)
        if reporters is None:
            reporters = resolve_reporters(
                config.reporters, config.reporter_options, verbosity=config.verbosity
            )
        kwargs: dict[str, Any] = {
            "root": config.test_drive_root,
            "name_filter": list(config.name_filter),
            "tag_filter": set(config.include_tags),
            "exclude_tag_filter": set(config.exclude_tags),
            "reporters": reporters,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # -- scope ---------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self.scope_stack)

    @property
    def qualified_name(self) -> str:
        return SCOPE_SEPARATOR.join(self.scope_stack)

    def qualify(self, name: str) -> str:
        return SCOPE_SEPARATOR.join([*self.scope_stack, name])

    @property
    def test_drive_path(self) -> Path | None:
        """Test drive of the innermost running block."""
        return self.test_drive.path

    # -- results -------------------------------------------------------------

    def record(self, result: TestResult) -> TestResult:
        self.results.append(result)
        return result

    def _count(self, status: TestStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def passed(self) -> int:
        return self._count(TestStatus.PASSED)

    @property
    def failed(self) -> int:
        return self._count(TestStatus.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(TestStatus.SKIPPED)

    @property
    def pending(self) -> int:
        return self._count(TestStatus.PENDING)

    @property
    def success(self) -> bool:
        return self.failed == 0

    # -- reporters -----------------------------------------------------------

    def notify(self, event: str, *args: Any) -> None:
        """Call ``event`` on every reporter that implements it."""
        for reporter in self.reporters:
            handler = getattr(reporter, event, None)
            if handler is not None:
                handler(*args)

    # -- block API -----------------------------------------------------------

    def describe(
        self,
        name: str,
        body: Callable[[], Any] | None,
        *,
        tags: Iterable[str] = (),
    ) -> None:
        """Run ``body`` as a describe block of this session."""
        from pestle.testing.block import describe

        describe(name, body, tags=tags, session=self)

    def context(self, name: str, body: Callable[[], Any] | None) -> None:
        """Run ``body`` as an unfiltered nested grouping."""
        from pestle.testing.block import context

        context(name, body, session=self)

    def it(
        self,
        name: str,
        body: Callable[[], Any] | None = None,
        *,
        skip: str | bool | None = None,
        pending: bool = False,
    ) -> TestResult:
        """Run a single test unit inside the current describe block."""
        from pestle.testing.unit import it

        return it(name, body, skip=skip, pending=pending, session=self)

    def mock(self, target: Any, attribute: str, new: Any = DEFAULT, **kwargs: Any) -> Any:
        """Patch ``target.attribute`` until the current block exits."""
        return self.mocks.patch(self.depth, target, attribute, new, **kwargs)

    def close(self) -> None:
        """Release anything left behind by an interrupted run."""
        if self.scope_stack:
            logger.warning("Closing session with %d active block(s)", self.depth)
        self.mocks.exit_scope(0)
        self.test_drive.release_all()


__all__ = ["SCOPE_SEPARATOR", "Session"]
