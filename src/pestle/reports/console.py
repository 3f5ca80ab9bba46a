"""Progress output on the terminal."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from pestle.context.session import SCOPE_SEPARATOR
from pestle.reports.base import Reporter
from pestle.types import TestResult, TestStatus


_MARKERS = {
    TestStatus.PASSED: "[green][+][/green]",
    TestStatus.FAILED: "[red][-][/red]",
    TestStatus.SKIPPED: "[yellow][!][/yellow]",
    TestStatus.PENDING: "[yellow][?][/yellow]",
}


class ConsoleReporter(Reporter):
    """Print ``Describing ...`` headers and one line per test."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def _indent(self, qualified_name: str) -> str:
        return "  " * (qualified_name.count(SCOPE_SEPARATOR))

    def on_block_enter(self, qualified_name: str) -> None:
        name = qualified_name.rsplit(SCOPE_SEPARATOR, 1)[-1]
        self.console.print()
        self.console.print(f"{self._indent(qualified_name)}[bold]Describing {escape(name)}[/bold]")

    def on_block_exit(self, qualified_name: str) -> None:
        pass

    def on_block_failure(self, result: TestResult) -> None:
        indent = self._indent(result.scope) + "  "
        self.console.print(f"{indent}[red][-] {escape(result.name)}[/red]")
        self.console.print(f"{indent}  {escape(result.message or '')}")
        if result.location:
            self.console.print(f"{indent}  at {escape(result.location)}")
        if self.verbosity > 0 and result.stack_trace:
            self.console.print(escape(result.stack_trace))

    def on_test_complete(self, result: TestResult) -> None:
        indent = self._indent(result.scope) + "  "
        name = result.name.rsplit(SCOPE_SEPARATOR, 1)[-1]
        line = f"{indent}{_MARKERS[result.status]} {escape(name)}"
        if result.duration_ms is not None and result.status is TestStatus.PASSED:
            line += f" [dim]{result.duration_ms:.0f}ms[/dim]"
        self.console.print(line)
        if result.status is TestStatus.FAILED:
            self.console.print(f"{indent}  {escape(result.message or '')}")
            if result.location:
                self.console.print(f"{indent}  at {escape(result.location)}")
        elif result.status is TestStatus.SKIPPED and result.message and self.verbosity > 0:
            self.console.print(f"{indent}  {escape(result.message)}")
