"""Reporting module for pestle session output."""

from pestle.reports.base import Reporter
from pestle.reports.console import ConsoleReporter
from pestle.reports.registry import (
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
