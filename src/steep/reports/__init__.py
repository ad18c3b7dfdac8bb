"""Reporting module for steep test output."""

from steep.reports.base import NullReporter, Reporter
from steep.reports.composite import CompositeReporter
from steep.reports.console import ConsoleReporter
from steep.reports.registry import (
    clear_reporter_registry,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)
from steep.reports.summary import Failure, FailureKind, RunSummary, SummaryReporter


register_builtin(ConsoleReporter)
register_builtin(SummaryReporter)
register_builtin(NullReporter)

__all__ = [
    "CompositeReporter",
    "ConsoleReporter",
    "Failure",
    "FailureKind",
    "NullReporter",
    "Reporter",
    "RunSummary",
    "SummaryReporter",
    "clear_reporter_registry",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
