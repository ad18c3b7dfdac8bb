"""Reporter that tallies outcomes into a :class:`RunSummary`."""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from steep.reports.base import Reporter
from steep.testing.tree import Hook, Scope, Test, full_name


class FailureKind(Enum):
    TEST = "test"
    HOOK = "hook"


@dataclass
class Failure:
    """A single reported failure."""

    kind: FailureKind
    name: str
    cause: BaseException


@dataclass
class RunSummary:
    """Aggregated outcome of a run."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    pending: int = 0
    hook_failures: int = 0
    failures: list[Failure] = field(default_factory=list)
    duration_ms: float = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped + self.pending

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.hook_failures == 0


class SummaryReporter(Reporter):
    """Counts tests and hook failures as they are reported."""

    def __init__(self) -> None:
        self.summary = RunSummary()
        self._start = 0.0

    def on_run_start(self, root: Scope) -> None:
        self.summary = RunSummary()
        self._start = time.perf_counter()

    def on_run_end(self) -> None:
        self.summary.duration_ms = (time.perf_counter() - self._start) * 1000

    def on_hook_fail(self, hook: Hook, parents: Sequence[Scope], cause: BaseException) -> None:
        self.summary.hook_failures += 1
        names = [scope.name for scope in parents if scope.name]
        names.append(f'"{hook.name}"')
        self.summary.failures.append(Failure(FailureKind.HOOK, " ".join(names), cause))

    def on_test_pass(self, test: Test, parents: Sequence[Scope]) -> None:
        self.summary.passed += 1

    def on_test_fail(self, test: Test, parents: Sequence[Scope], cause: BaseException) -> None:
        self.summary.failed += 1
        self.summary.failures.append(Failure(FailureKind.TEST, full_name(test, parents), cause))

    def on_test_pending(self, test: Test, parents: Sequence[Scope]) -> None:
        self.summary.pending += 1

    def on_test_skip(self, test: Test, parents: Sequence[Scope]) -> None:
        self.summary.skipped += 1
