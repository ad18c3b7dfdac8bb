"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from steep.config import Configuration
from steep.reports.base import Reporter
from steep.testing.runner import Runner
from steep.testing.tree import Hook, Scope, Test


class RecordingReporter(Reporter):
    """Records every notification as an ``(event, *names)`` tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, ...]] = []
        self.parents: list[tuple[str, tuple[str, ...]]] = []
        self.causes: list[BaseException] = []

    def _record(self, event: str, *names: str, parents: Sequence[Scope] = ()) -> None:
        self.events.append((event, *names))
        self.parents.append((event, tuple(scope.name for scope in parents)))

    def on_run_start(self, root: Scope) -> None:
        self._record("run_start")

    def on_run_end(self) -> None:
        self._record("run_end")

    def on_scope_start(self, scope: Scope, parents: Sequence[Scope]) -> None:
        self._record("scope_start", scope.name, parents=parents)

    def on_scope_end(self, scope: Scope, parents: Sequence[Scope]) -> None:
        self._record("scope_end", scope.name, parents=parents)

    def on_hook_start(self, hook: Hook, parents: Sequence[Scope]) -> None:
        self._record("hook_start", hook.name, parents=parents)

    def on_hook_pass(self, hook: Hook, parents: Sequence[Scope]) -> None:
        self._record("hook_pass", hook.name, parents=parents)

    def on_hook_fail(self, hook: Hook, parents: Sequence[Scope], cause: BaseException) -> None:
        self.causes.append(cause)
        self._record("hook_fail", hook.name, parents=parents)

    def on_test_hook_start(self, hook, hook_parents, test, test_parents) -> None:
        self._record("test_hook_start", hook.name, test.name, parents=hook_parents)

    def on_test_hook_pass(self, hook, hook_parents, test, test_parents) -> None:
        self._record("test_hook_pass", hook.name, test.name, parents=hook_parents)

    def on_test_hook_fail(self, hook, hook_parents, test, test_parents, cause) -> None:
        self.causes.append(cause)
        self._record("test_hook_fail", hook.name, test.name, parents=hook_parents)

    def on_test_start(self, test: Test, parents: Sequence[Scope]) -> None:
        self._record("test_start", test.name, parents=parents)

    def on_test_pass(self, test: Test, parents: Sequence[Scope]) -> None:
        self._record("test_pass", test.name, parents=parents)

    def on_test_fail(self, test: Test, parents: Sequence[Scope], cause: BaseException) -> None:
        self.causes.append(cause)
        self._record("test_fail", test.name, parents=parents)

    def on_test_end(self, test: Test, parents: Sequence[Scope]) -> None:
        self._record("test_end", test.name, parents=parents)

    def on_test_pending(self, test: Test, parents: Sequence[Scope]) -> None:
        self._record("test_pending", test.name, parents=parents)

    def on_test_skip(self, test: Test, parents: Sequence[Scope]) -> None:
        self._record("test_skip", test.name, parents=parents)

    def of(self, *kinds: str) -> list[tuple[str, ...]]:
        """Events restricted to the given kinds, in order."""
        return [event for event in self.events if event[0] in kinds]


class Calls:
    """Ordered log of user function calls."""

    def __init__(self) -> None:
        self.log: list[str] = []

    def fn(self, name: str) -> Callable[[], None]:
        def call() -> None:
            self.log.append(name)

        return call

    def failing(self, name: str, *, on_calls: set[int] | None = None) -> Callable[[], None]:
        """Function that logs itself and raises on the given (1-based) calls, or always."""
        state = {"calls": 0}

        def call() -> None:
            self.log.append(name)
            state["calls"] += 1
            if on_calls is None or state["calls"] in on_calls:
                raise RuntimeError(f"{name} failed")

        return call


@pytest.fixture
def recorder() -> RecordingReporter:
    """Provide a reporter that records the event stream."""
    return RecordingReporter()


@pytest.fixture
def calls() -> Calls:
    return Calls()


@pytest.fixture
def runner() -> Runner:
    """Runner with a default configuration (no installed provider lookup)."""
    return Runner(configuration=Configuration())
