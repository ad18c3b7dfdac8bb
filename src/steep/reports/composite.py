"""Reporter that fans every notification out to several reporters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from steep.reports.base import Reporter
    from steep.testing.tree import Hook, Scope, Test


class CompositeReporter:
    """Forwards each call to the inner reporters, in order."""

    def __init__(self, reporters: Iterable[Reporter]) -> None:
        self.reporters: list[Reporter] = list(reporters)

    def on_run_start(self, root: Scope) -> None:
        for reporter in self.reporters:
            reporter.on_run_start(root)

    def on_run_end(self) -> None:
        for reporter in self.reporters:
            reporter.on_run_end()

    def on_scope_start(self, scope: Scope, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_scope_start(scope, parents)

    def on_scope_end(self, scope: Scope, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_scope_end(scope, parents)

    def on_hook_start(self, hook: Hook, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_hook_start(hook, parents)

    def on_hook_pass(self, hook: Hook, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_hook_pass(hook, parents)

    def on_hook_fail(self, hook: Hook, parents: Sequence[Scope], cause: BaseException) -> None:
        for reporter in self.reporters:
            reporter.on_hook_fail(hook, parents, cause)

    def on_test_hook_start(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
    ) -> None:
        for reporter in self.reporters:
            reporter.on_test_hook_start(hook, hook_parents, test, test_parents)

    def on_test_hook_pass(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
    ) -> None:
        for reporter in self.reporters:
            reporter.on_test_hook_pass(hook, hook_parents, test, test_parents)

    def on_test_hook_fail(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
        cause: BaseException,
    ) -> None:
        for reporter in self.reporters:
            reporter.on_test_hook_fail(hook, hook_parents, test, test_parents, cause)

    def on_test_start(self, test: Test, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_test_start(test, parents)

    def on_test_pass(self, test: Test, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_test_pass(test, parents)

    def on_test_fail(self, test: Test, parents: Sequence[Scope], cause: BaseException) -> None:
        for reporter in self.reporters:
            reporter.on_test_fail(test, parents, cause)

    def on_test_end(self, test: Test, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_test_end(test, parents)

    def on_test_pending(self, test: Test, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_test_pending(test, parents)

    def on_test_skip(self, test: Test, parents: Sequence[Scope]) -> None:
        for reporter in self.reporters:
            reporter.on_test_skip(test, parents)
