"""Base reporter protocol for steep test output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from steep.testing.tree import Hook, Scope, Test


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the notifications the runner sends while it runs.

    Every call carries the node and its ancestor scopes (outermost first).
    Calls arrive synchronously, one at a time, in execution order. Classes
    that subclass ``Reporter`` explicitly inherit no-op bodies and only need
    to override what they care about.
    """

    def on_run_start(self, root: Scope) -> None:
        """Called once before anything else, with the untransformed root."""
        ...

    def on_run_end(self) -> None:
        """Called once after everything else."""
        ...

    def on_scope_start(self, scope: Scope, parents: Sequence[Scope]) -> None:
        ...

    def on_scope_end(self, scope: Scope, parents: Sequence[Scope]) -> None:
        ...

    def on_hook_start(self, hook: Hook, parents: Sequence[Scope]) -> None:
        """Called before a ``BEFORE``/``AFTER`` hook runs."""
        ...

    def on_hook_pass(self, hook: Hook, parents: Sequence[Scope]) -> None:
        ...

    def on_hook_fail(self, hook: Hook, parents: Sequence[Scope], cause: BaseException) -> None:
        """Called for any failing hook, including per-test hooks.

        Per-test hook failures get this call right after
        :meth:`on_test_hook_fail`.
        """
        ...

    def on_test_hook_start(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
    ) -> None:
        """Called before a ``BEFORE_EACH``/``AFTER_EACH`` hook runs for a test."""
        ...

    def on_test_hook_pass(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
    ) -> None:
        ...

    def on_test_hook_fail(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
        cause: BaseException,
    ) -> None:
        ...

    def on_test_start(self, test: Test, parents: Sequence[Scope]) -> None:
        ...

    def on_test_pass(self, test: Test, parents: Sequence[Scope]) -> None:
        ...

    def on_test_fail(self, test: Test, parents: Sequence[Scope], cause: BaseException) -> None:
        ...

    def on_test_end(self, test: Test, parents: Sequence[Scope]) -> None:
        ...

    def on_test_pending(self, test: Test, parents: Sequence[Scope]) -> None:
        """Called instead of running a test that has no function."""
        ...

    def on_test_skip(self, test: Test, parents: Sequence[Scope]) -> None:
        """Called instead of running a skipped test (declared or by hook failure)."""
        ...


class NullReporter(Reporter):
    """Reporter that ignores every notification."""
