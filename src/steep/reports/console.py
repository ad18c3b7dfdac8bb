"""Rich console reporter."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

from steep.reports.summary import FailureKind, SummaryReporter
from steep.testing.tree import Hook, Scope, Test
from steep.types import ScopeKind


def _depth(parents: Sequence[Scope]) -> int:
    return sum(1 for scope in parents if scope.name)


class ConsoleReporter(SummaryReporter):
    """Prints the test tree as it runs, then failure details and a summary.

    Args:
        console: Target console. Defaults to a new stdout console.
        verbosity: Below 0 only the summary is printed; above 0 failures
            include a full traceback.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._hook_test: Test | None = None

    def _line(self, depth: int, text: str) -> None:
        if self.verbosity >= 0:
            self.console.print("  " * depth + text, highlight=False)

    def on_run_start(self, root: Scope) -> None:
        super().on_run_start(root)
        self._hook_test = None

    def on_scope_start(self, scope: Scope, parents: Sequence[Scope]) -> None:
        if not scope.name:
            return
        label = escape(scope.name)
        if scope.kind is ScopeKind.WHEN:
            label = f"when {label}"
        self._line(_depth(parents), f"[bold]{label}[/bold]")

    def on_test_hook_fail(
        self,
        hook: Hook,
        hook_parents: Sequence[Scope],
        test: Test,
        test_parents: Sequence[Scope],
        cause: BaseException,
    ) -> None:
        self._hook_test = test

    def on_hook_fail(self, hook: Hook, parents: Sequence[Scope], cause: BaseException) -> None:
        super().on_hook_fail(hook, parents, cause)
        index = len(self.summary.failures)
        suffix = f' for "{escape(self._hook_test.name)}"' if self._hook_test else ""
        self._hook_test = None
        self._line(
            _depth(parents),
            f'[red]✗ {index}) "{escape(hook.name)}" hook{suffix} failed[/red]',
        )

    def on_test_pass(self, test: Test, parents: Sequence[Scope]) -> None:
        super().on_test_pass(test, parents)
        self._line(_depth(parents), f"[green]✓[/green] {escape(test.name)}")

    def on_test_fail(self, test: Test, parents: Sequence[Scope], cause: BaseException) -> None:
        super().on_test_fail(test, parents, cause)
        index = len(self.summary.failures)
        self._line(_depth(parents), f"[red]✗ {index}) {escape(test.name)}[/red]")

    def on_test_pending(self, test: Test, parents: Sequence[Scope]) -> None:
        super().on_test_pending(test, parents)
        self._line(_depth(parents), f"[cyan]- {escape(test.name)}[/cyan]")

    def on_test_skip(self, test: Test, parents: Sequence[Scope]) -> None:
        super().on_test_skip(test, parents)
        self._line(_depth(parents), f"[yellow]~ {escape(test.name)}[/yellow]")

    def on_run_end(self) -> None:
        super().on_run_end()
        summary = self.summary

        if summary.failures:
            self.console.print()
        for index, failure in enumerate(summary.failures, start=1):
            label = "hook" if failure.kind is FailureKind.HOOK else "test"
            self.console.print(f"[bold red]{index}) {escape(failure.name)}[/bold red] ({label})")
            if self.verbosity > 0 and failure.cause.__traceback__ is not None:
                self.console.print(
                    Traceback.from_exception(
                        type(failure.cause), failure.cause, failure.cause.__traceback__
                    )
                )
            else:
                self.console.print(
                    f"   {escape(type(failure.cause).__name__)}: {escape(str(failure.cause))}"
                )

        parts = [f"[green]{summary.passed} passing[/green]"]
        if summary.failed:
            parts.append(f"[red]{summary.failed} failing[/red]")
        if summary.hook_failures:
            parts.append(f"[red]{summary.hook_failures} hook failure(s)[/red]")
        if summary.pending:
            parts.append(f"[cyan]{summary.pending} pending[/cyan]")
        if summary.skipped:
            parts.append(f"[yellow]{summary.skipped} skipped[/yellow]")
        self.console.print()
        self.console.print(", ".join(parts) + f" ({summary.duration_ms:.0f}ms)")
