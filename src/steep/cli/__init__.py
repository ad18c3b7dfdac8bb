"""CLI module for the steep test runner."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from collections.abc import Callable, Sequence
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from steep.config import SteepConfig, load_config, load_configuration
from steep.errors import ConfigurationError, DefinitionError
from steep.reports import CompositeReporter, ConsoleReporter, SummaryReporter
from steep.reports.base import Reporter
from steep.reports.registry import resolve_reporter
from steep.testing import RunTags, Runner, collect
from steep.testing.filters import TreeTransform
from steep.testing.tree import Scope, full_name


EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2
EXIT_DEFINITION = 3
EXIT_NO_TESTS = 5


def main() -> None:
    """Entry point for steep CLI."""
    console = Console(stderr=True)
    try:
        config = load_config()
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(EXIT_USAGE) from exc

    parser = _build_parser()
    argv = [*config.addopts, *sys.argv[1:]] if config.addopts else sys.argv[1:]
    args = parser.parse_args(argv)

    if args.command == "run":
        raise SystemExit(_run_tests(args, config))

    parser.print_help()
    raise SystemExit(EXIT_OK)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="steep", description="Steep BDD test runner")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run steep tests")
    run_parser.add_argument("paths", nargs="*", help="Test files or directories")
    run_parser.add_argument("-k", "--keyword", help="Filter tests by keyword expression")
    run_parser.add_argument(
        "-t", "--tag", dest="include_tags", action="append", help="Run tests with given tag"
    )
    run_parser.add_argument(
        "--skip-tag",
        dest="exclude_tags",
        action="append",
        help="Skip tests that match this tag",
    )
    run_parser.add_argument(
        "-r",
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import path (repeatable)",
    )
    run_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    run_parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    return parser


def _resolve_paths(args: argparse.Namespace, config: SteepConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _resolve_tags(args: argparse.Namespace, config: SteepConfig) -> RunTags:
    include = list(config.include_tags)
    exclude = list(config.exclude_tags)
    if args.include_tags:
        include.extend(args.include_tags)
    if args.exclude_tags:
        exclude.extend(args.exclude_tags)
    return RunTags.parse(include, exclude)


def _resolve_keyword(args: argparse.Namespace, config: SteepConfig) -> str | None:
    return args.keyword or config.keyword


def _resolve_verbosity(args: argparse.Namespace, config: SteepConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace,
    config: SteepConfig,
    verbosity: int,
) -> list[Reporter]:
    """CLI reporters win over configured ones; ConsoleReporter is the default."""
    names = args.reporters or config.reporters or ["ConsoleReporter"]
    reporters: list[Reporter] = []
    for name in names:
        kwargs: dict[str, Any] = dict(config.reporter_options.get(name, {}))
        if name in ("ConsoleReporter", "steep.reports.console:ConsoleReporter"):
            kwargs.setdefault("verbosity", verbosity)
        reporters.append(resolve_reporter(name, **kwargs))
    return reporters


def _configure_logging(verbosity: int) -> None:
    if verbosity < 2:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def keyword_transform(matcher: KeywordMatcher) -> TreeTransform:
    """Tree transform keeping only tests whose full name matches ``matcher``."""

    def apply(scope: Scope, parents: tuple[Scope, ...] = ()) -> Scope:
        chain = (*parents, scope)
        return scope.with_children(
            tests=tuple(test for test in scope.tests if matcher.match(full_name(test, chain))),
            scopes=tuple(apply(child, chain) for child in scope.scopes),
        )

    return apply


def _run_tests(args: argparse.Namespace, config: SteepConfig) -> int:
    console = Console(stderr=True)
    verbosity = _resolve_verbosity(args, config)
    _configure_logging(verbosity)
    keyword = _resolve_keyword(args, config)

    try:
        configuration = load_configuration()
        if keyword:
            configuration.transforms.append(keyword_transform(KeywordMatcher(keyword)))
        reporters = _resolve_reporters(args, config, verbosity)
    except (ConfigurationError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        return EXIT_USAGE

    runner = Runner(run_tags=_resolve_tags(args, config), configuration=configuration)
    try:
        units = [unit for path in _resolve_paths(args, config) for unit in collect(path)]
        if not units:
            console.print("[yellow]No tests found.[/yellow]")
            return EXIT_NO_TESTS
        tree = runner.define_tests(units)
    except DefinitionError as exc:
        console.print(f"[red]{exc}[/red]")
        if exc.__cause__ is not None:
            console.print(f"[red]  caused by: {exc.__cause__!r}[/red]")
        return EXIT_DEFINITION

    summary = SummaryReporter()
    try:
        runner.run(tree, CompositeReporter([summary, *reporters]))
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        if exc.__cause__ is not None:
            console.print(f"[red]  caused by: {exc.__cause__!r}[/red]")
        return EXIT_USAGE
    return EXIT_OK if summary.summary.ok else EXIT_FAILURES


def _tokenize(expression: str) -> list[str]:
    lexer = shlex.shlex(expression, posix=True, punctuation_chars="()")
    lexer.whitespace_split = True
    tokens: list[str] = []
    for token in lexer:
        # runs of parentheses come back as one token
        if set(token) <= {"(", ")"}:
            tokens.extend(token)
        else:
            tokens.append(token)
    return tokens


class KeywordMatcher:
    """Boolean ``-k`` expression evaluated against a test's full name.

    Full names are scope names and the test name joined with spaces, so
    ``"cart and not 'cart checkout'"`` selects tests under ``cart`` except
    those in its ``checkout`` block. Words match as substrings; quote a
    phrase to match across names. ``and``/``or``/``not`` are case-insensitive.
    """

    def __init__(self, expression: str) -> None:
        self._tokens = _tokenize(expression)
        self._pos = 0
        self._predicate = self._disjunction()
        if self._pos != len(self._tokens):
            msg = f"Unexpected {self._tokens[self._pos]!r} in keyword expression"
            raise ValueError(msg)

    def match(self, name: str) -> bool:
        return self._predicate(name)

    def _disjunction(self) -> Callable[[str], bool]:
        terms = [self._conjunction()]
        while self._accept("or"):
            terms.append(self._conjunction())
        if len(terms) == 1:
            return terms[0]
        return lambda name: any(term(name) for term in terms)

    def _conjunction(self) -> Callable[[str], bool]:
        factors = [self._factor()]
        while self._accept("and"):
            factors.append(self._factor())
        if len(factors) == 1:
            return factors[0]
        return lambda name: all(factor(name) for factor in factors)

    def _factor(self) -> Callable[[str], bool]:
        if self._accept("not"):
            operand = self._factor()
            return lambda name: not operand(name)
        if self._pos == len(self._tokens):
            msg = "Unexpected end of keyword expression"
            raise ValueError(msg)
        token = self._tokens[self._pos]
        self._pos += 1
        if token == "(":
            group = self._disjunction()
            if not self._accept(")"):
                msg = "Unmatched '(' in keyword expression"
                raise ValueError(msg)
            return group
        if token == ")":
            msg = "Unexpected ')' in keyword expression"
            raise ValueError(msg)
        return lambda name: token in name

    def _accept(self, word: str) -> bool:
        if self._pos < len(self._tokens) and self._tokens[self._pos].lower() == word:
            self._pos += 1
            return True
        return False


__all__ = ["KeywordMatcher", "keyword_transform", "main"]
