"""Shared types for the steep test engine."""

from __future__ import annotations

from enum import Enum


class Behaviour(Enum):
    """Execution disposition declared on a scope or test."""

    NORMAL = "normal"
    SKIP = "skip"  # Never run, report as skipped
    ONLY = "only"  # Run this and drop unrelated siblings

    def combine(self, declared: Behaviour) -> Behaviour:
        """Combine this (ancestor) behaviour with a descendant's declared behaviour.

        ``SKIP`` is absorbing, otherwise ``ONLY`` dominates ``NORMAL``.
        """
        if self is Behaviour.SKIP or declared is Behaviour.SKIP:
            return Behaviour.SKIP
        if self is Behaviour.ONLY or declared is Behaviour.ONLY:
            return Behaviour.ONLY
        return Behaviour.NORMAL

    @classmethod
    def from_flags(cls, *, skip: bool = False, only: bool = False) -> Behaviour:
        if skip and only:
            msg = "a block cannot be both skip and only"
            raise ValueError(msg)
        if skip:
            return cls.SKIP
        if only:
            return cls.ONLY
        return cls.NORMAL


def combine(ancestor: Behaviour, declared: Behaviour) -> Behaviour:
    """Module-level form of :meth:`Behaviour.combine`."""
    return ancestor.combine(declared)


class HookKind(Enum):
    """When a hook runs relative to the tests of its owning scope."""

    BEFORE = "before"  # Once, before any test in the scope
    AFTER = "after"  # Once, after everything in the scope
    BEFORE_EACH = "before_each"  # Before every descendant test
    AFTER_EACH = "after_each"  # After every descendant test

    @property
    def per_test(self) -> bool:
        return self in (HookKind.BEFORE_EACH, HookKind.AFTER_EACH)


class ScopeKind(Enum):
    """Flavour of a scope; only affects how it is displayed."""

    ROOT = "root"
    DESCRIBE = "describe"
    WHEN = "when"
