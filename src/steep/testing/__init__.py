"""Test tree model, filters and runner.

Provides mocha-style describe/it definitions for plain Python callables.
"""

from .builder import TestBuilder
from .discovery import collect
from .filters import EmptyScopeFilter, OnlyFilter, TagFilter, TreeTransform, transform_pipeline
from .runner import HookLevel, Runner, ScopeOutcome
from .tags import RunTags
from .tree import Hook, Scope, Test, full_name, root


__all__ = [
    "EmptyScopeFilter",
    "Hook",
    "HookLevel",
    "OnlyFilter",
    "RunTags",
    "Runner",
    "Scope",
    "ScopeOutcome",
    "TagFilter",
    "Test",
    "TestBuilder",
    "TreeTransform",
    "collect",
    "full_name",
    "root",
    "transform_pipeline",
]
