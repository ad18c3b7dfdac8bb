"""Steep - behaviour-driven test definition and execution engine."""

from .config import Configuration, ConfigurationProvider, SteepConfig, load_config
from .errors import ConfigurationError, DefinitionError, InternalError, SteepError
from .reports import CompositeReporter, ConsoleReporter, NullReporter, Reporter, SummaryReporter
from .testing import Hook, RunTags, Runner, Scope, Test, TestBuilder, collect
from .types import Behaviour, HookKind, ScopeKind, combine
from .version import __version__


__all__ = [
    # Model
    "Behaviour",
    "HookKind",
    "ScopeKind",
    "combine",
    "Hook",
    "Scope",
    "Test",
    # Definition and running
    "TestBuilder",
    "collect",
    "RunTags",
    "Runner",
    # Configuration
    "Configuration",
    "ConfigurationProvider",
    "SteepConfig",
    "load_config",
    # Reporters
    "Reporter",
    "CompositeReporter",
    "ConsoleReporter",
    "NullReporter",
    "SummaryReporter",
    # Errors
    "SteepError",
    "ConfigurationError",
    "DefinitionError",
    "InternalError",
]
