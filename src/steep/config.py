"""Configuration for steep.

Two layers live here:

- :class:`Configuration` is what the runner consumes: caller transforms, an
  additional reporter and the strategy used to instantiate definition units.
  It can be customised by exactly one installed :class:`ConfigurationProvider`
  registered under the ``steep.configuration`` entry-point group.
- :class:`SteepConfig` holds project settings for the command line, read from
  ``[tool.steep]`` in the nearest ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import shlex
import tomllib
from collections.abc import Callable
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from steep.errors import ConfigurationError

if TYPE_CHECKING:
    from steep.reports.base import Reporter
    from steep.testing.builder import TestBuilder
    from steep.testing.filters import TreeTransform


logger = logging.getLogger(__name__)

PROVIDER_GROUP = "steep.configuration"

Instantiator = Callable[[Any, "TestBuilder"], Any]


def default_instantiator(unit: Any, builder: TestBuilder) -> Any:
    """Call the unit with the builder; works for functions and classes alike."""
    return unit(builder)


@dataclass
class Configuration:
    """Settings that control how the runner defines and runs tests.

    Attributes
    ----------
    transforms
        Tree transforms applied, in order, before the built-in filters.
    additional_reporter
        Reporter that receives every notification alongside the one passed
        to :meth:`~steep.testing.runner.Runner.run`.
    instantiator
        Called as ``instantiator(unit, builder)`` for every definition unit.
    """

    transforms: list[TreeTransform] = field(default_factory=list)
    additional_reporter: Reporter | None = None
    instantiator: Instantiator = default_instantiator


class ConfigurationProvider(Protocol):
    """Installed plugin that customises the default :class:`Configuration`."""

    def configure(self, configuration: Configuration) -> None: ...


def _apply_provider(obj: Any, configuration: Configuration) -> None:
    if isinstance(obj, type):
        obj = obj()
    configure = getattr(obj, "configure", None)
    if configure is None:
        configure = obj
    if not callable(configure):
        msg = f"configuration provider {obj!r} is not callable and has no configure()"
        raise ConfigurationError(msg)
    configure(configuration)


def load_configuration() -> Configuration:
    """Build the configuration, applying the installed provider if there is one.

    Raises:
        ConfigurationError: If more than one provider is installed.
    """
    configuration = Configuration()
    providers = list(entry_points(group=PROVIDER_GROUP))
    if not providers:
        return configuration
    if len(providers) > 1:
        names = ", ".join(sorted(provider.name for provider in providers))
        msg = f"There must only be a single configuration provider installed, found: {names}"
        raise ConfigurationError(msg)

    provider = providers[0]
    logger.debug("applying configuration provider %s (%s)", provider.name, provider.value)
    _apply_provider(provider.load(), configuration)
    return configuration


class SteepConfig(BaseModel):
    """Project settings from ``[tool.steep]``."""

    model_config = ConfigDict(extra="forbid")

    test_paths: list[str] = Field(default_factory=lambda: ["."])
    include_tags: list[str] = Field(default_factory=list)
    exclude_tags: list[str] = Field(default_factory=list)
    keyword: str | None = None
    verbosity: int = 0
    addopts: list[str] = Field(default_factory=list)
    reporters: list[str] = Field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("addopts", mode="before")
    @classmethod
    def _split_addopts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @field_validator("test_paths", "include_tags", "exclude_tags", "reporters", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


DEFAULT_CONFIG = SteepConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> SteepConfig:
    """Load ``[tool.steep]`` from the nearest ``pyproject.toml``.

    Missing file or section gives :data:`DEFAULT_CONFIG`.

    Raises:
        ConfigurationError: If the file cannot be parsed or the section is invalid.
    """
    path = find_pyproject(start)
    if path is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigurationError(msg) from e

    section = data.get("tool", {}).get("steep")
    if section is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    normalized = {str(key).replace("-", "_"): value for key, value in section.items()}
    try:
        return SteepConfig.model_validate(normalized)
    except ValidationError as e:
        msg = f"Invalid [tool.steep] configuration in {path}:\n{e}"
        raise ConfigurationError(msg) from e


__all__ = [
    "DEFAULT_CONFIG",
    "Configuration",
    "ConfigurationProvider",
    "SteepConfig",
    "default_instantiator",
    "find_pyproject",
    "load_config",
    "load_configuration",
]
