"""Name-based lookup of reporter classes.

The command line and ``[tool.steep]`` refer to reporters by name. A name is
either a key registered here (built-ins, or classes decorated with
:func:`reporter`) or an import string such as ``"pkg.module:MyReporter"``.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from steep.errors import ConfigurationError


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from steep.reports.base import Reporter


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReporterRegistry:
    """Reporter classes by name.

    Built-in entries survive :meth:`reset`; user registrations do not.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[Reporter]] = {}
        self._builtins: dict[str, type[Reporter]] = {}

    @property
    def classes(self) -> dict[str, type[Reporter]]:
        return self._classes

    def add(self, cls: type[Reporter], name: str | None = None, *, builtin: bool = False) -> None:
        key = name or cls.__name__
        if key in self._classes and self._classes[key] is not cls:
            logger.debug("reporter name %r now refers to %s", key, cls.__qualname__)
        self._classes[key] = cls
        if builtin:
            self._builtins[key] = cls

    def reset(self) -> None:
        self._classes.clear()
        self._classes.update(self._builtins)

    def lookup(self, name: str) -> type[Reporter]:
        """Return the class registered as ``name`` or importable from it."""
        if name in self._classes:
            return self._classes[name]
        if ":" in name or "." in name:
            return _import_reporter_class(name)
        available = ", ".join(sorted(self._classes))
        msg = f"Unknown reporter: {name}. Available: {available}"
        raise ConfigurationError(msg)

    def create(self, name: str, **kwargs: Any) -> Reporter:
        cls = self.lookup(name)
        try:
            return cls(**kwargs)
        except TypeError as e:
            msg = f"Cannot create reporter {name} with options {kwargs!r}: {e}"
            raise ConfigurationError(msg) from e


def _import_reporter_class(import_path: str) -> type[Reporter]:
    if ":" in import_path:
        module_path, _, class_name = import_path.partition(":")
    else:
        module_path, _, class_name = import_path.rpartition(".")

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        msg = f"Cannot import reporter module {module_path!r} for {import_path}"
        raise ConfigurationError(msg) from e

    from steep.reports.base import Reporter

    cls = getattr(module, class_name, None)
    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{import_path} is not a Reporter class"
        raise ConfigurationError(msg)
    return cls


_registry = ReporterRegistry()


def reporter(
    cls: type[T] | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> type[T] | Any:
    """Register a reporter class so it can be selected by name.

    Works bare or with arguments::

        @reporter
        class DotsReporter(Reporter): ...

        @reporter(name="dots")
        class DotsReporter(Reporter): ...
    """

    def decorator(target: type[T]) -> type[T]:
        if enabled:
            _registry.add(target, name)  # type: ignore[arg-type]
        return target

    if cls is not None:
        return decorator(cls)
    return decorator


def register_builtin(cls: type[T]) -> type[T]:
    """Register a reporter that stays available after :func:`clear_reporter_registry`."""
    _registry.add(cls, builtin=True)  # type: ignore[arg-type]
    return cls


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _registry.classes


def clear_reporter_registry() -> None:
    """Forget user registrations, keeping built-ins."""
    _registry.reset()


def resolve_reporter(name: str, **kwargs: Any) -> Reporter:
    """Instantiate the reporter known as ``name``.

    Raises:
        ConfigurationError: If the name is unknown, cannot be imported, is not
            a reporter class, or rejects ``kwargs``.
    """
    return _registry.create(name, **kwargs)


def resolve_reporters(
    names: Iterable[str],
    options: Mapping[str, Mapping[str, Any]] | None = None,
) -> list[Reporter]:
    """Instantiate several reporters, passing each its entry from ``options``."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "ReporterRegistry",
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
