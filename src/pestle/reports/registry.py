"""Reporter registry.

``[tool.pestle] reporters`` names reporters either by registry name or by
import path. A reporter is any class defining at least one of the session
callbacks in ``REPORTER_EVENTS``; the session looks each callback up by name
when the event fires and skips reporters that do not define it.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from pestle.reports.base import Reporter

logger = logging.getLogger(__name__)

T = TypeVar("T")

REPORTER_EVENTS = ("on_block_enter", "on_block_exit", "on_block_failure", "on_test_complete")

_reporter_registry: dict[str, type[Reporter]] = {}
_builtin_registry: dict[str, type[Reporter]] = {}


def _is_reporter_class(cls: Any) -> bool:
    return isinstance(cls, type) and any(callable(getattr(cls, e, None)) for e in REPORTER_EVENTS)


def _accepts(cls: type, keyword: str) -> bool:
    try:
        params = inspect.signature(cls).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(p.name == keyword or p.kind is inspect.Parameter.VAR_KEYWORD for p in params)


def reporter(
    cls: type[T] | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> type[T] | Any:
    """Make a class available to ``[tool.pestle] reporters`` under a short name.

    The class only needs the callbacks it cares about, for example just
    ``on_test_complete`` for a reporter that writes a results file:

        @reporter(name="junit")
        class JUnitReporter:
            def on_test_complete(self, result): ...

    Args:
        cls: The reporter class to register.
        enabled: Whether to register this reporter (default True).
        name: Registry name, defaults to the class name.

    Raises:
        TypeError: If the class defines none of ``on_block_enter``,
            ``on_block_exit``, ``on_block_failure`` or ``on_test_complete``.
    """

    def decorator(cls: type[T]) -> type[T]:
        if not _is_reporter_class(cls):
            msg = f"{cls!r} implements none of {', '.join(REPORTER_EVENTS)}"
            raise TypeError(msg)
        if enabled:
            _reporter_registry[name or cls.__name__] = cls  # type: ignore[assignment]
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Forget reporters registered with ``@reporter``; ``ConsoleReporter`` stays."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def register_builtin(cls: type[T]) -> type[T]:
    """Register a reporter shipped with pestle itself."""
    _reporter_registry[cls.__name__] = cls  # type: ignore[assignment]
    _builtin_registry[cls.__name__] = cls  # type: ignore[assignment]
    return cls


def _import_reporter_class(import_path: str) -> type[Reporter]:
    """Import a reporter from ``package.module:Class`` or ``package.module.Class``."""
    if ":" in import_path:
        module_path, class_name = import_path.rsplit(":", 1)
    elif "." in import_path:
        module_path, class_name = import_path.rsplit(".", 1)
    else:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    module = importlib.import_module(module_path)
    try:
        cls = getattr(module, class_name)
    except AttributeError:
        msg = f"{module_path} has no attribute {class_name!r}"
        raise ValueError(msg) from None

    if not _is_reporter_class(cls):
        msg = f"{import_path} is not a reporter class"
        raise TypeError(msg)
    return cls


def _reporter_class(name: str) -> type[Reporter]:
    if name in _reporter_registry:
        return _reporter_registry[name]

    if ":" in name or "." in name:
        return _import_reporter_class(name)

    available = ", ".join(sorted(_reporter_registry)) or "none"
    msg = f"Unknown reporter: {name}. Available: {available}"
    raise ValueError(msg)


def resolve_reporter(name: str, **kwargs: Any) -> Reporter:
    """Instantiate the reporter registered as ``name``, or imported from that path.

    Raises:
        ValueError: If the name is neither registered nor importable.
    """
    return _reporter_class(name)(**kwargs)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
    verbosity: int | None = None,
) -> list[Reporter]:
    """Instantiate each named reporter once.

    ``options[name]`` is passed as keyword arguments. ``verbosity`` is passed
    to reporters whose constructor takes it, unless their options set it.
    """
    options = options or {}
    reporters: list[Reporter] = []
    seen: set[str] = set()
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        cls = _reporter_class(name)
        kwargs = dict(options.get(name, {}))
        if verbosity is not None and _accepts(cls, "verbosity"):
            kwargs.setdefault("verbosity", verbosity)
        reporters.append(cls(**kwargs))
        logger.debug("Resolved reporter %s", name)
    return reporters


__all__ = [
    "REPORTER_EVENTS",
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
