"""Context wrapper: a value plus staged arguments that plugins run against."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .plugins import Plugin, ScopePlugin

logger = logging.getLogger(__name__)


def _plugin_name(plugin: Any) -> str:
    return getattr(plugin, "__qualname__", None) or type(plugin).__name__


class Context[T]:
    """Wraps a value and invokes plugins with it as their receiver.

    Arguments queued with ``stage`` are passed to the next consuming call
    (``run``, ``run_all``, ``apply`` or ``transform``) and then cleared.
    Explicit arguments given to one of those calls take precedence over the
    staged ones.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._staged: list[Any] = []

    def read(self) -> T:
        """Return the wrapped value."""
        return self._value

    def replace(self, value: T) -> Context[T]:
        """Swap in a new value; staged arguments are kept."""
        self._value = value
        return self

    def stage(self, *args: Any) -> Context[T]:
        """Append arguments for the next plugin call."""
        self._staged.extend(args)
        return self

    def set_staged(self, args: Sequence[Any]) -> Context[T]:
        """Use ``args`` as the staged arguments.

        A list is kept as is, not copied; other sequences are converted.
        """
        self._staged = args if isinstance(args, list) else list(args)
        return self

    def _resolve(self, args: tuple[Any, ...]) -> tuple[Any, ...] | list[Any]:
        return args if args else self._staged

    def _invoke[R](self, plugin: Plugin[T, R], args: tuple[Any, ...] | list[Any]) -> R:
        logger.debug("Invoking %s with %d argument(s)", _plugin_name(plugin), len(args))
        return plugin(self._value, *args)

    def run_all(self, plugins: Iterable[Plugin[T, Any]], *args: Any) -> Context[T]:
        """Run each plugin in order, discarding results.

        If a plugin raises, the remaining plugins are skipped and the staged
        arguments are left in place.
        """
        resolved = self._resolve(args)
        for plugin in plugins:
            self._invoke(plugin, resolved)
        self._staged = []
        return self

    def run(self, plugin: Plugin[T, Any], *args: Any) -> Context[T]:
        """Run a single plugin, discarding its result."""
        self._invoke(plugin, self._resolve(args))
        self._staged = []
        return self

    def apply[R](self, plugin: Plugin[T, R], *args: Any) -> R:
        """Run a plugin and return its result."""
        result = self._invoke(plugin, self._resolve(args))
        self._staged = []
        return result

    def transform[R](self, plugin: Plugin[T, R], *args: Any) -> Context[R]:
        """Run a plugin and wrap its result in a new context."""
        return Context(self.apply(plugin, *args))

    def with_scope[R](self, plugin: ScopePlugin[T, R], *args: Any) -> R:
        """Call ``plugin(self, value, staged)`` and return its result.

        ``staged`` is the live list, whatever explicit arguments are given.
        The staged arguments are not cleared; the plugin owns them.
        """
        logger.debug("Entering scope %s", _plugin_name(plugin))
        return plugin(self, self._value, self._staged)

    def __repr__(self) -> str:
        return f"Context(value={self._value!r}, staged={len(self._staged)})"
