"""Plugin signatures and helpers for adapting functions into plugins."""

from __future__ import annotations

import functools
from collections.abc import Callable
from types import ModuleType
from typing import TYPE_CHECKING, Any, Concatenate

if TYPE_CHECKING:
    from .context import Context

type Plugin[T, R] = Callable[Concatenate[T, ...], R]
"""Called as ``plugin(value, *args)``."""

type ScopePlugin[T, R] = Callable[[Context[T], T, list[Any]], R]
"""Called as ``plugin(context, value, staged)``."""


def unbind(method: Callable[..., Any]) -> Callable[..., Any]:
    """Turn a receiver-style callable into a plain ``f(receiver, *args)``.

    A bound method is unwrapped to its function, so the receiver it was
    bound to is replaced by whatever receiver the result is called with:

        >>> class Counter:
        ...     def __init__(self, n):
        ...         self.n = n
        ...     def add(self, k):
        ...         return self.n + k
        >>> add = unbind(Counter(1).add)
        >>> add(Counter(10), 5)
        15
    """
    func = getattr(method, "__func__", None)
    if func is None:
        owner = getattr(method, "__self__", None)
        if owner is None or isinstance(owner, ModuleType | type):
            func = method
        else:
            # built-in bound methods, e.g. "abc".upper
            func = getattr(type(owner), method.__name__)

    @functools.wraps(func)
    def plain(receiver: Any, *args: Any) -> Any:
        return func(receiver, *args)

    return plain


def bind[T, R](func: Callable[[T, list[Any]], R]) -> Plugin[T, R]:
    """Adapt ``func(receiver, args)`` into a plugin.

    The plugin collects its positional arguments into one list and passes
    it as ``args``.
    """

    @functools.wraps(func)
    def plugin(receiver: T, *args: Any) -> R:
        return func(receiver, list(args))

    return plugin


def pluginize[T, R](plugin: Plugin[T, R]) -> Callable[..., Plugin[T, R]]:
    """Return a factory that fixes the arguments of ``plugin``.

    Plugins made by the factory ignore the arguments they are called with:

        >>> add = pluginize(lambda x, n: x + n)
        >>> add(2)(1, 100)
        3
    """

    def factory(*fixed: Any) -> Plugin[T, R]:
        @functools.wraps(plugin)
        def curried(receiver: T, *_ignored: Any) -> R:
            return plugin(receiver, *fixed)

        return curried

    return factory
