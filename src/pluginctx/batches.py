"""Batch model: a named, ordered collection of plugins."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, Field

from .context import Context
from .plugins import Plugin

logger = logging.getLogger(__name__)


class Batch(BaseModel):
    """A named collection of plugins that run together against a context."""

    model_config = {"arbitrary_types_allowed": True}

    name: str
    plugins: list[Callable[..., Any]] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Plugin[Any, Any]]:
        return iter(self.plugins)

    def run[T](self, ctx: Context[T], *args: Any) -> Context[T]:
        """Run all plugins in this batch against ``ctx``."""
        logger.debug("Running batch '%s' (%d plugin(s))", self.name, len(self.plugins))
        return ctx.run_all(self.plugins, *args)
