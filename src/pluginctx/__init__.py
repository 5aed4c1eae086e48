"""pluginctx - Wrap any value and run plugins against it with staged arguments."""

from .batches import Batch as Batch
from .context import Context as Context
from .plugins import Plugin as Plugin
from .plugins import ScopePlugin as ScopePlugin
from .plugins import bind as bind
from .plugins import pluginize as pluginize
from .plugins import unbind as unbind
