"""Bash-compatible brace expansion.

>>> expand("a{d,c,b}e")
['ade', 'ace', 'abe']
"""

from brace_expansion.core.expand.cache_config import CacheConfig
from brace_expansion.core.expand.engine import BraceExpander, clear_cache, expand

__all__ = ["BraceExpander", "CacheConfig", "clear_cache", "expand"]
