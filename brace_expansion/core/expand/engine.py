from __future__ import annotations

import logging
import re

from brace_expansion.core.cache.lru import CacheStats, CacheTier
from brace_expansion.core.expand.cache_config import CacheConfig
from brace_expansion.core.expand.sequence import generate_sequence
from brace_expansion.core.model import AlphaRange, CommaList, Group, LiteralBody, NumericRange
from brace_expansion.core.parse.balanced import locate
from brace_expansion.core.parse.classify import classify_body
from brace_expansion.core.parse.commas import split_comma_parts
from brace_expansion.core.parse.escape import ESC_CLOSE, escape_braces, unescape_braces


logger = logging.getLogger(__name__)

_HAS_BRACES = re.compile(r"[{}]")
# a comma (not doubled) with a closing brace somewhere after it
_DANGLING_COMMA = re.compile(r",(?!,).*\}")


class BraceExpander:
    """Bash-compatible brace expansion with its own three-level LRU cache.

    Instances never share cache state. The module-level expand() and
    clear_cache() functions delegate to one default instance.
    """

    def __init__(self, config: CacheConfig | None = None) -> None:
        self.caches = CacheTier(config)

    def expand(self, pattern: str) -> list[str]:
        """Return every string pattern denotes, in bash order.

        "" expands to nothing; text without braces expands to itself.
        Never raises: malformed groups are kept as literal text.
        """
        if not pattern:
            return []

        cached = self.caches.results.get(pattern)
        if cached is not None:
            return list(cached)

        if not _HAS_BRACES.search(pattern):
            result = [pattern]
        else:
            s = pattern
            # bash keeps a leading "{}" literal, but only at the top level:
            # "{},a}b" stays as is while "a{},b}c" expands to a}c abc
            if s.startswith("{}"):
                s = "\\{\\}" + s[2:]
            result = [unescape_braces(x) for x in self._expand(escape_braces(s), top=True)]
            logger.debug("expanded %r into %d strings", pattern, len(result))

        self.caches.results.set(pattern, result)
        return list(result)

    def clear_cache(self) -> None:
        self.caches.clear()

    def cache_stats(self) -> list[CacheStats]:
        return self.caches.stats()

    def _remember(self, s: str, result: list[str], top: bool) -> list[str]:
        # top-level results live in the results cache, keyed by the raw pattern
        if not top:
            self.caches.sub_expansions.set(s, result)
        return result

    def _expand(self, s: str, top: bool = False) -> list[str]:
        # Walk sibling groups left to right, stopping at a cached suffix or at
        # text without groups, then combine right to left. Only nesting recurses.
        chain: list[tuple[str, Group, bool]] = []
        key, is_top = s, top
        while True:
            if not is_top:
                cached = self.caches.sub_expansions.get(key)
                if cached is not None:
                    result = cached
                    break
            group = locate(key)
            if group is None:
                result = self._remember(key, [key], is_top)
                break
            chain.append((key, group, is_top))
            if not group.post:
                result = [""]
                break
            key, is_top = group.post, False

        for key, group, is_top in reversed(chain):
            result = self._expand_group(key, group, result, is_top)
        return result

    def _expand_group(self, s: str, group: Group, post: list[str], top: bool) -> list[str]:
        """Expand the first group of s given the expansions of its post text."""
        pre = group.pre
        if pre.endswith("$"):
            literal = pre + "{" + group.body + "}"
            return self._remember(s, [literal + p for p in post], top)

        body = classify_body(group.body)
        if isinstance(body, LiteralBody):
            # {a},b}
            if _DANGLING_COMMA.search(group.post):
                return self._expand(pre + "{" + group.body + ESC_CLOSE + group.post)
            return self._remember(s, [s], top)

        if isinstance(body, (NumericRange, AlphaRange)):
            members = generate_sequence(body)
        else:
            parts = split_comma_parts(body.body, self.caches.comma_parts)
            if len(parts) == 1:
                # x{{a,b}}y ==> x{a}y x{b}y
                parts = ["{" + alt + "}" for alt in self._expand(parts[0])]
                if len(parts) == 1:
                    return self._remember(s, [pre + parts[0] + p for p in post], top)
            members = [alt for part in parts for alt in self._expand(part)]

        # empty comma alternatives are dropped at the top level only
        keep_empty = not top or not isinstance(body, CommaList)
        expansions: list[str] = []
        for m in members:
            for p in post:
                expansion = pre + m + p
                if keep_empty or expansion:
                    expansions.append(expansion)
        return self._remember(s, expansions, top)


_default_expander = BraceExpander()


def expand(pattern: str) -> list[str]:
    """Expand pattern with the shared default expander."""
    return _default_expander.expand(pattern)


def clear_cache() -> None:
    """Drop everything the shared default expander has memoized."""
    _default_expander.clear_cache()
