from __future__ import annotations

from brace_expansion.core.cache.lru import LRUCache
from brace_expansion.core.model import Group
from brace_expansion.core.parse.balanced import locate


def split_comma_parts(body: str, cache: LRUCache[list[str]] | None = None) -> list[str]:
    """Split body on top-level commas, keeping nested {...} groups whole.

    "a,{b,c},d" -> ["a", "{b,c}", "d"]. Results are memoized in cache by the
    exact body string, and by every suffix that starts after a nested group.
    The returned list is shared with the cache; callers must not mutate it.
    """
    if not body:
        return [""]

    chain: list[tuple[str, Group]] = []
    key = body
    tail: list[str] | None = None
    while True:
        if cache is not None:
            cached = cache.get(key)
            if cached is not None:
                tail = cached
                break
        group = locate(key)
        if group is None:
            tail = key.split(",")
            if cache is not None:
                cache.set(key, tail)
            break
        chain.append((key, group))
        if not group.post:
            break
        key = group.post

    # tail stays None when the last group ends the body
    for key, group in reversed(chain):
        parts = group.pre.split(",")
        parts[-1] += "{" + group.body + "}"
        if tail is not None:
            parts[-1] += tail[0]
            parts.extend(tail[1:])
        if cache is not None:
            cache.set(key, parts)
        tail = parts

    assert tail is not None
    return tail
