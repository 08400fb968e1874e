from __future__ import annotations

from typing import Optional

from brace_expansion.core.model import Group


def find_pair(s: str, open_: str = "{", close: str = "}") -> Optional[tuple[int, int]]:
    """Return (open_index, close_index) of the first balanced pair in s.

    Scans openers and closers in order. The first opener whose depth returns
    to zero wins. If the first opener is never closed, the leftmost pair that
    did balance is returned instead, so "{a{b,c}" locates "{b,c}".
    """
    ai = s.find(open_)
    bi = s.find(close, ai + 1)
    if ai < 0 or bi < 0:
        return None

    openers: list[int] = []
    left = len(s)
    right = -1
    i = ai
    while i >= 0:
        if i == ai:
            openers.append(i)
            ai = s.find(open_, i + 1)
        elif len(openers) == 1:
            return openers.pop(), bi
        else:
            beg = openers.pop()
            if beg < left:
                left = beg
                right = bi
            bi = s.find(close, i + 1)
        i = ai if 0 <= ai < bi else bi

    if openers and right >= 0:
        return left, right
    return None


def locate(s: str) -> Optional[Group]:
    """Split s around its first top-level {...} group, or None when there is none."""
    pair = find_pair(s)
    if pair is None:
        return None
    start, end = pair
    return Group(pre=s[:start], body=s[start + 1 : end], post=s[end + 1 :])
