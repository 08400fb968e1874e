from __future__ import annotations

import re

from brace_expansion.core.model import AlphaRange, Body, CommaList, LiteralBody, NumericRange


_NUMERIC_RANGE = re.compile(r"(-?[0-9]+)\.\.(-?[0-9]+)(?:\.\.(-?[0-9]+))?")
_ALPHA_RANGE = re.compile(r"([a-zA-Z])\.\.([a-zA-Z])(?:\.\.(-?[0-9]+))?")
_PADDED = re.compile(r"-?0[0-9]")


def is_padded(token: str) -> bool:
    """True for operands like "01" or "-007" that request zero padding."""
    return _PADDED.match(token) is not None


def _step(token: str | None) -> int:
    # bash treats a zero step as 1
    if token is None:
        return 1
    return abs(int(token)) or 1


def classify_body(body: str) -> Body:
    """Classify a group body as a sequence, a comma list, or a literal."""
    m = _NUMERIC_RANGE.fullmatch(body)
    if m:
        start, end, step = m.groups()
        return NumericRange(
            start=int(start),
            end=int(end),
            step=_step(step),
            width=max(len(start), len(end)),
            padded=is_padded(start) or is_padded(end),
        )

    m = _ALPHA_RANGE.fullmatch(body)
    if m:
        start, end, step = m.groups()
        return AlphaRange(start=ord(start), end=ord(end), step=_step(step))

    if "," in body:
        return CommaList(body=body)
    return LiteralBody(body=body)
