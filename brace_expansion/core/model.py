from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Group:
    """First top-level brace pair of a string, split around the match."""

    pre: str
    body: str
    post: str


@dataclass(frozen=True)
class NumericRange:
    start: int
    end: int
    step: int  # magnitude only; direction comes from start vs end
    width: int
    padded: bool


@dataclass(frozen=True)
class AlphaRange:
    start: int  # character codes
    end: int
    step: int


@dataclass(frozen=True)
class CommaList:
    body: str


@dataclass(frozen=True)
class LiteralBody:
    body: str


Body = Union[NumericRange, AlphaRange, CommaList, LiteralBody]
SequenceSpec = Union[NumericRange, AlphaRange]
