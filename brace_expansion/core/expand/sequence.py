from __future__ import annotations

import operator

from brace_expansion.core.model import AlphaRange, SequenceSpec


def _pad(n: int, width: int) -> str:
    text = str(n)
    need = width - len(text)
    if need <= 0:
        return text
    if n < 0:
        return "-" + "0" * need + text[1:]
    return "0" * need + text


def generate_sequence(seq: SequenceSpec) -> list[str]:
    """Materialize the members of a numeric or alphabetic range, in order.

    Direction follows start vs end whatever sign the step was written with.
    Padded numeric ranges are zero-filled to the width of the wider operand,
    keeping the minus sign in front. An alphabetic member equal to a
    backslash is emitted as an empty string, as bash does.
    """
    incr = seq.step
    within = operator.le
    if seq.end < seq.start:
        incr = -incr
        within = operator.ge

    members: list[str] = []
    i = seq.start
    while within(i, seq.end):
        if isinstance(seq, AlphaRange):
            c = chr(i)
            members.append("" if c == "\\" else c)
        elif seq.padded:
            members.append(_pad(i, seq.width))
        else:
            members.append(str(i))
        i += incr
    return members
