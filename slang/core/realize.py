"""Sequence realization: pull a first/next sequence into an ordered list."""

from __future__ import annotations

import logging
from typing import Optional

from slang import LispValue
from slang.errors import SlangTypeError
from slang.types.seq import ListSeq, Seq, is_seqable

logger = logging.getLogger(__name__)


def as_seq(value: LispValue) -> Seq:
    """Return a Seq view of `value`, or raise if it is not a sequence."""
    if isinstance(value, (list, tuple, str)):
        return ListSeq(value)
    if isinstance(value, Seq):
        return value
    raise SlangTypeError(
        f"invalid type given; expected Seq got {type(value).__name__}"
    )


def realize(seq: Optional[Seq]) -> list[LispValue]:
    """Walk `seq` with first()/next() until it is exhausted.

    Stops when first() signals emptiness (None) or next() returns None.
    Must not be called on an infinite sequence.
    """
    values: list[LispValue] = []
    while seq is not None:
        v = seq.first()
        if v is None:
            break
        values.append(v)
        seq = seq.next()
    logger.debug("realized %d element(s)", len(values))
    return values


def realize_value(value: LispValue) -> list[LispValue]:
    """as_seq + realize in one step, for builtins that take any sequence."""
    return realize(as_seq(value))


__all__ = ["as_seq", "is_seqable", "realize", "realize_value"]
