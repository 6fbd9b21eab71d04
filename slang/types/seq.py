"""The Sequence capability: anything offering first() and next().

`first()` returns the head element, or None when the sequence is empty. None
is the emptiness signal; Nil, False and 0 are ordinary elements.
`next()` returns the rest as another Seq, or None when nothing follows.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Protocol, Sequence, runtime_checkable

from slang import LispValue

_MISSING = object()


@runtime_checkable
class Seq(Protocol):
    def first(self) -> Optional[LispValue]: ...

    def next(self) -> Optional[Seq]: ...


class ListSeq:
    """Seq view over an indexable Python collection (list, tuple, Vector, str).

    A Python None stored in the collection is indistinguishable from the end
    of the sequence, so realizing [1, None, 2] yields [1]. Host values use Nil
    for nothing; None only reaches a list through a Python callable.
    """

    __slots__ = ("_values", "_offset")

    def __init__(self, values: Sequence, offset: int = 0):
        self._values = values
        self._offset = offset

    def first(self) -> Optional[LispValue]:
        if self._offset >= len(self._values):
            return None
        return self._values[self._offset]

    def next(self) -> Optional[ListSeq]:
        if self._offset + 1 >= len(self._values):
            return None
        return ListSeq(self._values, self._offset + 1)

    def __repr__(self):
        return f"ListSeq({list(self._values[self._offset:])!r})"


class LazySeq:
    """
    A lazy sequence over a Python iterator. The head is pulled on first
    access and memoized, as is the rest, so walking the same LazySeq twice
    yields the same elements without re-consuming the iterator.
    """

    __slots__ = ("_iterator", "_first", "_rest", "_realized")

    def __init__(self, iterable: Iterable):
        self._iterator: Iterator = iter(iterable)
        self._first = _MISSING
        self._rest: Optional[LazySeq] = None
        self._realized = False

    def _realize(self):
        if self._realized:
            return
        self._realized = True
        try:
            self._first = next(self._iterator)
        except StopIteration:
            self._first = _MISSING

    def first(self) -> Optional[LispValue]:
        self._realize()
        if self._first is _MISSING:
            return None
        return self._first

    def next(self) -> Optional[LazySeq]:
        self._realize()
        if self._first is _MISSING:
            return None
        if self._rest is None:
            self._rest = LazySeq(self._iterator)
        self._rest._realize()
        if self._rest._first is _MISSING:
            return None
        return self._rest

    def __repr__(self):
        # Only show what has been realized; the tail may be infinite
        items = []
        current: Optional[LazySeq] = self
        while current is not None and current._realized:
            if current._first is _MISSING:
                break
            items.append(repr(current._first))
            current = current._rest
        if current is not None and not current._realized:
            items.append("...")
        return f"LazySeq({' '.join(items)})"


def is_seqable(value: LispValue) -> bool:
    """True if `value` satisfies the Sequence capability."""
    return isinstance(value, (list, tuple, str)) or isinstance(value, Seq)
