from __future__ import annotations


class Vector(tuple):
    """A vector literal, e.g. the binding vector of (doseq [x xs] ...).

    Distinct from a Python list, which the evaluator treats as a call form.
    """

    __slots__ = ()

    def __repr__(self):
        return f"Vector({list(self)!r})"
