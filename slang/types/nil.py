from __future__ import annotations


class NilType:
    _instance: NilType | None = None

    def __new__(cls):
        # Single shared instance so `is Nil` checks hold everywhere
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_truthy(value) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None or isinstance(value, NilType):
        return False
    if isinstance(value, bool):
        return value
    return True
