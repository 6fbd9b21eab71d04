"""Textual rendering of slang values.

`to_string` is the display form used by str, throw and error messages:
strings are double-quoted, nil prints as `nil`, booleans as true/false, call
forms as (...) and vectors as [...].
"""

from __future__ import annotations

from slang import LispValue
from slang.config import get_quote_char
from slang.types.lambda_fn import Lambda
from slang.types.nil import NilType
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol
from slang.types.vector import Vector


def _quote(s: str) -> str:
    q = get_quote_char()
    return q + s + q


def to_string(value: LispValue) -> str:
    if isinstance(value, str):
        return _quote(value)
    if value is None or isinstance(value, NilType):
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Vector):
        return "[" + " ".join(to_string(v) for v in value) + "]"
    if isinstance(value, (list, tuple)):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, (Lambda, SpecialForm)):
        return str(value)
    if callable(value) and not isinstance(value, type):
        return f"<builtin {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)


def strip_quotes(rendered: str) -> str:
    """Remove one layer of surrounding quote characters, if present."""
    q = get_quote_char()
    if len(rendered) >= 2 and rendered[0] == q and rendered[-1] == q:
        return rendered[1:-1]
    return rendered
