"""Marker wrapper for operators that receive their argument forms unevaluated.

The evaluator checks a call head against SpecialForm before evaluating any
arguments; everything else is applied to already-evaluated values.
"""

from __future__ import annotations
from typing import Callable

from slang import SExpression, LispValue, EvaluatorFn


SpecialFormFn = Callable[[list, object, object, EvaluatorFn], LispValue]


class SpecialForm:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: SpecialFormFn):
        self.name = name
        self.fn = fn

    def __call__(
        self, tail: list[SExpression], env, macros, evaluate_fn: EvaluatorFn
    ) -> LispValue:
        return self.fn(tail, env, macros, evaluate_fn)

    def __repr__(self):
        return f"<special-form {self.name}>"
