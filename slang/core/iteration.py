"""doseq and set!: the two builtins that write into the caller's scope.

Both bind in the current frame with Environment.define, so the binding is
visible to every form evaluated afterwards in the same scope. doseq does not
open a frame of its own and does not restore the loop symbol when it is done.
"""

from __future__ import annotations

import logging

from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.core.realize import realize_value
from slang.errors import SlangArityError, SlangTypeError
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import Nil
from slang.types.symbol import Symbol
from slang.types.vector import Vector

logger = logging.getLogger(__name__)


def doseq_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(doseq [x coll] body...): run body once per element with x bound to it."""
    if not tail:
        raise SlangArityError(1, 0)

    binding = tail[0]
    if not isinstance(binding, Vector) or len(binding) != 2:
        raise SlangTypeError(
            f"doseq requires a binding vector [symbol seq], got {type(binding).__name__}"
        )

    symbol, seq_expr = binding
    if not isinstance(symbol, Symbol):
        raise SlangTypeError(
            f"invalid type; expected symbol got {type(symbol).__name__}"
        )

    values = realize_value(evaluate_fn(seq_expr, env, macros))
    body = tail[1:]

    for v in values:
        env.define(symbol, v)
        for form in body:
            evaluate_fn(form, env, macros)

    return Nil


def mutate_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name value): rebind name in the current scope and return value."""
    if len(tail) < 2:
        raise SlangArityError(2, len(tail))

    symbol = tail[0]
    if not isinstance(symbol, Symbol):
        raise SlangTypeError(
            f"expected symbol got {type(symbol).__name__}"
        )

    value = evaluate_fn(tail[1], env, macros)
    logger.debug("set! %s", symbol)
    env.define(symbol, value)
    return value
