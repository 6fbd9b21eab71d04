"""map, filter and reduce over realized sequences.

All three are special forms: they receive their argument forms unevaluated,
evaluate the function designator and the collection exactly once (function
first), then apply the function element by element, left to right. The first
error raised by an application propagates unchanged and no later element is
touched.
"""

from __future__ import annotations

from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError, SlangTypeError
from slang.evaluation.apply import apply, not_invokable
from slang.core.realize import realize_value
from slang.types.environment import Environment
from slang.types.lambda_fn import is_invokable
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import is_truthy


def _check_arity(tail: list[SExpression]) -> None:
    if len(tail) < 2:
        raise SlangArityError(2, len(tail))


def _eval_invokable(
    form: SExpression, env: Environment, macros: MacroEnvironment, evaluate_fn: EvaluatorFn
) -> LispValue:
    fn = evaluate_fn(form, env, macros)
    if not is_invokable(fn):
        raise not_invokable(fn)
    return fn


def map_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> list[LispValue]:
    """(map fn coll): fn applied to each element, in order."""
    _check_arity(tail)
    fn = _eval_invokable(tail[0], env, macros, evaluate_fn)
    values = realize_value(evaluate_fn(tail[1], env, macros))

    return [apply(fn, [v], env, macros, evaluate_fn) for v in values]


def filter_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> list[LispValue]:
    """(filter pred coll): the elements for which pred returns a truthy value."""
    _check_arity(tail)
    fn = _eval_invokable(tail[0], env, macros, evaluate_fn)
    values = realize_value(evaluate_fn(tail[1], env, macros))

    result = []
    for v in values:
        if is_truthy(apply(fn, [v], env, macros, evaluate_fn)):
            result.append(v)
    return result


def reduce_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (reduce fn coll)      - seed is the first element, fold over the rest
    (reduce fn seed coll) - seed given explicitly, fold over the whole coll

    fn is called as (fn acc x), strictly left to right.
    """
    _check_arity(tail)
    if len(tail) > 3:
        raise SlangArityError(3, len(tail))

    fn = _eval_invokable(tail[0], env, macros, evaluate_fn)
    seeded = len(tail) == 3
    values = realize_value(evaluate_fn(tail[-1], env, macros))

    if seeded:
        acc = evaluate_fn(tail[1], env, macros)
    else:
        if not values:
            raise SlangTypeError("cannot reduce empty sequence without seed")
        acc, values = values[0], values[1:]

    for v in values:
        acc = apply(fn, [acc, v], env, macros, evaluate_fn)
    return acc
