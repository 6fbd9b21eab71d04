"""Threading macros -> and ->>.

(-> x (f a) g)  evaluates as (g (f x a))
(->> x (f a) g) evaluates as (g (f a x))

Each step that is a call form is rebuilt as a new list with the running result
spliced in; the step form itself is left untouched so a form reused elsewhere
(in a lambda body, say) is not corrupted. Atoms are spliced as they are.
Lists, symbols and vectors would be evaluated again by the host, so those are
wrapped in (quote ...).
"""

from __future__ import annotations

import logging

from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.evaluation.apply import apply, not_invokable
from slang.printer import to_string
from slang.types.environment import Environment
from slang.types.lambda_fn import is_invokable
from slang.types.macro_environment import MacroEnvironment
from slang.types.symbol import Symbol
from slang.types.vector import Vector

logger = logging.getLogger(__name__)

QUOTE = Symbol("quote")


def splice_value(value: LispValue) -> SExpression:
    if isinstance(value, (list, Symbol, Vector)):
        return [QUOTE, value]
    return value


def thread_form(step: list[SExpression], value: LispValue, last: bool) -> list[SExpression]:
    """Return a copy of call form `step` with `value` inserted as an argument.

    Thread-first puts it right after the operator, thread-last appends it.
    The other arguments keep their relative order.
    """
    spliced = splice_value(value)
    if last:
        return [*step, spliced]
    return [step[0], spliced, *step[1:]]


def thread_call(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
    last: bool,
) -> LispValue:
    if not tail:
        raise SlangArityError(1, 0, "at-least 1 argument required")

    res = evaluate_fn(tail[0], env, macros)

    for step in tail[1:]:
        if isinstance(step, Symbol):
            step = [step]

        if isinstance(step, list) and step:
            form = thread_form(step, res, last)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("threaded form: %s", to_string(form))
            res = evaluate_fn(form, env, macros)
        elif is_invokable(step):
            res = apply(step, [res], env, macros, evaluate_fn)
        else:
            raise not_invokable(step)

    return res


def thread_first_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(-> x forms...): thread x through forms as the first argument."""
    return thread_call(tail, env, macros, evaluate_fn, last=False)


def thread_last_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(->> x forms...): thread x through forms as the last argument."""
    return thread_call(tail, env, macros, evaluate_fn, last=True)
