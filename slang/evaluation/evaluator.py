"""Reference evaluator for slang.

A plain recursive tree walker: enough host to run the builtins in slang.core.
Call forms are Python lists; the head is macro-expanded first, then evaluated.
Special-form heads receive their argument forms unevaluated, everything else
is applied to arguments evaluated left to right.
"""

from __future__ import annotations

from slang import SExpression, LispValue
from slang.evaluation.apply import apply
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol
from slang.types.vector import Vector


def evaluate(
    expr: SExpression, env: Environment, macros: MacroEnvironment | None = None
) -> LispValue:
    if macros is None:
        macros = MacroEnvironment()

    match expr:
        case Symbol():
            return env.lookup(expr)

        case Vector():
            return Vector(evaluate(e, env, macros) for e in expr)

        case [] if isinstance(expr, list):
            return []

        case [head, *tail_args] if isinstance(expr, list):
            if macros.is_macro(head):
                expanded = macros.expand_1(expr, evaluate, env)
                return evaluate(expanded, env, macros)

            op = evaluate(head, env, macros)
            if isinstance(op, SpecialForm):
                return op(tail_args, env, macros, evaluate)

            args = [evaluate(arg, env, macros) for arg in tail_args]
            return apply(op, args, env, macros, evaluate)

    # --- Atoms return as-is ---
    return expr
