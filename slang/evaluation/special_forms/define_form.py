from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment


def define_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Returns the bound value.
    """
    if len(tail) != 2:
        raise SlangArityError(2, len(tail), "define requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env, macros)
    env.define(name, value)
    return value
