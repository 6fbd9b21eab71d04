from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import Nil, is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise SlangArityError(
            2, len(tail), "if requires a condition and a then-expression"
        )

    cond = evaluate_fn(tail[0], env, macros)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env, macros)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, macros)
    else:
        return Nil
