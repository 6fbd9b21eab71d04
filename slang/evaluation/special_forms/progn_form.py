from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import Nil


def progn_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env, macros)
    return result
