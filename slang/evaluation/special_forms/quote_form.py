from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x): return x unevaluated."""
    if len(tail) != 1:
        raise SlangArityError(1, len(tail), "quote requires exactly 1 argument")
    return tail[0]
