from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError, SlangInvalidSymbol
from slang.types.environment import Environment
from slang.types.lambda_fn import Lambda
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import Nil
from slang.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn [params] body...) allows zero or more body forms.
    # Several forms are an implicit progn; none makes the function return nil.
    if not tail:
        raise SlangArityError(1, 0, "lambda requires at least a parameter list")

    params = tail[0]
    body_forms = tail[1:]

    if not isinstance(params, (list, tuple)):
        raise SlangInvalidSymbol(f"lambda parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SlangInvalidSymbol(f"lambda parameter must be a Symbol, got {p}")

    if not body_forms:
        body = Nil
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("progn"), *body_forms]

    return Lambda(list(params), body, env)
