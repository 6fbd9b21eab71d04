from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment


def macroexpand_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(macroexpand form): expand the head of the evaluated form.

    The argument is evaluated, so (macroexpand '(m 1)) expands (m 1). Whether
    any expansion happened is not reported; an unexpanded form comes back as is.
    """
    if len(tail) != 1:
        raise SlangArityError(1, len(tail))
    form = evaluate_fn(tail[0], env, macros)
    expanded, _ = macros.expand(form, evaluate_fn, env)
    return expanded
