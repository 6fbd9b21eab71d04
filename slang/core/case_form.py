"""(case subject key1 body1 key2 body2 ... default?)

The subject is evaluated once and compared against each key literally (keys
are never evaluated). The body of the first matching key is evaluated and
returned. An odd trailing form is the default and is evaluated when nothing
matched. Exactly two forms means the second one is evaluated unconditionally.
"""

import logging

from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.builtins import is_equal
from slang.errors import SlangArityError, SlangNoMatchError
from slang.printer import to_string
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment

logger = logging.getLogger(__name__)


def case_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroEnvironment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise SlangArityError(2, len(tail), "case requires at-least 2 args")

    subject = evaluate_fn(tail[0], env, macros)

    if len(tail) == 2:
        return evaluate_fn(tail[1], env, macros)

    for i in range(1, len(tail), 2):
        if i + 1 >= len(tail):
            logger.debug("case: no clause matched, taking default")
            return evaluate_fn(tail[i], env, macros)

        if is_equal(subject, tail[i]):
            logger.debug("case: matched clause %d", (i - 1) // 2)
            return evaluate_fn(tail[i + 1], env, macros)

    raise SlangNoMatchError(subject, to_string(subject))
