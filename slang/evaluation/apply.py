"""Application engine for the reference host.

Centralizes function application so the evaluator and the builtins in
slang.core invoke Lambdas and Python callables the same way:
- Lambda: bind positional arguments in a new frame over the closure env and
  evaluate the body.
- Python callable builtins: invoke as fn(env, args) with evaluated args.
- Anything else is not invokable.
"""

from __future__ import annotations

from typing import Callable

from slang import LispValue, EvaluatorFn
from slang.errors import SlangTypeError
from slang.types.environment import Environment
from slang.types.lambda_fn import Lambda, is_invokable


def not_invokable(value: LispValue) -> SlangTypeError:
    return SlangTypeError(f"{type(value).__name__} is not invokable")


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    macros,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable to evaluated `args`."""
    if isinstance(head, Lambda):
        new_env = head.extend_env(list(args))
        return evaluate_fn(head.body, new_env, macros)
    if is_invokable(head):
        return head(env, list(args))
    raise not_invokable(head)
