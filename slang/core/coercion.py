"""str, range and throw."""

from __future__ import annotations

from slang import LispValue
from slang.errors import SlangArityError, SlangThrownError, SlangTypeError
from slang.printer import strip_quotes, to_string
from slang.types.environment import Environment
from slang.types.nil import NilType


def make_string(*vals: LispValue) -> str:
    """Concatenate the renderings of `vals`, one layer of quotes stripped from each.

    A single nil renders as the empty string.
    """
    if not vals:
        return ""
    if len(vals) == 1:
        v = vals[0]
        if v is None or isinstance(v, NilType):
            return ""
        return strip_quotes(to_string(v))
    return "".join(strip_quotes(to_string(v)) for v in vals)


def _is_int(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def make_range(*args: LispValue) -> list[int]:
    """
    (range n)              -> 0 .. n-1
    (range min max)        -> min .. max-1
    (range min max step)   -> min, min+step, ... while < max
    """
    if not 1 <= len(args) <= 3:
        raise SlangArityError(1, len(args), f"range takes 1-3 arguments, got {len(args)}")
    for a in args:
        if not _is_int(a):
            raise SlangTypeError(
                f"invalid type given; expected Int got {type(a).__name__}"
            )

    if len(args) == 1:
        start, stop, step = 0, args[0], 1
    elif len(args) == 2:
        start, stop, step = args[0], args[1], 1
    else:
        start, stop, step = args

    if start >= stop:
        return []
    if step <= 0:
        raise SlangTypeError(f"range step {step} never reaches {stop}")
    return list(range(start, stop, step))


def make_error(*vals: LispValue) -> SlangThrownError:
    """The error (throw vals...) raises, message built like str."""
    return SlangThrownError(make_string(*vals))


# fn(env, args) builtins

def str_builtin(env: Environment, args: list[LispValue]) -> str:
    return make_string(*args)


def range_builtin(env: Environment, args: list[LispValue]) -> list[int]:
    return make_range(*args)


def throw_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    raise make_error(*args)
