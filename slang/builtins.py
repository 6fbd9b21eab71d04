"""Host primitives for the reference interpreter.

Arithmetic, comparison, equality and a few list helpers, written as
fn(env, args) over already-evaluated arguments. They are not part of the
extension library itself; they give the builtins in slang.core something
to map, filter and reduce with.
"""
from __future__ import annotations
from typing import Any

from slang import LispValue
from slang.errors import SlangTypeError, SlangArityError
from slang.types.environment import Environment
from slang.types.nil import Nil, is_truthy
from slang.types.symbol import Symbol


# -------------------------------
# Equality and basic predicates
# -------------------------------
def is_equal(a: Any, b: Any) -> bool:
    """Structural equality: type-strict for atoms, element-wise for collections."""
    if a is b:
        return True
    # list/tuple/Vector compare element-wise regardless of container type
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def equals(env: Environment, expr: list[LispValue]) -> bool:
    if len(expr) <= 1:
        return True
    first = expr[0]
    return all(is_equal(first, other) for other in expr[1:])


def is_nil(env: Environment, expr: list[LispValue]) -> bool:
    if len(expr) != 1:
        raise SlangArityError(1, len(expr))
    return expr[0] is Nil


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    try:
        return sum(expr)
    except TypeError:
        raise SlangTypeError("All arguments to + must be numbers")


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    if not expr:
        raise SlangArityError(1, 0, "- requires at least 1 argument")
    try:
        if len(expr) == 1:
            return -expr[0]
        result = expr[0]
        for x in expr[1:]:
            result -= x
        return result
    except TypeError:
        raise SlangTypeError("All arguments to - must be numbers")


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    result = 1
    try:
        for x in expr:
            result *= x
        return result
    except TypeError:
        raise SlangTypeError("All arguments to * must be numbers")


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    if not expr:
        raise SlangArityError(1, 0, "/ requires at least 1 argument")
    try:
        if len(expr) == 1:
            return 1 / expr[0]
        result = expr[0]
        for x in expr[1:]:
            result /= x
        return result
    except TypeError:
        raise SlangTypeError("All arguments to / must be numbers")


def inc(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise SlangArityError(1, len(expr))
    return expr[0] + 1


def dec(env: Environment, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise SlangArityError(1, len(expr))
    return expr[0] - 1


def is_even(env: Environment, expr: list[LispValue]) -> bool:
    if len(expr) != 1:
        raise SlangArityError(1, len(expr))
    return expr[0] % 2 == 0


def is_odd(env: Environment, expr: list[LispValue]) -> bool:
    return not is_even(env, expr)


# -------------------------------
# Comparison
# -------------------------------
def lt(env: Environment, expr: list[LispValue]) -> bool:
    return all(a < b for a, b in zip(expr, expr[1:]))

def lte(env: Environment, expr: list[LispValue]) -> bool:
    return all(a <= b for a, b in zip(expr, expr[1:]))

def gt(env: Environment, expr: list[LispValue]) -> bool:
    return all(a > b for a, b in zip(expr, expr[1:]))

def gte(env: Environment, expr: list[LispValue]) -> bool:
    return all(a >= b for a, b in zip(expr, expr[1:]))


# -------------------------------
# Boolean logic and lists
# -------------------------------
def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    if len(expr) != 1:
        raise SlangArityError(1, len(expr))
    return not is_truthy(expr[0])


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment):
    env.update({
        Symbol('nil'): Nil,
        Symbol('true'): True,
        Symbol('false'): False,
        Symbol('+'): add,
        Symbol('-'): sub,
        Symbol('*'): mul,
        Symbol('/'): div,
        Symbol('='): equals,
        Symbol('<'): lt,
        Symbol('<='): lte,
        Symbol('>'): gt,
        Symbol('>='): gte,
        Symbol('not'): logical_not,
        Symbol('list'): list_builtin,
        Symbol('inc'): inc,
        Symbol('dec'): dec,
        Symbol('even?'): is_even,
        Symbol('odd?'): is_odd,
        Symbol('nil?'): is_nil,
    })
