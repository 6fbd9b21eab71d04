"""type, implements? and to-type.

Thin builtins over a TypeRegistry; the registry is passed in when the
bindings are built so every interpreter gets its own table.
"""

from __future__ import annotations

from typing import Callable

from slang import LispValue
from slang.errors import SlangArityError, SlangTypeError
from slang.types.environment import Environment
from slang.types.type_registry import TypeDescriptor, TypeRegistry

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def type_of(registry: TypeRegistry, value: LispValue) -> TypeDescriptor:
    return registry.type_of(value)


def implements(registry: TypeRegistry, value: LispValue, t: LispValue) -> bool:
    if not isinstance(t, TypeDescriptor):
        raise SlangTypeError(
            f"invalid type given; expected Type got {type(t).__name__}"
        )
    return registry.implements(value, t)


def to_type(registry: TypeRegistry, value: LispValue, t: LispValue) -> LispValue:
    if not isinstance(t, TypeDescriptor):
        raise SlangTypeError(
            f"invalid type given; expected Type got {type(t).__name__}"
        )
    return registry.convert(value, t)


def _exactly(n: int, args: list[LispValue]) -> None:
    if len(args) != n:
        raise SlangArityError(n, len(args))


def make_builtins(registry: TypeRegistry) -> dict[str, Builtin]:
    """fn(env, args) wrappers closing over `registry`."""

    def type_builtin(env: Environment, args: list[LispValue]) -> TypeDescriptor:
        _exactly(1, args)
        return type_of(registry, args[0])

    def implements_builtin(env: Environment, args: list[LispValue]) -> bool:
        _exactly(2, args)
        return implements(registry, args[0], args[1])

    def to_type_builtin(env: Environment, args: list[LispValue]) -> LispValue:
        _exactly(2, args)
        return to_type(registry, args[0], args[1])

    return {
        "type": type_builtin,
        "implements?": implements_builtin,
        "to-type": to_type_builtin,
    }
