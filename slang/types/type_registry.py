"""Type descriptors and the capability table behind type, implements? and to-type.

Types are looked up in an explicit registry instead of being discovered by
introspection: each registered Python type has a named descriptor, interfaces
are named predicates, and conversions are an explicit (from, to) table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from slang import LispValue
from slang.errors import SlangConversionError
from slang.types.lambda_fn import Lambda, is_invokable
from slang.types.nil import NilType
from slang.types.seq import is_seqable
from slang.types.symbol import Symbol
from slang.types.vector import Vector

Converter = Callable[[LispValue], LispValue]


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """A runtime type: concrete (wraps a Python type), interface (wraps a
    predicate) or reference (points at another descriptor)."""

    name: str
    py_type: Optional[type] = None
    predicate: Optional[Callable[[LispValue], bool]] = None
    target: Optional[TypeDescriptor] = None

    @property
    def kind(self) -> str:
        if self.target is not None:
            return "reference"
        if self.predicate is not None:
            return "interface"
        return "concrete"

    @property
    def is_interface(self) -> bool:
        return self.kind == "interface"

    def ref(self) -> TypeDescriptor:
        return TypeDescriptor(f"*{self.name}", target=self)

    def deref(self) -> TypeDescriptor:
        return self.target if self.target is not None else self

    def check(self, value: LispValue) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(value))
        if self.py_type is not None:
            return isinstance(value, self.py_type)
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return (
            self.name == other.name
            and self.py_type is other.py_type
            and self.predicate is other.predicate
            and self.target == other.target
        )

    def __hash__(self) -> int:
        return hash((self.name, self.py_type))

    def __str__(self) -> str:
        return self.name


class TypeRegistry:
    def __init__(self):
        self._by_type: dict[type, TypeDescriptor] = {}
        self._by_name: dict[str, TypeDescriptor] = {}
        self._conversions: dict[tuple[type, type], Converter] = {}

    def register(self, name: str, py_type: type) -> TypeDescriptor:
        descriptor = TypeDescriptor(name, py_type=py_type)
        self._by_type[py_type] = descriptor
        self._by_name[name] = descriptor
        return descriptor

    def register_interface(
        self, name: str, predicate: Callable[[LispValue], bool]
    ) -> TypeDescriptor:
        descriptor = TypeDescriptor(name, predicate=predicate)
        self._by_name[name] = descriptor
        return descriptor

    def register_conversion(
        self, from_type: type, to_type: type, converter: Converter
    ) -> None:
        self._conversions[(from_type, to_type)] = converter

    def get(self, name: str) -> Optional[TypeDescriptor]:
        return self._by_name.get(name)

    def names(self) -> dict[str, TypeDescriptor]:
        return dict(self._by_name)

    def describe(self, py_type: type) -> TypeDescriptor:
        """Descriptor for `py_type`; unregistered types get one named after the class."""
        descriptor = self._by_type.get(py_type)
        if descriptor is None:
            descriptor = TypeDescriptor(py_type.__name__, py_type=py_type)
        return descriptor

    def type_of(self, value: LispValue) -> TypeDescriptor:
        return self.describe(type(value))

    def implements(self, value: LispValue, t: TypeDescriptor) -> bool:
        t = t.deref()
        if not t.is_interface:
            raise SlangConversionError(f"type '{t}' is not an interface type")
        return t.check(value)

    def is_assignable(self, value: LispValue, t: TypeDescriptor) -> bool:
        if t.is_interface:
            return t.check(value)
        if t.py_type is None:
            return False
        vt = type(value)
        if vt is t.py_type:
            return True
        # A registered subtype (bool under int, Vector under tuple) is its own
        # type and needs an explicit conversion.
        return issubclass(vt, t.py_type) and vt not in self._by_type

    def convert(self, value: LispValue, t: TypeDescriptor) -> LispValue:
        t = t.deref()
        if self.is_assignable(value, t):
            return value
        converter = None
        if t.py_type is not None:
            converter = self._conversions.get((type(value), t.py_type))
        if converter is None:
            raise SlangConversionError(
                f"cannot convert '{self.type_of(value)}' to '{t}'"
            )
        try:
            return converter(value)
        except (ValueError, OverflowError, TypeError) as e:
            raise SlangConversionError(
                f"cannot convert '{self.type_of(value)}' to '{t}': {e}"
            ) from e


def default_registry() -> TypeRegistry:
    """A fresh registry with the language's built-in types and conversions."""
    registry = TypeRegistry()
    registry.register("Int", int)
    registry.register("Float", float)
    registry.register("String", str)
    registry.register("Bool", bool)
    registry.register("Symbol", Symbol)
    registry.register("Nil", NilType)
    registry.register("List", list)
    registry.register("Vector", Vector)
    registry.register("Fn", Lambda)
    registry.register("Type", TypeDescriptor)
    registry.register_interface("Seq", is_seqable)
    registry.register_interface("Invokable", is_invokable)

    registry.register_conversion(int, float, float)
    registry.register_conversion(float, int, int)
    registry.register_conversion(bool, int, int)
    registry.register_conversion(str, Symbol, Symbol)
    registry.register_conversion(Symbol, str, str)
    registry.register_conversion(list, Vector, Vector)
    registry.register_conversion(Vector, list, list)
    return registry
