import pytest

from slang.errors import SlangConversionError, SlangTypeError
from slang.types.symbol import Symbol
from slang.types.type_registry import TypeDescriptor, default_registry
from slang.types.vector import Vector

TYPE = Symbol("type")
IMPLEMENTS = Symbol("implements?")
TO_TYPE = Symbol("to-type")
QUOTE = Symbol("quote")


@pytest.fixture
def registry(interp):
    return interp.registry


# ------------------ type ------------------

@pytest.mark.parametrize(
    "form,name",
    [
        (1, "Int"),
        (1.5, "Float"),
        ("s", "String"),
        (Symbol("true"), "Bool"),
        (Symbol("nil"), "Nil"),
        ([QUOTE, Symbol("a")], "Symbol"),
        ([Symbol("list"), 1], "List"),
        (Vector((1,)), "Vector"),
        ([Symbol("fn"), Vector(()), 1], "Fn"),
        (Symbol("Int"), "Type"),
    ],
)
def test_type_of(interp, form, name):
    assert str(interp.eval([TYPE, form])) == name


def test_type_of_unregistered_value(registry):
    class Widget:
        pass

    descriptor = registry.type_of(Widget())
    assert descriptor.name == "Widget"
    assert descriptor.py_type is Widget
    assert descriptor.kind == "concrete"


def test_type_of_is_the_registered_descriptor(interp):
    assert interp.eval([TYPE, 3]) is interp.eval(Symbol("Int"))


# ------------------ implements? ------------------

@pytest.mark.parametrize(
    "value,iface,expected",
    [
        ([Symbol("list"), 1], "Seq", True),
        ("abc", "Seq", True),
        ([Symbol("range"), 2], "Seq", True),
        (5, "Seq", False),
        (Symbol("inc"), "Invokable", True),
        ([Symbol("fn"), Vector(()), 1], "Invokable", True),
        (5, "Invokable", False),
    ],
)
def test_implements(interp, value, iface, expected):
    assert interp.eval([IMPLEMENTS, value, Symbol(iface)]) is expected


def test_implements_dereferences_one_level(registry):
    seq = registry.get("Seq")
    assert registry.implements([1], seq.ref()) is True
    assert seq.ref().deref() is seq
    assert seq.ref().kind == "reference"


def test_implements_only_one_level_of_reference(registry):
    with pytest.raises(SlangConversionError, match="not an interface type"):
        registry.implements([1], registry.get("Seq").ref().ref())


def test_implements_rejects_concrete_types(interp):
    with pytest.raises(SlangConversionError, match="type 'Int' is not an interface type"):
        interp.eval([IMPLEMENTS, 1, Symbol("Int")])


def test_implements_requires_a_type(interp):
    with pytest.raises(SlangTypeError, match="expected Type"):
        interp.eval([IMPLEMENTS, 1, 2])


# ------------------ to-type ------------------

@pytest.mark.parametrize(
    "form,type_name,expected,expected_type",
    [
        (1, "Int", 1, int),
        (1, "Float", 1.0, float),
        (3.9, "Int", 3, int),
        (Symbol("true"), "Int", 1, int),
        ("a", "Symbol", Symbol("a"), Symbol),
        ([QUOTE, Symbol("a")], "String", "a", str),
        ([Symbol("list"), 1, 2], "Vector", Vector((1, 2)), Vector),
        (Vector((1, 2)), "List", [1, 2], list),
    ],
)
def test_to_type(interp, form, type_name, expected, expected_type):
    result = interp.eval([TO_TYPE, form, Symbol(type_name)])
    assert result == expected
    assert type(result) is expected_type


def test_to_type_interface_is_assignability(interp):
    assert interp.eval([TO_TYPE, [Symbol("list"), 1], Symbol("Seq")]) == [1]
    with pytest.raises(SlangConversionError, match="cannot convert 'Int' to 'Seq'"):
        interp.eval([TO_TYPE, 1, Symbol("Seq")])


def test_to_type_failure(interp):
    with pytest.raises(SlangConversionError, match="cannot convert 'String' to 'Int'"):
        interp.eval([TO_TYPE, "a", Symbol("Int")])


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_to_type_non_finite_float_to_int(interp, value):
    with pytest.raises(SlangConversionError, match="cannot convert 'Float' to 'Int'"):
        interp.eval([TO_TYPE, value, Symbol("Int")])


def test_to_type_overflowing_product_to_int(interp):
    with pytest.raises(SlangConversionError, match="cannot convert 'Float' to 'Int'"):
        interp.eval([TO_TYPE, [Symbol("*"), 1e308, 10.0], Symbol("Int")])


def test_to_type_through_reference(registry):
    assert registry.convert(2, registry.get("Float").ref()) == 2.0


# ------------------ registry ------------------

def test_registries_are_independent():
    a = default_registry()
    b = default_registry()
    a.register("Bytes", bytes)
    assert a.type_of(b"x").name == "Bytes"
    assert b.type_of(b"x").name == "bytes"


def test_custom_interface_and_conversion():
    registry = default_registry()
    sized = registry.register_interface("Sized", lambda v: hasattr(v, "__len__"))
    registry.register_conversion(str, int, int)
    assert registry.implements("abc", sized)
    assert registry.convert("42", registry.get("Int")) == 42


def test_descriptor_equality():
    assert TypeDescriptor("Int", py_type=int) == TypeDescriptor("Int", py_type=int)
    assert TypeDescriptor("Int", py_type=int) != TypeDescriptor("Int", py_type=float)
