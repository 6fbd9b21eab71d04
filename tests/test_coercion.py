import pytest
from hypothesis import given, strategies as st

from slang.core.coercion import make_error, make_range, make_string
from slang.errors import SlangArityError, SlangThrownError, SlangTypeError
from slang.types.lambda_fn import Lambda
from slang.types.nil import Nil
from slang.types.symbol import Symbol

STR = Symbol("str")
QUOTE = Symbol("quote")


# ------------------ str ------------------

@pytest.mark.parametrize(
    "args,expected",
    [
        ([], ""),
        ([Symbol("nil")], ""),
        (["a", "b"], "ab"),
        (["abc"], "abc"),
        ([1], "1"),
        ([1, "x", Symbol("true")], "1xtrue"),
        ([[QUOTE, Symbol("a")]], "a"),
        (["a", Symbol("nil")], "anil"),
        ([[Symbol("list"), 1, "a"]], '(1 "a")'),
    ],
)
def test_str(interp, args, expected):
    assert interp.eval([STR, *args]) == expected


@given(st.text())
def test_str_of_one_string_is_that_string(s):
    assert make_string(s) == s


@given(st.lists(st.text(), min_size=2))
def test_str_concatenates_without_separator(parts):
    assert make_string(*parts) == "".join(parts)


def test_str_strips_only_one_layer_of_quotes():
    assert make_string('"quoted"') == '"quoted"'
    assert make_string(None) == ""
    assert make_string(Nil) == ""


# ------------------ range ------------------

@pytest.mark.parametrize(
    "args,expected",
    [
        ([3], [0, 1, 2]),
        ([2, 5], [2, 3, 4]),
        ([0, 10, 3], [0, 3, 6, 9]),
        ([0], []),
        ([5, 2], []),
        ([-2, 1], [-2, -1, 0]),
    ],
)
def test_range(interp, args, expected):
    assert interp.eval([Symbol("range"), *args]) == expected


@given(st.integers(-50, 50), st.integers(-50, 50), st.integers(1, 10))
def test_range_matches_half_open_interval(lo, hi, step):
    assert make_range(lo, hi, step) == list(range(lo, hi, step))


def test_range_arity():
    with pytest.raises(SlangArityError):
        make_range()
    with pytest.raises(SlangArityError):
        make_range(1, 2, 3, 4)


@pytest.mark.parametrize("args", [(1.5,), ("3",), (True,), (0, Nil)])
def test_range_requires_integers(args):
    with pytest.raises(SlangTypeError, match="expected Int"):
        make_range(*args)


@pytest.mark.parametrize("step", [0, -1])
def test_range_step_must_approach_max(step):
    with pytest.raises(SlangTypeError, match="never reaches"):
        make_range(0, 5, step)


# ------------------ throw ------------------

def test_throw_raises_with_rendered_message(interp):
    with pytest.raises(SlangThrownError) as exc:
        interp.eval([Symbol("throw"), "bad value: ", 42])
    assert str(exc.value) == "bad value: 42"


def test_throw_message_follows_str(interp):
    with pytest.raises(SlangThrownError, match="^oops$"):
        interp.eval([Symbol("throw"), "oops"])


def test_make_error_does_not_raise():
    err = make_error("x", 1)
    assert isinstance(err, SlangThrownError)
    assert str(err) == "x1"


# ------------------ macroexpand ------------------

@pytest.fixture
def twice(macros):
    macros.define_macro(Symbol("twice"), lambda args, env: [Symbol("+"), args[0], args[0]])


def test_macroexpand_python_transformer(interp, twice):
    form = [Symbol("macroexpand"), [QUOTE, [Symbol("twice"), 3]]]
    assert interp.eval(form) == [Symbol("+"), 3, 3]


def test_macroexpand_lambda_transformer(interp, env, macros):
    # (defmacro square (x) (list '* x x))
    body = [Symbol("list"), [QUOTE, Symbol("*")], Symbol("x"), Symbol("x")]
    macros.define_macro(Symbol("square"), Lambda([Symbol("x")], body, env))
    form = [Symbol("macroexpand"), [QUOTE, [Symbol("square"), 4]]]
    assert interp.eval(form) == [Symbol("*"), 4, 4]
    assert interp.eval([Symbol("square"), 4]) == 16


def test_macroexpand_expands_head_to_fixpoint(interp, macros, twice):
    macros.define_macro(Symbol("twice-two"), lambda args, env: [Symbol("twice"), 2])
    form = [Symbol("macroexpand"), [QUOTE, [Symbol("twice-two")]]]
    assert interp.eval(form) == [Symbol("+"), 2, 2]


@pytest.mark.parametrize("form", [[Symbol("inc"), 1], 5, "s"])
def test_macroexpand_passes_through_non_macros(interp, form):
    assert interp.eval([Symbol("macroexpand"), [QUOTE, form]]) == form


def test_expand_reports_whether_it_expanded(env, macros, twice):
    from slang.evaluation.evaluator import evaluate

    assert macros.expand([Symbol("twice"), 1], evaluate, env) == ([Symbol("+"), 1, 1], True)
    assert macros.expand([Symbol("inc"), 1], evaluate, env) == ([Symbol("inc"), 1], False)


def test_macroexpand_arity(interp):
    with pytest.raises(SlangArityError):
        interp.eval([Symbol("macroexpand")])
