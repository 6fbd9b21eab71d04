import pytest

from slang.errors import SlangArityError, SlangNoMatchError
from slang.types.symbol import Symbol

CASE = Symbol("case")


def test_matching_clause(interp):
    assert interp.eval([CASE, 2, 1, "a", 2, "b", "default"]) == "b"


def test_default_clause(interp):
    assert interp.eval([CASE, 5, 1, "a", 2, "b", "default"]) == "default"


def test_default_is_evaluated(interp):
    assert interp.eval([CASE, 5, 1, "a", [Symbol("+"), 1, 1]]) == 2


def test_no_match_without_default(interp):
    with pytest.raises(SlangNoMatchError, match="no matching clause for '5'") as exc:
        interp.eval([CASE, 5, 1, "a", 2, "b"])
    assert exc.value.subject == 5


def test_no_match_renders_subject(interp):
    with pytest.raises(SlangNoMatchError, match="no matching clause for '\"x\"'"):
        interp.eval([CASE, "x", 1, "a", 2, "b"])


@pytest.mark.parametrize(
    "subject,expected",
    [
        (1, "one"),
        ([Symbol("+"), 1, 1], "two"),
        (3, "many"),
    ],
)
def test_subject_is_evaluated(interp, subject, expected):
    assert interp.eval([CASE, subject, 1, "one", 2, "two", "many"]) == expected


def test_two_forms_evaluates_second_unconditionally(interp):
    assert interp.eval([CASE, 99, "only"]) == "only"
    assert interp.eval([CASE, 99, [Symbol("+"), 1, 2]]) == 3


def test_keys_are_matched_literally(interp):
    # `a` and `b` are unbound; evaluating a key would fail
    subject = [Symbol("quote"), Symbol("a")]
    assert interp.eval([CASE, subject, Symbol("a"), 1, Symbol("b"), 2]) == 1


def test_list_keys_compare_structurally(interp):
    subject = [Symbol("list"), 1, 2]
    assert interp.eval([CASE, subject, [1, 2], "pair", "other"]) == "pair"


def test_equality_is_type_strict(interp):
    assert interp.eval([CASE, Symbol("true"), 1, "one", "other"]) == "other"
    assert interp.eval([CASE, 1.0, 1, "int", "float"]) == "float"


def test_subject_evaluated_once_and_only_matching_body(interp, env, calls):
    def boom(_, args):
        raise AssertionError("unmatched body evaluated")

    env.define(Symbol("boom"), boom)
    form = [CASE, [Symbol("record"), 1], 1, "a", 2, [Symbol("boom")]]
    assert interp.eval(form) == "a"
    assert calls == [1]


@pytest.mark.parametrize("tail", [[], [1]])
def test_requires_two_forms(interp, tail):
    with pytest.raises(SlangArityError) as exc:
        interp.eval([CASE, *tail])
    assert exc.value.expected == 2
