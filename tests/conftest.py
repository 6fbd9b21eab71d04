import pytest

from slang.interpreter import Interpreter
from slang.types.symbol import Symbol


@pytest.fixture
def interp():
    """A fresh interpreter: host forms, host primitives and the slang builtins."""
    return Interpreter()


@pytest.fixture
def env(interp):
    return interp.env


@pytest.fixture
def macros(interp):
    return interp.macros


@pytest.fixture
def calls(env):
    """Define (record x): appends x to the returned list and returns x."""
    seen = []

    def record(_, args):
        seen.append(args[0])
        return args[0]

    env.define(Symbol("record"), record)
    return seen
