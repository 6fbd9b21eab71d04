"""Lambda function representation and argument binding for slang."""

from __future__ import annotations

from io import StringIO

from slang import SExpression, LispValue
from slang.errors import SlangArityError
from slang.types.environment import Environment
from slang.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[Symbol], body: SExpression, env: Environment | None = None
    ):
        self.formals: list[Symbol] = list(formals)
        self.body: SExpression = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def __str__(self) -> str:
        from slang.printer import to_string

        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, enclosed by the closure env, for the body.
        """
        if len(args) != len(self.formals):
            raise SlangArityError(len(self.formals), len(args))
        local_env = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            local_env.define(name, value)
        return local_env


def is_invokable(value: LispValue) -> bool:
    """True for values the host can apply to evaluated arguments.

    Special forms take unevaluated forms, so they are not invokable as values;
    neither are Python classes, which are callable only as constructors.
    """
    from slang.types.special_form import SpecialForm

    if isinstance(value, Lambda):
        return True
    if isinstance(value, (SpecialForm, type)):
        return False
    return callable(value)
