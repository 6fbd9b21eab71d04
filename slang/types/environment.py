"""Runtime scope for slang.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Builtins borrow it for the duration of one
call: they evaluate forms against it and, for set!/doseq, write one binding
into the current frame.
"""

from __future__ import annotations

from typing import Optional

from slang import LispValue
from slang.errors import SlangInvalidSymbol, SlangUnboundSymbol
from slang.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any prior binding.

        Raises SlangInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SlangInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outwards."""
        env = self.find(name)
        if env is None:
            raise SlangUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)
