from __future__ import annotations
from typing import Callable

from slang import SExpression, EvaluatorFn
from slang.types.environment import Environment
from slang.types.lambda_fn import Lambda
from slang.types.symbol import Symbol


class MacroEnvironment:
    """
    Macro table mapping macro names (Symbols) to Lambda transformers or
    Python callable transformers of the shape `fn(args, env) -> form`.

    Only head-position expansion is supported; expanding nested subforms is
    left to the evaluator, which expands each call form as it reaches it.
    """

    def __init__(self):
        self.macros: dict[Symbol, Lambda | Callable] = {}

    def define_macro(self, name: Symbol, transformer: Lambda | Callable):
        self.macros[name] = transformer

    def is_macro(self, sym: SExpression) -> bool:
        return isinstance(sym, Symbol) and sym in self.macros

    def _run_transformer(
        self, args: list[SExpression], transformer: Lambda, evaluator: EvaluatorFn
    ) -> SExpression:
        """
        Bind the raw, unevaluated args to the transformer's formals and evaluate
        its body once to produce the expansion. The expansion is not evaluated.
        """
        call_env = transformer.extend_env(list(args))
        return evaluator(transformer.body, call_env, self)

    def expand_1(
        self, form: SExpression, evaluator: EvaluatorFn, env: Environment
    ) -> SExpression:
        """Expand only the head-position macro if present."""
        if isinstance(form, list) and form and self.is_macro(form[0]):
            transformer = self.macros[form[0]]
            args = form[1:]
            if isinstance(transformer, Lambda):
                return self._run_transformer(args, transformer, evaluator)
            # Python callable macro transformers accept (args, env)
            return transformer(args, env)
        return form  # Not a macro call, unchanged

    def expand(
        self, form: SExpression, evaluator: EvaluatorFn, env: Environment
    ) -> tuple[SExpression, bool]:
        """Expand the head repeatedly until it is no longer a macro call.

        Returns the final form and whether any expansion was applied.
        """
        cur = form
        expanded = False
        while True:
            nxt = self.expand_1(cur, evaluator, env)
            # Structural equality detects the fixpoint
            if nxt == cur:
                return cur, expanded
            cur = nxt
            expanded = True
