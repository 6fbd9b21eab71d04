from __future__ import annotations

import logging
from typing import Callable, Optional

from slang import SExpression, LispValue
from slang.builtins import register as register_builtins
from slang.config import configure_logging
from slang.core.bindings import bindings
from slang.evaluation.evaluator import evaluate
from slang.evaluation.special_forms import register as register_host_forms
from slang.types.environment import Environment
from slang.types.macro_environment import MacroEnvironment
from slang.types.nil import Nil
from slang.types.type_registry import TypeRegistry, default_registry

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Wires the reference host together: a root Environment holding the host
    special forms, host primitives and the extension builtins, plus a
    MacroEnvironment. Forms are evaluated one at a time; there is no reader.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment, MacroEnvironment], LispValue] | None = None,
        registry: Optional[TypeRegistry] = None,
        log_level: int | None = None,
    ):
        configure_logging(log_level)

        self.eval_fn = eval_fn or evaluate
        self.registry: TypeRegistry = registry or default_registry()

        self.env: Environment = Environment()
        register_host_forms(self.env)
        register_builtins(self.env)
        self.env.update(bindings(self.registry))

        self.macros: MacroEnvironment = MacroEnvironment()
        logger.debug("interpreter ready with %d root bindings", len(self.env.vars))

    def eval(self, *forms: SExpression) -> LispValue:
        """Evaluate each form in order in the root scope; return the last value."""
        result: LispValue = Nil
        for form in forms:
            result = self.eval_fn(form, self.env, self.macros)
        return result
