# Core type aliases for slang's data model.
# Forms and runtime values are plain Python objects (int, float, str, list for
# call forms, Vector for vector literals, Symbol, Nil, ...). The host evaluator
# produces them; the builtins in slang.core only consume and re-wrap them.
#
# Naming guidance:
# - SExpression: unevaluated forms handed to special forms and the rewriter.
# - LispValue:  evaluated runtime values.
# Both resolve to `Any`; they document intent at the seams.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Unevaluated form alias
SExpression = LispValue

# Evaluator callback handed to special forms: evaluate_fn(expr, env, macros)
EvaluatorFn = Callable[..., LispValue]
