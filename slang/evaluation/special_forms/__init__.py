"""Host special forms for the reference evaluator.

Maps names to SpecialForm wrappers. They are bound into the root environment
like any other value; the evaluator recognizes a SpecialForm head and passes
the argument forms through unevaluated.
"""

from slang.types.environment import Environment
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol
from slang.evaluation.special_forms.quote_form import quote_form
from slang.evaluation.special_forms.if_form import if_form
from slang.evaluation.special_forms.define_form import define_form
from slang.evaluation.special_forms.lambda_form import lambda_form
from slang.evaluation.special_forms.progn_form import progn_form


def host_forms() -> dict[Symbol, SpecialForm]:
    return {
        Symbol("quote"): SpecialForm("quote", quote_form),
        Symbol("if"): SpecialForm("if", if_form),
        Symbol("define"): SpecialForm("define", define_form),
        Symbol("def"): SpecialForm("def", define_form),
        Symbol("lambda"): SpecialForm("lambda", lambda_form),
        Symbol("fn"): SpecialForm("fn", lambda_form),
        Symbol("progn"): SpecialForm("progn", progn_form),
        Symbol("do"): SpecialForm("do", progn_form),
    }


def register(env: Environment) -> None:
    env.update(host_forms())
