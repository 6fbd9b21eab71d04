"""Name -> implementation table for the extension builtins.

The host calls bindings() once at startup and installs the result in its root
scope; nothing here is registered globally.
"""

from __future__ import annotations

from typing import Optional

from slang import LispValue
from slang.core.case_form import case_form
from slang.core.coercion import range_builtin, str_builtin, throw_builtin
from slang.core.higher_order import filter_form, map_form, reduce_form
from slang.core.iteration import doseq_form, mutate_form
from slang.core.macro_forms import macroexpand_form
from slang.core.reflection import make_builtins
from slang.core.thread_forms import thread_first_form, thread_last_form
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol
from slang.types.type_registry import TypeRegistry, default_registry

SPECIAL_FORMS = {
    "case": case_form,
    "map": map_form,
    "filter": filter_form,
    "reduce": reduce_form,
    "doseq": doseq_form,
    "set!": mutate_form,
    "->": thread_first_form,
    "->>": thread_last_form,
    "macroexpand": macroexpand_form,
}


def bindings(registry: Optional[TypeRegistry] = None) -> dict[Symbol, LispValue]:
    """A fresh mapping of every builtin name, plus the registry's type names."""
    if registry is None:
        registry = default_registry()

    table: dict[Symbol, LispValue] = {
        Symbol(name): SpecialForm(name, fn) for name, fn in SPECIAL_FORMS.items()
    }
    table.update({Symbol(name): fn for name, fn in make_builtins(registry).items()})
    table[Symbol("str")] = str_builtin
    table[Symbol("range")] = range_builtin
    table[Symbol("throw")] = throw_builtin

    for name, descriptor in registry.names().items():
        table[Symbol(name)] = descriptor
    return table
