from slang.core.bindings import bindings, SPECIAL_FORMS
from slang.core.realize import as_seq, realize
from slang.core.coercion import make_string, make_range, make_error
from slang.core.thread_forms import thread_form
