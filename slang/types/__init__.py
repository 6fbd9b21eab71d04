from slang.types.symbol import Symbol
from slang.types.nil import Nil, NilType, is_truthy
from slang.types.vector import Vector
from slang.types.environment import Environment
from slang.types.lambda_fn import Lambda, is_invokable
from slang.types.macro_environment import MacroEnvironment
from slang.types.seq import Seq, ListSeq, LazySeq, is_seqable
from slang.types.special_form import SpecialForm
from slang.types.type_registry import TypeDescriptor, TypeRegistry, default_registry
