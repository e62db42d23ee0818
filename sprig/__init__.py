# Core type aliases for sprig's data model.
# Values are plain Python objects: float (Num), str (Str), bool (Bool),
# list (List), Symbol (Ident), Lambda and NativeOp.
#
# Naming guidance:
# - Expression: used by the reader, evaluator and builtins alike; parsed code
#   and evaluated values share the same representation.

from typing import Any, Callable

__version__ = "0.1.0"

# Parsed node or runtime value
Expression = Any

# Evaluator function type, passed into special forms and the apply engine
EvaluatorFn = Callable[..., Expression]

# Builtin implementation: (env, evaluated args) -> value
NativeFn = Callable[..., Expression]
