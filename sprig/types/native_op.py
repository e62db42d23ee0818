from __future__ import annotations

from enum import Enum


class NativeOp(Enum):
    """The closed set of builtin operators.

    Environments bind builtin names to these members instead of Python
    callables, so values stay plain data. The implementations live in
    `sprig.builtin.prelude`.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    CONCAT = "concat"
    AND = "and"
    OR = "or"
    STRICT_EQ = "=="
    EQ = "="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    IF = "if"
    READ = "read"
    NTH = "nth"
    APPEND = "append"
    EXIT = "exit"

    def __str__(self) -> str:
        return self.value
