"""Builtin operators (the prelude) for the sprig runtime environment.

Every fresh environment binds the builtin names to NativeOp members; the
evaluator hands the already-evaluated arguments to `call_native`, which
dispatches to the implementations below. Each implementation has the
signature `(env, args) -> value`.
"""
from __future__ import annotations

import logging
import math
import sys
from functools import reduce
from typing import Callable

import numpy as np

from sprig import Expression, NativeFn
from sprig.types.coerce import to_bool, to_number, to_string
from sprig.types.environment import Environment
from sprig.types.errors import (
    IndexOutOfBounds,
    InvalidNumberOfArguments,
    Terminate,
    UnexpectedType,
)
from sprig.types.lambda_fn import Lambda
from sprig.types.native_op import NativeOp
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)

EPSILON = float(np.finfo(np.float64).eps)

_I32_MIN = -(2 ** 31)
_I32_MAX = 2 ** 31 - 1


def _fold(args: list[Expression], coerce: Callable, op: Callable) -> Expression:
    """Coerce every argument, then reduce left to right."""
    if not args:
        raise InvalidNumberOfArguments()
    return reduce(op, [coerce(a) for a in args])


def _fold_float(args: list[Expression], ufunc: np.ufunc) -> float:
    # IEEE-754 float64: x/0 is inf or nan rather than an exception.
    with np.errstate(all="ignore"):
        result = _fold(args, lambda a: np.float64(to_number(a)), ufunc)
    return float(result)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Expression]) -> float:
    return _fold_float(args, np.add)


def sub(env: Environment, args: list[Expression]) -> float:
    """Left fold: (- 10 2 3) is 10-2-3; a single argument is returned as is."""
    return _fold_float(args, np.subtract)


def mul(env: Environment, args: list[Expression]) -> float:
    return _fold_float(args, np.multiply)


def div(env: Environment, args: list[Expression]) -> float:
    return _fold_float(args, np.divide)


def mod(env: Environment, args: list[Expression]) -> float:
    """Truncated remainder; the result takes the sign of the dividend."""
    return _fold_float(args, np.fmod)


# -------------------------------
# Strings and logic
# -------------------------------
def concat(env: Environment, args: list[Expression]) -> str:
    return _fold(args, to_string, lambda a, b: a + b)


def logical_and(env: Environment, args: list[Expression]) -> bool:
    return _fold(args, to_bool, lambda a, b: a and b)


def logical_or(env: Environment, args: list[Expression]) -> bool:
    return _fold(args, to_bool, lambda a, b: a or b)


# -------------------------------
# Equality and comparison
# -------------------------------
def _tag(value: Expression) -> str:
    match value:
        case bool():
            return "bool"
        case int() | float():
            return "num"
        case str():
            return "str"
        case Symbol():
            return "ident"
        case list():
            return "list"
        case Lambda():
            return "lambda"
        case NativeOp():
            return "native"
    raise UnexpectedType()


def is_equal(a: Expression, b: Expression) -> bool:
    """Tag-and-value equality, element-wise for lists. No coercion."""
    if _tag(a) != _tag(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def strict_equals(env: Environment, args: list[Expression]) -> bool:
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


def _compare(args: list[Expression], cmp: Callable[[float, float], bool]) -> bool:
    values = [to_number(a) for a in args]
    return all(cmp(a, b) for a, b in zip(values, values[1:]))


def loose_equals(env: Environment, args: list[Expression]) -> bool:
    return _compare(args, lambda a, b: abs(a - b) < EPSILON)


def lt(env: Environment, args: list[Expression]) -> bool:
    return _compare(args, lambda a, b: a < b)


def lte(env: Environment, args: list[Expression]) -> bool:
    return _compare(args, lambda a, b: a <= b)


def gt(env: Environment, args: list[Expression]) -> bool:
    return _compare(args, lambda a, b: a > b)


def gte(env: Environment, args: list[Expression]) -> bool:
    return _compare(args, lambda a, b: a >= b)


# -------------------------------
# Control
# -------------------------------
def choose(cond: Expression, on_true: Expression, on_false: Expression) -> Expression:
    """Pick a branch by the boolean coercion of `cond`."""
    return on_true if to_bool(cond) else on_false


def if_builtin(env: Environment, args: list[Expression]) -> Expression:
    """(if cond on-true on-false) over already-evaluated branches."""
    if len(args) != 3:
        raise InvalidNumberOfArguments()
    return choose(*args)


def _truncate(n: float) -> int:
    """float -> 32-bit status code, saturating; NaN becomes 0."""
    if math.isnan(n):
        return 0
    return int(min(max(n, _I32_MIN), _I32_MAX))


def exit_builtin(env: Environment, args: list[Expression]) -> Expression:
    """(exit [status]) raises Terminate; the host decides whether to exit."""
    if len(args) > 1:
        raise InvalidNumberOfArguments()
    status = _truncate(to_number(args[0])) if args else 0
    logger.debug("exit requested with status %d", status)
    raise Terminate(status)


def read(env: Environment, args: list[Expression]) -> str:
    """Read one line from stdin, keeping the line terminator."""
    return sys.stdin.readline()


# -------------------------------
# List operations
# -------------------------------
def nth(env: Environment, args: list[Expression]) -> Expression:
    """(nth index list) => element at index (index truncated toward zero)."""
    if len(args) != 2:
        raise InvalidNumberOfArguments()
    index, items = args
    if not isinstance(items, list):
        raise UnexpectedType()
    position = to_number(index)
    if not math.isfinite(position):
        raise UnexpectedType()
    position = int(position)
    if not 0 <= position < len(items):
        raise IndexOutOfBounds(position)
    return items[position]


def append(env: Environment, args: list[Expression]) -> list[Expression]:
    """(append value list) => a new list; the argument list is left untouched."""
    if len(args) != 2:
        raise InvalidNumberOfArguments()
    value, items = args
    if not isinstance(items, list):
        raise UnexpectedType()
    return [*items, value]


BUILTINS: dict[NativeOp, NativeFn] = {
    NativeOp.ADD: add,
    NativeOp.SUB: sub,
    NativeOp.MUL: mul,
    NativeOp.DIV: div,
    NativeOp.MOD: mod,
    NativeOp.CONCAT: concat,
    NativeOp.AND: logical_and,
    NativeOp.OR: logical_or,
    NativeOp.STRICT_EQ: strict_equals,
    NativeOp.EQ: loose_equals,
    NativeOp.LT: lt,
    NativeOp.LTE: lte,
    NativeOp.GT: gt,
    NativeOp.GTE: gte,
    NativeOp.IF: if_builtin,
    NativeOp.READ: read,
    NativeOp.NTH: nth,
    NativeOp.APPEND: append,
    NativeOp.EXIT: exit_builtin,
}


def call_native(op: NativeOp, env: Environment, args: list[Expression]) -> Expression:
    return BUILTINS[op](env, args)


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({op.value: op for op in NativeOp})


def create(eager_if: bool = False) -> Environment:
    """A fresh environment holding only the prelude."""
    env = Environment(eager_if=eager_if)
    register(env)
    return env
