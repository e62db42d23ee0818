"""Core evaluator for the sprig interpreter.

Walks the expression tree against a flat Environment:

- atoms evaluate to themselves, including a bare top-level identifier, which
  is returned as the identifier itself rather than looked up;
- in operand position (arguments, `def` values, `if` branches, lambda
  bodies) an expression is evaluated and a bare identifier result, written
  or produced at run time by `quote` or `nth`, is resolved to its binding;
- a list is dispatched on its head: special forms first, then the value the
  head is bound to (a builtin NativeOp or a Lambda).

There is no trampoline: recursion depth follows the nesting of the source.
"""

from __future__ import annotations

import logging

from sprig import Expression
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS, IF
from sprig.types.environment import Environment
from sprig.types.errors import (
    AttemptedToUseFunctionAsVariable,
    EmptyListExpression,
    FunctionNotDefined,
    NotAnIdentifier,
    UnexpectedType,
    VariableNotDefined,
)
from sprig.types.native_op import NativeOp
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Reduce `expr` to a value. Errors propagate as SprigError subclasses."""
    match expr:
        case list():
            return evaluate_list(expr, env)
        case bool() | int() | float() | str() | Symbol():
            # Bare identifiers are returned unevaluated.
            return expr
    raise UnexpectedType()


def evaluate_list(expr: list, env: Environment) -> Expression:
    if not expr:
        raise EmptyListExpression()

    head, *tail = expr
    if not isinstance(head, Symbol):
        raise NotAnIdentifier(head)

    # Special forms cannot be shadowed by bindings.
    form = SPECIAL_FORMS.get(head)
    if form is not None and not (head == IF and env.eager_if):
        logger.debug("special form %s", head)
        return form(tail, env, evaluate_operand)

    target = env.get(head)
    if target is None:
        raise FunctionNotDefined(head.id)
    return apply(target, tail, env, evaluate_operand)


def evaluate_operand(expr: Expression, env: Environment) -> Expression:
    """Evaluate an expression in operand position.

    The expression is evaluated first; if the result is a bare identifier,
    written (`x`) or computed (`(quote x)`), it resolves to its binding.
    """
    value = evaluate(expr, env)
    if isinstance(value, Symbol):
        return resolve(value, env)
    return value


def resolve(name: Symbol, env: Environment) -> Expression:
    """Look up a variable. Builtins cannot be used as data."""
    value = env.get(name)
    if value is None:
        raise VariableNotDefined(name.id)
    if isinstance(value, NativeOp):
        raise AttemptedToUseFunctionAsVariable(name.id)
    return value
