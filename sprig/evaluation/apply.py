"""Application engine for sprig.

Centralizes what happens once the head of a list has been looked up:
- a NativeOp gets its operands evaluated and is dispatched to the prelude;
- a Lambda gets its operands evaluated in the caller's environment and its
  body evaluated in a clone of that environment extended with the parameters.
Anything else bound to the head name cannot be called.
"""

from __future__ import annotations

import logging

from sprig import Expression, EvaluatorFn
from sprig.builtin.prelude import call_native
from sprig.types.environment import Environment
from sprig.types.errors import InvalidNumberOfArguments, UnexpectedType
from sprig.types.lambda_fn import Lambda
from sprig.types.native_op import NativeOp

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    operands: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Call a Lambda.

    Parameters:
    - fn: The Lambda being applied.
    - operands: The unevaluated operand expressions from the call site.
    - env: The caller's environment. Operands are evaluated here, and a clone
      of it becomes the callee's local scope.
    - evaluate_fn: Operand evaluator (resolves bare identifier results).

    The arity check happens before any operand is evaluated. Whatever the body
    binds stays in the clone; the caller's environment is never modified.
    """
    if len(operands) != fn.arity:
        raise InvalidNumberOfArguments()

    args = [evaluate_fn(operand, env) for operand in operands]

    local_env = env.clone()
    for name, value in zip(fn.params, args):
        local_env.define(name, value)
    logger.debug("calling lambda %s with %d argument(s)", fn.params, len(args))
    return evaluate_fn(fn.body, local_env)


def apply(
    head: Expression,
    operands: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply either a builtin or a Lambda.

    - For NativeOp, evaluate every operand left to right and call the builtin.
    - For Lambda, defer to apply_lambda.
    - Otherwise, raise UnexpectedType.
    """
    if isinstance(head, NativeOp):
        args = [evaluate_fn(operand, env) for operand in operands]
        return call_native(head, env, args)
    if isinstance(head, Lambda):
        return apply_lambda(head, operands, env, evaluate_fn)
    raise UnexpectedType()
