from sprig import EvaluatorFn
from sprig import Expression
from sprig.types.environment import Environment
from sprig.types.errors import InvalidNumberOfArguments, NotAnIdentifier
from sprig.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (def name value)
    The name is taken literally, the value is evaluated; the bound value is returned.
    """
    if len(tail) != 2:
        raise InvalidNumberOfArguments()

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise NotAnIdentifier(name)

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
