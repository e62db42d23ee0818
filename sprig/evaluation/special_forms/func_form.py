from sprig import EvaluatorFn
from sprig import Expression
from sprig.types.environment import Environment
from sprig.types.errors import InvalidNumberOfArguments, UnexpectedType
from sprig.types.lambda_fn import Lambda
from sprig.types.symbol import Symbol


def func_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (func (a b) body): exactly one body expression, kept unevaluated.
    if len(tail) != 2:
        raise InvalidNumberOfArguments()

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise UnexpectedType()

    return Lambda([p.id for p in params], body)
