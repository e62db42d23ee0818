from sprig import EvaluatorFn
from sprig import Expression
from sprig.builtin.prelude import choose
from sprig.types.environment import Environment
from sprig.types.errors import InvalidNumberOfArguments


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (if cond on-true on-false)
    Only the selected branch is evaluated. Uses the same condition coercion as
    the eager `if` builtin.
    """
    if len(tail) != 3:
        raise InvalidNumberOfArguments()

    cond = evaluate_fn(tail[0], env)
    branch = choose(cond, tail[1], tail[2])
    return evaluate_fn(branch, env)
