from sprig import Expression, EvaluatorFn


def quote_form(tail: list[Expression], env, evaluate_fn: EvaluatorFn) -> Expression:
    """
    (quote x)      => x, unevaluated
    (quote a b c)  => (a b c), the remainder wrapped back into a list
    """
    if len(tail) == 1:
        return tail[0]
    return list(tail)
