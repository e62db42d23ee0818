import logging

from sprig import Expression
from sprig import config
from sprig.builtin.prelude import create
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import parse_all
from sprig.reader.tokenizer import tokenize
from sprig.types.environment import Environment
from sprig.types.errors import SprigRecursionError, UnexpectedEndOfTokenStream

logger = logging.getLogger(__name__)


def evaluate_source(source: str, env: Environment) -> Expression:
    """Tokenize, parse and evaluate every top-level expression; return the last value.

    Raises UnexpectedEndOfTokenStream when the source holds no expression.
    """
    exprs = parse_all(tokenize(source))
    if not exprs:
        raise UnexpectedEndOfTokenStream()

    result = None
    try:
        for expr in exprs:
            result = evaluate(expr, env)
    except RecursionError:
        raise SprigRecursionError() from None
    return result


class Interpreter:
    """
    One interpreter session: a single environment, created with the prelude,
    that persists across calls to `eval`.
    """
    def __init__(self, eager_if: bool | None = None):
        if eager_if is None:
            eager_if = config.get_eager_if()
        self.env = create(eager_if=eager_if)
        logger.info("new session (eager if: %s)", eager_if)

    def eval(self, source: str) -> Expression:
        """Evaluate `source` in this session's environment.

        Raises a SprigError subclass on failure, or Terminate for (exit n).
        """
        logger.debug("eval %r", source)
        return evaluate_source(source, self.env)
