from sprig import Expression
from sprig.types.coerce import format_number
from sprig.types.lambda_fn import Lambda
from sprig.types.native_op import NativeOp
from sprig.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[93m"
COLOR_STRING = "\033[92m"
COLOR_BOOL = "\033[96m"
COLOR_SYMBOL = "\033[94m"
COLOR_LAMBDA = "\033[95m"
COLOR_NATIVE = "\033[90m"
COLOR_ERROR = "\033[91m"

LAMBDA_SIGN = "λ"


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def pprint_expr(expr: Expression, color: bool = False) -> str:
    """Render a value the way the REPL shows it.

    numbers -> 6, 2.5        strings  -> "text"
    idents  -> name          booleans -> true / false
    lists   -> (a b c)       lambdas  -> λ (a b) -> (+ a b)
    builtins -> prelude function
    """
    match expr:
        case bool():
            return _paint("true" if expr else "false", COLOR_BOOL, color)
        case int() | float():
            return _paint(format_number(float(expr)), COLOR_NUMBER, color)
        case str():
            return _paint(f'"{expr}"', COLOR_STRING, color)
        case Symbol():
            return _paint(expr.id, COLOR_SYMBOL, color)
        case list():
            return "(" + " ".join(pprint_expr(e, color) for e in expr) + ")"
        case Lambda():
            params = "(" + " ".join(expr.params) + ")"
            head = _paint(f"{LAMBDA_SIGN} {params}", COLOR_LAMBDA, color)
            return f"{head} -> {pprint_expr(expr.body, color)}"
        case NativeOp():
            return _paint("prelude function", COLOR_NATIVE, color)
    return repr(expr)


def pprint_error(error: BaseException, color: bool = False) -> str:
    return _paint(f"error: {error}", COLOR_ERROR, color)
