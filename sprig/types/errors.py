
class SprigError(Exception):
    """ Base class for all sprig errors"""
    message = "sprig error"

    def __init__(self, *args):
        super().__init__(*args or (self.message,))

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class SprigSyntaxError(SprigError):
    """ Raised when the source text or token stream is malformed"""


class SprigTypeError(SprigError):
    """ Raised when a value has the wrong shape or cannot be coerced"""


class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class SprigNameError(SprigError):
    """ Raised when a name is used without a suitable binding"""

    def __init__(self, name: str):
        super().__init__(self.message.format(name=name))
        self.name = name

    def __eq__(self, other):
        return type(self) is type(other) and self.name == other.name

    def __hash__(self):
        return hash((type(self), self.name))


# -------------------------------
# Lexical / structural
# -------------------------------
class UnexpectedEndOfTokenStream(SprigSyntaxError):
    """ Raised when no expression could be read from the tokens"""
    message = "token stream ended unexpectedly"


class UnexpectedClosingParenthesis(SprigSyntaxError):
    """ Raised on a ')' without a matching '('"""
    message = "encountered an unexpected closing parenthesis"


class MissingClosingParenthesis(SprigSyntaxError):
    """ Raised when the tokens run out while a list is still open"""
    message = "missing expected closing parenthesis"


class MalformedNumber(SprigSyntaxError):
    """ Raised when a numeric literal cannot be parsed as a float"""

    def __init__(self, text: str):
        super().__init__(f"malformed number literal `{text}`")
        self.text = text


# -------------------------------
# Shape
# -------------------------------
class UnexpectedType(SprigTypeError):
    """ Raised for non-callable operators and failed coercions"""
    message = "encountered an unexpected type"


class NotAnIdentifier(SprigTypeError):
    """ Raised when an identifier is required but something else was given"""

    def __init__(self, expr):
        from sprig.debug_utils.pprint import pprint_expr
        super().__init__(f"expression `{pprint_expr(expr)}` is not an identifier")
        self.expr = expr


class EmptyListExpression(SprigTypeError):
    """ Raised when evaluating ()"""
    message = "empty list expression"


# -------------------------------
# Arity
# -------------------------------
class InvalidNumberOfArguments(SprigArityError):
    message = "invalid number of arguments passed"


# -------------------------------
# Binding
# -------------------------------
class FunctionNotDefined(SprigNameError):
    message = "function `{name}` is not defined"


class VariableNotDefined(SprigNameError):
    message = "variable `{name}` is not defined"


class AttemptedToUseFunctionAsVariable(SprigNameError):
    message = "attempted to use function `{name}` as a variable"


# -------------------------------
# Lists
# -------------------------------
class IndexOutOfBounds(SprigError):
    """ Raised by nth for an index outside the list"""

    def __init__(self, index: int):
        super().__init__(f"index `{index}` is out of bounds")
        self.index = index


class SprigRecursionError(SprigError):
    """ Raised when an expression nests deeper than the host stack allows"""
    message = "expression nested too deeply"


class Terminate(Exception):
    """Signal raised by (exit n); unwinds the evaluator without killing the host."""

    def __init__(self, status: int = 0):
        super().__init__(f"Terminate(status={status})")
        self.status: int = status
