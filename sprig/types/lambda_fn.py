"""User-defined function values created by the `func` special form."""

from __future__ import annotations

from sprig import Expression


class Lambda:
    """A lambda with named parameters and an owned, unevaluated body.

    Lambdas capture nothing at definition time: the body runs in a copy of
    the caller's environment extended with the parameter bindings.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: Expression):
        self.params: list[str] = list(params)
        self.body: Expression = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other) -> bool:
        # Imported lazily: builtin.prelude depends on this module.
        from sprig.builtin.prelude import is_equal
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and is_equal(self.body, other.body)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"

    def __str__(self) -> str:
        from sprig.debug_utils.pprint import pprint_expr
        return pprint_expr(self)
