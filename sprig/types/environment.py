"""Runtime environment for sprig.

The Environment is a single flat mapping from names to values. Variables,
lambdas and builtins share one namespace. There is no outer chain: a lambda
call works on `clone()`, a full copy of the caller's bindings, so nothing the
callee binds is visible to the caller afterwards.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from sprig import Expression
from sprig.types.errors import NotAnIdentifier, VariableNotDefined
from sprig.types.symbol import Symbol


def _key(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise NotAnIdentifier(name)


class Environment:
    """Mapping from names to sprig values."""

    __slots__ = ("vars", "eager_if")

    def __init__(self, bindings: Optional[dict[str, Expression]] = None, eager_if: bool = False):
        self.vars: dict[str, Expression] = dict(bindings) if bindings else {}
        # Carried across clones so a whole session agrees on how `if` evaluates.
        self.eager_if: bool = eager_if

    def define(self, name: str | Symbol, value: Expression) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises NotAnIdentifier if `name` is neither a str nor a Symbol.
        """
        self.vars[_key(name)] = value

    def get(self, name: str | Symbol, default: Expression = None) -> Expression:
        return self.vars.get(_key(name), default)

    def lookup(self, name: str | Symbol) -> Expression:
        """Return the value bound to `name`; raises VariableNotDefined."""
        key = _key(name)
        try:
            return self.vars[key]
        except KeyError:
            raise VariableNotDefined(key) from None

    def update(self, mapping: dict[str, Expression]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def clone(self) -> Environment:
        """Copy of every binding. Values are never mutated in place, so the
        copy behaves as an independent store."""
        return Environment(self.vars, eager_if=self.eager_if)

    def __contains__(self, name) -> bool:
        return isinstance(name, (str, Symbol)) and _key(name) in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        """Compact view of the bindings."""
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
