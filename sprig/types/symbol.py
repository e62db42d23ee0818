"""Identifier atoms.

Names are interned, so symbols read from different places share one string
and compare cheaply. Symbols themselves are light wrappers: equal by name,
hashed by name, and never kept alive by a global table.
"""

from __future__ import annotations

import sys


class Symbol:
    """An identifier such as `x`, `+` or `def`."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
