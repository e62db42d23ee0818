"""
  Recursive-descent parser: tokens -> expression tree.

Emits Python primitives, the same objects the evaluator works on:

    - numbers     -> float
    - strings     -> str
    - booleans    -> bool
    - identifiers -> Symbol
    - lists       -> Python list

Parenthesis matching is the only structural rule: every '(' needs exactly one
matching ')', decided purely by nesting depth.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from sprig import Expression
from sprig.reader.tokenizer import Token, TokenKind, OPEN, CLOSE, tokenize
from sprig.types.errors import (
    MissingClosingParenthesis,
    SprigRecursionError,
    UnexpectedType,
    UnexpectedClosingParenthesis,
    UnexpectedEndOfTokenStream,
)
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> Expression:
        tok = self.advance()
        if tok is None:
            raise UnexpectedEndOfTokenStream()

        if tok == OPEN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise MissingClosingParenthesis()
                if nxt == CLOSE:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok == CLOSE:
            raise UnexpectedClosingParenthesis()

        return atom(tok)

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def atom(tok: Token) -> Expression:
    """Convert a non-paren token into its expression atom."""
    if tok.kind is TokenKind.IDENT:
        return Symbol(tok.value)
    if tok.kind in (TokenKind.NUM, TokenKind.STR, TokenKind.BOOL):
        return tok.value
    raise UnexpectedType()


def parse(tokens: Iterable[Token]) -> Expression:
    """Parse the first expression of `tokens`; anything after it is ignored."""
    try:
        expr = TokenStream(tokens).parse_expr()
    except RecursionError:
        raise SprigRecursionError() from None
    logger.debug("parsed %r", expr)
    return expr


def parse_all(tokens: Iterable[Token]) -> list[Expression]:
    """Parse every top-level expression of `tokens`.

    Nesting deeper than the host stack allows raises SprigRecursionError.
    """
    try:
        exprs = list(TokenStream(tokens).parse_all())
    except RecursionError:
        raise SprigRecursionError() from None
    logger.debug("parsed %d top-level expressions", len(exprs))
    return exprs


def read(source: str) -> Expression:
    """Tokenize and parse the first expression of `source`."""
    return parse(tokenize(source))
