"""
  Tokenizer: source text -> flat list of tokens.

Scans left to right with one character of lookahead:

    (  )              -> PAREN
    1  2.5            -> NUM     (a leading ASCII digit, then digits and '.')
    "text"            -> STR     (no escapes; runs to the next '"')
    true  false       -> BOOL
    anything else     -> IDENT   (a run of non-whitespace, non-paren characters)

An unterminated string swallows the rest of the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from sprig.types.coerce import parse_number
from sprig.types.errors import MalformedNumber

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    PAREN = "paren"
    NUM = "num"
    STR = "str"
    IDENT = "ident"
    BOOL = "bool"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[str, float, bool]

    def __repr__(self):
        return f"{self.kind.name.title()}({self.value!r})"


def Paren(ch: str) -> Token:
    return Token(TokenKind.PAREN, ch)


def Num(n: float) -> Token:
    return Token(TokenKind.NUM, n)


def Str(s: str) -> Token:
    return Token(TokenKind.STR, s)


def Ident(s: str) -> Token:
    return Token(TokenKind.IDENT, s)


def Bool(b: bool) -> Token:
    return Token(TokenKind.BOOL, b)


OPEN = Paren("(")
CLOSE = Paren(")")


def tokenize(source: str) -> list[Token]:
    """Tokenize the whole source eagerly.

    Raises MalformedNumber for numeric text such as `1.2.3`.
    """
    tokens: list[Token] = []
    pos = 0
    n = len(source)

    while pos < n:
        ch = source[pos]

        if ch in "()":
            tokens.append(Paren(ch))
            pos += 1
        elif "0" <= ch <= "9":
            start = pos
            while pos < n and (source[pos].isnumeric() or source[pos] == "."):
                pos += 1
            text = source[start:pos]
            try:
                tokens.append(Num(parse_number(text)))
            except ValueError:
                raise MalformedNumber(text) from None
        elif ch == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                end = n
            tokens.append(Str(source[pos + 1:end]))
            pos = end + 1
        elif ch.isspace():
            pos += 1
        else:
            start = pos
            while pos < n and not (source[pos].isspace() or source[pos] in "()"):
                pos += 1
            text = source[start:pos]
            if text in ("true", "false"):
                tokens.append(Bool(text == "true"))
            else:
                tokens.append(Ident(text))

    logger.debug("tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
