"""
  Stepwise Lexer

Character-driven tokenizer for the S-expression surface syntax:

    - '('                      -> LEFT_PAREN
    - ')'                      -> RIGHT_PAREN
    - ' ' and newline          -> SPACE
    - run right after '('      -> OPERATOR_NAME (function position)
    - any other run            -> ARGUMENT
    - end of input             -> END_OF_INPUT

Every token stream ends with exactly one END_OF_INPUT token whose lexeme is "".
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from stepwise.errors import TokenizationError


class TokenKind(Enum):
    LEFT_PAREN = "lparen"
    RIGHT_PAREN = "rparen"
    OPERATOR_NAME = "operator"
    SPACE = "space"
    ARGUMENT = "argument"
    END_OF_INPUT = "eof"


class Token(NamedTuple):
    lexeme: str
    kind: TokenKind


SPACE_CHARS = frozenset(" \n")


def classify(char: Optional[str], previous: Optional[str] = None) -> TokenKind:
    """Classify `char`; None stands for the end of input."""
    if char == "(":
        return TokenKind.LEFT_PAREN
    if char == ")":
        return TokenKind.RIGHT_PAREN
    if char in SPACE_CHARS:
        return TokenKind.SPACE
    if char is None:
        return TokenKind.END_OF_INPUT
    if previous == "(":
        return TokenKind.OPERATOR_NAME
    return TokenKind.ARGUMENT


def _char_at(source: str, i: int) -> Optional[str]:
    return source[i] if i < len(source) else None


def read_run(source: str, start: int, kind: TokenKind, previous: Optional[str] = None) -> str:
    """Greedily read characters of the same `kind` starting at `start`.

    `previous` is held fixed for the whole run, so an operator name keeps
    classifying as OPERATOR_NAME when called with previous="(".
    """
    end = start
    while classify(_char_at(source, end), previous) is kind:
        end += 1
    return source[start:end]


def tokenize(source: str) -> list[Token]:
    tokens: list[Token] = []
    previous: Optional[str] = None
    pos = 0
    n = len(source)

    while pos < n:
        char = source[pos]
        kind = classify(char, previous)

        match kind:
            case TokenKind.LEFT_PAREN | TokenKind.RIGHT_PAREN | TokenKind.SPACE:
                tokens.append(Token(char, kind))
                pos += 1
            case TokenKind.ARGUMENT:
                run = read_run(source, pos, TokenKind.ARGUMENT)
                tokens.append(Token(run, kind))
                pos += len(run)
            case TokenKind.OPERATOR_NAME:
                run = read_run(source, pos, TokenKind.OPERATOR_NAME, "(")
                tokens.append(Token(run, kind))
                pos += len(run)
            case _:
                raise TokenizationError(f"Unexpected char at {pos}: {char!r}")

        previous = source[pos - 1]

    tokens.append(Token("", TokenKind.END_OF_INPUT))
    return tokens
