"""
  Stepwise Tree Builder

Turns the token stream from `stepwise.reader.lexer` into expression trees:

    - a bare literal with no parentheses  -> Literal (number or symbol text)
    - '(' ... ')'                         -> Expression
    - OPERATOR_NAME token                 -> Operator child
    - ARGUMENT token                      -> Literal child (text kept as written)
    - nested '(' ... ')'                  -> child Expression

Parsing is stack based: the stack holds the Expressions that are still open.
The root's `height` is the deepest stack size seen while it was open.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from stepwise.errors import MalformedExpressionError
from stepwise.reader.lexer import Token, TokenKind, tokenize
from stepwise.types.node import Expression, Literal, Node, Operator
from stepwise.types.numeric import parse_number


CONTENT_KINDS = (TokenKind.ARGUMENT, TokenKind.OPERATOR_NAME)


def _bare_literal(tokens: list[Token]) -> Optional[Literal]:
    """Return a Literal when the stream is one argument token and nothing else."""
    content = [t for t in tokens if t.kind not in (TokenKind.SPACE, TokenKind.END_OF_INPUT)]
    if len(content) != 1 or content[0].kind is not TokenKind.ARGUMENT:
        return None
    text = content[0].lexeme
    number = parse_number(text)
    return Literal(text if number is None else number, 0)


def _trees(tokens: Iterable[Token], source: str) -> Iterator[Expression]:
    levels: list[Expression] = []
    height = 0

    for token in tokens:
        match token.kind:
            case TokenKind.LEFT_PAREN:
                # Head expressions such as ((= y 0) 0) and nested arguments
                # both open a new level under the current top.
                levels.append(Expression(depth=len(levels)))
                height = max(height, len(levels))
            case TokenKind.OPERATOR_NAME | TokenKind.ARGUMENT:
                if not levels:
                    raise MalformedExpressionError(
                        f"Unexpected {token.lexeme!r} outside parentheses in {source!r}"
                    )
                node = (
                    Operator(token.lexeme, len(levels))
                    if token.kind is TokenKind.OPERATOR_NAME
                    else Literal(token.lexeme, len(levels))
                )
                levels[-1].add_child(node)
            case TokenKind.RIGHT_PAREN:
                if not levels:
                    raise MalformedExpressionError(f"Unmatched ')' in {source!r}")
                current = levels.pop()
                if levels:
                    levels[-1].add_child(current)
                else:
                    current.height = height
                    height = 0
                    yield current
            case TokenKind.SPACE | TokenKind.END_OF_INPUT:
                pass

    if levels:
        raise MalformedExpressionError(f"Unmatched '(' in {source!r}")


def parse_all(source: str) -> Iterator[Node]:
    """Yield every top-level tree in `source`, left to right."""
    tokens = tokenize(source)
    literal = _bare_literal(tokens)
    if literal is not None:
        yield literal
        return
    yield from _trees(tokens, source)


def build(source: str) -> Optional[Node]:
    """
    Build exactly one tree from `source`; None for empty input.

    Anything after the first complete tree raises MalformedExpressionError,
    so "(+ 1 1) (+ 2 2)" is rejected. Use parse_all for several forms.
    """
    if not source:
        return None

    trees = parse_all(source)
    root = next(trees, None)
    if root is None:
        raise MalformedExpressionError(f"No expression could be built from {source!r}")
    if next(trees, None) is not None:
        raise MalformedExpressionError(f"Unexpected content after the first expression in {source!r}")
    return root
