from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from stepwise import Value
from stepwise.builtin.env_builtin import register
from stepwise.config import get_max_expansions, get_recursion_limit
from stepwise.errors import MalformedExpressionError, RecursionDepthError
from stepwise.evaluation.evaluator import evaluate
from stepwise.evaluation.explain import explain, explain_step_by_step
from stepwise.evaluation.expand import expand, expand_to_end
from stepwise.evaluation.special_forms.define_form import define, define_explain
from stepwise.reader.lexer import Token, tokenize
from stepwise.reader.parser import build, parse_all
from stepwise.types.environment import Environment
from stepwise.types.node import Node

logger = logging.getLogger(__name__)


def ensure_recursion_limit(limit: int) -> None:
    """Raise Python's recursion limit to `limit`; never lowers it."""
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


@contextmanager
def depth_guard() -> Iterator[None]:
    """Report runaway nesting as a StepwiseError instead of a bare RecursionError."""
    try:
        yield
    except RecursionError as e:
        raise RecursionDepthError(
            f"Evaluation nested deeper than the recursion limit ({sys.getrecursionlimit()})"
        ) from e


class Interpreter:
    """
    A session for Stepwise expressions.

    Holds the numeric environment (`env`) and the symbolic explain table
    (`explain_table`). Definitions persist for the lifetime of the instance;
    separate instances share nothing. Every define writes both tables.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        max_expansions: int | None = None,
        recursion_limit: int | None = None,
    ):
        self.env: Environment = Environment()
        register(self.env)
        self.explain_table: Environment = Environment()
        self.max_expansions: int = (
            max_expansions if max_expansions is not None else get_max_expansions()
        )
        ensure_recursion_limit(
            recursion_limit if recursion_limit is not None else get_recursion_limit()
        )

        if prelude:
            self.eval_prelude(prelude)

    # --- reading ---
    def tokenize(self, code: str) -> list[Token]:
        return tokenize(code)

    def build(self, code: str) -> Optional[Node]:
        return build(code)

    def _tree(self, code_or_node: str | Node) -> Node:
        if not isinstance(code_or_node, str):
            return code_or_node
        node = build(code_or_node)
        if node is None:
            raise MalformedExpressionError("Cannot evaluate an empty expression")
        return node

    # --- evaluation ---
    def eval_prelude(self, code: str) -> None:
        """Evaluate every top-level form in `code`, typically definitions."""
        with depth_guard():
            for expr in parse_all(code):
                evaluate(expr, self.env, self.explain_table)

    def evaluate(self, code: str | Node) -> Value:
        with depth_guard():
            return evaluate(self._tree(code), self.env, self.explain_table)

    def define(self, code: str | Node) -> None:
        node = self._tree(code)
        with depth_guard():
            define(node, self.env, evaluate)
            define_explain(node, self.env, self.explain_table, evaluate)

    def define_explain(self, code: str | Node) -> None:
        with depth_guard():
            define_explain(self._tree(code), self.env, self.explain_table, evaluate)

    # --- stepping ---
    def explain(self, code: str | Node, level: float) -> str:
        with depth_guard():
            return explain(self._tree(code), level, self.env, evaluate)

    def explain_step_by_step(self, code: str | Node) -> list[str]:
        with depth_guard():
            return explain_step_by_step(self._tree(code), self.env, evaluate)

    def expand(self, code: str | Node) -> Value:
        with depth_guard():
            return expand(self._tree(code), self.env, self.explain_table, evaluate)

    def expand_to_end(self, code: str | Node) -> list[Value]:
        node = self._tree(code)
        logger.debug("expanding %s (cap %d)", node, self.max_expansions)
        with depth_guard():
            return expand_to_end(node, self.env, self.explain_table, evaluate, self.max_expansions)
