"""Partial-evaluation views of a tree.

explain(node, level) reduces every sub-expression whose depth satisfies
`level <= depth + 1` and keeps the rest as written, so level 1 is the final
value and level height + 1 is the original text.
"""

from __future__ import annotations

import math

from stepwise import EvaluatorFn
from stepwise.types.environment import Environment
from stepwise.types.node import Expression, Literal, Node, Operator
from stepwise.types.numeric import format_value


def render_literal(literal: Literal, table: Environment) -> str:
    """Render a literal, substituting its binding in `table` when it has a plain one."""
    binding = table.resolve(literal.value)
    if binding is None or callable(binding):
        return format_value(literal.value)
    return format_value(binding)


def explain(node: Node, level: float, env: Environment, evaluate_fn: EvaluatorFn) -> str:
    match node:
        case Literal():
            return render_literal(node, env)
        case Operator(name=name):
            return name
        case Expression(children=children):
            if level <= node.depth + 1:
                return format_value(evaluate_fn(node, env))
            parts = []
            for child in children:
                match child:
                    case Literal(value=value):
                        parts.append(format_value(value))
                    case Operator(name=name):
                        parts.append(name)
                    case Expression():
                        parts.append(explain(child, level, env, evaluate_fn))
            return "(" + " ".join(parts) + ")"
    raise TypeError(f"Not an expression node: {node!r}")


def explain_step_by_step(node: Node, env: Environment, evaluate_fn: EvaluatorFn) -> list[str]:
    """The unreduced form, then one view per level from `height` down to 1."""
    steps = [explain(node, math.inf, env, evaluate_fn)]
    for level in range(node.height, 0, -1):
        steps.append(explain(node, level, env, evaluate_fn))
    return steps
