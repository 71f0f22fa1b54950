"""Substitution-model stepping.

expand() performs one substitution step with the symbolic explain table:

- all arguments are literals: apply the explain-table procedure and render the
  body it selects with the formals substituted, or fall back to the numeric
  procedure and return its value
- otherwise: reduce each compound argument, by one symbolic step when its
  operator has a symbolic definition and fully otherwise, then render the node

expand_to_end() re-reads each step's text and expands again until the result
is no longer a call, a step is NaN, or the iteration cap is reached.
"""

from __future__ import annotations

import logging

from stepwise import EvaluatorFn, Value
from stepwise.debug_utils.pprint import dump
from stepwise.errors import FunctionNotFoundError
from stepwise.evaluation.explain import render_literal
from stepwise.reader.parser import build
from stepwise.types.environment import Environment
from stepwise.types.node import Expression, Literal, Node, Operator
from stepwise.types.numeric import format_value, is_nan

logger = logging.getLogger(__name__)


def flatten(node: Node, explain_table: Environment) -> str:
    """Render `node` as source text, substituting explain-table bindings."""
    match node:
        case Literal():
            return render_literal(node, explain_table)
        case Operator(name=name):
            return name
        case Expression(children=children):
            return "(" + " ".join(flatten(c, explain_table) for c in children) + ")"
    raise TypeError(f"Not an expression node: {node!r}")


def _evaluate_or_fallback(node: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    value = evaluate_fn(node, env)
    if is_nan(value):
        logger.warning("Evaluation error for %s, keeping the literal text", dump(node))
        return node.value if isinstance(node, Literal) else value
    return value


def expand(
    node: Node, env: Environment, explain_table: Environment, evaluate_fn: EvaluatorFn
) -> Value:
    if isinstance(node, Literal):
        return _evaluate_or_fallback(node, env, evaluate_fn)
    if not isinstance(node, Expression):
        raise TypeError(f"Cannot expand {node!r}")

    name = node.operator_name
    if all(isinstance(arg, Literal) for arg in node.args):
        actuals = [_evaluate_or_fallback(arg, env, evaluate_fn) for arg in node.args]
        symbolic = explain_table.resolve(name)
        if callable(symbolic):
            return flatten(symbolic(explain_table, actuals), explain_table)
        procedure = env.resolve(name)
        if not callable(procedure):
            raise FunctionNotFoundError(f"Function not found: {node.head}")
        return procedure(env, actuals)

    for i, arg in enumerate(node.args, start=1):
        if isinstance(arg, Literal):
            continue
        if explain_table.resolve(arg.operator_name):
            node.children[i] = build(format_value(expand(arg, env, explain_table, evaluate_fn)))
        else:
            node.children[i] = Literal(evaluate_fn(arg, env), arg.depth)

    return flatten(node, explain_table)


def expand_to_end(
    node: Node,
    env: Environment,
    explain_table: Environment,
    evaluate_fn: EvaluatorFn,
    max_steps: int,
) -> list[Value]:
    steps: list[Value] = []
    current = node
    count = 0

    while isinstance(current, Expression):
        if count >= max_steps:
            logger.warning("Stopped expanding after %d steps", max_steps)
            break
        expanded = expand(current, env, explain_table, evaluate_fn)
        logger.debug("expanded = %s", expanded)
        if is_nan(expanded):
            logger.warning("Expansion of %s produced NaN, stopping", current)
            break
        steps.append(expanded)
        current = build(format_value(expanded))
        count += 1

    return steps
