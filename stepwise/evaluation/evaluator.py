"""Core evaluator for the Stepwise interpreter.

Reduces a tree to a value against one Environment. Special forms are
dispatched before ordinary application; everything else is evaluated
eagerly, arguments left to right.
"""

from __future__ import annotations

from typing import Optional

from stepwise import Value
from stepwise.errors import FunctionNotFoundError
from stepwise.evaluation.special_forms import SPECIAL_FORMS
from stepwise.types.environment import Environment
from stepwise.types.node import Expression, Literal, Node, Operator
from stepwise.types.numeric import is_truthy, to_number


def evaluate(node: Node, env: Environment, explain_table: Optional[Environment] = None) -> Value:
    """
    Evaluate `node` in `env`.

    `explain_table` is only handed to special forms, so that a define
    evaluated here also lands in the symbolic table.
    """
    match node:
        case Literal(value=value):
            # A defined symbol evaluates to its binding, anything else to its own text
            binding = env.resolve(value)
            return to_number(value if binding is None else binding)

        case Operator(name=name):
            return env.resolve(name)

        case Expression(children=[head, *tail]):
            name = node.operator_name
            if name in SPECIAL_FORMS:
                return SPECIAL_FORMS[name](node, env, explain_table, evaluate)

            procedure = evaluate(head, env, explain_table)
            if not is_truthy(procedure):
                raise FunctionNotFoundError(f"Function not found: {head}")
            if not callable(procedure):
                raise FunctionNotFoundError(f"{head} is bound to {procedure!r}, not a procedure")

            args = [evaluate(arg, env, explain_table) for arg in tail]
            return procedure(env, args)

        case Expression():
            raise FunctionNotFoundError("Cannot apply an empty expression ()")

    raise TypeError(f"Not an expression node: {node!r}")
