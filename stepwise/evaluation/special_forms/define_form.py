"""Special form: define.

    (define name value)                      constant binding
    (define (name formal ...) (cond ...))    cond-bodied procedure
    (define (name formal ...) (op ...))      alias: name takes op's binding

The alias form ignores the formals and the body's arguments; only cond bodies
get real argument plumbing.
"""

from __future__ import annotations

import logging
from typing import Optional

from stepwise import EvaluatorFn, Value
from stepwise.errors import MalformedExpressionError
from stepwise.evaluation.special_forms.cond_form import (
    cond_clauses,
    is_cond,
    make_cond_procedure,
    make_symbolic_cond_procedure,
)
from stepwise.types.environment import Environment
from stepwise.types.node import Expression, Literal, Node
from stepwise.types.unbound import Unbound

logger = logging.getLogger(__name__)


def is_define(node: Node) -> bool:
    return isinstance(node, Expression) and node.operator_name == "define"


def _operands(node: Expression) -> tuple[Node, Node]:
    if len(node.children) != 3:
        raise MalformedExpressionError(f"define requires exactly 2 operands: {node}")
    return node.children[1], node.children[2]


def _header(target: Expression) -> tuple[str, list[str]]:
    """Return (name, formals) for a (name formal ...) header."""
    name = target.operator_name
    if name is None:
        raise MalformedExpressionError(f"define header must start with a name: {target}")
    formals = []
    for formal in target.args:
        if not isinstance(formal, Literal):
            raise MalformedExpressionError(f"formal parameter must be a symbol: {formal}")
        formals.append(formal.value)
    return name, formals


def _constant(body: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    if isinstance(body, Literal):
        return body.value
    return evaluate_fn(body, env)


def define(node: Node, env: Environment, evaluate_fn: EvaluatorFn) -> None:
    """Bind a definition into the numeric environment; no-op for other nodes."""
    if not is_define(node):
        return None

    target, body = _operands(node)
    match target:
        case Literal(value=name):
            env.define(name, _constant(body, env, evaluate_fn))
            logger.debug("defined constant %s", name)
            return None
        case Expression():
            name, formals = _header(target)
        case _:
            raise MalformedExpressionError(f"cannot define {target}")

    for formal in formals:
        env.define(formal, Unbound)

    if not isinstance(body, Expression):
        raise MalformedExpressionError(f"body of {name} must be an expression: {body}")

    if is_cond(body):
        env.define(name, make_cond_procedure(name, formals, cond_clauses(body), env, evaluate_fn))
    else:
        env.define(name, env.resolve(body.operator_name))
    logger.debug("defined procedure %s %s", name, formals)
    return None


def define_explain(
    node: Node, env: Environment, explain_table: Environment, evaluate_fn: EvaluatorFn
) -> None:
    """Bind the symbolic version of a definition into the explain table."""
    if not is_define(node):
        return None

    target, body = _operands(node)
    match target:
        case Literal(value=name):
            explain_table.define(name, _constant(body, env, evaluate_fn))
            return None
        case Expression():
            name, formals = _header(target)
        case _:
            raise MalformedExpressionError(f"cannot define {target}")

    for formal in formals:
        explain_table.define(formal, Unbound)

    if not isinstance(body, Expression):
        raise MalformedExpressionError(f"body of {name} must be an expression: {body}")

    if is_cond(body):
        explain_table.define(
            name,
            make_symbolic_cond_procedure(
                name, formals, cond_clauses(body), env, explain_table, evaluate_fn
            ),
        )
    else:
        explain_table.define(name, explain_table.resolve(body.operator_name))
    return None


def define_form(
    node: Expression,
    env: Environment,
    explain_table: Optional[Environment],
    evaluate_fn: EvaluatorFn,
) -> None:
    """
    (define ...) reached through evaluation: writes both tables.
    """
    define(node, env, evaluate_fn)
    if explain_table is not None:
        define_explain(node, env, explain_table, evaluate_fn)
    return None
