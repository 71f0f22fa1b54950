"""Procedures generated for cond-bodied definitions.

    (define (name formal ...)
      (cond (test result) ... (else result)))

Both variants bind the formals to the actual arguments in the numeric
environment and test the guards in order there. The numeric variant returns
the evaluated result; the symbolic variant also binds the formals in the
explain table and returns the unevaluated result node.
"""

from __future__ import annotations

from stepwise import EvaluatorFn, Procedure, Value
from stepwise.errors import CondFallthroughError, MalformedExpressionError
from stepwise.types.environment import Environment
from stepwise.types.node import Expression, Node
from stepwise.types.numeric import is_truthy
from stepwise.types.unbound import Unbound


def is_cond(body: Node) -> bool:
    return isinstance(body, Expression) and body.operator_name == "cond"


def cond_clauses(body: Expression) -> list[tuple[Node, Node]]:
    """Split a cond body into (test, result) pairs."""
    clauses = []
    for clause in body.args:
        if not isinstance(clause, Expression) or len(clause.children) != 2:
            raise MalformedExpressionError(f"cond clause must be (test result), got {clause}")
        test, result = clause.children
        clauses.append((test, result))
    return clauses


def bind_formals(formals: list[str], args: list[Value], *tables: Environment) -> None:
    for i, formal in enumerate(formals):
        actual = args[i] if i < len(args) else Unbound
        for table in tables:
            table.define(formal, actual)


def _select(name, clauses, env, evaluate_fn) -> Node:
    for test, result in clauses:
        if is_truthy(evaluate_fn(test, env)):
            return result
    raise CondFallthroughError(f"No cond clause matched in {name}")


def make_cond_procedure(
    name: str,
    formals: list[str],
    clauses: list[tuple[Node, Node]],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Procedure:
    def procedure(_: Environment, args: list[Value]) -> Value:
        bind_formals(formals, args, env)
        return evaluate_fn(_select(name, clauses, env, evaluate_fn), env)

    procedure.__name__ = procedure.__qualname__ = name
    return procedure


def make_symbolic_cond_procedure(
    name: str,
    formals: list[str],
    clauses: list[tuple[Node, Node]],
    env: Environment,
    explain_table: Environment,
    evaluate_fn: EvaluatorFn,
) -> Procedure:
    def procedure(_: Environment, args: list[Value]) -> Node:
        bind_formals(formals, args, env, explain_table)
        return _select(name, clauses, env, evaluate_fn)

    procedure.__name__ = procedure.__qualname__ = name
    return procedure
