import math
import sys

import pytest

from stepwise.errors import FunctionNotFoundError, RecursionDepthError
from stepwise.interpreter import Interpreter
from stepwise.evaluation.evaluator import evaluate
from stepwise.builtin.env_builtin import add
from stepwise.types.node import Expression, Literal, Operator
from stepwise.types.unbound import Unbound


def test_literal_node(env):
    assert evaluate(Literal(1, 1), env) == 1
    assert evaluate(Literal("42", 1), env) == 42


def test_literal_resolves_binding(env):
    env.define("x", "7")
    assert evaluate(Literal("x"), env) == 7


def test_unbound_placeholder_falls_back_to_text(env):
    env.define("x", Unbound)
    assert math.isnan(evaluate(Literal("x"), env))


def test_operator_resolves_procedure(env):
    assert evaluate(Operator("+"), env) is add
    assert evaluate(Operator("nope"), env) is None


def test_hand_built_tree(env):
    tree = Expression([Operator("+", 1), Literal("1", 1), Literal("2", 1)])
    assert evaluate(tree, env) == 3


@pytest.mark.parametrize("source", ["(foo 1 2)", "(+ 1 (bar))", "()"])
def test_function_not_found(interp, source):
    with pytest.raises(FunctionNotFoundError):
        interp.evaluate(source)


def test_constant_in_operator_position(interp):
    interp.evaluate("(define k 3)")
    with pytest.raises(FunctionNotFoundError):
        interp.evaluate("(k 1)")


def test_arguments_evaluate_left_to_right(env):
    seen = []

    def record(_, args):
        seen.append(args[0])
        return args[0]

    env.define("rec", record)
    tree = Expression([Operator("+"), Expression([Operator("rec"), Literal("1")]),
                       Expression([Operator("rec"), Literal("2")])])
    assert evaluate(tree, env) == 3
    assert seen == [1, 2]


def test_interpreter_accepts_nodes(interp):
    assert interp.evaluate(interp.build("(* 6 7)")) == 42


def test_deep_recursion(ackermann):
    assert ackermann.evaluate("(C 1 300)") == 2 ** 300


def test_interpreter_raises_recursion_limit():
    limit = sys.getrecursionlimit() + 500
    Interpreter(recursion_limit=limit)
    assert sys.getrecursionlimit() == limit
    Interpreter(recursion_limit=100)
    assert sys.getrecursionlimit() == limit


@pytest.fixture
def shallow_stack():
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(3000)
    yield
    sys.setrecursionlimit(previous)


def test_runaway_recursion(interp, shallow_stack):
    interp.define("(define (F n) (cond (else (F n))))")
    with pytest.raises(RecursionDepthError):
        interp.evaluate("(F 1)")
    # the session survives the failure
    assert interp.evaluate("(+ 1 1)") == 2


@pytest.mark.parametrize("name,value", [("inf", 3), ("nan", 4), ("NaN", 5)])
def test_python_float_spellings_are_symbols(interp, name, value):
    interp.define(f"(define {name} {value})")
    assert interp.evaluate(name) == value
    assert interp.evaluate(f"(+ {name} 1)") == value + 1


def test_underscore_digits_are_not_numbers(interp):
    assert math.isnan(interp.evaluate("(+ 1_0 1)"))
