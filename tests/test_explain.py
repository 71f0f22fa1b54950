import math

import pytest

from stepwise.reader.parser import build


def test_explain_level_one_is_value(interp):
    node = build("(+ 1 1)")
    assert node.height == 1
    assert node.depth == 0
    assert interp.explain(node, 1) == "2"


def test_explain_level_two(interp):
    assert interp.explain("(+ 1 (- 1 1))", 2) == "(+ 1 0)"


def test_explain_step_by_step(interp):
    steps = interp.explain_step_by_step("(+ 1 (- 1 1))")
    assert "\n".join(steps) == "(+ 1 (- 1 1))\n(+ 1 0)\n1"


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 1)",
        "(+ 1 (- 1 1))",
        "(* (+ 1 2) (- 7 (* 2 3)))",
        "(+ 1 (- 9 (* 2 (+ 1 1))))",
    ],
)
def test_explain_bounds(interp, source):
    node = build(source)
    assert interp.explain(node, node.height + 1) == source
    assert interp.explain(node, math.inf) == source
    assert interp.explain(node, 1) == str(interp.evaluate(source))


@pytest.mark.parametrize(
    "source",
    ["(+ 1 1)", "(+ (- 1 1) (- 1 1))", "(+ 1 (- 9 (* 2 (+ 1 1))))"],
)
def test_step_by_step_shrinks(interp, source):
    node = build(source)
    steps = interp.explain_step_by_step(node)
    assert len(steps) == node.height + 1
    parens = [s.count("(") for s in steps]
    assert parens == sorted(parens, reverse=True)
    assert parens[-1] == 0


def test_step_by_step_deep(interp):
    assert interp.explain_step_by_step("(+ 1 (- 9 (* 2 (+ 1 1))))") == [
        "(+ 1 (- 9 (* 2 (+ 1 1))))",
        "(+ 1 (- 9 (* 2 2)))",
        "(+ 1 (- 9 4))",
        "(+ 1 5)",
        "6",
    ]


def test_explain_literal_uses_binding(interp):
    interp.define("(define x 1)")
    assert interp.explain("x", 1) == "1"
    assert interp.explain_step_by_step("x") == ["1", "1"]


def test_explain_keeps_argument_symbols(interp):
    interp.define("(define x 1)")
    assert interp.explain("(+ x (- x 1))", 2) == "(+ x 0)"


def test_explain_boolean(interp):
    assert interp.explain("(= 1 (- 2 1))", 1) == "#t"


def test_explain_defined_function(ackermann):
    assert ackermann.explain_step_by_step("(C 1 (+ 1 1))") == ["(C 1 (+ 1 1))", "(C 1 2)", "4"]
