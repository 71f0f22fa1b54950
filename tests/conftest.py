import pytest

from stepwise.builtin.env_builtin import register
from stepwise.interpreter import Interpreter
from stepwise.types.environment import Environment


# Ackermann-style function from SICP exercise 1.10; (C 1 n) is 2^n.
ACKERMANN = """
(define (C x y)
  (cond ((= y 0) 0)
        ((= x 0) (* 2 y))
        ((= y 1) 2)
        (else (C (- x 1) (C x (- y 1))))))
"""


@pytest.fixture
def interp():
    """Fresh session: builtins loaded, empty explain table."""
    return Interpreter()


@pytest.fixture
def ackermann(interp):
    interp.define(ACKERMANN.strip())
    return interp


@pytest.fixture
def env():
    e = Environment()
    register(e)
    return e


@pytest.fixture
def ackermann_source():
    return ACKERMANN.strip()
