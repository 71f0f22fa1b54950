"""Built-in procedures for the Stepwise environment.

Every builtin is called as fn(env, args) with already evaluated arguments.
Arithmetic coerces each argument with to_number, so an unresolved symbol
turns the result into NaN rather than raising.
"""
from __future__ import annotations

import math

from stepwise import Value
from stepwise.errors import ArityError
from stepwise.types.environment import Environment
from stepwise.types.numeric import to_number


def _numbers(args: list[Value]) -> list[int | float]:
    return [to_number(a) for a in args]


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Value]) -> int | float:
    """Return the sum of all arguments; 0 for no arguments."""
    return sum(_numbers(args))


def sub(env: Environment, args: list[Value]) -> int | float:
    """Subtract the sum of the remaining arguments from the first."""
    numbers = _numbers(args)
    if not numbers:
        return 0
    return numbers[0] - sum(numbers[1:])


def mul(env: Environment, args: list[Value]) -> int | float:
    """Return the product of all arguments; 1 for no arguments."""
    return math.prod(_numbers(args))


# -------------------------------
# Predicates
# -------------------------------
def equals(env: Environment, args: list[Value]) -> bool:
    if len(args) != 2:
        raise ArityError(f"= requires exactly 2 arguments, got {len(args)}")
    a, b = _numbers(args)
    return a == b


def else_(env: Environment, args: list[Value]) -> bool:
    """Catch-all cond guard."""
    return True


def define_placeholder(env: Environment, args: list[Value]) -> None:
    # (define ...) is handled as a special form; this keeps the name resolvable
    return None


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update(
        {
            "+": add,
            "-": sub,
            "*": mul,
            "=": equals,
            "else": else_,
            "define": define_placeholder,
        }
    )
