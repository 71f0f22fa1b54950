"""Number coercion and value rendering.

Literal text is coerced lazily: a literal stays a string inside the tree and
only becomes a number when evaluated. Coercion never raises; anything that is
not a number becomes NaN so that unresolved symbols flow through arithmetic.
"""

from __future__ import annotations

import math
import re

from stepwise import Value

NAN = float("nan")

# Decimal literals only; Python spellings such as 1_000, inf or nan stay symbols.
_INTEGER = re.compile(r"[+-]?\d+")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")


def to_number(value: Value) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
        if _NUMBER.fullmatch(text):
            return float(text)
        return NAN
    return NAN


def parse_number(text: str) -> int | float | None:
    """Return the number spelled by `text`, or None when it is a symbol."""
    if not _NUMBER.fullmatch(text.strip()):
        return None
    return to_number(text)


def is_nan(value: Value) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    return value == "NaN"


def is_truthy(value: Value) -> bool:
    # NaN never satisfies a guard
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def format_value(value: Value) -> str:
    """Render an evaluated value the way it is written back into source text."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if callable(value):
        return f"#<procedure {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)
