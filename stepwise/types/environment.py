"""Symbol table for Stepwise.

A flat mapping from names to values: numeric constants, builtin procedures,
define-generated closures, or the Unbound placeholder. An Interpreter holds
two of these, the numeric `env` and the symbolic `explain_table`.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Hashable, Optional

from stepwise import Value
from stepwise.types.unbound import Unbound


class Environment:
    """Mutable mapping from symbol names to values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Hashable, Value] = {}

    def define(self, name: Hashable, value: Value) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        self.vars[name] = value

    def update(self, mapping: dict[Hashable, Value]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def resolve(self, name: Any) -> Optional[Value]:
        """Return the value bound to `name`.

        Missing names and names bound to Unbound both resolve to None, so
        callers can fall back to the literal text in one check.
        """
        try:
            value = self.vars.get(name)
        except TypeError:
            # unhashable literal values never name a binding
            return None
        if value is None or value is Unbound:
            return None
        return value

    def __contains__(self, name: Any) -> bool:
        try:
            return name in self.vars
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this table's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
