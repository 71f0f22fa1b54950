"""Expression tree nodes.

A tree is a closed sum of three node kinds:

- Literal:    a number or symbol in argument position
- Operator:   the name in function position, right after '('
- Expression: a parenthesised list; children[0] is what gets applied

`depth` is the nesting level the node was created at (0 is outermost).
`height` is the deepest nesting level in the whole tree and is only
meaningful on the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from stepwise.types.numeric import format_value


@dataclass(eq=True, slots=True)
class Literal:
    value: int | float | str
    depth: int = 0

    height: ClassVar[int] = 1

    def __str__(self) -> str:
        return format_value(self.value)


@dataclass(eq=True, slots=True)
class Operator:
    name: str
    depth: int = 0

    height: ClassVar[int] = 1

    def __str__(self) -> str:
        return self.name


@dataclass(eq=True, slots=True)
class Expression:
    children: list[Node] = field(default_factory=list)
    depth: int = 0
    height: int = 1

    def add_child(self, node: Node) -> None:
        self.children.append(node)

    @property
    def head(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def args(self) -> list[Node]:
        return self.children[1:]

    @property
    def operator_name(self) -> str | None:
        """Name in function position, or None when the head is not an Operator."""
        head = self.head
        return head.name if isinstance(head, Operator) else None

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


Node = Union[Literal, Operator, Expression]
