import json

from stepwise.types.node import Expression, Literal, Node, Operator
from stepwise.types.numeric import format_value


def simplify(node: Node) -> dict:
    """Plain-dict view of a tree, for logging and debugging."""
    match node:
        case Literal(value=value, depth=depth):
            return {"value": format_value(value), "depth": depth}
        case Operator(name=name, depth=depth):
            return {"value": name, "depth": depth}
        case Expression(children=children, depth=depth):
            return {"depth": depth, "children": [simplify(c) for c in children]}
    return {"value": repr(node)}


def dump(node: Node, indent: int | None = 2) -> str:
    return json.dumps(simplify(node), indent=indent)
