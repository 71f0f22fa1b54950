from __future__ import annotations


class UnboundType:
    """Placeholder bound to formal parameters before a call supplies a value."""

    def __repr__(self): return "unbound"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnboundType)

    def __hash__(self):
        return hash(UnboundType)


Unbound = UnboundType()
