from __future__ import annotations

import itertools

_id_counter = itertools.count()


class Variable:
    """A solver variable referenced by linear expressions.

    Variables are compared by identity: two instances are never merged, even if
    their names or current values coincide. The creation order (`id`) gives the
    total order used to sort the terms of an expression.

    Attributes:
        id (int): Unique, monotonically increasing creation index.
        name (str): Display name, used when rendering expressions.
        value (float): Current value, written by the solver.

    """

    __slots__ = ("id", "name", "value")

    def __init__(self, name: str = "", value: float = 0.0) -> None:
        self.id: int = next(_id_counter)
        self.name: str = name
        self.value: float = value

    @staticmethod
    def compare(a: Variable, b: Variable) -> int:
        """Compare two variables by creation order."""
        return a.id - b.id

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Variable({self.name!r}, value={self.value!r})"
