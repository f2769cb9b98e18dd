from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from linexpr.terms import Term
    from linexpr.variable import Variable

Number: TypeAlias = int | float

# Total order used to sort the variables of a term map
Comparator: TypeAlias = "Callable[[Variable, Variable], int]"

# Raw argument accepted by `Expression(*args)`
ExpressionArg: TypeAlias = "Number | Variable | Sequence[Number | Variable] | Term"
