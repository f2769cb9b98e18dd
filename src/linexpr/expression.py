from __future__ import annotations

from typing import TYPE_CHECKING

import polars as pl

from linexpr._utils import format_number
from linexpr.terms import parse_args

if TYPE_CHECKING:
    from collections.abc import Iterable

    from immutabledict import immutabledict

    from linexpr.typing import ExpressionArg
    from linexpr.variable import Variable


class Expression:
    """A linear expression: a sum of scaled variables plus a constant.

    The constructor accepts any number of arguments, each of which is one of:
        - a number, added to the constant,
        - a `Variable`, added with coefficient 1,
        - a `(coefficient, variable)` pair, added with the given coefficient.

    Repeated variables are merged by summing their coefficients. The expression
    is never modified after construction.

    Examples
    --------
    >>> x, y = Variable("x"), Variable("y")
    >>> str(Expression(x, (2, y), x, -3))
    '2*x + 2y - 3'

    """

    __slots__ = ("_constant", "_terms")

    def __init__(self, *args: ExpressionArg) -> None:
        parsed = parse_args(args)
        self._terms: immutabledict[Variable, float] = parsed.terms.freeze()
        self._constant: float = parsed.constant

    @property
    def terms(self) -> immutabledict[Variable, float]:
        """Return the terms of the expression, sorted by variable order."""
        return self._terms

    @property
    def constant(self) -> float:
        """Return the constant of the expression."""
        return self._constant

    @property
    def value(self) -> float:
        """Return the value of the expression for the current variable values.

        The value is not cached: it follows the variables as the solver updates them.
        """
        result = self._constant
        for variable, coefficient in self._terms.items():
            result += variable.value * coefficient
        return result

    def __str__(self) -> str:
        parts: list[str] = []
        for i, (variable, coefficient) in enumerate(self._terms.items()):
            if i == 0:
                if coefficient == 1:
                    parts.append(f"{variable}")
                elif coefficient == -1:
                    parts.append(f"-{variable}")
                else:
                    parts.append(f"{format_number(coefficient)}*{variable}")
            elif coefficient == 1:
                parts.append(f" + {variable}")
            elif coefficient == -1:
                parts.append(f" - {variable}")
            elif coefficient >= 0:
                parts.append(f" + {format_number(coefficient)}{variable}")
            else:
                parts.append(f" - {format_number(-coefficient)}{variable}")

        if self._constant < 0:
            parts.append(f" - {format_number(-self._constant)}")
        elif self._constant > 0:
            parts.append(f" + {format_number(self._constant)}")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def to_frame(self) -> pl.DataFrame:
        """Return the terms as a DataFrame.

        Returns
        -------
        pl.DataFrame
            One row per term, in variable order, with columns
            `variable` (Object), `name` (String) and `coefficient` (Float64).

        """
        return pl.DataFrame(
            [
                pl.Series("variable", list(self._terms), dtype=pl.Object),
                pl.Series("name", [str(v) for v in self._terms], dtype=pl.String),
                pl.Series("coefficient", list(self._terms.values()), dtype=pl.Float64),
            ]
        )


def read_values(expressions: Iterable[Expression]) -> pl.Series:
    """Read the current value of each expression.

    Examples
    --------
    >>> x.value = 2.0
    >>> read_values([Expression(x, 1), Expression((3, x))]).to_list()
    [3.0, 6.0]

    """
    return pl.Series("value", [expr.value for expr in expressions], dtype=pl.Float64)
