"""Linear expressions for constraint solvers."""

from linexpr.errors import (
    ExpressionArgumentError,
    InvalidArgumentType,
    InvalidPairElement0,
    InvalidPairElement1,
    InvalidPairLength,
)
from linexpr.expression import Expression, read_values
from linexpr.terms import Constant, Scaled, Unit
from linexpr.variable import Variable

__all__ = [
    "Constant",
    "Expression",
    "ExpressionArgumentError",
    "InvalidArgumentType",
    "InvalidPairElement0",
    "InvalidPairElement1",
    "InvalidPairLength",
    "Scaled",
    "Unit",
    "Variable",
    "read_values",
]
