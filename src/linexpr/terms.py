"""Parsing of `Expression` construction arguments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple, TypeAlias, assert_never

from linexpr._utils import is_number
from linexpr.errors import (
    ExpressionArgumentError,
    InvalidArgumentType,
    InvalidPairElement0,
    InvalidPairElement1,
    InvalidPairLength,
)
from linexpr.term_map import TermMap
from linexpr.variable import Variable

if TYPE_CHECKING:
    from linexpr.typing import ExpressionArg


@dataclass(frozen=True)
class Constant:
    """A constant offset."""

    value: float


@dataclass(frozen=True)
class Unit:
    """A variable with coefficient 1."""

    variable: Variable


@dataclass(frozen=True)
class Scaled:
    """A variable multiplied by a coefficient."""

    coefficient: float
    variable: Variable


Term: TypeAlias = Constant | Unit | Scaled


class ParseResult(NamedTuple):
    """Aggregated terms and summed constant of an argument list."""

    terms: TermMap
    constant: float


def parse_into_term(item: ExpressionArg) -> Term:
    """Classify a raw construction argument.

    Parameters
    ----------
    item : ExpressionArg
        A number, a `Variable`, a `(coefficient, variable)` pair given as a
        tuple or a list, or an already built term. Terms are checked like
        raw arguments.

    Returns
    -------
    Term
        The matching `Constant`, `Unit` or `Scaled` term, with its numbers
        converted to float.

    Raises
    ------
    InvalidPairLength
        If a pair does not have exactly two elements.
    InvalidPairElement0
        If the coefficient of a pair or `Scaled` term is not a number, or is
        too large for a float.
    InvalidPairElement1
        If the variable of a pair or `Scaled` term is not a `Variable`.
    InvalidArgumentType
        For any other kind of argument, a `Constant` holding something other
        than a number (or a number too large for a float), or a `Unit` without
        a `Variable`.

    """
    match item:
        case Constant(value):
            return Constant(_to_float(value, InvalidArgumentType, item))
        case Unit(variable):
            return Unit(_check_variable(variable, InvalidArgumentType, item))
        case Scaled(coefficient, variable):
            return _scaled(coefficient, variable, item)
        case Variable():
            return Unit(item)
        case tuple() | list():
            return _parse_pair(item)
    if is_number(item):
        return Constant(_to_float(item, InvalidArgumentType, item))
    msg = f"Invalid Expression argument: {item!r}"
    raise InvalidArgumentType(msg, item)


def _to_float(value: Any, error: type[ExpressionArgumentError], argument: Any) -> float:
    if not is_number(value):
        msg = f"Expected a number, got {value!r}"
        raise error(msg, argument)
    try:
        return float(value)
    except OverflowError:
        msg = f"Number too large for a float: {value!r}"
        raise error(msg, argument) from None


def _check_variable(
    variable: Any, error: type[ExpressionArgumentError], argument: Any
) -> Variable:
    if not isinstance(variable, Variable):
        msg = f"Expected a Variable, got {variable!r}"
        raise error(msg, argument)
    return variable


def _scaled(coefficient: Any, variable: Any, argument: Any) -> Scaled:
    """Build a `Scaled` term, checking the coefficient before the variable."""
    return Scaled(
        _to_float(coefficient, InvalidPairElement0, argument),
        _check_variable(variable, InvalidPairElement1, argument),
    )


def _parse_pair(pair: tuple[Any, ...] | list[Any]) -> Scaled:
    if len(pair) != 2:
        msg = f"Pair must have length 2, got {len(pair)}: {pair!r}"
        raise InvalidPairLength(msg, pair)
    coefficient, variable = pair
    return _scaled(coefficient, variable, pair)


def parse_args(args: Iterable[ExpressionArg]) -> ParseResult:
    """Aggregate construction arguments into a term map and a constant.

    Arguments are processed in order and parsing stops at the first invalid one.
    Repeated variables are merged by summing their coefficients.
    """
    constant = 0.0
    terms = TermMap(Variable.compare)
    for item in args:
        match parse_into_term(item):
            case Constant(value):
                constant += value
            case Unit(variable):
                terms.setdefault(variable).coefficient += 1.0
            case Scaled(coefficient, variable):
                terms.setdefault(variable).coefficient += coefficient
            case other:
                assert_never(other)
    return ParseResult(terms, constant)
