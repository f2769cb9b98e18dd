from fractions import Fraction

import polars as pl
import pytest
from immutabledict import immutabledict

from linexpr import (
    Expression,
    InvalidArgumentType,
    InvalidPairElement0,
    InvalidPairElement1,
    InvalidPairLength,
    Scaled,
    Unit,
    Variable,
    read_values,
)


@pytest.fixture
def v() -> Variable:
    return Variable("v", 4.0)


@pytest.fixture
def w() -> Variable:
    return Variable("w", -1.5)


# --- Construction Tests ---


@pytest.mark.parametrize("numbers", [(), (1,), (1, 2.5, -3), (0.5, 0.25)])
def test_numbers_only(numbers: tuple[float, ...]):
    expr = Expression(*numbers)
    assert expr.constant == pytest.approx(sum(numbers))
    assert len(expr.terms) == 0


def test_two_variables(v: Variable, w: Variable):
    expr = Expression(v, w)
    assert expr.value == v.value + w.value
    assert dict(expr.terms) == {v: 1.0, w: 1.0}


def test_same_variable_twice(v: Variable):
    expr = Expression(v, v)
    assert dict(expr.terms) == {v: 2.0}


def test_pair(v: Variable):
    assert dict(Expression((2, v)).terms) == {v: 2.0}


def test_pairs_aggregate(v: Variable):
    assert dict(Expression((2, v), (3, v)).terms) == {v: 5.0}


def test_mixed_arguments(v: Variable):
    expr = Expression(1, v, (2, v))
    assert expr.value == 1 + v.value * 3


def test_variant_arguments(v: Variable):
    assert dict(Expression(Scaled(2, v), [3, v]).terms) == {v: 5.0}


def test_terms_are_sorted_by_variable_order(v: Variable, w: Variable):
    expr = Expression(w, (2, v))
    assert list(expr.terms) == [v, w]


def test_zero_coefficient_is_kept(v: Variable):
    expr = Expression((2, v), (-2, v), 1)
    assert dict(expr.terms) == {v: 0.0}
    assert expr.value == 1.0


def test_terms_are_read_only(v: Variable):
    expr = Expression(v)
    assert isinstance(expr.terms, immutabledict)
    with pytest.raises(TypeError):
        expr.terms[v] = 3.0  # type: ignore[index]


@pytest.mark.parametrize(
    ("args", "error"),
    [
        (((1, 2, 3),), InvalidPairLength),
        (("v",), InvalidArgumentType),
    ],
)
def test_invalid_arguments(args: tuple, error: type[Exception]):
    with pytest.raises(error):
        Expression(*args)


def test_swapped_pair(v: Variable):
    with pytest.raises(InvalidPairElement0):
        Expression((v, 2))


def test_invalid_built_terms(v: Variable):
    """Tests that malformed terms are rejected before any Expression exists."""
    with pytest.raises(InvalidArgumentType):
        Expression(Unit(42))  # ty:ignore[invalid-argument-type]
    with pytest.raises(InvalidPairElement0):
        Expression(Scaled("2", v))  # ty:ignore[invalid-argument-type]
    with pytest.raises(InvalidPairElement1):
        Expression(Scaled(2, "v"))  # ty:ignore[invalid-argument-type]


def test_real_number_arguments(v: Variable):
    expr = Expression(Fraction(1, 2), (Fraction(3, 2), v))
    assert expr.constant == 0.5
    assert dict(expr.terms) == {v: 1.5}
    assert expr.value == 0.5 + 1.5 * 4.0


def test_number_too_large(v: Variable):
    with pytest.raises(InvalidArgumentType):
        Expression(v, 10**400)


# --- Value Tests ---


def test_value_is_live(v: Variable, w: Variable):
    """Tests that value follows variable updates without reconstruction."""
    expr = Expression((2, v), w, 10)
    assert expr.value == 2 * 4.0 - 1.5 + 10

    v.value = 0.5
    w.value = 3.0
    assert expr.value == 2 * 0.5 + 3.0 + 10


def test_expression_does_not_mutate_variables(v: Variable):
    expr = Expression((3, v), 1)
    _ = expr.value, str(expr)
    assert v.value == 4.0
    assert v.name == "v"


# --- Representation Tests ---


def test_str_single_variable(v: Variable):
    assert str(Expression(v)) == str(v) == "v"


def test_str_pair(v: Variable):
    assert str(Expression((2, v))) == "2*" + str(v)


def test_str_pair_and_constant(v: Variable):
    assert str(Expression((2, v), 3)) == "2*" + str(v) + " + 3"


def test_str_empty():
    assert str(Expression()) == ""


@pytest.mark.parametrize(
    ("coefficients", "constant", "expected"),
    [
        ((-1, 1), 0, "-a + b"),
        ((1, -1), 0, "a - b"),
        ((2.5, 3), -1, "2.5*a + 3b - 1"),
        ((-2, -0.5), 2, "-2*a - 0.5b + 2"),
        ((1, 0), 0, "a + 0b"),
        ((0, 1), 0, "0*a + b"),
    ],
)
def test_str_rendering(coefficients: tuple[float, float], constant: float, expected: str):
    """Tests that first and later terms keep their distinct formats."""
    a, b = Variable("a"), Variable("b")
    expr = Expression(*zip(coefficients, (a, b), strict=True), constant)
    assert str(expr) == expected


def test_str_constant_only():
    assert str(Expression(3)) == " + 3"
    assert str(Expression(-3)) == " - 3"
    assert str(Expression(2, -2)) == ""


@pytest.mark.parametrize(
    ("coefficient", "constant", "expected"),
    [
        (1e-7, 0, "v + 1e-7w"),
        (-1e-7, 0, "v - 1e-7w"),
        (0.00001, 0, "v + 0.00001w"),
        (2.5e21, -1e-7, "v + 2.5e+21w - 1e-7"),
    ],
)
def test_str_exponent_numbers(
    v: Variable, w: Variable, coefficient: float, constant: float, expected: str
):
    assert str(Expression(v, (coefficient, w), constant)) == expected


def test_repr(v: Variable):
    assert repr(Expression((2, v), -1)) == "Expression('2*v - 1')"


# --- Tabular View Tests ---


def test_to_frame(v: Variable, w: Variable):
    df = Expression(w, (2, v), (0.5, w)).to_frame()

    assert df.columns == ["variable", "name", "coefficient"]
    assert df.schema["name"] == pl.String
    assert df.schema["coefficient"] == pl.Float64
    assert df["name"].to_list() == ["v", "w"]
    assert df["coefficient"].to_list() == [2.0, 1.5]
    assert df["variable"][0] is v


def test_read_values(v: Variable, w: Variable):
    exprs = [Expression(v, 1), Expression((2, w)), Expression()]

    result = read_values(exprs)
    assert result.dtype == pl.Float64
    assert result.to_list() == pytest.approx([5.0, -3.0, 0.0])

    v.value = 0.0
    assert read_values(exprs).to_list() == pytest.approx([1.0, -3.0, 0.0])
