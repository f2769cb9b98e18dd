from __future__ import annotations

from typing import Any


class ExpressionArgumentError(Exception):
    """Raised when an `Expression` construction argument is malformed.

    Attributes:
        argument (Any): The offending argument.

    """

    def __init__(self, msg: str, argument: Any) -> None:
        super().__init__(msg)
        self.argument = argument


class InvalidArgumentType(ExpressionArgumentError, TypeError):
    """The argument is not a number, a Variable or a (coefficient, variable) pair."""


class InvalidPairLength(ExpressionArgumentError, ValueError):
    """The pair argument does not have exactly two elements."""


class InvalidPairElement0(ExpressionArgumentError, TypeError):
    """The first element of the pair is not a number."""


class InvalidPairElement1(ExpressionArgumentError, TypeError):
    """The second element of the pair is not a Variable."""
