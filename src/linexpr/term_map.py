from __future__ import annotations

import bisect
import functools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from immutabledict import immutabledict

if TYPE_CHECKING:
    from linexpr.typing import Comparator
    from linexpr.variable import Variable


@dataclass
class TermEntry:
    """Mutable (variable, coefficient) slot of a `TermMap`."""

    variable: Variable
    coefficient: float = 0.0


class TermMap(Mapping["Variable", float]):
    """Mapping from variables to coefficients, sorted by a comparator.

    Keys are matched by identity, iteration follows the order given by
    `compare`. Entries are never removed, a coefficient may go back to zero.

    Examples
    --------
    >>> terms = TermMap(Variable.compare)
    >>> terms.setdefault(x).coefficient += 1.0
    >>> terms.add(x, 2.0)
    >>> dict(terms)
    {Variable('x', value=0.0): 3.0}

    """

    def __init__(self, compare: Comparator) -> None:
        self._sort_key = functools.cmp_to_key(compare)
        self._entries: dict[Variable, TermEntry] = {}
        self._keys: list[Variable] = []

    def setdefault(self, variable: Variable) -> TermEntry:
        """Return the entry of `variable`, inserting a zero coefficient if absent."""
        entry = self._entries.get(variable)
        if entry is None:
            entry = self._entries[variable] = TermEntry(variable)
            bisect.insort(self._keys, variable, key=self._sort_key)
        return entry

    def add(self, variable: Variable, coefficient: float) -> None:
        """Add `coefficient` to the entry of `variable`."""
        self.setdefault(variable).coefficient += coefficient

    def freeze(self) -> immutabledict[Variable, float]:
        """Return an immutable snapshot of the terms, in sorted order."""
        return immutabledict(self.items())

    def __getitem__(self, variable: Variable) -> float:
        return self._entries[variable].coefficient

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"
