"""Comparators used to order plugins.

A comparator is any callable ``(left, right) -> int`` returning a negative
number, zero or a positive number when *left* sorts before, level with or
after *right*. Sorting is always stable, so plugins that compare equal keep
their relative input order.

Two process-wide comparators are provided:

- :data:`DEFAULT_COMPARATOR` orders by resolved priority, ascending.
- :data:`DEFAULT_REVERSE_COMPARATOR` is its structural inverse.
"""
from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, TypeVar

from plugin_registry.ordering.priority import PriorityResolver, default_resolver

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class OrderComparator:
    """Compares plugins by their resolved priority.

    Parameters
    ----------
    resolver:
        Resolver used to compute each plugin's priority. Defaults to the
        process-wide resolver.
    """

    def __init__(self, resolver: PriorityResolver | None = None) -> None:
        self._resolver = resolver or default_resolver()

    @property
    def resolver(self) -> PriorityResolver:
        return self._resolver

    def __call__(self, left: object, right: object) -> int:
        left_priority = self._resolver.resolve(left)
        right_priority = self._resolver.resolve(right)
        return (left_priority > right_priority) - (left_priority < right_priority)

    def __repr__(self) -> str:
        return f"OrderComparator({self._resolver!r})"


class InvertibleComparator:
    """Wraps a comparator and optionally flips the sign of its result.

    Parameters
    ----------
    comparator:
        The comparator to delegate to.
    ascending:
        When False the delegate's result is negated.
    """

    def __init__(self, comparator: Comparator, ascending: bool = True) -> None:
        if comparator is None:
            raise ValueError("Comparator must not be None!")
        self._comparator = comparator
        self._ascending = ascending

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @property
    def ascending(self) -> bool:
        return self._ascending

    def invert(self) -> "InvertibleComparator":
        """Return a comparator sorting in the opposite direction."""
        return InvertibleComparator(self._comparator, not self._ascending)

    def __call__(self, left: object, right: object) -> int:
        result = self._comparator(left, right)
        if result == 0:
            return 0
        return result if self._ascending else -result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvertibleComparator):
            return NotImplemented
        return self._comparator == other._comparator and self._ascending == other._ascending

    def __hash__(self) -> int:
        return hash((self._comparator, self._ascending))

    def __repr__(self) -> str:
        return f"InvertibleComparator({self._comparator!r}, ascending={self._ascending})"


DEFAULT_COMPARATOR: Comparator = OrderComparator()
DEFAULT_REVERSE_COMPARATOR: Comparator = InvertibleComparator(DEFAULT_COMPARATOR, ascending=False)


def invert_comparator(comparator: Comparator) -> Comparator:
    """Return the structural inverse of *comparator*.

    The default comparators map onto each other, so inverting twice yields
    the comparator you started from.

    Raises
    ------
    ValueError
        If *comparator* is None.
    """
    if comparator is None:
        raise ValueError("Comparator must not be None!")
    if comparator is DEFAULT_COMPARATOR:
        return DEFAULT_REVERSE_COMPARATOR
    if comparator is DEFAULT_REVERSE_COMPARATOR:
        return DEFAULT_COMPARATOR
    if isinstance(comparator, InvertibleComparator):
        inverted = comparator.invert()
        if inverted.ascending and inverted.comparator is DEFAULT_COMPARATOR:
            return DEFAULT_COMPARATOR
        return inverted
    return InvertibleComparator(comparator, ascending=False)


def sort_plugins(plugins: Iterable[T], comparator: Comparator) -> list[T]:
    """Return a new list holding *plugins* stably sorted with *comparator*.

    Any exception raised by the comparator propagates; no partially sorted
    result is returned.
    """
    return sorted(plugins, key=functools.cmp_to_key(comparator))
