"""OrderAwarePluginRegistry — a registry that sorts its plugins on creation.

Plugins are stably sorted with a comparator when the registry is built. By
default the comparator orders by resolved priority, ascending, so that
plugins declaring a lower priority value are consulted first and plugins
declaring none come last, in the order they were given.

Example
-------
::

    @order(5)
    class Fallback: ...

    @order(1)
    class Preferred: ...

    registry = OrderAwarePluginRegistry.of(Fallback(), Preferred())
    registry.get_plugins()            # (Preferred, Fallback)
    registry.reverse().get_plugins()  # (Fallback, Preferred)
"""
from __future__ import annotations

from typing import Iterable, Optional

from plugin_registry.ordering.comparator import (
    DEFAULT_COMPARATOR,
    DEFAULT_REVERSE_COMPARATOR,
    Comparator,
    invert_comparator,
    sort_plugins,
)
from plugin_registry.registry.simple import S, SimplePluginRegistry, T


class OrderAwarePluginRegistry(SimplePluginRegistry[T, S]):
    """Plugin registry ordered by a comparator.

    Parameters
    ----------
    plugins:
        Plugins to hold. ``None`` entries are dropped; passing ``None``
        creates an empty registry.
    comparator:
        Comparator defining the plugin order. Defaults to
        :data:`~plugin_registry.ordering.DEFAULT_COMPARATOR`.

    Raises
    ------
    Exception
        Whatever the comparator raises; no registry is created in that case.
    """

    def __init__(
        self,
        plugins: Iterable[Optional[T]] | None = None,
        comparator: Comparator | None = None,
    ) -> None:
        self._comparator: Comparator = comparator if comparator is not None else DEFAULT_COMPARATOR
        super().__init__(plugins)

    def _initialize(self, plugins: list[T]) -> list[T]:
        return sort_plugins(plugins, self._comparator)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        plugins: Iterable[Optional[T]] | None = None,
        comparator: Comparator | None = None,
    ) -> "OrderAwarePluginRegistry[T, S]":
        """Create a registry ordering *plugins* with *comparator*."""
        return cls(plugins, comparator)

    @classmethod
    def of_reverse(cls, plugins: Iterable[Optional[T]]) -> "OrderAwarePluginRegistry[T, S]":
        """Create a registry with the default order inverted."""
        if plugins is None:
            raise ValueError("Plugins must not be None!")
        return cls(plugins, DEFAULT_REVERSE_COMPARATOR)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    @property
    def comparator(self) -> Comparator:
        """The comparator this registry was sorted with."""
        return self._comparator

    def reverse(self) -> "OrderAwarePluginRegistry[T, S]":
        """Return a new registry ordered by the inverse comparator.

        The comparator is inverted rather than the plugin sequence reversed,
        so plugins comparing equal keep their current relative order. This
        registry is left untouched.
        """
        return type(self)(list(self._plugins), invert_comparator(self._comparator))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(plugins={list(self._plugins)!r}, "
            f"comparator={self._comparator!r})"
        )
