"""Ordering subsystem — priority resolution and plugin comparators."""
from __future__ import annotations

from plugin_registry.ordering.comparator import (
    DEFAULT_COMPARATOR,
    DEFAULT_REVERSE_COMPARATOR,
    Comparator,
    InvertibleComparator,
    OrderComparator,
    invert_comparator,
    sort_plugins,
)
from plugin_registry.ordering.priority import (
    PriorityResolver,
    default_resolver,
    resolve_priority,
)
from plugin_registry.ordering.settings import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    ResolverSettings,
)

__all__ = [
    "Comparator",
    "DEFAULT_COMPARATOR",
    "DEFAULT_REVERSE_COMPARATOR",
    "HIGHEST_PRECEDENCE",
    "InvertibleComparator",
    "LOWEST_PRECEDENCE",
    "OrderComparator",
    "PriorityResolver",
    "ResolverSettings",
    "default_resolver",
    "invert_comparator",
    "resolve_priority",
    "sort_plugins",
]
