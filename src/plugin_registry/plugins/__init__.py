"""Plugin capability contract.

Every object held by a registry implements :class:`Plugin`. Objects may
additionally implement :class:`Ordered` or carry :func:`order` metadata to
take part in ordering, and wrappers implement :class:`Decorating` so that
ordering sees through them.
"""
from __future__ import annotations

from plugin_registry.plugins.capability import (
    Decorating,
    Ordered,
    Plugin,
    PluginDecorator,
    declared_order,
    order,
)

__all__ = [
    "Decorating",
    "Ordered",
    "Plugin",
    "PluginDecorator",
    "declared_order",
    "order",
]
