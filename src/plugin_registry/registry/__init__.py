"""Plugin registries.

:class:`SimplePluginRegistry` keeps plugins in the order given;
:class:`OrderAwarePluginRegistry` sorts them by priority or a comparator.
"""
from __future__ import annotations

from plugin_registry.registry.order_aware import OrderAwarePluginRegistry
from plugin_registry.registry.simple import PluginNotFoundError, SimplePluginRegistry

__all__ = [
    "OrderAwarePluginRegistry",
    "PluginNotFoundError",
    "SimplePluginRegistry",
]
