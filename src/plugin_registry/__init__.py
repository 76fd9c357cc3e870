"""plugin-registry — typed, priority-ordered plugin registries.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import plugin_registry
>>> plugin_registry.__version__
'0.1.0'

Quick start
-----------
::

    from plugin_registry import OrderAwarePluginRegistry, order

    @order(1)
    class JsonExporter:
        def supports(self, delimiter: str) -> bool:
            return delimiter == "json"

    registry = OrderAwarePluginRegistry.of(JsonExporter())
    exporter = registry.get_required_plugin_for("json")
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Capability contract
# ------------------------------------------------------------------
from plugin_registry.plugins.capability import (
    Decorating,
    Ordered,
    Plugin,
    PluginDecorator,
    declared_order,
    order,
)

# ------------------------------------------------------------------
# Ordering
# ------------------------------------------------------------------
from plugin_registry.ordering.comparator import (
    DEFAULT_COMPARATOR,
    DEFAULT_REVERSE_COMPARATOR,
    Comparator,
    InvertibleComparator,
    OrderComparator,
    invert_comparator,
)
from plugin_registry.ordering.priority import PriorityResolver, resolve_priority
from plugin_registry.ordering.settings import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    ResolverSettings,
)

# ------------------------------------------------------------------
# Registries
# ------------------------------------------------------------------
from plugin_registry.registry.order_aware import OrderAwarePluginRegistry
from plugin_registry.registry.simple import PluginNotFoundError, SimplePluginRegistry

# ------------------------------------------------------------------
# Discovery
# ------------------------------------------------------------------
from plugin_registry.loader import load_entrypoint_plugins, registry_from_entrypoints

__all__ = [
    "__version__",
    # Capability contract
    "Decorating",
    "Ordered",
    "Plugin",
    "PluginDecorator",
    "declared_order",
    "order",
    # Ordering
    "Comparator",
    "DEFAULT_COMPARATOR",
    "DEFAULT_REVERSE_COMPARATOR",
    "HIGHEST_PRECEDENCE",
    "InvertibleComparator",
    "LOWEST_PRECEDENCE",
    "OrderComparator",
    "PriorityResolver",
    "ResolverSettings",
    "invert_comparator",
    "resolve_priority",
    # Registries
    "OrderAwarePluginRegistry",
    "PluginNotFoundError",
    "SimplePluginRegistry",
    # Discovery
    "load_entrypoint_plugins",
    "registry_from_entrypoints",
]
