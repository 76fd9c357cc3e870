"""Entry-point discovery of plugin instances.

Distributions expose ready-made plugin objects under an entry-point group in
their ``pyproject.toml``:

.. code-block:: toml

    [project.entry-points."myapp.exporters"]
    csv = "myapp_csv.plugins:CSV_EXPORTER"

Each entry point must resolve to a plugin *instance*; the loader does not
instantiate classes. Entries that fail to import or do not implement
:class:`~plugin_registry.plugins.Plugin` are logged and skipped.
"""
from __future__ import annotations

import importlib.metadata
import logging

from plugin_registry.ordering.comparator import Comparator
from plugin_registry.plugins.capability import Plugin
from plugin_registry.registry.order_aware import OrderAwarePluginRegistry

logger = logging.getLogger(__name__)


def load_entrypoint_plugins(group: str) -> list[object]:
    """Load all plugins exposed under the entry-point *group*.

    Parameters
    ----------
    group:
        Entry-point group name, e.g. ``"myapp.exporters"``.

    Returns
    -------
    list
        Loaded plugins in entry-point discovery order.
    """
    if not group:
        raise ValueError("Entry-point group must not be empty!")

    plugins: list[object] = []
    for entry_point in importlib.metadata.entry_points(group=group):
        try:
            loaded = entry_point.load()
        except Exception:
            logger.warning(
                "Failed to load plugin %r from group %r; skipping",
                entry_point.name,
                group,
                exc_info=True,
            )
            continue

        if isinstance(loaded, type) or not isinstance(loaded, Plugin):
            logger.warning(
                "Entry point %r in group %r is not a plugin instance (%r); skipping",
                entry_point.name,
                group,
                loaded,
            )
            continue

        logger.debug("Loaded plugin %r from group %r", entry_point.name, group)
        plugins.append(loaded)

    logger.info("Loaded %d plugin(s) from entry-point group %r", len(plugins), group)
    return plugins


def registry_from_entrypoints(
    group: str,
    comparator: Comparator | None = None,
    reverse: bool = False,
) -> OrderAwarePluginRegistry:
    """Build an ordered registry from the plugins exposed under *group*.

    Parameters
    ----------
    group:
        Entry-point group to load.
    comparator:
        Optional comparator; the default priority order is used otherwise.
    reverse:
        When True the resulting registry is reversed.
    """
    registry: OrderAwarePluginRegistry = OrderAwarePluginRegistry(
        load_entrypoint_plugins(group), comparator
    )
    return registry.reverse() if reverse else registry
