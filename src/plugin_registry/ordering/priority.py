"""Priority resolution — effective ordering key of a plugin.

A plugin's priority is found, in order, from:

1. its own ``priority()`` method (:class:`~plugin_registry.plugins.Ordered`);
2. metadata attached to its concrete class (:func:`~plugin_registry.plugins.order`
   or a custom lookup function);
3. the object it wraps, when the plugin is a
   :class:`~plugin_registry.plugins.Decorating` wrapper, following the chain
   layer by layer.

Plugins with no declared priority resolve to the configured fallback,
which by default is the lowest precedence.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from plugin_registry.ordering.settings import ResolverSettings
from plugin_registry.plugins.capability import Decorating, Ordered, declared_order

logger = logging.getLogger(__name__)

OrderLookup = Callable[[type], Optional[int]]


class PriorityResolver:
    """Resolves the effective priority of plugins, seeing through decorators.

    Stateless apart from its configuration; one instance may be shared by any
    number of registries and threads.

    Parameters
    ----------
    settings:
        Resolution policy. Defaults to :class:`ResolverSettings` defaults.
    order_lookup:
        Function mapping a plugin's concrete class to its declared priority,
        or None when it declares none. Defaults to reading :func:`order`
        metadata.
    """

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        order_lookup: OrderLookup = declared_order,
    ) -> None:
        self._settings = settings or ResolverSettings()
        self._order_lookup = order_lookup

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def resolve(self, plugin: object) -> int:
        """Return the effective priority of *plugin*.

        Parameters
        ----------
        plugin:
            Any plugin reference, possibly wrapped by decorators.

        Returns
        -------
        int
            The first declared priority found along the decorator chain, or
            ``settings.fallback_priority`` if there is none.
        """
        current: object = plugin
        for _ in range(self._settings.max_unwrap_depth + 1):
            declared = self.declared_priority(current)
            if declared is not None:
                return declared
            if not isinstance(current, Decorating):
                return self._settings.fallback_priority
            current = current.get_target()
            if current is None:
                return self._settings.fallback_priority

        logger.debug(
            "Decorator chain of %r exceeds %d layers; using fallback priority",
            plugin,
            self._settings.max_unwrap_depth,
        )
        return self._settings.fallback_priority

    def declared_priority(self, candidate: object) -> Optional[int]:
        """Return the priority *candidate* declares itself, without unwrapping.

        Only the candidate's own class is consulted. A decorator forwarding
        attribute access to its target does not report the target's
        priority as its own.

        Raises
        ------
        TypeError
            If the candidate's ``priority()`` returns something other than
            an int.
        """
        cls = type(candidate)
        if issubclass(cls, Ordered) and callable(getattr(cls, "priority", None)):
            value = candidate.priority()  # type: ignore[attr-defined]
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{cls.__name__}.priority() must return an int, "
                    f"got {type(value).__name__}."
                )
            return value
        return self._order_lookup(cls)

    def __repr__(self) -> str:
        return f"PriorityResolver(settings={self._settings!r})"


_DEFAULT_RESOLVER = PriorityResolver()


def default_resolver() -> PriorityResolver:
    """Return the process-wide resolver used by the default comparators."""
    return _DEFAULT_RESOLVER


def resolve_priority(plugin: object) -> int:
    """Resolve *plugin*'s priority with the default resolver."""
    return _DEFAULT_RESOLVER.resolve(plugin)
