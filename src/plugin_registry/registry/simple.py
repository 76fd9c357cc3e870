"""SimplePluginRegistry — immutable, ordered container of plugins.

The registry stores the plugins it was created with, minus any ``None``
entries, in the order given. All queries select plugins by asking each one
whether it ``supports`` a delimiter value.

The registry never changes after construction. Build a new one to represent
a different set or order of plugins.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from plugin_registry.plugins.capability import Plugin

S = TypeVar("S")
T = TypeVar("T", bound=Plugin[Any])

ExceptionFactory = Callable[[], BaseException]

_MISSING: Any = object()


class PluginNotFoundError(ValueError):
    """Raised when a required plugin for a delimiter is not registered.

    Parameters
    ----------
    delimiter:
        The delimiter no plugin supports.
    plugins:
        The plugins registered at the time of the lookup.
    message:
        Optional message replacing the generated one.
    """

    def __init__(
        self,
        delimiter: object,
        plugins: tuple[object, ...] = (),
        message: str | None = None,
    ) -> None:
        self.delimiter = delimiter
        self.plugins = plugins
        super().__init__(
            message
            if message is not None
            else f"No plugin found for delimiter {delimiter!r}! "
            f"Registered plugins: {list(plugins)!r}."
        )


def _require_delimiter(delimiter: object) -> None:
    if delimiter is None:
        raise ValueError("Delimiter must not be None!")


def _require(value: object, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None!")


class SimplePluginRegistry(Generic[T, S]):
    """Registry of plugins queried by delimiter, in insertion order.

    Immutable once constructed, and therefore safe to share between threads
    without locking.

    Parameters
    ----------
    plugins:
        Plugins to hold. ``None`` entries are dropped; passing ``None``
        instead of an iterable creates an empty registry.

    Example
    -------
    ::

        registry = SimplePluginRegistry.of(CsvExporter(), JsonExporter())
        exporter = registry.get_required_plugin_for("csv")
    """

    def __init__(self, plugins: Iterable[Optional[T]] | None = None) -> None:
        self._plugins: tuple[T, ...] = tuple(self._initialize(self._filter(plugins)))

    @staticmethod
    def _filter(plugins: Iterable[Optional[T]] | None) -> list[T]:
        if plugins is None:
            return []
        return [plugin for plugin in plugins if plugin is not None]

    def _initialize(self, plugins: list[T]) -> list[T]:
        """Hook for subclasses to derive the stored sequence."""
        return plugins

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "SimplePluginRegistry[T, S]":
        """Create a registry holding no plugins."""
        return cls([])

    @classmethod
    def of(cls, *plugins: Optional[T]) -> "SimplePluginRegistry[T, S]":
        """Create a registry holding the given plugins."""
        return cls(plugins)

    @classmethod
    def from_iterable(cls, plugins: Iterable[Optional[T]]) -> "SimplePluginRegistry[T, S]":
        """Create a registry holding the plugins of *plugins*."""
        _require(plugins, "Plugins")
        return cls(plugins)

    # ------------------------------------------------------------------
    # Single-plugin lookups
    # ------------------------------------------------------------------

    def get_plugin_for(self, delimiter: S) -> Optional[T]:
        """Return the first plugin supporting *delimiter*, or None.

        Raises
        ------
        ValueError
            If *delimiter* is None.
        """
        _require_delimiter(delimiter)
        for plugin in self._plugins:
            if plugin.supports(delimiter):
                return plugin
        return None

    def get_plugin_or_raise(self, delimiter: S, exception_factory: ExceptionFactory) -> T:
        """Return the first plugin supporting *delimiter*.

        Parameters
        ----------
        delimiter:
            Value to match plugins against.
        exception_factory:
            Zero-argument callable producing the exception raised when no
            plugin matches. Exceptions raised by the factory itself propagate
            unchanged.

        Raises
        ------
        ValueError
            If *delimiter* or *exception_factory* is None.
        """
        _require_delimiter(delimiter)
        _require(exception_factory, "Exception factory")

        plugin = self.get_plugin_for(delimiter)
        if plugin is None:
            raise exception_factory()
        return plugin

    def get_required_plugin_for(
        self,
        delimiter: S,
        message_supplier: Callable[[], str] | None = None,
    ) -> T:
        """Return the first plugin supporting *delimiter* or fail.

        Parameters
        ----------
        delimiter:
            Value to match plugins against.
        message_supplier:
            Optional zero-argument callable producing the error message. By
            default the message names the delimiter and lists the registered
            plugins.

        Raises
        ------
        PluginNotFoundError
            If no registered plugin supports *delimiter*.
        ValueError
            If *delimiter* is None.
        """
        _require_delimiter(delimiter)

        def not_found() -> PluginNotFoundError:
            message = message_supplier() if message_supplier is not None else None
            return PluginNotFoundError(delimiter, self._plugins, message)

        return self.get_plugin_or_raise(delimiter, not_found)

    def get_plugin_or_default_for(
        self,
        delimiter: S,
        default: Optional[T] = _MISSING,
        *,
        default_factory: Callable[[], Optional[T]] | None = None,
    ) -> Optional[T]:
        """Return the first plugin supporting *delimiter*, or a fallback.

        Exactly one of *default* and *default_factory* must be given. The
        factory is only invoked when no plugin matches.

        Raises
        ------
        ValueError
            If *delimiter* is None, or not exactly one fallback is given.
        """
        _require_delimiter(delimiter)
        if (default is _MISSING) == (default_factory is None):
            raise ValueError("Exactly one of default and default_factory must be given!")

        plugin = self.get_plugin_for(delimiter)
        if plugin is not None:
            return plugin
        if default_factory is not None:
            return default_factory()
        return default

    # ------------------------------------------------------------------
    # Multi-plugin lookups
    # ------------------------------------------------------------------

    def get_plugins_for(self, delimiter: S) -> list[T]:
        """Return every plugin supporting *delimiter*, in registry order.

        Returns
        -------
        list
            A new list; empty when nothing matches.

        Raises
        ------
        ValueError
            If *delimiter* is None.
        """
        _require_delimiter(delimiter)
        return [plugin for plugin in self._plugins if plugin.supports(delimiter)]

    def get_plugins_or_raise(
        self, delimiter: S, exception_factory: ExceptionFactory
    ) -> list[T]:
        """Return every plugin supporting *delimiter*, raising if there are none.

        Raises
        ------
        ValueError
            If *delimiter* or *exception_factory* is None.
        """
        _require_delimiter(delimiter)
        _require(exception_factory, "Exception factory")

        result = self.get_plugins_for(delimiter)
        if not result:
            raise exception_factory()
        return result

    def get_plugins_or_defaults_for(self, delimiter: S, defaults: Iterable[T]) -> list[T]:
        """Return every plugin supporting *delimiter*, or a copy of *defaults*.

        Raises
        ------
        ValueError
            If *delimiter* or *defaults* is None.
        """
        _require_delimiter(delimiter)
        _require(defaults, "Default plugins")

        candidates = self.get_plugins_for(delimiter)
        return candidates if candidates else list(defaults)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_plugin_for(self, delimiter: S) -> bool:
        """Return True if any registered plugin supports *delimiter*."""
        return self.get_plugin_for(delimiter) is not None

    def count_plugins(self) -> int:
        """Return the number of registered plugins."""
        return len(self._plugins)

    def contains(self, plugin: object) -> bool:
        """Return True if *plugin* is registered."""
        return plugin in self._plugins

    def get_plugins(self) -> tuple[T, ...]:
        """Return all registered plugins in registry order.

        The result is a tuple, so callers cannot modify the registry through
        it.
        """
        return self._plugins

    def __iter__(self) -> Iterator[T]:
        return iter(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, plugin: object) -> bool:
        return self.contains(plugin)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(plugins={list(self._plugins)!r})"
