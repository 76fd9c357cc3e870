"""Capability contract — the interfaces every plugin and decorator honours.

A plugin is any object with a ``supports(delimiter)`` predicate. Two
optional capabilities feed the ordering subsystem:

- :class:`Ordered` — the plugin reports its own priority.
- :class:`Decorating` — a wrapping object exposes the object it wraps, so
  that priority metadata living on the original is still found.

Priority metadata can also be attached to a plugin class from the outside
with the :func:`order` class decorator.

Example
-------
::

    from plugin_registry.plugins import PluginDecorator, order

    @order(10)
    class CsvExporter:
        def supports(self, delimiter: str) -> bool:
            return delimiter == "csv"

    class TimingDecorator(PluginDecorator[str]):
        pass

    wrapped = TimingDecorator(CsvExporter())
    assert wrapped.supports("csv")
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)
C = TypeVar("C", bound=type)

# Class attribute under which @order stores its value.
ORDER_ATTRIBUTE = "__plugin_order__"


@runtime_checkable
class Plugin(Protocol[S_contra]):
    """A capability provider selected at runtime by delimiter matching."""

    def supports(self, delimiter: S_contra) -> bool:
        """Return True if this plugin applies to *delimiter*.

        Must not raise for unknown values; return False instead.
        """
        ...


@runtime_checkable
class Ordered(Protocol):
    """A plugin that declares its own priority.

    Lower values take precedence over higher ones. The priority resolver
    checks this against the plugin's class, so ``priority`` must be defined
    on the class itself and return an int.
    """

    def priority(self) -> int: ...


@runtime_checkable
class Decorating(Protocol):
    """A transparent decorator exposing the object it wraps."""

    def get_target(self) -> object: ...


class PluginDecorator(Generic[S]):
    """Transparent decorator forwarding everything to a wrapped plugin.

    Attribute access not found on the decorator itself is delegated to the
    target, so a decorated plugin behaves like the original. Override
    :meth:`supports` (or add methods) to layer cross-cutting behaviour on top.

    Parameters
    ----------
    target:
        The plugin (or another decorator) being wrapped. Must not be None.
    """

    def __init__(self, target: Plugin[S]) -> None:
        if target is None:
            raise ValueError("Decorated target must not be None!")
        self._target = target

    def get_target(self) -> Plugin[S]:
        """Return the wrapped object."""
        return self._target

    def supports(self, delimiter: S) -> bool:
        return self._target.supports(delimiter)

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes missing on the decorator.
        if name == "_target":
            raise AttributeError(name)
        return getattr(self._target, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


def order(value: int) -> Callable[[C], C]:
    """Class decorator attaching priority metadata to a plugin class.

    The class is returned unchanged apart from the metadata attribute.

    Parameters
    ----------
    value:
        Priority of every instance of the class. Lower values sort first.

    Raises
    ------
    TypeError
        If *value* is not an int or the decorated object is not a class.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Order value must be an int, got {type(value).__name__}.")

    def decorator(cls: C) -> C:
        if not isinstance(cls, type):
            raise TypeError("@order can only decorate classes.")
        setattr(cls, ORDER_ATTRIBUTE, value)
        return cls

    return decorator


def declared_order(cls: type) -> Optional[int]:
    """Return the priority attached to *cls* by :func:`order`, or None."""
    value = getattr(cls, ORDER_ATTRIBUTE, None)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
