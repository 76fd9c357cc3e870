#!/usr/bin/env python3
"""Example: Decorated plugins

Shows that wrapping a plugin in a transparent decorator (here one that
counts calls) does not change where it sorts.

Usage:
    python examples/02_decorated_plugins.py

Requirements:
    pip install plugin-registry
"""
from __future__ import annotations

from plugin_registry import OrderAwarePluginRegistry, PluginDecorator, order, resolve_priority


class CountingDecorator(PluginDecorator[str]):
    def __init__(self, target: object) -> None:
        super().__init__(target)  # type: ignore[arg-type]
        self.calls = 0

    def supports(self, delimiter: str) -> bool:
        self.calls += 1
        return super().supports(delimiter)


@order(5)
class GzipCodec:
    def supports(self, delimiter: str) -> bool:
        return delimiter.endswith(".gz")

    def __repr__(self) -> str:
        return "GzipCodec"


@order(3)
class TarGzipCodec:
    def supports(self, delimiter: str) -> bool:
        return delimiter.endswith(".tar.gz")

    def __repr__(self) -> str:
        return "TarGzipCodec"


def main() -> None:
    tar = CountingDecorator(TarGzipCodec())
    print(f"Decorated TarGzipCodec priority: {resolve_priority(tar)}")

    registry = OrderAwarePluginRegistry.of(GzipCodec(), tar)
    codec = registry.get_required_plugin_for("backup.tar.gz")
    print(f"Selected codec for backup.tar.gz: {codec}")
    print(f"Decorator was consulted {tar.calls} time(s)")


if __name__ == "__main__":
    main()
