#!/usr/bin/env python3
"""Example: Quickstart

Demonstrates selecting an exporter plugin by format name with a simple
registry and with a priority-ordered registry.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install plugin-registry
"""
from __future__ import annotations

import plugin_registry
from plugin_registry import OrderAwarePluginRegistry, SimplePluginRegistry, order


@order(10)
class TextExporter:
    def supports(self, delimiter: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "TextExporter"


@order(1)
class CsvExporter:
    def supports(self, delimiter: str) -> bool:
        return delimiter == "csv"

    def __repr__(self) -> str:
        return "CsvExporter"


def main() -> None:
    print(f"plugin-registry version: {plugin_registry.__version__}")

    plugins = [TextExporter(), CsvExporter()]

    # Step 1: Insertion order — the catch-all wins because it comes first
    simple = SimplePluginRegistry.from_iterable(plugins)
    print(f"Simple registry picks for 'csv': {simple.get_plugin_for('csv')}")

    # Step 2: Priority order — the specific exporter declares a lower value
    ordered = OrderAwarePluginRegistry.from_iterable(plugins)
    print(f"Ordered registry picks for 'csv': {ordered.get_plugin_for('csv')}")
    print(f"All candidates for 'csv': {ordered.get_plugins_for('csv')}")

    # Step 3: Reverse the order
    print(f"Reversed order: {list(ordered.reverse())}")

    print("\nQuickstart complete.")


if __name__ == "__main__":
    main()
