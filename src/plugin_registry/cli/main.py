"""CLI entry point for plugin-registry.

Invoked as::

    plugin-registry [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m plugin_registry.cli.main

Commands
--------
version   Show version information
plugins   Show the ordered plugins of an entry-point group
"""
from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

console = Console()


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="plugin-registry")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Typed, priority-ordered plugin registries"""
    logging.basicConfig(level=getattr(logging, log_level.upper()))


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from plugin_registry import __version__

    console.print(f"[bold]plugin-registry[/bold] v{__version__}")


# ------------------------------------------------------------------
# plugins
# ------------------------------------------------------------------


@cli.command(name="plugins")
@click.argument("group")
@click.option(
    "--delimiter",
    "-d",
    default=None,
    help="Show whether each plugin supports this delimiter value.",
)
@click.option("--reverse", is_flag=True, default=False, help="Show the reversed order.")
def plugins_command(group: str, delimiter: str | None, reverse: bool) -> None:
    """List the plugins registered under entry-point GROUP in priority order."""
    from plugin_registry.loader import registry_from_entrypoints
    from plugin_registry.ordering.priority import resolve_priority
    from plugin_registry.ordering.settings import LOWEST_PRECEDENCE

    registry = registry_from_entrypoints(group, reverse=reverse)

    if not len(registry):
        console.print(f"No plugins registered under [bold]{group}[/bold].")
        return

    table = Table(title=f"Plugins in {group}")
    table.add_column("#", justify="right")
    table.add_column("Plugin", style="cyan")
    table.add_column("Priority", justify="right")
    if delimiter is not None:
        table.add_column("Supports")

    for position, plugin in enumerate(registry, start=1):
        priority = resolve_priority(plugin)
        row = [
            str(position),
            type(plugin).__name__,
            "-" if priority == LOWEST_PRECEDENCE else str(priority),
        ]
        if delimiter is not None:
            row.append("[green]yes[/green]" if plugin.supports(delimiter) else "[red]no[/red]")
        table.add_row(*row)

    console.print(table)


if __name__ == "__main__":
    cli()
