"""Tests for plugin_registry.registry.simple — SimplePluginRegistry."""
from __future__ import annotations

import threading

import pytest

from plugin_registry.registry.simple import PluginNotFoundError, SimplePluginRegistry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FormatPlugin:
    """Supports a fixed set of format names."""

    def __init__(self, name: str, *formats: str) -> None:
        self.name = name
        self.formats = set(formats)

    def supports(self, delimiter: str) -> bool:
        return delimiter in self.formats

    def __repr__(self) -> str:
        return f"FormatPlugin({self.name!r})"


class LookupFailed(Exception):
    pass


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def csv_plugin() -> FormatPlugin:
    return FormatPlugin("csv", "csv", "tsv")


@pytest.fixture()
def json_plugin() -> FormatPlugin:
    return FormatPlugin("json", "json")


@pytest.fixture()
def any_text_plugin() -> FormatPlugin:
    return FormatPlugin("text", "csv", "json", "txt")


@pytest.fixture()
def registry(
    csv_plugin: FormatPlugin, json_plugin: FormatPlugin, any_text_plugin: FormatPlugin
) -> SimplePluginRegistry[FormatPlugin, str]:
    return SimplePluginRegistry.of(csv_plugin, json_plugin, any_text_plugin)


@pytest.fixture()
def empty() -> SimplePluginRegistry[FormatPlugin, str]:
    return SimplePluginRegistry.empty()


# ---------------------------------------------------------------------------
# PluginNotFoundError
# ---------------------------------------------------------------------------


class TestErrors:
    def test_not_found_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise PluginNotFoundError("x")

    def test_not_found_stores_delimiter_and_plugins(self, csv_plugin: FormatPlugin) -> None:
        err = PluginNotFoundError("xml", (csv_plugin,))
        assert err.delimiter == "xml"
        assert err.plugins == (csv_plugin,)

    def test_generated_message_lists_plugins(self, csv_plugin: FormatPlugin) -> None:
        err = PluginNotFoundError("xml", (csv_plugin,))
        assert "'xml'" in str(err)
        assert "FormatPlugin('csv')" in str(err)

    def test_custom_message_replaces_generated(self) -> None:
        err = PluginNotFoundError("xml", (), "custom text")
        assert str(err) == "custom text"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_of_holds_plugins(self, csv_plugin: FormatPlugin) -> None:
        registry = SimplePluginRegistry.of(csv_plugin)
        assert registry.count_plugins() == 1
        assert registry.contains(csv_plugin)

    def test_none_entries_are_dropped(self, csv_plugin: FormatPlugin) -> None:
        registry = SimplePluginRegistry([None, csv_plugin, None])
        assert registry.count_plugins() == 1
        assert registry.get_plugins() == (csv_plugin,)

    def test_only_none_entries_gives_empty_registry(self) -> None:
        registry = SimplePluginRegistry([None])
        assert registry.count_plugins() == 0

    def test_none_iterable_gives_empty_registry(self) -> None:
        assert SimplePluginRegistry(None).count_plugins() == 0

    def test_from_iterable_rejects_none(self) -> None:
        with pytest.raises(ValueError, match="Plugins"):
            SimplePluginRegistry.from_iterable(None)  # type: ignore[arg-type]

    def test_from_iterable_accepts_generator(
        self, csv_plugin: FormatPlugin, json_plugin: FormatPlugin
    ) -> None:
        registry = SimplePluginRegistry.from_iterable(p for p in (csv_plugin, json_plugin))
        assert registry.get_plugins() == (csv_plugin, json_plugin)

    def test_preserves_input_order(
        self,
        csv_plugin: FormatPlugin,
        json_plugin: FormatPlugin,
        any_text_plugin: FormatPlugin,
    ) -> None:
        registry = SimplePluginRegistry([any_text_plugin, None, csv_plugin, json_plugin])
        assert registry.get_plugins() == (any_text_plugin, csv_plugin, json_plugin)

    def test_duplicates_are_kept(self, csv_plugin: FormatPlugin) -> None:
        registry = SimplePluginRegistry.of(csv_plugin, csv_plugin)
        assert registry.count_plugins() == 2

    def test_source_list_mutation_does_not_leak(self, csv_plugin: FormatPlugin) -> None:
        source = [csv_plugin]
        registry = SimplePluginRegistry(source)
        source.append(FormatPlugin("late", "late"))
        assert registry.count_plugins() == 1

    def test_instances_are_independent(
        self, csv_plugin: FormatPlugin, json_plugin: FormatPlugin
    ) -> None:
        first = SimplePluginRegistry.of(csv_plugin)
        second = SimplePluginRegistry.of(json_plugin)
        assert first.get_plugins() == (csv_plugin,)
        assert second.get_plugins() == (json_plugin,)


# ---------------------------------------------------------------------------
# Single-plugin lookups
# ---------------------------------------------------------------------------


class TestGetPluginFor:
    def test_returns_first_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str], csv_plugin: FormatPlugin
    ) -> None:
        assert registry.get_plugin_for("csv") is csv_plugin

    def test_returns_none_without_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        assert registry.get_plugin_for("xml") is None

    def test_none_delimiter_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Delimiter"):
            registry.get_plugin_for(None)  # type: ignore[arg-type]

    def test_matches_first_of_get_plugins_for(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        for delimiter in ("csv", "json", "txt", "tsv", "xml"):
            matches = registry.get_plugins_for(delimiter)
            expected = matches[0] if matches else None
            assert registry.get_plugin_for(delimiter) is expected


class TestGetPluginOrRaise:
    def test_returns_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str], json_plugin: FormatPlugin
    ) -> None:
        assert registry.get_plugin_or_raise("json", LookupFailed) is json_plugin

    def test_match_never_invokes_factory(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        calls: list[int] = []

        def factory() -> Exception:
            calls.append(1)
            return LookupFailed()

        registry.get_plugin_or_raise("json", factory)
        assert calls == []

    def test_raises_factory_exception(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        error = LookupFailed("missing")
        with pytest.raises(LookupFailed) as excinfo:
            empty.get_plugin_or_raise("json", lambda: error)
        assert excinfo.value is error

    def test_factory_raising_propagates_unchanged(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        def factory() -> Exception:
            raise RuntimeError("factory broke")

        with pytest.raises(RuntimeError, match="factory broke"):
            empty.get_plugin_or_raise("json", factory)

    def test_none_factory_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Exception factory"):
            registry.get_plugin_or_raise("json", None)  # type: ignore[arg-type]

    def test_none_delimiter_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Delimiter"):
            registry.get_plugin_or_raise(None, LookupFailed)  # type: ignore[arg-type]


class TestGetRequiredPluginFor:
    def test_returns_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str], csv_plugin: FormatPlugin
    ) -> None:
        assert registry.get_required_plugin_for("tsv") is csv_plugin

    def test_missing_raises_not_found(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(PluginNotFoundError):
            empty.get_required_plugin_for("FOO")

    def test_missing_is_value_error(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError):
            empty.get_required_plugin_for("FOO")

    def test_generated_message_lists_registered_plugins(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(PluginNotFoundError) as excinfo:
            registry.get_required_plugin_for("xml")
        message = str(excinfo.value)
        assert "'xml'" in message
        assert "FormatPlugin('json')" in message
        assert excinfo.value.delimiter == "xml"
        assert excinfo.value.plugins == registry.get_plugins()

    def test_supplied_message_is_used(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(PluginNotFoundError, match="^message$"):
            empty.get_required_plugin_for("FOO", lambda: "message")

    def test_message_supplier_not_called_on_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        def supplier() -> str:
            raise AssertionError("should not be called")

        assert registry.get_required_plugin_for("csv", supplier) is not None

    def test_none_delimiter_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Delimiter"):
            registry.get_required_plugin_for(None)  # type: ignore[arg-type]


class TestGetPluginOrDefaultFor:
    def test_returns_match_over_default(
        self, registry: SimplePluginRegistry[FormatPlugin, str], csv_plugin: FormatPlugin
    ) -> None:
        fallback = FormatPlugin("fallback")
        assert registry.get_plugin_or_default_for("csv", fallback) is csv_plugin

    def test_returns_default_without_match(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        fallback = FormatPlugin("fallback")
        assert empty.get_plugin_or_default_for("BAR", fallback) is fallback

    def test_default_may_be_none(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        assert empty.get_plugin_or_default_for("BAR", None) is None

    def test_default_factory_used_without_match(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        fallback = FormatPlugin("fallback")
        assert empty.get_plugin_or_default_for("BAR", default_factory=lambda: fallback) is fallback

    def test_default_factory_not_called_on_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str], json_plugin: FormatPlugin
    ) -> None:
        def factory() -> FormatPlugin:
            raise AssertionError("should not be called")

        assert registry.get_plugin_or_default_for("json", default_factory=factory) is json_plugin

    def test_requires_exactly_one_fallback(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        fallback = FormatPlugin("fallback")
        with pytest.raises(ValueError, match="Exactly one"):
            registry.get_plugin_or_default_for("json")
        with pytest.raises(ValueError, match="Exactly one"):
            registry.get_plugin_or_default_for(
                "json", fallback, default_factory=lambda: fallback
            )

    def test_none_delimiter_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Delimiter"):
            registry.get_plugin_or_default_for(None, FormatPlugin("x"))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Multi-plugin lookups
# ---------------------------------------------------------------------------


class TestGetPluginsFor:
    def test_returns_all_matches_in_order(
        self,
        registry: SimplePluginRegistry[FormatPlugin, str],
        csv_plugin: FormatPlugin,
        any_text_plugin: FormatPlugin,
    ) -> None:
        assert registry.get_plugins_for("csv") == [csv_plugin, any_text_plugin]

    def test_returns_empty_list_without_match(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        assert registry.get_plugins_for("xml") == []

    def test_returns_fresh_list(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        first = registry.get_plugins_for("csv")
        first.clear()
        assert len(registry.get_plugins_for("csv")) == 2

    def test_none_delimiter_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Delimiter"):
            registry.get_plugins_for(None)  # type: ignore[arg-type]


class TestGetPluginsOrRaise:
    def test_returns_matches(
        self, registry: SimplePluginRegistry[FormatPlugin, str], json_plugin: FormatPlugin,
        any_text_plugin: FormatPlugin,
    ) -> None:
        assert registry.get_plugins_or_raise("json", LookupFailed) == [json_plugin, any_text_plugin]

    def test_raises_when_empty(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(LookupFailed):
            empty.get_plugins_or_raise("BAR", LookupFailed)

    def test_none_factory_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Exception factory"):
            registry.get_plugins_or_raise("json", None)  # type: ignore[arg-type]


class TestGetPluginsOrDefaultsFor:
    def test_returns_matches_over_defaults(
        self, registry: SimplePluginRegistry[FormatPlugin, str], json_plugin: FormatPlugin,
        any_text_plugin: FormatPlugin,
    ) -> None:
        defaults = [FormatPlugin("fallback")]
        assert registry.get_plugins_or_defaults_for("json", defaults) == [
            json_plugin,
            any_text_plugin,
        ]

    def test_returns_copy_of_defaults_without_match(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        defaults = [FormatPlugin("fallback")]
        result = empty.get_plugins_or_defaults_for("BAR", defaults)
        assert result == defaults
        assert result is not defaults

    def test_none_defaults_raise(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError, match="Default plugins"):
            registry.get_plugins_or_defaults_for("json", None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


class TestQueryMethods:
    def test_has_plugin_for_agrees_with_get_plugin_for(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        for delimiter in ("csv", "json", "xml", ""):
            assert registry.has_plugin_for(delimiter) == (
                registry.get_plugin_for(delimiter) is not None
            )

    def test_has_plugin_for_none_raises(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        with pytest.raises(ValueError):
            registry.has_plugin_for(None)  # type: ignore[arg-type]

    def test_count_and_len(self, registry: SimplePluginRegistry[FormatPlugin, str]) -> None:
        assert registry.count_plugins() == 3
        assert len(registry) == 3

    def test_contains_and_in(
        self, registry: SimplePluginRegistry[FormatPlugin, str], csv_plugin: FormatPlugin
    ) -> None:
        stranger = FormatPlugin("stranger")
        assert registry.contains(csv_plugin)
        assert csv_plugin in registry
        assert not registry.contains(stranger)
        assert stranger not in registry

    def test_get_plugins_is_immutable(
        self, registry: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        plugins = registry.get_plugins()
        assert isinstance(plugins, tuple)
        with pytest.raises(AttributeError):
            plugins.append(FormatPlugin("x"))  # type: ignore[attr-defined]

    def test_iteration_follows_stored_order(
        self,
        registry: SimplePluginRegistry[FormatPlugin, str],
        csv_plugin: FormatPlugin,
        json_plugin: FormatPlugin,
        any_text_plugin: FormatPlugin,
    ) -> None:
        assert list(registry) == [csv_plugin, json_plugin, any_text_plugin]

    def test_repr_lists_plugins(self, registry: SimplePluginRegistry[FormatPlugin, str]) -> None:
        text = repr(registry)
        assert text.startswith("SimplePluginRegistry(")
        assert "FormatPlugin('csv')" in text


# ---------------------------------------------------------------------------
# Empty registry
# ---------------------------------------------------------------------------


class TestEmptyRegistry:
    def test_behaves_like_zero_matches(
        self, empty: SimplePluginRegistry[FormatPlugin, str]
    ) -> None:
        assert empty.get_plugin_for("csv") is None
        assert empty.get_plugins_for("csv") == []
        assert not empty.has_plugin_for("csv")
        assert empty.count_plugins() == 0
        assert empty.get_plugins() == ()
        assert list(empty) == []


# ---------------------------------------------------------------------------
# Thread safety
# ---------------------------------------------------------------------------


class TestConcurrentReads:
    def test_concurrent_queries_see_same_result(
        self, registry: SimplePluginRegistry[FormatPlugin, str], csv_plugin: FormatPlugin
    ) -> None:
        results: list[object] = []
        lock = threading.Lock()

        def query() -> None:
            for _ in range(100):
                found = registry.get_plugin_for("csv")
                with lock:
                    results.append(found)

        threads = [threading.Thread(target=query) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 800
        assert all(found is csv_plugin for found in results)
