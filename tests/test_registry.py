"""
Tests for the target registry — declared vs runtime targets, merging.
"""

from asset_compress.core.models.config import AssetConfig
from asset_compress.core.models.state import InclusionState
from asset_compress.core.models.target import AssetKind
from asset_compress.core.services.registry import TargetRegistry


class TestRegisterFiles:
    def test_creates_target(self, config: AssetConfig):
        registry = TargetRegistry(config)
        name = registry.register_files("page.js", AssetKind.SCRIPT, ["menu.js"])
        assert name == "page.js"
        assert registry.get_files("page.js") == ["menu.js"]

    def test_appends_extension(self, config: AssetConfig):
        registry = TargetRegistry(config)
        name = registry.register_files("page", AssetKind.STYLE, ["print.css"])
        assert name == "page.css"
        assert registry.get_files("page.css") == ["print.css"]

    def test_with_and_without_extension_are_one_target(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("page", AssetKind.SCRIPT, ["a.js"])
        registry.register_files("page.js", AssetKind.SCRIPT, ["b.js"])
        assert registry.get_files("page.js") == ["a.js", "b.js"]

    def test_merge_keeps_order(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("page.js", AssetKind.SCRIPT, ["a.js"])
        registry.register_files("page.js", AssetKind.SCRIPT, ["b.js"])
        assert registry.get_files("page.js") == ["a.js", "b.js"]

    def test_merge_drops_duplicates(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("page.js", AssetKind.SCRIPT, ["a.js"])
        registry.register_files("page.js", AssetKind.SCRIPT, ["a.js", "b.js"])
        assert registry.get_files("page.js") == ["a.js", "b.js"]

    def test_single_string(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("page.js", AssetKind.SCRIPT, "solo.js")
        assert registry.get_files("page.js") == ["solo.js"]

    def test_extends_declared_target(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("default.js", AssetKind.SCRIPT, ["extra.js"])
        assert registry.get_files("default.js") == ["jquery.js", "app.js", "extra.js"]
        # The config itself is untouched
        assert config.files_for("default.js") == ["jquery.js", "app.js"]

    def test_empty_registration_is_not_pending(self, config: AssetConfig):
        registry = TargetRegistry(config)
        name = registry.register_files("page", AssetKind.SCRIPT, [])
        assert name == "page.js"
        assert registry.get_files("page.js") == []
        assert registry.state.pending(AssetKind.SCRIPT) == []

    def test_empty_registration_of_declared_target_is_pending(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("default", AssetKind.SCRIPT, [])
        assert registry.state.pending(AssetKind.SCRIPT) == ["default.js"]

    def test_marks_runtime_and_pending(self, config: AssetConfig):
        state = InclusionState()
        registry = TargetRegistry(config, state)
        registry.register_files("page.js", AssetKind.SCRIPT, ["a.js"])
        assert registry.is_runtime("page.js")
        assert state.pending(AssetKind.SCRIPT) == ["page.js"]
        assert state.pending(AssetKind.STYLE) == []


class TestGetFiles:
    def test_declared_target(self, config: AssetConfig):
        registry = TargetRegistry(config)
        assert registry.get_files("default.css") == ["reset.css", "layout.css"]
        assert not registry.is_runtime("default.css")

    def test_unknown_target_is_empty(self, config: AssetConfig):
        assert TargetRegistry(config).get_files("nothing.js") == []

    def test_returns_copy(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.register_files("page.js", AssetKind.SCRIPT, ["a.js"])
        registry.get_files("page.js").append("b.js")
        assert registry.get_files("page.js") == ["a.js"]


class TestSetFiles:
    def test_unions_without_marking_pending(self, config: AssetConfig):
        registry = TargetRegistry(config)
        registry.set_files("widgets.js", ["a.js", "b.js"])
        registry.set_files("widgets.js", ["b.js", "c.js"])
        assert registry.get_files("widgets.js") == ["a.js", "b.js", "c.js"]
        assert registry.state.pending(AssetKind.SCRIPT) == []


class TestSnapshots:
    def test_get_unknown_is_none(self, config: AssetConfig):
        assert TargetRegistry(config).get("nothing.js") is None

    def test_get_declared(self, config: AssetConfig):
        target = TargetRegistry(config).get("default.js")
        assert target is not None
        assert target.kind is AssetKind.SCRIPT
        assert target.is_runtime is False

    def test_registries_are_independent(self, config: AssetConfig):
        first, second = TargetRegistry(config), TargetRegistry(config)
        first.register_files("page", AssetKind.SCRIPT, ["a.js"])
        assert second.get_files("page.js") == []
