"""
Tests for configuration loading — asset_compress.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from asset_compress.core.config.loader import ConfigError, find_config_file, load_config
from asset_compress.core.models.config import AssetConfig


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_valid_config(self, config_file: Path):
        config = load_config(config_file)
        assert config.files_for("default.js") == ["jquery.js", "app.js"]
        assert config.files_for("default.css") == ["reset.css", "layout.css"]

    def test_relative_paths_anchor_at_config_dir(self, config_file: Path, webroot: Path):
        config = load_config(config_file)
        assert config.document_root_path == webroot.resolve()
        assert config.cache_directory("js") == (webroot / "cache_js").resolve()

    def test_empty_file_is_all_defaults(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text("")
        config = load_config(path)
        assert config.targets == {}
        assert config.cache_directory("js") is None

    def test_single_file_string_accepted(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text("targets:\n  solo.js: only.js\n")
        assert load_config(path).files_for("solo.js") == ["only.js"]

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text("- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_bad_target_extension_raises(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text("targets:\n  logo.png: [a.png]\n")
        with pytest.raises(ConfigError, match="Invalid asset configuration"):
            load_config(path)

    def test_cache_path_outside_document_root_raises(self, tmp_path: Path):
        path = tmp_path / "asset_compress.yml"
        path.write_text(textwrap.dedent("""\
            general:
              document_root: webroot
            js:
              cache_path: elsewhere/cache_js
        """))
        with pytest.raises(ConfigError, match="not inside"):
            load_config(path)

    def test_auto_search_without_file_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        monkeypatch.setattr(
            "asset_compress.core.config.loader.find_config_file", lambda start_dir=None: None
        )
        with pytest.raises(ConfigError, match="No asset_compress.yml found"):
            load_config()


class TestFindConfigFile:
    def test_finds_in_current_dir(self, config_file: Path):
        assert find_config_file(config_file.parent) == config_file.resolve()

    def test_finds_in_parent(self, config_file: Path):
        child = config_file.parent / "app" / "views"
        child.mkdir(parents=True)
        assert find_config_file(child) == config_file.resolve()


class TestAssetConfig:
    """Provider interface of the config model."""

    def test_defaults(self):
        config = AssetConfig()
        assert config.general.debug is False
        assert config.general.build_url == "/asset_compress/assets/get"
        assert config.caching_enabled("js") is True
        assert config.cache_directory("css") is None

    def test_files_for_unknown_is_empty(self, config: AssetConfig):
        assert config.files_for("nothing.js") == []

    def test_files_for_returns_copy(self, config: AssetConfig):
        config.files_for("default.js").append("evil.js")
        assert config.files_for("default.js") == ["jquery.js", "app.js"]

    def test_caching_switch(self, tmp_path: Path):
        config = AssetConfig.model_validate({
            "js": {"caching": False},
            "config_dir": str(tmp_path),
        })
        assert config.caching_enabled(".js") is False
        assert config.caching_enabled("css") is True

    def test_extension_of(self, config: AssetConfig):
        assert config.extension_of("default.css") == "css"

    def test_source_url_defaults_per_kind(self):
        config = AssetConfig()
        assert config.source_url_for("js") == "/js/"
        assert config.source_url_for("css") == "/css/"

    def test_base_url(self, tmp_path: Path):
        config = AssetConfig.model_validate({
            "css": {"base_url": "https://cdn.example.com"},
            "config_dir": str(tmp_path),
        })
        assert config.base_url_for("css") == "https://cdn.example.com"
        assert config.base_url_for("js") == ""

    def test_declared_targets(self, config: AssetConfig):
        names = [t.name for t in config.declared_targets()]
        assert names == ["default.js", "default.css"]

    def test_direct_validation_error(self):
        with pytest.raises(ValidationError):
            AssetConfig.model_validate({"targets": {"default": ["a.js"]}})

    def test_config_dir_not_serialized(self, config: AssetConfig):
        assert "config_dir" not in config.model_dump()
