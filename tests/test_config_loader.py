"""Tests for the layered YAML config loader."""

from pathlib import Path

import pytest

from retouch import create_comparator
from scripts.config_loader import (
    CONFIG_DIR_ENV,
    config_section,
    deep_merge,
    load_default_and_local,
    load_effective_config,
    resolve_config_dir,
)

from .conftest import write_yaml


class TestDeepMerge:
    """Tests for deep_merge()."""

    def test_dicts_merge_recursively(self) -> None:
        """Test that nested mappings are merged key by key."""
        base = {"matching": {"sentences": "ordered", "words": "lcs"}, "output": {"format": "text"}}
        merged = deep_merge(base, {"matching": {"words": "ordered"}})
        assert merged == {"matching": {"sentences": "ordered", "words": "ordered"}, "output": {"format": "text"}}

    def test_lists_replaced(self) -> None:
        """Test that a local abbreviation list replaces the default one."""
        assert deep_merge({"abbreviations": ["m.", "dr."]}, {"abbreviations": ["cf."]}) == {"abbreviations": ["cf."]}

    def test_base_not_mutated(self) -> None:
        """Test that merging leaves the inputs untouched."""
        base = {"output": {"format": "text"}}
        deep_merge(base, {"output": {"format": "json"}})
        assert base == {"output": {"format": "text"}}


class TestLoadConfig:
    """Tests for loading config.default.yaml and config.yaml."""

    def test_default_only(self, config_dir: Path) -> None:
        """Test loading without a local override."""
        cfg, has_local = load_effective_config(config_dir)
        assert has_local is False
        assert cfg["abbreviations"] == ["dr."]

    def test_local_override(self, config_dir: Path) -> None:
        """Test that config.yaml overrides the defaults."""
        write_yaml(config_dir / "config.yaml", {"output": {"format": "json"}})
        cfg, has_local = load_effective_config(config_dir)
        assert has_local is True
        assert cfg["output"]["format"] == "json"
        assert cfg["matching"]["words"] == "lcs"

    def test_empty_local_file(self, config_dir: Path) -> None:
        """Test that an empty config.yaml counts as no overrides."""
        (config_dir / "config.yaml").write_text("", encoding="utf-8")
        default_cfg, local_cfg, has_local = load_default_and_local(config_dir)
        assert local_cfg == {}
        assert has_local is True

    def test_missing_default(self, tmp_path: Path) -> None:
        """Test that a missing config.default.yaml is an error."""
        with pytest.raises(FileNotFoundError):
            load_effective_config(tmp_path)

    def test_non_mapping_root(self, config_dir: Path) -> None:
        """Test that a YAML list at the root is rejected."""
        (config_dir / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_effective_config(config_dir)


class TestResolveConfigDir:
    """Tests for resolve_config_dir()."""

    def test_explicit_wins(self, monkeypatch, tmp_path: Path) -> None:
        """Test that an explicit directory beats the environment."""
        monkeypatch.setenv(CONFIG_DIR_ENV, "/elsewhere")
        assert resolve_config_dir(str(tmp_path)) == tmp_path

    def test_environment(self, monkeypatch, tmp_path: Path) -> None:
        """Test that the environment variable is honoured."""
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        assert resolve_config_dir() == tmp_path

    def test_project_default_config(self, monkeypatch) -> None:
        """Test that the shipped defaults load and build a comparator."""
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
        base = resolve_config_dir()
        default_cfg, _local, _has_local = load_default_and_local(base)
        comparator = create_comparator(default_cfg)
        assert comparator.abbreviations.entries == ("m.", "mme.", "dr.", "pr.", "etc.", "vs.")


class TestConfigSection:
    """Tests for config_section()."""

    def test_returns_mapping(self) -> None:
        """Test that a nested mapping is returned as is."""
        assert config_section({"output": {"format": "json"}}, "output") == {"format": "json"}

    def test_missing_or_malformed(self) -> None:
        """Test that absent, null or scalar sections read as empty."""
        assert config_section({}, "output") == {}
        assert config_section({"output": None}, "output") == {}
        assert config_section({"output": "json"}, "output") == {}
