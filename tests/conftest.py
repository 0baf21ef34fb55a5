from pathlib import Path

import pytest
import yaml

BASE_CONFIG = {
    "abbreviations": ["dr."],
    "abbreviation_whole_words": False,
    "matching": {"sentences": "ordered", "words": "lcs"},
    "output": {"format": "text"},
    "logging": {"level": "info"},
}


def write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory with a config.default.yaml and no local override."""
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    write_yaml(cfg_dir / "config.default.yaml", BASE_CONFIG)
    return cfg_dir
