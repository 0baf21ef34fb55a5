from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_NAME = "config.default.yaml"
LOCAL_NAME = "config.yaml"
CONFIG_DIR_ENV = "RETOUCH_CONFIG_DIR"


def resolve_config_dir(explicit: Optional[str] = None) -> Path:
    """Directory holding config.default.yaml.

    Order: explicit argument, $RETOUCH_CONFIG_DIR, then the project root next to scripts/.
    """
    if explicit:
        return Path(explicit)
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path(__file__).resolve().parent.parent


def config_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return the mapping under `key`, or {} when it is missing or not a mapping."""
    section = cfg.get(key)
    return section if isinstance(section, dict) else {}


def _read_yaml_dict(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def deep_merge(base: Any, override: Any) -> Any:
    """Merge override onto base.

    - dicts merge recursively
    - lists are replaced whole (an abbreviations list in config.yaml replaces the default one)
    - scalars override
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged: Dict[str, Any] = dict(base)
        for key, value in override.items():
            merged[key] = deep_merge(base[key], value) if key in base else value
        return merged
    return override


def load_default_and_local(
    base_dir: Path,
    default_name: str = DEFAULT_NAME,
    local_name: str = LOCAL_NAME,
) -> Tuple[Dict[str, Any], Dict[str, Any], bool]:
    default_path = base_dir / default_name
    if not default_path.exists():
        raise FileNotFoundError(f"Missing required config: {default_path}")
    default_cfg = _read_yaml_dict(default_path)

    local_path = base_dir / local_name
    if local_path.exists():
        return default_cfg, _read_yaml_dict(local_path), True
    return default_cfg, {}, False


def load_effective_config(
    base_dir: Path,
    default_name: str = DEFAULT_NAME,
    local_name: str = LOCAL_NAME,
) -> Tuple[Dict[str, Any], bool]:
    default_cfg, local_cfg, has_local = load_default_and_local(
        base_dir, default_name=default_name, local_name=local_name
    )
    return deep_merge(default_cfg, local_cfg), has_local
