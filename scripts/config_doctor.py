#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Tuple

import yaml

from retouch import AbbreviationTable, RetouchError, create_comparator

from scripts.config_loader import config_section, deep_merge, load_default_and_local, resolve_config_dir
from scripts.logging_helper import LEVELS
from scripts.utils import OUTPUT_FORMATS


def _path_to_str(path: Tuple[str, ...]) -> str:
    return ".".join(path)


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return yaml.safe_dump(
            value,
            default_flow_style=True,
            sort_keys=True,
            allow_unicode=True,
        ).strip()
    return repr(value)


def _leaf_paths(value: Any, prefix: Tuple[str, ...]) -> List[Tuple[Tuple[str, ...], Any]]:
    if isinstance(value, dict) and value:
        out: List[Tuple[Tuple[str, ...], Any]] = []
        for key, child in value.items():
            out.extend(_leaf_paths(child, prefix + (str(key),)))
        return out
    return [(prefix, value)]


def _type_name(value: Any) -> str:
    if isinstance(value, dict):
        return "dict"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def collect_diffs(default_cfg: Dict[str, Any], local_cfg: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    """Compare config.default.yaml with config.yaml key by key."""
    overrides: List[Dict[str, Any]] = []
    stale_local: List[Dict[str, Any]] = []
    new_default: List[Dict[str, Any]] = []
    type_warnings: List[Dict[str, Any]] = []

    def walk(dv: Any, lv: Any, path: Tuple[str, ...]) -> None:
        if isinstance(dv, dict) and isinstance(lv, dict):
            for key in sorted(set(dv.keys()) | set(lv.keys()), key=str):
                next_path = path + (str(key),)
                if key in dv and key in lv:
                    walk(dv[key], lv[key], next_path)
                elif key in dv:
                    new_default.extend(
                        {"path": _path_to_str(p), "value": v} for p, v in _leaf_paths(dv[key], next_path)
                    )
                else:
                    stale_local.extend(
                        {"path": _path_to_str(p), "value": v} for p, v in _leaf_paths(lv[key], next_path)
                    )
            return
        if dv != lv:
            label = "changed(list)" if isinstance(dv, list) or isinstance(lv, list) else "changed"
            overrides.append({"path": _path_to_str(path), "label": label, "from": dv, "to": lv})
        if _type_name(dv) != _type_name(lv) and not (dv is None or lv is None):
            type_warnings.append(
                {"path": _path_to_str(path), "default_type": _type_name(dv), "local_type": _type_name(lv)}
            )

    walk(default_cfg, local_cfg, tuple())
    return {
        "overrides": overrides,
        "stale_local_only": stale_local,
        "new_default_only": new_default,
        "type_warnings": type_warnings,
    }


def _shadowed_abbreviations(table: AbbreviationTable) -> List[str]:
    """Entries that can never fire because an earlier entry already rewrote their period."""
    out: List[str] = []
    entries = table.entries
    for i, later in enumerate(entries):
        for earlier in entries[:i]:
            if later.endswith(earlier) and not table.whole_words:
                out.append(f"'{later}' is shadowed by earlier entry '{earlier}' (list the longer one first)")
                break
    return out


def check_effective(cfg: Dict[str, Any]) -> List[str]:
    """Validate the merged config the way the comparison CLI will consume it."""
    problems: List[str] = []
    try:
        comparator = create_comparator(cfg)
    except RetouchError as exc:
        problems.append(str(exc))
    else:
        problems.extend(_shadowed_abbreviations(comparator.abbreviations))

    fmt: Optional[str] = config_section(cfg, "output").get("format")
    if fmt is not None and str(fmt).strip().lower() not in OUTPUT_FORMATS:
        problems.append(f"output.format {fmt!r} is not one of {', '.join(OUTPUT_FORMATS)}")

    level: Optional[str] = config_section(cfg, "logging").get("level")
    if level is not None and str(level).strip().lower() not in LEVELS:
        problems.append(f"logging.level {level!r} is not one of {', '.join(LEVELS)}")
    return problems


def _print_section(title: str, lines: List[str]) -> None:
    print(f"{title}:")
    if not lines:
        print("  (none)")
        return
    for line in lines:
        print(f"  {line}")


def _dump_yaml(cfg: Dict[str, Any]) -> str:
    return yaml.safe_dump(cfg, sort_keys=True, default_flow_style=False, allow_unicode=True).rstrip()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect config.default.yaml vs config.yaml overrides and validate the result.")
    parser.add_argument(
        "command",
        nargs="?",
        default="report",
        choices=["report", "effective"],
        help="report (default) or effective",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON output (report or effective)")
    parser.add_argument("--config-dir", default=None, help="Directory holding config.default.yaml and optional config.yaml")
    args = parser.parse_args(argv)

    base = resolve_config_dir(args.config_dir)
    try:
        default_cfg, local_cfg, has_local = load_default_and_local(base)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        return 2

    effective_cfg = deep_merge(default_cfg, local_cfg)

    if args.command == "effective":
        if args.json:
            print(json.dumps({"effective_config": effective_cfg}, indent=2, ensure_ascii=False, default=str))
        else:
            print(_dump_yaml(effective_cfg))
        return 0

    diffs = collect_diffs(default_cfg, local_cfg)
    problems = check_effective(effective_cfg)
    warn_count = len(diffs["stale_local_only"]) + len(diffs["type_warnings"]) + len(problems)

    if args.json:
        payload = dict(diffs)
        payload["has_local_config"] = has_local
        payload["problems"] = problems
        payload["effective_config"] = effective_cfg
        print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
        return 1 if warn_count else 0

    if not has_local:
        print("WARNING: config.yaml not found; using only config.default.yaml")

    _print_section(
        "Overrides report",
        [f'{d["label"]}: {d["path"]}: {_format_value(d["from"])} -> {_format_value(d["to"])}' for d in diffs["overrides"]],
    )
    _print_section("New keys in default", [f'new(default-only): {d["path"]} = {_format_value(d["value"])}' for d in diffs["new_default_only"]])
    _print_section("Stale local keys", [f'WARNING stale(local): {d["path"]} = {_format_value(d["value"])}' for d in diffs["stale_local_only"]])
    _print_section(
        "Type compatibility warnings",
        [f'WARNING type-mismatch: {d["path"]} default={d["default_type"]} local={d["local_type"]}' for d in diffs["type_warnings"]],
    )
    _print_section("Effective config problems", [f"WARNING {p}" for p in problems])

    print("\nEffective config:")
    print(_dump_yaml(effective_cfg))
    return 1 if warn_count else 0


if __name__ == "__main__":
    sys.exit(main())
