#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional

from retouch import InvalidInputError, RetouchError, create_comparator, validate_inputs

from scripts.config_loader import config_section, load_effective_config, resolve_config_dir
from scripts.logging_helper import LEVELS, is_trace_enabled, log_debug, log_trace_block, set_log_level
from scripts.utils import OUTPUT_FORMATS, load_text, render_report


def _resolve_level(cfg: dict, debug: bool, trace: bool) -> str:
    cfg_level = str(config_section(cfg, "logging").get("level") or "").strip().lower()
    level = cfg_level if cfg_level in LEVELS else "info"
    if debug:
        level = "debug"
    if trace:
        level = "trace"
    return level


def _resolve_format(cfg: dict, override: Optional[str]) -> str:
    if override:
        return override
    fmt = str(config_section(cfg, "output").get("format") or "text").strip().lower()
    return fmt if fmt in OUTPUT_FORMATS else "text"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description=(
            "Compare an original text with its revised version and report how many sentences "
            "were retouched and how many words were conserved."
        )
    )
    ap.add_argument("--original", required=True, help="Path to the original text (UTF-8)")
    ap.add_argument("--revised", required=True, help="Path to the revised text (UTF-8)")
    ap.add_argument("--format", choices=list(OUTPUT_FORMATS), default=None, help="Output format (default from config output.format)")
    ap.add_argument(
        "--abbreviation",
        action="append",
        default=[],
        metavar="ABBR",
        help="Extra abbreviation protected from sentence splitting, e.g. 'cf.' (repeatable)",
    )
    ap.add_argument("--config-dir", default=None, help="Directory holding config.default.yaml and optional config.yaml")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging (counts only)")
    ap.add_argument("--trace", action="store_true", help="Enable trace logging: dump the split sentences of both texts")
    args = ap.parse_args(argv)

    base = resolve_config_dir(args.config_dir)
    try:
        cfg, has_local = load_effective_config(base)
    except (OSError, ValueError) as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        return 2

    set_log_level(_resolve_level(cfg, args.debug, args.trace))
    fmt = _resolve_format(cfg, args.format)
    log_debug(f"Config -> dir={base} | local_override={has_local} | format={fmt}")

    try:
        text_a = load_text(args.original)
        text_b = load_text(args.revised)
    except OSError as exc:
        print(f"ERROR: cannot read input: {exc}", file=sys.stderr)
        return 1

    try:
        validate_inputs(text_a, text_b)
    except InvalidInputError:
        print("ERROR: both texts must be provided.", file=sys.stderr)
        return 1

    try:
        comparator = create_comparator(cfg, extra_abbreviations=args.abbreviation)
    except RetouchError as exc:
        print(f"ERROR: invalid configuration: {exc}", file=sys.stderr)
        return 1
    log_debug(
        f"Comparator -> abbreviations={list(comparator.abbreviations)} | "
        f"sentences={comparator.sentence_matcher.name()} | words={comparator.word_matcher.name()}"
    )

    if is_trace_enabled():
        log_trace_block("Sentences A", "\n".join(comparator.splitter.split_sentences(text_a)))
        log_trace_block("Sentences B", "\n".join(comparator.splitter.split_sentences(text_b)))

    result = comparator.compare(text_a, text_b)
    print(render_report(result, fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
