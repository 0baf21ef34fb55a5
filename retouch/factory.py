from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .abbreviations import DEFAULT_ABBREVIATIONS, AbbreviationTable
from .base import ConfigError, ConservationMatcher
from .comparator import TextComparator


def create_matcher(name: str) -> ConservationMatcher:
    """Return the matcher registered under `name` ('ordered' or 'lcs')."""
    key = (name or "").strip().lower()
    if key == "ordered":
        from .ordered_matcher import OrderedMatcher
        return OrderedMatcher()
    if key == "lcs":
        from .lcs_matcher import LCSMatcher
        return LCSMatcher()
    raise ConfigError(f"Unknown matcher '{name}'. Implement a ConservationMatcher and register it in the factory.")


def _abbreviation_entries(cfg: Dict[str, Any]) -> Iterable[str]:
    entries = cfg.get("abbreviations", DEFAULT_ABBREVIATIONS)
    if entries is None:
        return ()
    if not isinstance(entries, (list, tuple)):
        raise ConfigError(f"'abbreviations' must be a list, got {type(entries).__name__}")
    return entries


def create_comparator(cfg: Dict[str, Any], *, extra_abbreviations: Optional[Iterable[str]] = None) -> TextComparator:
    """Build a TextComparator from the merged config dict.

    Supported keys:
      abbreviations: [m., dr., ...]
      abbreviation_whole_words: false
      matching:
        sentences: ordered|lcs
        words: ordered|lcs
    """
    entries = list(_abbreviation_entries(cfg))
    if extra_abbreviations:
        entries.extend(extra_abbreviations)
    whole_words = cfg.get("abbreviation_whole_words", False)
    if whole_words is None:
        whole_words = False
    if not isinstance(whole_words, bool):
        raise ConfigError(f"'abbreviation_whole_words' must be true or false, got {whole_words!r}")
    table = AbbreviationTable(entries, whole_words=whole_words)

    matching = cfg.get("matching") or {}
    if not isinstance(matching, dict):
        raise ConfigError(f"'matching' must be a mapping, got {type(matching).__name__}")
    return TextComparator(
        table,
        sentence_matcher=create_matcher(matching.get("sentences") or "ordered"),
        word_matcher=create_matcher(matching.get("words") or "lcs"),
    )
