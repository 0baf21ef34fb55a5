from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Pattern, Tuple

from .base import ConfigError

# Uppercase on purpose: normalized text is lowercase, so the marker cannot already be there.
SENTINEL = "<DOT>"

DEFAULT_ABBREVIATIONS: Tuple[str, ...] = ("m.", "mme.", "dr.", "pr.", "etc.", "vs.")


def _check_entry(raw: object) -> str:
    if not isinstance(raw, str):
        raise ConfigError(f"Abbreviation must be a string, got {type(raw).__name__}: {raw!r}")
    entry = raw.strip().lower()
    if not entry.endswith("."):
        raise ConfigError(f"Abbreviation must end with a period: {raw!r}")
    if len(entry) < 2 or entry[-2] in ".!?":
        raise ConfigError(f"Abbreviation must end with exactly one period after a token: {raw!r}")
    if re.search(r"\s", entry):
        raise ConfigError(f"Abbreviation must not contain whitespace: {raw!r}")
    return entry


class AbbreviationTable:
    """Ordered, read-only set of abbreviations whose period must not end a sentence.

    Entries are applied in table order. When one entry is a substring of another
    (e.g. "r." and "pr."), the later one sees text already rewritten by the
    earlier one, so order is part of the configuration.
    """

    def __init__(self, entries: Iterable[str] = DEFAULT_ABBREVIATIONS, *, whole_words: bool = False) -> None:
        checked: List[str] = []
        for raw in entries:
            entry = _check_entry(raw)
            if entry not in checked:
                checked.append(entry)
        self._entries: Tuple[str, ...] = tuple(checked)
        self._whole_words = bool(whole_words)
        prefix = r"(?<![^\W_])" if self._whole_words else ""
        self._patterns: Tuple[Pattern[str], ...] = tuple(
            re.compile(prefix + re.escape(entry), re.IGNORECASE) for entry in self._entries
        )

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    @property
    def whole_words(self) -> bool:
        return self._whole_words

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"AbbreviationTable({list(self._entries)!r}, whole_words={self._whole_words})"

    def extended(self, extra: Iterable[str]) -> "AbbreviationTable":
        """Return a new table with `extra` appended; this table is left unchanged."""
        return AbbreviationTable(list(self._entries) + list(extra), whole_words=self._whole_words)

    def protect(self, text: str) -> str:
        """Hide the period of every configured abbreviation behind the sentinel."""
        for pattern in self._patterns:
            text = pattern.sub(lambda m: m.group(0).replace(".", SENTINEL), text)
        return text

    @staticmethod
    def restore(text: str) -> str:
        return text.replace(SENTINEL, ".")
