from __future__ import annotations

import re
from typing import Callable, List, Optional, Pattern, Tuple

TERMINATORS = ".!?"

# Applied in order; the rules do not commute.
WHITESPACE_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile("\u00a0"), " "),
    (re.compile(r"\s+"), " "),
]

TERMINATOR_RULES: List[Tuple[Pattern[str], str]] = [
    # "??", "!!!", "..." and "? !" all become one hard stop
    (re.compile(r"[.!?](?:\s*[.!?])+"), "."),
    (re.compile(r"\s+([.!?])"), r"\1"),
]

TRAILING_SPACE_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"([.!?])\s+"), r"\1"),
]


def _apply(rules: List[Tuple[Pattern[str], str]], text: str) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def normalize(text: str, protect: Optional[Callable[[str], str]] = None) -> str:
    """Canonicalize case, whitespace and terminator punctuation.

    When `protect` is given it runs once terminator runs are collapsed and
    glued to the preceding word, but before the space after a terminator is
    dropped, so abbreviation periods it hides keep the space that follows them.
    """
    text = _apply(TERMINATOR_RULES, _apply(WHITESPACE_RULES, text.lower()))
    if protect is not None:
        text = protect(text)
    return _apply(TRAILING_SPACE_RULES, text).strip()
