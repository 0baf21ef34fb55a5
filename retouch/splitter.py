from __future__ import annotations

import re
from typing import List, Optional

from .abbreviations import AbbreviationTable
from .normalizer import TERMINATORS, normalize

_TERMINATOR_RE = re.compile(r"[.!?]")


class TextSplitter:
    """Splits text into sentences and words under the shared normalization.

    Holds its abbreviation table for its whole lifetime; build a new splitter
    to use a different table.
    """

    def __init__(self, abbreviations: Optional[AbbreviationTable] = None) -> None:
        self._abbreviations = abbreviations if abbreviations is not None else AbbreviationTable()

    @property
    def abbreviations(self) -> AbbreviationTable:
        return self._abbreviations

    def split_sentences(self, text: str) -> List[str]:
        """
        Return the sentences of `text` in reading order, duplicates kept.
        A leading "." is prepended so the first sentence is delimited like the others.
        """
        prepared = "." + normalize(text, protect=self._abbreviations.protect)
        sentences: List[str] = []
        for fragment in _TERMINATOR_RE.split(prepared):
            sentence = self._abbreviations.restore(fragment.strip())
            if sentence:
                sentences.append(sentence)
        return sentences

    def split_words(self, text: str) -> List[str]:
        """Return the words of `text`; punctuation other than .!? stays on its token."""
        prepared = normalize(text)
        for terminator in TERMINATORS:
            prepared = prepared.replace(terminator, " ")
        return [tok for tok in prepared.split(" ") if tok]
