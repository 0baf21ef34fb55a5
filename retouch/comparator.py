from __future__ import annotations

import logging
from typing import Iterable, Optional

from .abbreviations import AbbreviationTable
from .base import ConservationMatcher, InvalidInputError
from .lcs_matcher import LCSMatcher
from .ordered_matcher import OrderedMatcher
from .report import ComparisonResult, build_report
from .splitter import TextSplitter

logger = logging.getLogger(__name__)


def validate_inputs(text_a: str, text_b: str) -> None:
    """Reject empty or blank texts before a comparison is run."""
    missing = [label for label, text in (("original", text_a), ("revised", text_b)) if not (text or "").strip()]
    if missing:
        raise InvalidInputError(f"Both texts must be provided (blank: {', '.join(missing)})")


class TextComparator:
    """Runs one original/revised comparison at sentence and word level.

    Instances only hold immutable configuration and can be reused freely.
    """

    def __init__(
        self,
        abbreviations: Optional[AbbreviationTable] = None,
        *,
        sentence_matcher: Optional[ConservationMatcher] = None,
        word_matcher: Optional[ConservationMatcher] = None,
    ) -> None:
        self._splitter = TextSplitter(abbreviations)
        self._sentence_matcher = sentence_matcher or OrderedMatcher()
        self._word_matcher = word_matcher or LCSMatcher()

    @property
    def splitter(self) -> TextSplitter:
        return self._splitter

    @property
    def abbreviations(self) -> AbbreviationTable:
        return self._splitter.abbreviations

    @property
    def sentence_matcher(self) -> ConservationMatcher:
        return self._sentence_matcher

    @property
    def word_matcher(self) -> ConservationMatcher:
        return self._word_matcher

    def with_abbreviations(self, entries: Iterable[str]) -> "TextComparator":
        """Return a comparator using `entries` as its table; this one is left untouched."""
        table = AbbreviationTable(entries, whole_words=self.abbreviations.whole_words)
        return TextComparator(
            table,
            sentence_matcher=self._sentence_matcher,
            word_matcher=self._word_matcher,
        )

    def compare(self, text_a: str, text_b: str) -> ComparisonResult:
        sentences_a = self._splitter.split_sentences(text_a)
        sentences_b = self._splitter.split_sentences(text_b)
        words_a = self._splitter.split_words(text_a)
        words_b = self._splitter.split_words(text_b)
        logger.debug(
            "Split -> sentences A=%d B=%d | words A=%d B=%d",
            len(sentences_a), len(sentences_b), len(words_a), len(words_b),
        )

        conserved_sentences = self._sentence_matcher.count_conserved(sentences_a, sentences_b)
        conserved_words = self._word_matcher.count_conserved(words_a, words_b)
        logger.debug(
            "Matched -> sentences=%d (%s) | words=%d (%s)",
            conserved_sentences, self._sentence_matcher.name(),
            conserved_words, self._word_matcher.name(),
        )
        return build_report(sentences_a, conserved_sentences, words_a, conserved_words)
