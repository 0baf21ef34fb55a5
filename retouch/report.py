from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Union

Count = Union[int, Sequence[str]]


def _count(value: Count) -> int:
    return value if isinstance(value, int) else len(value)


def percent(part: int, total: int) -> int:
    """Integer percentage rounded half up; 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


@dataclass(frozen=True)
class ComparisonResult:
    total_sentences_a: int
    conserved_sentences: int
    modified_sentences: int
    sentence_retouch_percent: int
    total_words_a: int
    conserved_words: int
    word_conserved_percent: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalSentencesA": self.total_sentences_a,
            "conservedSentences": self.conserved_sentences,
            "modifiedSentences": self.modified_sentences,
            "sentenceRetouchPercent": self.sentence_retouch_percent,
            "totalWordsA": self.total_words_a,
            "conservedWords": self.conserved_words,
            "wordConservedPercent": self.word_conserved_percent,
        }


def build_report(
    sentences_a: Count,
    conserved_sentences: int,
    words_a: Count,
    conserved_words: int,
) -> ComparisonResult:
    """Combine raw counts into the result record.

    `sentences_a` and `words_a` may be the original sequences or their lengths.
    """
    total_sentences = _count(sentences_a)
    total_words = _count(words_a)
    modified = total_sentences - conserved_sentences
    return ComparisonResult(
        total_sentences_a=total_sentences,
        conserved_sentences=conserved_sentences,
        modified_sentences=modified,
        sentence_retouch_percent=percent(modified, total_sentences),
        total_words_a=total_words,
        conserved_words=conserved_words,
        word_conserved_percent=percent(conserved_words, total_words),
    )
