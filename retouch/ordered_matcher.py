from __future__ import annotations

from typing import Sequence

from .base import ConservationMatcher


class OrderedMatcher(ConservationMatcher):
    """Greedy forward matcher: an item of A is conserved if an equal item of B
    follows the previous match.

    B is scanned left to right only. Insertions in B never penalize A, while
    moved items are lost once the cursor has passed them. This is not an
    optimal alignment and must not be turned into one.
    """

    def name(self) -> str:
        return "ordered"

    def count_conserved(self, seq_a: Sequence[str], seq_b: Sequence[str]) -> int:
        index_b = 0
        conserved = 0
        for item in seq_a:
            for j in range(index_b, len(seq_b)):
                if item == seq_b[j]:
                    conserved += 1
                    index_b = j + 1
                    break
        return conserved
