from __future__ import annotations

from typing import List, Sequence

from .base import ConservationMatcher


class LCSMatcher(ConservationMatcher):
    """Length of the longest common subsequence of two token sequences."""

    def name(self) -> str:
        return "lcs"

    def count_conserved(self, seq_a: Sequence[str], seq_b: Sequence[str]) -> int:
        # LCS is symmetric; keep the row over the shorter sequence.
        if len(seq_b) > len(seq_a):
            seq_a, seq_b = seq_b, seq_a
        if not seq_b:
            return 0

        prev: List[int] = [0] * (len(seq_b) + 1)
        for item_a in seq_a:
            cur: List[int] = [0] * (len(seq_b) + 1)
            for j in range(1, len(seq_b) + 1):
                if item_a == seq_b[j - 1]:
                    cur[j] = prev[j - 1] + 1
                else:
                    cur[j] = max(prev[j], cur[j - 1])
            prev = cur
        return prev[-1]
