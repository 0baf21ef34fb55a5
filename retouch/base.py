from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class RetouchError(Exception):
    """Base error for the comparison package."""


class InvalidInputError(RetouchError):
    """A caller supplied an empty or blank text."""


class ConfigError(RetouchError):
    """Configuration could not be turned into a comparator (bad abbreviation, unknown matcher, ...)."""


class ConservationMatcher(ABC):
    """Counts how many items of a first sequence are conserved in a second one.

    Implementors compare items by exact equality only. The returned count is
    never larger than min(len(seq_a), len(seq_b)).
    """

    @abstractmethod
    def name(self) -> str:
        """Registry name used in configuration (e.g., 'ordered', 'lcs')."""

    @abstractmethod
    def count_conserved(self, seq_a: Sequence[str], seq_b: Sequence[str]) -> int:
        """Return the number of items of seq_a conserved in seq_b."""
