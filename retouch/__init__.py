"""Editorial retouch meter.

Compares an original text with its revision and reports how many sentences
and words survived. Exposes the main types for external imports.
"""

from .abbreviations import AbbreviationTable
from .base import (
    ConfigError,
    ConservationMatcher,
    InvalidInputError,
    RetouchError,
)
from .comparator import TextComparator, validate_inputs
from .factory import create_comparator, create_matcher
from .lcs_matcher import LCSMatcher
from .normalizer import normalize
from .ordered_matcher import OrderedMatcher
from .report import ComparisonResult, build_report
from .splitter import TextSplitter

__all__ = [
    "AbbreviationTable",
    "ComparisonResult",
    "ConfigError",
    "ConservationMatcher",
    "InvalidInputError",
    "LCSMatcher",
    "OrderedMatcher",
    "RetouchError",
    "TextComparator",
    "TextSplitter",
    "build_report",
    "create_comparator",
    "create_matcher",
    "normalize",
    "validate_inputs",
]
