"""Mini README: Filename classification subsystem for shop items.

Exports the rule-driven classifier and the price variants it produces. The
rule table can be swapped per ``ProductClassifier`` instance without
altering the listing code that consumes classifications.
"""

from .classifier import (
    DEFAULT_RULES,
    ClassificationRule,
    ItemClassification,
    ProductClassifier,
    classify,
    is_excluded,
)
from .pricing import FixedPrice, Inquire, ItemStatus, PairPrice, Price, Sold, Unpriced

__all__ = [
    "ClassificationRule",
    "DEFAULT_RULES",
    "FixedPrice",
    "Inquire",
    "ItemClassification",
    "ItemStatus",
    "PairPrice",
    "Price",
    "ProductClassifier",
    "Sold",
    "Unpriced",
    "classify",
    "is_excluded",
]
