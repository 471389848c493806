"""Mini README: Filename based product classification.

Structure:
    * ClassificationRule - friendly name, pattern and price resolver.
    * DEFAULT_RULES - ordered rule table for the current product lines.
    * ItemClassification - title plus price variant for one filename.
    * ProductClassifier - first-match evaluation with a fallback title.
    * classify / is_excluded - module level helpers using the defaults.

Product photos are named ``<code><number>.<ext>`` (``SV03.png``). The rule
table is scanned top to bottom and the first matching pattern decides the
title and price. Patterns for one product code overlap on purpose: the sold
and inquire rules list specific numbers and must stay above the catch-all
rule for the same code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Pattern, Sequence, Tuple

from ..logging_utils import get_logger
from .pricing import FixedPrice, Inquire, ItemStatus, PairPrice, Price, Sold, Unpriced

LOGGER = get_logger(__name__)

DEFAULT_FOLDER_PREFIX = "completed_works/"
EXCLUSION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\bSPIN\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bHANDHELD\b", re.IGNORECASE | re.ASCII),
)
_EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")
_SEPARATOR_PATTERN = re.compile(r"[_-]")


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """One row of the rule table; group 1 of ``pattern`` captures the item number."""

    friendly_name: str
    pattern: Pattern[str]
    resolve_price: Callable[[int], Price]

    @classmethod
    def build(
        cls, friendly_name: str, pattern: str, resolve_price: Callable[[int], Price]
    ) -> "ClassificationRule":
        return cls(friendly_name, re.compile(pattern, re.IGNORECASE | re.ASCII), resolve_price)


def _sold(_: int) -> Price:
    return Sold()


def _inquire(_: int) -> Price:
    return Inquire()


def _mug_pricing(_: int) -> Price:
    return PairPrice(amount=40, pair_amount=70)


def _vase_pricing(_: int) -> Price:
    return FixedPrice(amount=120)


DEFAULT_RULES: Tuple[ClassificationRule, ...] = (
    # Sold
    ClassificationRule.build("Tumbly Tumbler", r"\bTT(\d+)", _sold),
    ClassificationRule.build("Martini Tumbler", r"\bTM(15|01|02)\b", _sold),
    ClassificationRule.build("Random Vase", r"\bRV(0?4)\b", _sold),
    ClassificationRule.build("Summer Vase", r"\bSV(05|14|23)\b", _sold),
    # Inquire
    ClassificationRule.build("Summer Vase", r"\bSV(0?[1-9]|10)\b", _inquire),
    # Catalog
    ClassificationRule.build("Spline Mug", r"\bSM(\d+)", _mug_pricing),
    ClassificationRule.build("Summer Vase", r"\bSV(1[1-9]|[2-9]\d|\d{3,})", _vase_pricing),
    ClassificationRule.build("Tall Tumbler", r"\bTA(\d+)", _mug_pricing),
    ClassificationRule.build("Tumbler", r"\bTU(\d+)", _mug_pricing),
    ClassificationRule.build("Martini Tumbler", r"\bTM(\d+)", _mug_pricing),
    ClassificationRule.build("Random Vase", r"\bRV(\d+)", _vase_pricing),
)


@dataclass(frozen=True, slots=True)
class ItemClassification:
    """Title and price derived from a filename."""

    title: str
    price: Price

    @property
    def status(self) -> Optional[ItemStatus]:
        return self.price.status

    def as_dict(self) -> Dict[str, str]:
        """Render the legacy ``{title, price, status?, pairPrice?}`` shape."""

        payload = {"title": self.title, "price": self.price.display}
        if self.price.status is not None:
            payload["status"] = self.price.status.value
        if self.price.pair_display is not None:
            payload["pairPrice"] = self.price.pair_display
        return payload


EXCLUDED = ItemClassification(title="", price=Unpriced(label=""))


def is_excluded(filename: str) -> bool:
    """Return True for spin and handheld shots, which never appear in the shop."""

    return any(pattern.search(filename) for pattern in EXCLUSION_PATTERNS)


class ProductClassifier:
    """Map filenames to titles and prices with an ordered rule table."""

    def __init__(
        self,
        *,
        rules: Optional[Sequence[ClassificationRule]] = None,
        folder_prefix: str = DEFAULT_FOLDER_PREFIX,
    ) -> None:
        self.rules: Tuple[ClassificationRule, ...] = tuple(
            DEFAULT_RULES if rules is None else rules
        )
        self.folder_prefix = folder_prefix
        LOGGER.debug(
            "ProductClassifier initialised with %s rules (prefix=%r)",
            len(self.rules),
            folder_prefix,
        )

    def classify(self, filename: str) -> ItemClassification:
        """Classify ``filename``; never raises."""

        upper_name = filename.upper()
        if is_excluded(upper_name):
            LOGGER.debug("Filename %s is excluded", filename)
            return EXCLUDED

        for rule in self.rules:
            match = rule.pattern.search(upper_name)
            if not match:
                continue
            item_number = int(match.group(1))
            price = rule.resolve_price(item_number)
            title = f"{rule.friendly_name} {item_number:02d}"
            LOGGER.debug("Filename %s matched %r -> %s", filename, rule.friendly_name, title)
            return ItemClassification(title=title, price=price)

        LOGGER.debug("Filename %s matched no rule; using fallback title", filename)
        return ItemClassification(title=self.fallback_title(filename), price=Unpriced())

    def fallback_title(self, filename: str) -> str:
        """Derive a readable title from the raw filename."""

        name = filename.replace(self.folder_prefix, "", 1) if self.folder_prefix else filename
        name = _EXTENSION_PATTERN.sub("", name)
        name = _SEPARATOR_PATTERN.sub(" ", name)
        return " ".join(word.capitalize() for word in name.split(" "))

    def describe_rules(self) -> Tuple[Tuple[str, str], ...]:
        """Return ``(friendly_name, pattern)`` pairs in evaluation order."""

        return tuple((rule.friendly_name, rule.pattern.pattern) for rule in self.rules)


_DEFAULT_CLASSIFIER = ProductClassifier()


def classify(filename: str) -> ItemClassification:
    """Classify ``filename`` with the default rule table."""

    return _DEFAULT_CLASSIFIER.classify(filename)
