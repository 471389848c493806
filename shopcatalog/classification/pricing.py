"""Mini README: Price variants attached to classified shop items.

Structure:
    * ItemStatus - enum of the non-purchasable states exposed to clients.
    * FixedPrice, PairPrice, Sold, Inquire, Unpriced - tagged price variants.

Classification logic only handles these objects. The legacy display strings
("$40", "Sold", "Not Priced") are produced by ``display`` and
``pair_display`` when an entry is serialised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ItemStatus(str, Enum):
    """Availability flags; priced items that are for sale carry no status."""

    SOLD = "sold"
    INQUIRE = "inquire"
    NOT_PRICED = "not-priced"


def _format_amount(amount: int) -> str:
    return f"${amount}"


@dataclass(frozen=True, slots=True)
class FixedPrice:
    """A single unit for sale at ``amount`` dollars."""

    amount: int

    @property
    def display(self) -> str:
        return _format_amount(self.amount)

    @property
    def status(self) -> Optional[ItemStatus]:
        return None

    @property
    def pair_display(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class PairPrice:
    """For sale individually or as a pair at a discounted ``pair_amount``."""

    amount: int
    pair_amount: int

    @property
    def display(self) -> str:
        return _format_amount(self.amount)

    @property
    def status(self) -> Optional[ItemStatus]:
        return None

    @property
    def pair_display(self) -> Optional[str]:
        return _format_amount(self.pair_amount)


@dataclass(frozen=True, slots=True)
class Sold:
    @property
    def display(self) -> str:
        return "Sold"

    @property
    def status(self) -> Optional[ItemStatus]:
        return ItemStatus.SOLD

    @property
    def pair_display(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class Inquire:
    """Available on request; no public price."""

    @property
    def display(self) -> str:
        return "Inquire"

    @property
    def status(self) -> Optional[ItemStatus]:
        return ItemStatus.INQUIRE

    @property
    def pair_display(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class Unpriced:
    """No rule priced the item. ``label`` is empty for excluded items."""

    label: str = "Not Priced"

    @property
    def display(self) -> str:
        return self.label

    @property
    def status(self) -> Optional[ItemStatus]:
        return ItemStatus.NOT_PRICED

    @property
    def pair_display(self) -> Optional[str]:
        return None


Price = Union[FixedPrice, PairPrice, Sold, Inquire, Unpriced]
