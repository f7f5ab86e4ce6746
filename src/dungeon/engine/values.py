"""Plain value objects shared by the item model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonetaryValue:
    """The price of an item. Negative values are not rejected."""

    value: int
