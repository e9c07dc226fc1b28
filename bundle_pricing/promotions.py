"""Bundle promotion definitions.

The set of promotion variants is closed:

- QuantityBundleDiscount: N units of one item for a fixed total price
  ("2 apples for 2.15").
- UnitPriceOverrideBundle: a basket of items where some entries carry an
  overridden unit price ("1 bread + 2 margarines, the 2nd margarine free").

Both are validated when constructed so that the pricing search never meets
a definition it cannot evaluate.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Union

from .domain import CartItem, CatalogItem
from .errors import InvalidPromotionError, errmsg
from .validation import require_non_negative, require_not_empty, require_whole


@dataclass(frozen=True)
class QuantityBundleDiscount:
    """Exactly ``item.quantity`` units of ``item.catalog_item`` for ``total_price``."""

    item: CartItem
    total_price: int

    def __post_init__(self) -> None:
        if not isinstance(self.item, CartItem):
            raise InvalidPromotionError(errmsg.BUNDLE_ITEM_REQUIRED)
        require_whole(self.total_price, errmsg.PRICE_WHOLE, InvalidPromotionError)
        require_non_negative(self.total_price, errmsg.PRICE_NEGATIVE, InvalidPromotionError)

    @property
    def discounted_price(self) -> int:
        return self.total_price


@dataclass(frozen=True)
class PromotionEntry:
    """One line of a unit-price bundle, optionally at an overridden unit price."""

    item: CartItem
    unit_price_override: Optional[int] = None

    def __post_init__(self) -> None:
        if self.unit_price_override is not None:
            require_whole(self.unit_price_override, errmsg.PRICE_WHOLE, InvalidPromotionError)
            require_non_negative(self.unit_price_override, errmsg.OVERRIDE_NEGATIVE, InvalidPromotionError)

    @property
    def unit_price(self) -> int:
        if self.unit_price_override is not None:
            return self.unit_price_override
        return self.item.catalog_item.unit_price

    @property
    def price(self) -> int:
        return self.unit_price * self.item.quantity


@dataclass(frozen=True)
class UnitPriceOverrideBundle:
    entries: tuple[PromotionEntry, ...]
    discounted_price: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        require_not_empty(self.entries, errmsg.BUNDLE_ENTRIES_REQUIRED, InvalidPromotionError)
        object.__setattr__(self, "discounted_price", sum(entry.price for entry in self.entries))

    @classmethod
    def of(cls, *entries: PromotionEntry) -> UnitPriceOverrideBundle:
        return cls(entries)

    def references(self, catalog_item: CatalogItem) -> bool:
        """Return True if any entry of the bundle is for ``catalog_item``."""
        return any(entry.item.catalog_item == catalog_item for entry in self.entries)

    def required_quantities(self) -> Counter:
        """Total quantity the bundle needs per catalog item."""
        required: Counter = Counter()
        for entry in self.entries:
            required[entry.item.catalog_item] += entry.item.quantity
        return required


Promotion = Union[QuantityBundleDiscount, UnitPriceOverrideBundle]

PROMOTION_TYPES = (QuantityBundleDiscount, UnitPriceOverrideBundle)
