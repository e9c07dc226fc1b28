"""Catalog and cart value types.

All money amounts are integer minor currency units (cents). Every type is a
frozen dataclass, so equality is by value and instances are safe to share
across search branches.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .errors import InvalidCatalogItemError, InvalidQuantityError, errmsg
from .validation import require_non_negative, require_positive, require_whole


@dataclass(frozen=True)
class CatalogItem:
    name: str
    unit_price: int

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidCatalogItemError(errmsg.CATALOG_NAME_REQUIRED)
        require_whole(self.unit_price, errmsg.PRICE_WHOLE, InvalidCatalogItemError)
        require_non_negative(self.unit_price, errmsg.PRICE_NEGATIVE, InvalidCatalogItemError)


@dataclass(frozen=True)
class CartItem:
    """A quantity of one catalog item."""

    catalog_item: CatalogItem
    quantity: int

    def __post_init__(self) -> None:
        require_whole(self.quantity, errmsg.QUANTITY_WHOLE, InvalidQuantityError)
        require_positive(self.quantity, errmsg.QUANTITY_POSITIVE, InvalidQuantityError)

    @property
    def price(self) -> int:
        """Regular (undiscounted) price of the line."""
        return self.quantity * self.catalog_item.unit_price


@dataclass(frozen=True)
class Cart:
    """Ordered cart lines, one per catalog item.

    Lines for the same catalog item are merged into the first of them, so
    the cart holds exactly what the caller passed in. Line order does not
    change the final price but decides which line a scanning promotion
    meets first.
    """

    items: tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", merge_lines(self.items))

    @classmethod
    def of(cls, *items: CartItem) -> Cart:
        return cls(items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> int:
        return price_lines(self.items)


def merge_lines(items: Iterable[CartItem]) -> tuple[CartItem, ...]:
    """Sum quantities of lines for the same catalog item, keeping first positions."""
    merged: dict[CatalogItem, CartItem] = {}
    for line in items:
        seen = merged.get(line.catalog_item)
        if seen is None:
            merged[line.catalog_item] = line
        else:
            merged[line.catalog_item] = replace(seen, quantity=seen.quantity + line.quantity)
    return tuple(merged.values())


def price_lines(items: Iterable[CartItem]) -> int:
    """Sum the regular price of every line."""
    return sum(item.price for item in items)
