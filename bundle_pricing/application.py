"""Applying promotions to a cart.

Each apply function takes a promotion and the current residual cart and
returns an Applied: the cart left after the promotion consumed what it
matched, and the amount charged for what it consumed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .consumption import covers, remove
from .domain import CartItem, price_lines
from .errors import InvalidPromotionError, errmsg
from .promotions import Promotion, QuantityBundleDiscount, UnitPriceOverrideBundle


@dataclass(frozen=True)
class Applied:
    items: tuple[CartItem, ...]
    charge: int = 0

    def add(self, other: Applied) -> Applied:
        """Combine charges, keeping the cart from ``other`` (the later step)."""
        return Applied(other.items, self.charge + other.charge)


def apply_quantity_bundle(promotion: QuantityBundleDiscount, items: Sequence[CartItem]) -> Applied:
    """Apply a quantity bundle to the first cart line for its item.

    As many whole bundles as the line holds are charged at the bundle price.
    Whatever is left of the line is charged at the regular unit price and
    leaves the cart. A line holding fewer units than one bundle is charged
    the same way. Lines for other items are untouched.
    """
    items = tuple(items)
    required = promotion.item

    for index, line in enumerate(items):
        if line.catalog_item != required.catalog_item:
            continue

        without_line = items[:index] + items[index + 1:]
        if line.quantity < required.quantity:
            return Applied(without_line, line.price)

        bundles, leftover = divmod(line.quantity, required.quantity)
        charge = bundles * promotion.total_price
        if leftover:
            residual = items[:index] + (replace(line, quantity=leftover),) + items[index + 1:]
            return Applied(residual, charge).add(apply_quantity_bundle(promotion, residual))
        return Applied(without_line, charge)

    return Applied(items, 0)


def apply_unit_price_override_bundle(promotion: UnitPriceOverrideBundle, items: Sequence[CartItem]) -> Applied:
    """Apply one instance of a unit-price bundle.

    The bundle only applies when the cart holds every entry it needs. In that
    case each entry is consumed in order and the bundle's discounted price is
    charged. Otherwise the cart comes back unchanged with nothing charged.
    """
    items = tuple(items)

    if not any(promotion.references(line.catalog_item) for line in items):
        return Applied(items, 0)
    if not covers(items, promotion.required_quantities()):
        return Applied(items, 0)

    residual = items
    for entry in promotion.entries:
        residual = remove(entry.item, residual)
    return Applied(residual, promotion.discounted_price)


def apply_promotion(promotion: Promotion, items: Sequence[CartItem]) -> Applied:
    if isinstance(promotion, QuantityBundleDiscount):
        return apply_quantity_bundle(promotion, items)
    elif isinstance(promotion, UnitPriceOverrideBundle):
        return apply_unit_price_override_bundle(promotion, items)
    else:
        raise InvalidPromotionError(f"{errmsg.UNKNOWN_PROMOTION}: {type(promotion).__name__}")


def evaluate_ordering(items: Sequence[CartItem], ordering: Sequence[Promotion]) -> int:
    """Price the cart with promotions applied in one specific order.

    Promotions are folded from the last one to the first, each seeing the
    cart left by the previous step. Lines no promotion consumed are charged
    at their regular price.
    """
    state = Applied(tuple(items), 0)
    for promotion in reversed(ordering):
        state = state.add(apply_promotion(promotion, state.items))
    return state.charge + price_lines(state.items)
