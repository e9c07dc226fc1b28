"""Removing matched quantities from a cart.

Carts are threaded through the promotion search as tuples of CartItem.
Nothing here mutates its argument; every function returns a new tuple.
Each call is a linear scan of the cart, which is fine for the small carts
this engine prices.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import replace

from .domain import CartItem, CatalogItem


def remove(target: CartItem, items: Sequence[CartItem]) -> tuple[CartItem, ...]:
    """Subtract ``target.quantity`` from every line for the same catalog item.

    Lines that drop to zero or below disappear. Other lines keep their
    relative order.
    """
    residual = []
    for line in items:
        if line.catalog_item != target.catalog_item:
            residual.append(line)
            continue
        leftover = line.quantity - target.quantity
        if leftover > 0:
            residual.append(replace(line, quantity=leftover))
    return tuple(residual)


def quantities(items: Sequence[CartItem]) -> Counter:
    """Total quantity held per catalog item."""
    held: Counter = Counter()
    for line in items:
        held[line.catalog_item] += line.quantity
    return held


def covers(items: Sequence[CartItem], required: Mapping[CatalogItem, int]) -> bool:
    """Return True if the cart holds at least ``required`` of every item."""
    held = quantities(items)
    return all(held[catalog_item] >= quantity for catalog_item, quantity in required.items())
