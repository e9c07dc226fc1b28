"""Error types and error message constants for bundle pricing."""

from typing import Optional


class errmsg:
    """Error message constants for the pricing domain."""

    QUANTITY_POSITIVE = "Quantity must be positive"
    QUANTITY_WHOLE = "Quantity must be a whole number"
    PRICE_NEGATIVE = "Price cannot be negative"
    PRICE_WHOLE = "Price must be a whole number of minor units"
    CATALOG_NAME_REQUIRED = "Catalog item name is required"
    BUNDLE_ITEM_REQUIRED = "Quantity bundle requires a cart item"
    BUNDLE_ENTRIES_REQUIRED = "Bundle requires at least one entry"
    OVERRIDE_NEGATIVE = "Unit price override cannot be negative"
    UNKNOWN_PROMOTION = "Unknown promotion type"
    TOO_MANY_PROMOTIONS = "Too many promotions for exhaustive search"
    ITEM_NOT_IN_CATALOG = "Cart item is not in the catalog"
    CART_EMPTY = "Cart is empty"
    NO_POSITIVE_CANDIDATE = "No ordering produced a positive total"


class PricingError(Exception):
    """Base class for pricing errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidQuantityError(PricingError, ValueError):
    """A quantity was zero, negative or not a whole number."""


class InvalidCatalogItemError(PricingError, ValueError):
    """A catalog item was constructed with a bad name or price."""


class InvalidPromotionError(PricingError, ValueError):
    """A promotion definition cannot be priced."""


class InvalidCartError(PricingError):
    """The cart references an item that is absent from the catalog."""

    def __init__(self, item=None):
        message = errmsg.ITEM_NOT_IN_CATALOG
        if item is not None:
            message = f"{message}: {item.catalog_item.name}"
        super().__init__(message)
        self.item = item


class NoCandidateError(PricingError):
    """No ordering of promotions produced an acceptable total."""
