"""Bundle pricing: the lowest cart total under bundle promotions."""

from .domain import CatalogItem, CartItem, Cart, merge_lines, price_lines
from .promotions import (
    Promotion,
    PromotionEntry,
    QuantityBundleDiscount,
    UnitPriceOverrideBundle,
)
from .consumption import remove, covers, quantities
from .application import (
    Applied,
    apply_promotion,
    apply_quantity_bundle,
    apply_unit_price_override_bundle,
    evaluate_ordering,
)
from .service import BundlePricingService, Candidate
from .config import PricingConfig, get_pricing_config, configure_logging
from .errors import (
    errmsg,
    PricingError,
    InvalidCartError,
    InvalidCatalogItemError,
    InvalidPromotionError,
    InvalidQuantityError,
    NoCandidateError,
)

__version__ = "0.1.0"

__all__ = [
    # Value types
    "CatalogItem",
    "CartItem",
    "Cart",
    "merge_lines",
    "price_lines",
    # Promotions
    "Promotion",
    "PromotionEntry",
    "QuantityBundleDiscount",
    "UnitPriceOverrideBundle",
    # Consumption
    "remove",
    "covers",
    "quantities",
    # Application
    "Applied",
    "apply_promotion",
    "apply_quantity_bundle",
    "apply_unit_price_override_bundle",
    "evaluate_ordering",
    # Service
    "BundlePricingService",
    "Candidate",
    # Config
    "PricingConfig",
    "get_pricing_config",
    "configure_logging",
    # Errors
    "errmsg",
    "PricingError",
    "InvalidCartError",
    "InvalidCatalogItemError",
    "InvalidPromotionError",
    "InvalidQuantityError",
    "NoCandidateError",
]
