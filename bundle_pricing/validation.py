"""Validation helpers for construction-time precondition checks.

Eliminates repeated validation boilerplate across the value types and
promotion definitions.
"""

from collections.abc import Sequence
from typing import Any

from .errors import InvalidCartError, PricingError


def require_whole(value: Any, error_msg: str, error_type: type[PricingError] = PricingError) -> None:
    """Require that a value is an int (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise error_type(error_msg)


def require_positive(value: int, error_msg: str, error_type: type[PricingError] = PricingError) -> None:
    """Require that a value is greater than zero."""
    if value <= 0:
        raise error_type(error_msg)


def require_non_negative(value: int, error_msg: str, error_type: type[PricingError] = PricingError) -> None:
    """Require that a value is zero or greater."""
    if value < 0:
        raise error_type(error_msg)


def require_not_empty(items: Sequence[Any], error_msg: str, error_type: type[PricingError] = PricingError) -> None:
    """Require that a sequence has at least one element."""
    if not items:
        raise error_type(error_msg)


def require_at_most(value: int, limit: int, error_msg: str, error_type: type[PricingError] = PricingError) -> None:
    """Require that a value does not exceed a limit."""
    if value > limit:
        raise error_type(f"{error_msg}: {value} > {limit}")


def require_in_catalog(item: Any, catalog: Sequence[Any]) -> None:
    """Require that a cart line references an item present in the catalog."""
    if item.catalog_item not in catalog:
        raise InvalidCartError(item)
