"""Shared pytest fixtures: a small grocery catalog and its promotions."""

import pytest

from bundle_pricing import (
    BundlePricingService,
    CartItem,
    CatalogItem,
    PromotionEntry,
    QuantityBundleDiscount,
    UnitPriceOverrideBundle,
)


@pytest.fixture
def apple() -> CatalogItem:
    return CatalogItem("Apple", 199)


@pytest.fixture
def margarine() -> CatalogItem:
    return CatalogItem("Margarine", 250)


@pytest.fixture
def bread() -> CatalogItem:
    return CatalogItem("Bread", 300)


@pytest.fixture
def catalog(apple, margarine, bread) -> list[CatalogItem]:
    return [apple, margarine, bread]


@pytest.fixture
def two_apples(apple) -> QuantityBundleDiscount:
    """2 apples for 2.15 instead of 3.98."""
    return QuantityBundleDiscount(CartItem(apple, 2), total_price=215)


@pytest.fixture
def bread_and_margarine(bread, margarine) -> UnitPriceOverrideBundle:
    """1 bread + 2 margarines, the 2nd margarine is free."""
    return UnitPriceOverrideBundle.of(
        PromotionEntry(CartItem(bread, 1)),
        PromotionEntry(CartItem(margarine, 1)),
        PromotionEntry(CartItem(margarine, 1), unit_price_override=0),
    )


@pytest.fixture
def service(catalog, two_apples, bread_and_margarine) -> BundlePricingService:
    return BundlePricingService(catalog, [two_apples, bread_and_margarine])
