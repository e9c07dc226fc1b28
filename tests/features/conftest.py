"""Pytest-bdd configuration and shared fixtures for pricing feature tests."""

import pytest


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {
        "catalog": {},
        "promotions": [],
        "bundles": {},
        "cart": [],
        "price": None,
        "error": None,
    }
