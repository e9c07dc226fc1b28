"""Lowest-price search over promotion application orders.

A promotion consumes cart lines that later promotions can no longer match,
so the order promotions are applied in changes the total. The service tries
every ordering and keeps the cheapest. The search grows factorially with the
number of promotions, which is why the promotion count is capped by
PricingConfig.max_promotions.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent import futures
from dataclasses import dataclass
from functools import partial
from itertools import permutations
from typing import Optional

import structlog

from .application import evaluate_ordering
from .config import PricingConfig
from .domain import Cart, CatalogItem
from .errors import InvalidCartError, InvalidPromotionError, NoCandidateError, errmsg
from .promotions import PROMOTION_TYPES, Promotion
from .validation import require_at_most, require_in_catalog


@dataclass(frozen=True)
class Candidate:
    """Total for the cart under one ordering of the promotions."""

    total: int
    ordering: tuple[Promotion, ...]


class BundlePricingService:
    """Prices carts against a fixed catalog and promotion list.

    Example::

        apple = CatalogItem("Apple", 199)
        service = BundlePricingService(
            [apple],
            [QuantityBundleDiscount(CartItem(apple, 2), total_price=215)],
        )
        service.bundle_cart_to_lowest_price(Cart.of(CartItem(apple, 4)))  # 430
    """

    def __init__(
        self,
        catalog: Iterable[CatalogItem],
        promotions: Iterable[Promotion],
        config: Optional[PricingConfig] = None,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        self._config = config or PricingConfig()
        self._catalog = tuple(catalog)
        self._promotions = tuple(promotions)

        for promotion in self._promotions:
            if not isinstance(promotion, PROMOTION_TYPES):
                raise InvalidPromotionError(f"{errmsg.UNKNOWN_PROMOTION}: {type(promotion).__name__}")
        require_at_most(
            len(self._promotions),
            self._config.max_promotions,
            errmsg.TOO_MANY_PROMOTIONS,
            InvalidPromotionError,
        )

        self._log = (logger or structlog.get_logger()).bind(service="bundle_pricing")

    @property
    def catalog(self) -> tuple[CatalogItem, ...]:
        return self._catalog

    @property
    def promotions(self) -> tuple[Promotion, ...]:
        return self._promotions

    @property
    def config(self) -> PricingConfig:
        return self._config

    def is_cart_valid(self, cart: Cart) -> bool:
        """Return True if every cart line references a catalog item."""
        return all(line.catalog_item in self._catalog for line in cart.items)

    def _require_valid(self, cart: Cart) -> None:
        for line in cart.items:
            try:
                require_in_catalog(line, self._catalog)
            except InvalidCartError:
                self._log.warning(
                    "cart_rejected",
                    reason=errmsg.ITEM_NOT_IN_CATALOG,
                    item=line.catalog_item.name,
                )
                raise

    def iter_candidates(self, cart: Cart) -> Iterator[Candidate]:
        """Lazily evaluate every ordering of the promotions.

        Duplicate promotions are not de-duplicated; they only repeat totals.
        The cart is not validated here.
        """
        for ordering in permutations(self._promotions):
            yield Candidate(evaluate_ordering(cart.items, ordering), ordering)

    def _parallel_candidates(self, cart: Cart) -> Iterator[Candidate]:
        orderings = list(permutations(self._promotions))
        evaluate = partial(evaluate_ordering, cart.items)
        chunksize = max(1, len(orderings) // (self._config.workers * 4))
        with futures.ProcessPoolExecutor(max_workers=self._config.workers) as executor:
            totals = list(executor.map(evaluate, orderings, chunksize=chunksize))
        for total, ordering in zip(totals, orderings):
            yield Candidate(total, ordering)

    def _candidates(self, cart: Cart) -> Iterator[Candidate]:
        if self._config.workers > 1 and len(self._promotions) > 1:
            return self._parallel_candidates(cart)
        return self.iter_candidates(cart)

    def compute_all_costs(self, cart: Cart) -> list[int]:
        """Return the total of every ordering, in permutation order."""
        self._require_valid(cart)
        return [candidate.total for candidate in self._candidates(cart)]

    def best_candidate(self, cart: Cart) -> Candidate:
        """Find the cheapest acceptable ordering.

        Raises:
            InvalidCartError: A cart line is not in the catalog.
            NoCandidateError: The cart is empty, or no ordering produced a
                total the configuration accepts.
        """
        self._require_valid(cart)
        if cart.is_empty:
            raise NoCandidateError(errmsg.CART_EMPTY)

        self._log.debug(
            "pricing_started",
            lines=len(cart.items),
            promotions=len(self._promotions),
            workers=self._config.workers,
        )

        best: Optional[Candidate] = None
        evaluated = 0
        for candidate in self._candidates(cart):
            evaluated += 1
            if not self._config.accepts(candidate.total):
                continue
            if best is None or candidate.total < best.total:
                best = candidate

        if best is None:
            raise NoCandidateError(errmsg.NO_POSITIVE_CANDIDATE)

        self._log.info("cart_priced", total=best.total, subtotal=cart.subtotal, orderings=evaluated)
        return best

    def bundle_cart_to_lowest_price(self, cart: Cart) -> int:
        """Lowest total for the cart, in minor currency units."""
        return self.best_candidate(cart).total
