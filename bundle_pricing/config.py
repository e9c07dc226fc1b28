"""Runtime configuration and logging setup."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

import structlog

DEFAULT_WORKERS = 1
DEFAULT_MAX_PROMOTIONS = 8
DEFAULT_LOG_LEVEL = "info"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PricingConfig:
    """Settings for a BundlePricingService.

    Attributes:
        workers: Number of processes evaluating orderings. 1 keeps the
            search lazy and in-process.
        max_promotions: Largest promotion list the exhaustive search accepts.
        allow_zero_total: Accept a total of exactly 0 as the lowest price.
            When False only strictly positive totals count.
        log_level: Minimum level applied by PricingConfig.configure_logging.
    """

    workers: int = DEFAULT_WORKERS
    max_promotions: int = DEFAULT_MAX_PROMOTIONS
    allow_zero_total: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def accepts(self, total: int) -> bool:
        """Return True if ``total`` may be reported as a cart price."""
        if self.allow_zero_total:
            return total >= 0
        return total > 0

    def configure_logging(self) -> None:
        """Configure structlog at this config's log level."""
        configure_logging(self.log_level)


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def _bool_setting(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _level_setting(environ: Mapping[str, str], name: str, default: str) -> str:
    level = environ.get(name, default).strip().lower() or default
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"{name} is not a log level: {level!r}")
    return level


def get_pricing_config(environ: Optional[Mapping[str, str]] = None) -> PricingConfig:
    """Get pricing configuration from environment.

    Environment variables:
        BUNDLE_PRICING_WORKERS: Worker processes for the search (default 1)
        BUNDLE_PRICING_MAX_PROMOTIONS: Promotion count limit (default 8)
        BUNDLE_PRICING_ALLOW_ZERO_TOTAL: Accept zero totals (default true)
        BUNDLE_PRICING_LOG_LEVEL: debug, info, warning or error (default info)
    """
    if environ is None:
        environ = os.environ

    return PricingConfig(
        workers=_int_setting(environ, "BUNDLE_PRICING_WORKERS", DEFAULT_WORKERS),
        max_promotions=_int_setting(environ, "BUNDLE_PRICING_MAX_PROMOTIONS", DEFAULT_MAX_PROMOTIONS),
        allow_zero_total=_bool_setting(environ, "BUNDLE_PRICING_ALLOW_ZERO_TOTAL", True),
        log_level=_level_setting(environ, "BUNDLE_PRICING_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
