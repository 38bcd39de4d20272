"""Reads pricing settings with an explicit, logged fallback.

The settings collaborator is authoritative.  Only when it raises
SettingsUnavailable do we fall back, and then to the constants below,
never to zero.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from pos.domain.exceptions import SettingsUnavailable
from pos.domain.model.value_objects import TaxRate
from pos.domain.repository.settings_provider import SettingsProvider

DEFAULT_TAX_RATE = TaxRate(Decimal("0.10"))
DEFAULT_POINTS_PER_CURRENCY_UNIT = Decimal("10")

logger = structlog.get_logger(__name__)


def read_tax_rate(settings: SettingsProvider) -> TaxRate:
    try:
        return settings.get_tax_rate()
    except SettingsUnavailable as exc:
        logger.warning(
            "tax_rate_fallback",
            reason=str(exc),
            fallback=str(DEFAULT_TAX_RATE.value),
        )
        return DEFAULT_TAX_RATE


def read_points_per_currency_unit(settings: SettingsProvider) -> Decimal:
    try:
        return settings.get_points_per_currency_unit()
    except SettingsUnavailable as exc:
        logger.warning(
            "points_ratio_fallback",
            reason=str(exc),
            fallback=str(DEFAULT_POINTS_PER_CURRENCY_UNIT),
        )
        return DEFAULT_POINTS_PER_CURRENCY_UNIT
