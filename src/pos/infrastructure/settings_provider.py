"""SettingsProvider backed by the register's pydantic Settings."""

from __future__ import annotations

from decimal import Decimal

from pydantic import ValidationError as PydanticValidationError

from pos.domain.exceptions import InvalidAmount, SettingsUnavailable
from pos.domain.model.value_objects import TaxRate
from pos.domain.repository.settings_provider import SettingsProvider
from pos.infrastructure.config import Settings


class EnvSettingsProvider(SettingsProvider):
    """Reads pricing settings fresh on every call so edits to the
    environment or ``.env`` apply to the next checkout."""

    def get_tax_rate(self) -> TaxRate:
        try:
            return TaxRate(self._load().tax_rate)
        except InvalidAmount as exc:
            raise SettingsUnavailable(str(exc)) from exc

    def get_points_per_currency_unit(self) -> Decimal:
        return self._load().points_per_currency_unit

    @staticmethod
    def _load() -> Settings:
        try:
            return Settings()
        except PydanticValidationError as exc:
            raise SettingsUnavailable(f"Invalid register settings: {exc}") from exc
