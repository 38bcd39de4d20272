"""Abstract settings collaborator consulted once per checkout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from pos.domain.model.value_objects import TaxRate


class SettingsProvider(ABC):

    @abstractmethod
    def get_tax_rate(self) -> TaxRate:
        """Return the configured flat tax rate.

        Raises SettingsUnavailable if the value cannot be read.
        """

    @abstractmethod
    def get_points_per_currency_unit(self) -> Decimal:
        """Return how much post-tax spend earns one loyalty point.

        Raises SettingsUnavailable if the value cannot be read.
        """
