"""Abstract source of active promotions.

Which promotions are active is the catalog's decision; the register
only asks for the current set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pos.domain.model.promotion import Promotion


class PromotionRepository(ABC):

    @abstractmethod
    def list_active(self, at: datetime) -> list[Promotion]:
        """Return promotions active at ``at``, in catalog order."""
