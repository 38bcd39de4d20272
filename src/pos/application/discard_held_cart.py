"""Application service: Discard Held Cart use case."""

from __future__ import annotations

import structlog

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.held_cart_repository import HeldCartRepository

logger = structlog.get_logger(__name__)


class DiscardHeldCartHandler:

    def __init__(self, held_repo: HeldCartRepository) -> None:
        self._held_repo = held_repo

    def handle(self, held_id: int) -> None:
        if self._held_repo.get_by_id(held_id) is None:
            raise EntityNotFoundError(f"Held cart #{held_id} not found")
        self._held_repo.delete(held_id)
        logger.info("held_cart_discarded", held_id=held_id)
