"""Candidate pool selection for the matching engine."""

from __future__ import annotations

import logging
from typing import Iterable

from lostfound.items.models import Item, opposite_status

logger = logging.getLogger(__name__)


class CandidateRetriever:
    """Selects the items of a pool that may pair with a target."""

    def get_candidates(self, pool: Iterable[Item], target_type: str) -> list[Item]:
        """
        Keep only items whose status is opposite to ``target_type``.

        Items with the target's own status, and claimed or returned items,
        are dropped. The target itself is not excluded by id.

        Args:
            pool: Items supplied by the caller, in any status
            target_type: ``lost`` or ``found``

        Returns:
            Candidate items, in pool order

        Raises:
            ValueError: If ``target_type`` is neither ``lost`` nor ``found``
        """
        wanted = opposite_status(target_type)

        pool = list(pool)
        candidates = [item for item in pool if item.status == wanted]

        logger.debug(
            f"[RETRIEVAL] {len(candidates)}/{len(pool)} pool items have status '{wanted}'"
        )

        return candidates
