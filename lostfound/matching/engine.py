"""Matching engine that runs a candidate search for one item."""

from __future__ import annotations

import logging
from typing import Iterable

from lostfound.items.models import Item
from lostfound.matching.config import MatchingConfig
from lostfound.matching.models import PotentialMatch, SearchResult
from lostfound.matching.retrieval import CandidateRetriever
from lostfound.matching.scorer import MatchScorer

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Matching engine for lost and found items.

    Orchestrates:
    1. Candidate selection (opposite status only)
    2. Field scoring
    3. Threshold filtering
    4. Ranking
    """

    def __init__(self, config: MatchingConfig | None = None):
        """
        Initialize matching engine.

        Args:
            config: Matching configuration

        Raises:
            ValueError: If the configured weights do not sum to 1.0
        """
        self.config = config or MatchingConfig()
        self.config.validate_config()

        self.retriever = CandidateRetriever()
        self.scorer = MatchScorer(self.config)

    def search(
        self,
        target: Item,
        pool: Iterable[Item],
        target_type: str | None = None,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> SearchResult:
        """
        Find the items of ``pool`` that may pair with ``target``.

        Args:
            target: Item to find matches for
            pool: Items to search through, in any status
            target_type: ``lost`` or ``found`` (default: the target's status)
            threshold: Minimum score kept (default: config search threshold)
            limit: Maximum number of matches returned

        Returns:
            Search result with matches sorted best-first

        Raises:
            ValueError: On an invalid target type, threshold or limit
        """
        target_type = target_type or target.status
        if threshold is None:
            threshold = self.config.thresholds.search_default
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0 and 1, got {threshold}")
        if limit is not None and limit < 1:
            raise ValueError(f"Limit must be positive, got {limit}")

        logger.info(
            f"[MATCH] Searching matches for {target_type} item {target.id} "
            f"(threshold: {threshold:.2f})"
        )

        candidates = self.retriever.get_candidates(pool, target_type)
        scored = self.scorer.score_all_candidates(target, candidates, target_type)
        kept = [m for m in scored if m.score >= threshold]
        ranked = self.scorer.rank_candidates(kept)

        if limit is not None:
            ranked = ranked[:limit]

        result = SearchResult(
            target_id=target.id,
            target_type=target_type,
            threshold=threshold,
            total_candidates=len(candidates),
            matches=ranked,
        )

        summary = result.get_summary()
        logger.info(
            f"[MATCH] Search completed for item {target.id} | "
            f"Candidates: {summary['candidates_scored']} | "
            f"Matches: {summary['matches']} | "
            f"High potential: {summary['high_potential']} | "
            f"Best: {summary['best_item_id']}"
        )

        return result

    def find_potential_matches(
        self,
        target: Item,
        pool: Iterable[Item],
        target_type: str | None = None,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> list[PotentialMatch]:
        """Ranked matches only; see :meth:`search`."""
        return self.search(target, pool, target_type, threshold, limit).matches


# Convenience function
def find_potential_matches(
    target: Item,
    pool: Iterable[Item],
    target_type: str | None = None,
    threshold: float = 0.5,
    config: MatchingConfig | None = None,
) -> list[PotentialMatch]:
    """
    Find potential matches for an item.

    Args:
        target: Item to find matches for
        pool: Items to search through
        target_type: ``lost`` or ``found`` (default: the target's status)
        threshold: Minimum score kept
        config: Matching configuration

    Returns:
        Matches sorted by score, highest first
    """
    engine = MatchingEngine(config)
    return engine.find_potential_matches(target, pool, target_type, threshold)
