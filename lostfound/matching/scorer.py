"""Scoring and ranking for lost/found item pairs."""

from __future__ import annotations

import logging

from lostfound.items.models import LOST, Item
from lostfound.matching.config import MatchingConfig
from lostfound.matching.models import (
    FieldScores,
    MatchDetails,
    MatchResult,
    PotentialMatch,
    to_percentage,
)
from lostfound.matching.similarity import ItemSimilarity

logger = logging.getLogger(__name__)


class MatchScorer:
    """Scores and ranks candidate items."""

    def __init__(self, config: MatchingConfig | None = None):
        """
        Initialize match scorer.

        Args:
            config: Matching configuration
        """
        self.config = config or MatchingConfig()
        self.similarity = ItemSimilarity(self.config)

    def field_scores(self, lost_item: Item, found_item: Item) -> FieldScores:
        """Compare the five matched fields of a lost/found pair."""
        sim = self.similarity
        return FieldScores(
            title=sim.string_similarity(lost_item.title, found_item.title),
            description=sim.string_similarity(lost_item.description, found_item.description),
            category=sim.category_similarity(lost_item.category, found_item.category),
            location=sim.location_similarity(lost_item.location, found_item.location),
            date=sim.date_proximity(lost_item.date, found_item.date),
        )

    def score_pair(self, lost_item: Item, found_item: Item) -> MatchResult:
        """
        Score a lost item against a found item.

        Args:
            lost_item: The item reported lost
            found_item: The item reported found

        Returns:
            Match result with weighted score and per-field details
        """
        scores = self.field_scores(lost_item, found_item)
        weights = self.config.weights

        total = (
            scores.title * weights.title
            + scores.description * weights.description
            + scores.category * weights.category
            + scores.location * weights.location
            + scores.date * weights.date
        )
        # Float accumulation can land a hair outside [0, 1].
        total = min(1.0, max(0.0, total))

        result = MatchResult(
            score=total,
            match_percentage=to_percentage(total),
            details=MatchDetails.from_field_scores(scores),
            is_high_potential_match=total >= self.config.thresholds.high_potential,
            field_scores=scores,
        )

        if self.config.debug:
            logger.debug(
                f"[SCORER] Scored lost={lost_item.id} found={found_item.id}: {total:.4f}",
                extra={
                    "lost_id": lost_item.id,
                    "found_id": found_item.id,
                    "breakdown": result.get_score_breakdown(),
                },
            )

        return result

    def score_candidate(self, target: Item, candidate: Item, target_type: str) -> PotentialMatch:
        """
        Score a candidate against the target, ordering the pair by ``target_type``.

        Args:
            target: Item the search is run for
            candidate: Opposite-status item from the pool
            target_type: Status the target is searched as

        Returns:
            Candidate item with its match result
        """
        if target_type == LOST:
            result = self.score_pair(target, candidate)
        else:
            result = self.score_pair(candidate, target)

        return PotentialMatch(
            item=candidate,
            score=result.score,
            match_percentage=result.match_percentage,
            details=result.details,
            is_high_potential_match=result.is_high_potential_match,
            field_scores=result.field_scores,
        )

    def score_all_candidates(
        self, target: Item, candidates: list[Item], target_type: str
    ) -> list[PotentialMatch]:
        """
        Score all candidate items.

        Args:
            target: Item the search is run for
            candidates: Opposite-status items
            target_type: Status the target is searched as

        Returns:
            List of scored candidates, in pool order
        """
        logger.info(f"[SCORER] Starting scoring for {len(candidates)} candidates")

        scored = [self.score_candidate(target, c, target_type) for c in candidates]

        avg_score = sum(m.score for m in scored) / len(scored) if scored else 0
        logger.info(
            f"[SCORER] Scored {len(scored)} candidates | Average score: {avg_score:.4f}"
        )

        return scored

    def rank_candidates(self, matches: list[PotentialMatch]) -> list[PotentialMatch]:
        """
        Rank candidates by score, highest first.

        Equal scores are ordered by item id so results do not depend on pool order.

        Args:
            matches: Scored candidates

        Returns:
            Ranked candidates
        """
        if not matches:
            return matches

        ranked = sorted(matches, key=lambda m: (-m.score, m.item.id))

        logger.debug(
            f"[SCORER] Candidates ranked | "
            f"Best: {ranked[0].item.id} ({ranked[0].score:.4f}) | "
            f"Worst: {ranked[-1].item.id} ({ranked[-1].score:.4f})"
        )

        return ranked


# Convenience function
def calculate_match_score(
    lost_item: Item, found_item: Item, config: MatchingConfig | None = None
) -> MatchResult:
    """
    Score a lost item against a found item.

    Args:
        lost_item: The item reported lost
        found_item: The item reported found
        config: Matching configuration

    Returns:
        Match result
    """
    return MatchScorer(config).score_pair(lost_item, found_item)
