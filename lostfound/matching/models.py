"""Data models for match results and candidate searches."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from lostfound.items.models import Item


def to_percentage(score: float) -> int:
    """Convert a [0, 1] score to a whole percentage, rounding halves up."""
    return int(math.floor(score * 100 + 0.5))


class FieldScores(BaseModel):
    """Raw [0, 1] score of every compared field."""

    title: float = Field(..., ge=0.0, le=1.0)
    description: float = Field(..., ge=0.0, le=1.0)
    category: float = Field(..., ge=0.0, le=1.0)
    location: float = Field(..., ge=0.0, le=1.0)
    date: float = Field(..., ge=0.0, le=1.0)


class MatchDetails(BaseModel):
    """Per-field percentages explaining a match.

    Each field is rounded on its own, so the values need not add up to the
    overall match percentage.
    """

    model_config = ConfigDict(populate_by_name=True)

    title_match: int = Field(..., ge=0, le=100, alias="titleMatch")
    description_match: int = Field(..., ge=0, le=100, alias="descriptionMatch")
    category_match: int = Field(..., ge=0, le=100, alias="categoryMatch")
    location_match: int = Field(..., ge=0, le=100, alias="locationMatch")
    date_match: int = Field(..., ge=0, le=100, alias="dateMatch")

    @classmethod
    def from_field_scores(cls, scores: FieldScores) -> MatchDetails:
        return cls(
            title_match=to_percentage(scores.title),
            description_match=to_percentage(scores.description),
            category_match=to_percentage(scores.category),
            location_match=to_percentage(scores.location),
            date_match=to_percentage(scores.date),
        )


class MatchResult(BaseModel):
    """Score of one lost item against one found item."""

    model_config = ConfigDict(populate_by_name=True)

    score: float = Field(..., ge=0.0, le=1.0, description="Weighted aggregate score")
    match_percentage: int = Field(
        ..., ge=0, le=100, alias="matchPercentage", description="round(score * 100)"
    )
    details: MatchDetails = Field(..., description="Per-field percentages")
    is_high_potential_match: bool = Field(
        ..., alias="isHighPotentialMatch", description="Score at or above the high potential cutoff"
    )

    # Raw field scores for callers working in Python; not part of the serialized shape.
    field_scores: FieldScores | None = Field(default=None, exclude=True)

    def get_score_breakdown(self) -> dict:
        """Get detailed score breakdown."""
        return {
            "score": self.score,
            "match_percentage": self.match_percentage,
            "is_high_potential_match": self.is_high_potential_match,
            "fields": self.field_scores.model_dump() if self.field_scores else None,
            "details": self.details.model_dump(by_alias=True),
        }


class PotentialMatch(MatchResult):
    """A candidate item together with its match result."""

    item: Item = Field(..., description="The candidate item")


class SearchResult(BaseModel):
    """Outcome of a candidate search for one target item."""

    model_config = ConfigDict(populate_by_name=True)

    target_id: str = Field(..., alias="targetId")
    target_type: str = Field(..., alias="targetType")
    threshold: float = Field(..., ge=0.0, le=1.0)
    total_candidates: int = Field(
        default=0, alias="totalCandidates", description="Opposite-status items scored"
    )
    matches: list[PotentialMatch] = Field(default_factory=list)
    searched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="searchedAt"
    )

    @property
    def best_match(self) -> PotentialMatch | None:
        return self.matches[0] if self.matches else None

    def get_summary(self) -> dict:
        """Get a summary of the search."""
        best = self.best_match
        return {
            "target_id": self.target_id,
            "target_type": self.target_type,
            "threshold": self.threshold,
            "candidates_scored": self.total_candidates,
            "matches": len(self.matches),
            "high_potential": sum(1 for m in self.matches if m.is_high_potential_match),
            "best_item_id": best.item.id if best else None,
            "best_score": best.score if best else None,
        }
