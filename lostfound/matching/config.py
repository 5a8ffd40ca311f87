"""Configuration for the item matching engine.

Scoring Flow:
-------------
1. Each field comparator returns a score in [0, 1]:
   - title / description : normalized Levenshtein similarity
   - category            : 1.0 on equal ids, otherwise 0.0
   - location            : 0.3 floor, 0.9 on a shared landmark, word overlap otherwise
   - date                : linear decay over 30 days, 0.5 when unknown

2. Field scores are combined with fixed weights that sum to 1.0, so the
   overall score stays in [0, 1].

3. Search keeps candidates at or above the search threshold (0.5 by default)
   and flags those at or above 0.70 as high potential matches.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

SIGNIFICANT_PLACE_WORDS: tuple[str, ...] = (
    "library",
    "cafeteria",
    "dorm",
    "hall",
    "building",
    "classroom",
    "lab",
    "gym",
    "field",
    "center",
    "court",
    "parking",
    "auditorium",
)


class FieldWeights(BaseModel):
    """Weights for the five compared item fields."""

    title: float = Field(default=0.30, ge=0.0, le=1.0, description="Weight for title similarity")
    description: float = Field(
        default=0.25, ge=0.0, le=1.0, description="Weight for description similarity"
    )
    category: float = Field(default=0.20, ge=0.0, le=1.0, description="Weight for category equality")
    location: float = Field(
        default=0.15, ge=0.0, le=1.0, description="Weight for location similarity"
    )
    date: float = Field(default=0.10, ge=0.0, le=1.0, description="Weight for date proximity")

    def total_weight(self) -> float:
        """Calculate total weight (must be 1.0).

        Returns:
            Sum of all field weights
        """
        return self.title + self.description + self.category + self.location + self.date


class DateProximityConfig(BaseModel):
    """Configuration for date proximity scoring."""

    neutral_score: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Score when a date is missing or unparseable"
    )
    window_days: int = Field(
        default=30, ge=1, le=365, description="Days apart at which the score reaches zero"
    )


class LocationConfig(BaseModel):
    """Configuration for location similarity scoring."""

    missing_score: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Floor score, also used when a location is missing"
    )
    landmark_score: float = Field(
        default=0.9, ge=0.0, le=1.0, description="Score when both mention the same landmark"
    )
    overlap_span: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Score range spread over the word overlap ratio"
    )
    significant_words: tuple[str, ...] = Field(
        default=SIGNIFICANT_PLACE_WORDS,
        description="Landmark tokens checked as substrings, in priority order",
    )


class ThresholdConfig(BaseModel):
    """Score thresholds for search and flagging."""

    high_potential: float = Field(
        default=0.70, ge=0.0, le=1.0, description="Score flagged as a high potential match"
    )
    search_default: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Default minimum score kept by search"
    )


class MatchingConfig(BaseModel):
    """Main configuration for the matching engine."""

    # Sub-configurations
    weights: FieldWeights = Field(default_factory=FieldWeights)
    date_proximity: DateProximityConfig = Field(default_factory=DateProximityConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)

    # General settings
    debug: bool = Field(default=False, description="Log every scored candidate")

    def validate_config(self) -> None:
        """Validate entire configuration.

        Weights must sum to 1.0 so the aggregate score stays within [0, 1].
        Raises ValueError if validation fails.
        """
        total_weight = self.weights.total_weight()
        if not math.isclose(total_weight, 1.0, abs_tol=1e-9):
            raise ValueError(f"Field weights must sum to 1.0, got {total_weight:.4f}")
