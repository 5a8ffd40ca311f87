"""Matching engine module exports."""

from lostfound.matching.config import (
    MatchingConfig,
    FieldWeights,
    DateProximityConfig,
    LocationConfig,
    ThresholdConfig,
)

from lostfound.matching.models import (
    FieldScores,
    MatchDetails,
    MatchResult,
    PotentialMatch,
    SearchResult,
)

from lostfound.matching.similarity import (
    ItemSimilarity,
    string_similarity,
    date_proximity,
    location_similarity,
    category_similarity,
)

from lostfound.matching.scorer import (
    MatchScorer,
    calculate_match_score,
)

from lostfound.matching.engine import (
    MatchingEngine,
    find_potential_matches,
)

__all__ = [
    # Config
    "MatchingConfig",
    "FieldWeights",
    "DateProximityConfig",
    "LocationConfig",
    "ThresholdConfig",
    # Models
    "FieldScores",
    "MatchDetails",
    "MatchResult",
    "PotentialMatch",
    "SearchResult",
    # Field similarity
    "ItemSimilarity",
    "string_similarity",
    "date_proximity",
    "location_similarity",
    "category_similarity",
    # Scoring
    "MatchScorer",
    "calculate_match_score",
    # Engine
    "MatchingEngine",
    "find_potential_matches",
]
