"""
Matching API routes.

Callers post already-loaded item records and get ranked matches back.
Nothing is stored.
"""

from functools import lru_cache
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from lostfound.core.config import get_settings
from lostfound.items.models import FOUND, ITEM_CATEGORIES, LOST, Category, Item, MatchableStatus
from lostfound.matching.config import MatchingConfig
from lostfound.matching.engine import MatchingEngine
from lostfound.matching.models import MatchResult, SearchResult

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/matching", tags=["matching"])


class PotentialMatchesRequest(BaseModel):
    """Request body for a candidate search."""

    model_config = ConfigDict(populate_by_name=True)

    target: Item
    pool: List[Item] = Field(default_factory=list)
    target_type: Optional[MatchableStatus] = Field(default=None, alias="targetType")
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    limit: Optional[int] = Field(default=None, ge=1)


class ScoreRequest(BaseModel):
    """Request body for scoring a single lost/found pair."""

    lost: Item
    found: Item


@lru_cache(maxsize=1)
def get_engine() -> MatchingEngine:
    """Shared engine; it holds configuration only, so one per process is enough."""
    return MatchingEngine(MatchingConfig(debug=settings.DEBUG))


@router.post("/potential-matches", response_model=SearchResult)
def potential_matches(request: PotentialMatchesRequest):
    """
    Rank the pool items that may pair with the target.

    Defaults to the browse threshold and the configured result cap when the
    request does not set them.
    """
    threshold = (
        request.threshold
        if request.threshold is not None
        else settings.MATCH_BROWSE_THRESHOLD
    )
    limit = min(request.limit or settings.MATCH_MAX_RESULTS, settings.MATCH_MAX_RESULTS)

    try:
        return get_engine().search(
            request.target,
            request.pool,
            target_type=request.target_type,
            threshold=threshold,
            limit=limit,
        )
    except ValueError as e:
        logger.warning(f"Rejected match search for item {request.target.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.post("/score", response_model=MatchResult)
def score_pair(request: ScoreRequest):
    """Score one lost item against one found item."""
    if request.lost.status != LOST or request.found.status != FOUND:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Scoring requires one lost item and one found item",
        )

    return get_engine().scorer.score_pair(request.lost, request.found)


@router.get("/categories", response_model=List[Category])
def list_categories():
    """Return the default category registry."""
    return ITEM_CATEGORIES
