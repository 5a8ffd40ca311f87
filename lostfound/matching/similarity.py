"""Field similarity functions used to compare a lost item with a found item."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone
from typing import Any

from rapidfuzz.distance import Levenshtein

from lostfound.matching.config import DateProximityConfig, LocationConfig, MatchingConfig

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Non-ISO layouts seen in item reports, month-first as browsers read them.
DATE_FORMATS = [
    "%m/%d/%Y",  # 01/10/2024
    "%m/%d/%Y %H:%M",  # 01/10/2024 14:30
    "%Y/%m/%d",  # 2024/01/10
    "%B %d, %Y",  # January 10, 2024
    "%b %d, %Y",  # Jan 10, 2024
    "%d %B %Y",  # 10 January 2024
    "%d %b %Y",  # 10 Jan 2024
]


def _to_utc(value: datetime) -> datetime | None:
    """Convert to UTC, or None when the shifted instant leaves the datetime range."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        return None


def parse_item_date(value: Any) -> datetime | None:
    """
    Parse an item date into an aware UTC datetime.

    Naive values are taken as UTC. Calendar dates map to midnight.

    Args:
        value: date, datetime or string

    Returns:
        Parsed datetime, or None if the value cannot be understood
    """
    if isinstance(value, datetime):
        return _to_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None

    if parsed is not None:
        return _to_utc(parsed)

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    return None


class ItemSimilarity:
    """Per-field comparators, each returning a score in [0, 1]."""

    def __init__(self, config: MatchingConfig | None = None):
        """
        Initialize the comparators.

        Args:
            config: Matching configuration
        """
        self.config = config or MatchingConfig()
        self.date_config: DateProximityConfig = self.config.date_proximity
        self.location_config: LocationConfig = self.config.location

    def string_similarity(self, str1: str | None, str2: str | None) -> float:
        """
        Normalized Levenshtein similarity, case-insensitive.

        Used for titles and descriptions. A missing value on either side
        scores 0.

        Args:
            str1: First string
            str2: Second string

        Returns:
            1 - distance / longer length
        """
        if not str1 or not str2:
            return 0.0

        s1 = str1.lower()
        s2 = str2.lower()

        max_length = max(len(s1), len(s2))
        if max_length == 0:
            return 1.0

        distance = Levenshtein.distance(s1, s2)
        return 1.0 - distance / max_length

    def date_proximity(self, date1: Any, date2: Any) -> float:
        """
        Score how close two dates are.

        Whole days apart decay linearly to zero at the configured window.
        Missing or unparseable dates get the neutral score, never an error.

        Args:
            date1: First date (date, datetime or string)
            date2: Second date (date, datetime or string)

        Returns:
            Proximity score (0-1)
        """
        neutral = self.date_config.neutral_score

        if not date1 or not date2:
            return neutral

        d1 = parse_item_date(date1)
        d2 = parse_item_date(date2)
        if d1 is None or d2 is None:
            logger.warning(
                f"[SIMILARITY] Unparseable item date ({date1!r}, {date2!r}), "
                f"using neutral score {neutral}"
            )
            return neutral

        seconds = abs((d2 - d1).total_seconds())
        days = math.ceil(seconds / SECONDS_PER_DAY)

        return max(0.0, 1.0 - days / self.date_config.window_days)

    def location_similarity(self, loc1: str | None, loc2: str | None) -> float:
        """
        Score two free-text locations.

        A landmark word (library, gym...) found in both strings wins outright.
        Otherwise the share of overlapping words lifts the score above the floor.

        Args:
            loc1: First location
            loc2: Second location

        Returns:
            Similarity score (0-1)
        """
        floor = self.location_config.missing_score

        if not loc1 or not loc2:
            return floor

        location1 = loc1.lower()
        location2 = loc2.lower()

        for word in self.location_config.significant_words:
            if word in location1 and word in location2:
                return self.location_config.landmark_score

        words1 = location1.split()
        words2 = location2.split()

        # Counted with repeats from the first location.
        common_words = sum(1 for word in words1 if word in words2)
        total_unique_words = len(set(words1) | set(words2))

        if total_unique_words == 0:
            return floor

        score = floor + self.location_config.overlap_span * common_words / total_unique_words
        return min(1.0, score)

    def category_similarity(self, cat1: str | None, cat2: str | None) -> float:
        """
        Binary category comparison.

        Args:
            cat1: First category id
            cat2: Second category id

        Returns:
            1.0 if both are present and equal, otherwise 0.0
        """
        if not cat1 or not cat2:
            return 0.0
        return 1.0 if cat1 == cat2 else 0.0


# Convenience functions
_default = ItemSimilarity()


def string_similarity(str1: str | None, str2: str | None) -> float:
    """Normalized Levenshtein similarity with default configuration."""
    return _default.string_similarity(str1, str2)


def date_proximity(date1: Any, date2: Any) -> float:
    """Date proximity with default configuration."""
    return _default.date_proximity(date1, date2)


def location_similarity(loc1: str | None, loc2: str | None) -> float:
    """Location similarity with default configuration."""
    return _default.location_similarity(loc1, loc2)


def category_similarity(cat1: str | None, cat2: str | None) -> float:
    """Category equality score."""
    return _default.category_similarity(cat1, cat2)
