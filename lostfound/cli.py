"""
Matching CLI.

Loads a JSON array of item records, finds the target by id and prints its
ranked potential matches.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import ValidationError

from lostfound.core.config import get_settings
from lostfound.core.logging import configure_logging
from lostfound.items.models import Item, category_label
from lostfound.matching.engine import MatchingEngine
from lostfound.matching.models import SearchResult

logger = structlog.get_logger()


def load_items(path: Path) -> List[Item]:
    """Read item records from a JSON file holding a list of objects."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of items")
    return [Item.model_validate(record) for record in data]


def print_result(result: SearchResult, target: Item):
    """Pretty print a search result."""
    opposite = "found" if result.target_type == "lost" else "lost"
    print(f"\n=== Potential matches for {result.target_type} item {target.id} ===\n")
    print(f"Title: {target.title or '-'}")
    print(f"Threshold: {result.threshold:.2f}")
    print(f"Scored {result.total_candidates} {opposite} items, {len(result.matches)} matched")

    for i, match in enumerate(result.matches, 1):
        flag = " [HIGH]" if match.is_high_potential_match else ""
        details = match.details
        print(f"\n{i}. {match.item.title or '(untitled)'} ({match.item.id}) - {match.match_percentage}%{flag}")
        print(f"   Category: {category_label(match.item.category) or '-'}")
        print(f"   Location: {match.item.location or '-'}")
        print(
            f"   Title {details.title_match}% | Description {details.description_match}% | "
            f"Category {details.category_match}% | Location {details.location_match}% | "
            f"Date {details.date_match}%"
        )
    print()


def usage():
    print("Usage: lostfound-match <items.json> <target-id> [options]")
    print("\nOptions:")
    print("  --threshold X   Minimum match score (0-1)")
    print("  --limit N       Maximum number of matches")
    print("  --json          Print the result as JSON")
    print("\nExamples:")
    print("  lostfound-match items.json abc123")
    print("  lostfound-match items.json abc123 --threshold 0.6 --limit 5 --json")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    as_json = "--json" in args
    if as_json:
        args.remove("--json")

    threshold: Optional[float] = None
    limit: Optional[int] = None
    try:
        if "--threshold" in args:
            i = args.index("--threshold")
            threshold = float(args[i + 1])
            del args[i : i + 2]
        if "--limit" in args:
            i = args.index("--limit")
            limit = int(args[i + 1])
            del args[i : i + 2]
    except (IndexError, ValueError):
        usage()
        return 1

    if len(args) != 2:
        usage()
        return 1

    path, target_id = Path(args[0]), args[1]

    settings = get_settings()
    configure_logging(settings.ENV, debug=False)
    # Keep stdout readable for the printed result.
    logging.getLogger("lostfound").setLevel(logging.WARNING)

    try:
        items = load_items(path)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Could not load items from {path}: {e}")
        return 1

    target = next((item for item in items if item.id == target_id), None)
    if target is None:
        print(f"Item {target_id} not found in {path}")
        return 1

    if threshold is None:
        threshold = settings.MATCH_BROWSE_THRESHOLD
    if limit is None:
        limit = settings.MATCH_MAX_RESULTS

    engine = MatchingEngine()
    try:
        result = engine.search(target, items, threshold=threshold, limit=limit)
    except ValueError as e:
        logger.error("match.search_failed", target_id=target_id, error=str(e))
        print(f"Error: {e}")
        return 1

    if as_json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print_result(result, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
