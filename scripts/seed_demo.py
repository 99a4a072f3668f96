#!/usr/bin/env python3
"""Seed demo glove reports for the sample restaurants.

Usage:
    python scripts/seed_demo.py [--json]

This script:
1. Opens the configured store (SQL by default, JSON file with --json)
2. Adds a handful of reports for sample-1 and sample-2
3. Prints the resulting per-place summary
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from latexfree.aggregation import aggregate_glove_info  # noqa: E402
from latexfree.api.app import build_store  # noqa: E402
from latexfree.config import load_config  # noqa: E402
from latexfree.places.sample import SAMPLE_RESTAURANTS  # noqa: E402
from latexfree.store import SubmissionInput  # noqa: E402

# (place index, glove type, notes)
DEMO_REPORTS = [
    (0, "latex", "Powdered latex box by the prep station"),
    (0, "nitrile", "Switched to blue nitrile"),
    (1, "vinyl", ""),
    (1, "none", "Staff handle slices by paper"),
]


def seed(use_json: bool = False) -> int:
    """Add demo reports and return how many were written."""
    config = load_config()
    if use_json:
        config = replace(config, store_backend="json")
    store = build_store(config)

    for index, glove_type, notes in DEMO_REPORTS:
        restaurant = SAMPLE_RESTAURANTS[index]
        created = store.create(
            SubmissionInput(
                place_id=restaurant.place_id,
                restaurant_name=restaurant.name,
                address=restaurant.formatted_address,
                glove_type=glove_type,
                notes=notes,
                submitted_by="demo",
            )
        )
        print(f"Created: {created.id} {created.place_id} {created.glove_type.value}")

    print("\nSummary:")
    for place_id, info in aggregate_glove_info(store.list_all()).items():
        counts = ", ".join(f"{t.value}={n}" for t, n in info.glove_type_counts.items())
        print(f"  {place_id}: latest={info.latest_glove_type.value} ({counts})")

    return len(DEMO_REPORTS)


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("Latex Free Eats Demo Seeding Script")
    print("=" * 60)

    seed(use_json="--json" in sys.argv[1:])

    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
