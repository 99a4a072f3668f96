"""Aggregation module for per-place glove summaries.

- Collapses raw submissions into one GloveInfo per place
- Joins summaries onto restaurants from the place lookup
- Forbidden: storage writes, network calls
"""

from latexfree.aggregation.summary import (
    aggregate_glove_info,
    merge_glove_info,
    reported_restaurants,
)

__all__ = ["aggregate_glove_info", "merge_glove_info", "reported_restaurants"]
