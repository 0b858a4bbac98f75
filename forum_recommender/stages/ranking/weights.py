"""
Adaptive weight selection by history size.

The tier table lives on RecommendationConfig.weight_tiers; the reader's
completed-read count picks the first tier whose bound it is below.
"""

from typing import List

from ...models.config import DEFAULT_CONFIG, RecommendationConfig, ScoreWeights
from ...models.events import ReadEvent


def count_completed_reads(read_events: List[ReadEvent]) -> int:
    return sum(1 for event in read_events if event.is_completed)


def select_weights(
    read_events: List[ReadEvent],
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> ScoreWeights:
    """Weights for this reader: <5 completed reads, <20, or established."""
    return config.weights_for(count_completed_reads(read_events))
