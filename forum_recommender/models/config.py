"""
Engine configuration: candidate pool, behavior profile, scoring, and fallback parameters.

RecommendationConfig defaults are defined here. Callers may pass a dict
(e.g. from a JSON file named by RECOMMENDER_CONFIG_PATH); from_dict() merges it
with these defaults.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class ScoreWeights(BaseModel):
    """
    Blend weights for the five weighted scoring factors.

    final_score = content * content_similarity + behavior * behavior_similarity
                + freshness * freshness_score + popularity * popularity_score
                + diversity * diversity_bonus (+ bonus - penalty)
    """

    content: float
    behavior: float
    freshness: float
    popularity: float
    diversity: float = 0.05

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        total = self.content + self.behavior + self.freshness + self.popularity + self.diversity
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")
        return self


class WeightTier(BaseModel):
    """Weights used while the completed-read count is below max_completed_reads (None = no bound)."""

    max_completed_reads: Optional[int] = None
    weights: ScoreWeights


def _default_weight_tiers() -> List[WeightTier]:
    return [
        # New reader: lean on popularity and freshness
        WeightTier(
            max_completed_reads=5,
            weights=ScoreWeights(content=0.30, behavior=0.15, freshness=0.25, popularity=0.25),
        ),
        WeightTier(
            max_completed_reads=20,
            weights=ScoreWeights(content=0.35, behavior=0.25, freshness=0.20, popularity=0.15),
        ),
        # Established reader: lean on content and behavior
        WeightTier(
            max_completed_reads=None,
            weights=ScoreWeights(content=0.45, behavior=0.35, freshness=0.10, popularity=0.05),
        ),
    ]


class RecommendationConfig(BaseModel):
    """Configuration for the recommendation engine."""

    # -------------------------------------------------------------------------
    # Candidate Pool Pre-Filter
    # -------------------------------------------------------------------------

    # Only threads published within this many days are eligible.
    freshness_window_days: int = 30

    # Below this many survivors the pool is rebuilt with loose disliked-tag matching.
    min_candidate_pool_size: int = 50

    # Hard cap on the pool; newest threads are kept.
    max_candidate_pool_size: int = 500

    # Substring matches against disliked tags only count when the contained
    # string has at least this many characters (strict matching).
    strict_tag_match_min_length: int = 3

    # -------------------------------------------------------------------------
    # Behavior Profile
    # -------------------------------------------------------------------------

    # Event weight = exp(-age_days / profile_decay_days).
    profile_decay_days: float = 30.0
    # Window for unweighted "recent preferences".
    recent_preference_days: float = 7.0

    top_categories: int = 5
    top_tags: int = 10
    top_active_hours: int = 6
    recent_top_categories: int = 3
    recent_top_tags: int = 5

    # Average scroll depth assumed when the reader has no weighted history.
    default_scroll_depth: float = 50.0

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    # Max candidates scored per content-branch call.
    max_scored_candidates: int = 200

    # Characters of (tag-stripped) thread content appended to history/corpus texts.
    history_content_chars: int = 200

    # Adaptive weights, ordered by max_completed_reads; last tier must be open-ended.
    weight_tiers: List[WeightTier] = Field(default_factory=_default_weight_tiers)

    # -------------------------------------------------------------------------
    # Ranking / Fallback
    # -------------------------------------------------------------------------

    score_threshold: float = 0.01
    relaxed_score_threshold: float = 0.0
    # Fewer survivors than this after score_threshold → use relaxed_score_threshold.
    min_results_before_relax: int = 5

    # Fewer results than backfill_trigger → append up to backfill_size newest threads.
    backfill_trigger: int = 3
    backfill_size: int = 5

    # Force refresh: this fraction of the top results keeps its order, the rest is shuffled.
    refresh_keep_fraction: float = 0.5

    # -------------------------------------------------------------------------
    # Branch Mixer
    # -------------------------------------------------------------------------

    content_branch_share: float = 0.7
    tag_branch_share: float = 0.3
    tag_branch_top_tags: int = 5

    # -------------------------------------------------------------------------
    # Similarity Cache
    # -------------------------------------------------------------------------

    similarity_cache_size: int = 1000
    # Only this many leading characters of each text form the cache key.
    cache_key_chars: int = 100

    @model_validator(mode="after")
    def weight_tiers_are_ordered(self):
        if not self.weight_tiers:
            raise ValueError("At least one weight tier is required")
        if self.weight_tiers[-1].max_completed_reads is not None:
            raise ValueError("The last weight tier must have max_completed_reads=None")
        bounds = [t.max_completed_reads for t in self.weight_tiers[:-1]]
        if any(b is None for b in bounds) or bounds != sorted(bounds):
            raise ValueError(f"Weight tier bounds must be increasing, got {bounds}")
        return self

    def weights_for(self, completed_reads: int) -> ScoreWeights:
        """Weights of the first tier whose bound exceeds completed_reads."""
        for tier in self.weight_tiers:
            if tier.max_completed_reads is None or completed_reads < tier.max_completed_reads:
                return tier.weights
        return self.weight_tiers[-1].weights

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON). Unknown keys are ignored."""
        flat = {}
        for section in ("candidate_pool", "profile", "ranking", "cache", "mixer"):
            if section in config_dict:
                flat.update(config_dict[section])
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        if "weight_tiers" in config_dict:
            flat["weight_tiers"] = config_dict["weight_tiers"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
