"""Pipeline stages: candidate pool, behavior profile, ranking, tag branch, mixer, orchestration."""

from .behavior_profile import build_behavior_profile
from .candidate_pool import ALL_FORUMS, get_candidate_pool, sort_by_publish_time
from .mixer import branch_limits, merge_branches
from .orchestrator import run_content_branch, run_tag_branch
from .ranking import rank_candidates
from .tag_branch import recommend_by_tags, top_read_tags

__all__ = [
    "ALL_FORUMS",
    "branch_limits",
    "build_behavior_profile",
    "get_candidate_pool",
    "merge_branches",
    "rank_candidates",
    "recommend_by_tags",
    "run_content_branch",
    "run_tag_branch",
    "sort_by_publish_time",
    "top_read_tags",
]
