"""
GitHub sub-score calculation.

Turns a GitHubMetrics snapshot into four capped category scores using
progressive tiers, so power users get diminishing returns.
"""

import logging
from typing import Dict, Mapping, Optional
from dataclasses import dataclass, asdict

from ..config.scoring_config import SCORING_CONFIG
from ..metrics.models import GitHubMetrics
from ..metrics.normalization import tiered_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitHubBreakdown:
    """GitHub category scores."""
    activity: float = 0.0
    impact: float = 0.0
    community: float = 0.0
    collaboration: float = 0.0

    @property
    def total(self) -> float:
        return round(self.activity + self.impact + self.community + self.collaboration, 2)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def calculate_github_breakdown(
    github: GitHubMetrics,
    config: Optional[Mapping] = None
) -> GitHubBreakdown:
    """
    Calculate GitHub category scores.

    Args:
        github: GitHub metrics snapshot
        config: GitHub scoring config (defaults to SCORING_CONFIG["github"])

    Returns:
        GitHubBreakdown with each category rounded to 2 decimals
    """
    cfg = config or SCORING_CONFIG["github"]

    activity_cfg = cfg["activity"]
    activity = tiered_score(
        github.total_contributions,
        activity_cfg["tiers"],
        activity_cfg["log_weight"],
        cap=activity_cfg["cap"],
    )

    # PRs weigh more than issues
    impact_cfg = cfg["impact"]
    impact = min(
        impact_cfg["cap"],
        github.merged_pull_requests * impact_cfg["merged_pr"]
        + github.issues_created * impact_cfg["issue"],
    )

    community_cfg = cfg["community"]
    community = min(
        community_cfg["cap"],
        github.total_stars * community_cfg["star"]
        + github.followers * community_cfg["follower"],
    )

    collab_cfg = cfg["collaboration"]
    collaboration = (
        min(collab_cfg["owned_repo_cap"], github.repository_count * collab_cfg["owned_repo"])
        + min(collab_cfg["contributed_repo_cap"], github.contributed_repositories * collab_cfg["contributed_repo"])
    )

    breakdown = GitHubBreakdown(
        activity=round(activity, 2),
        impact=round(impact, 2),
        community=round(community, 2),
        collaboration=round(collaboration, 2),
    )
    logger.debug("[GITHUB] breakdown=%s total=%.2f", breakdown.to_dict(), breakdown.total)
    return breakdown
