"""
Scoring Module for ZK role classification.

Contains the GitHub and on-chain sub-score calculators, the role classifiers
and the engine that ties them together.
"""

from .github_scorer import (
    GitHubBreakdown,
    calculate_github_breakdown,
)

from .onchain_scorer import (
    OnchainBreakdown,
    calculate_onchain_breakdown,
    is_deployer,
)

from .role_classifier import (
    Role,
    ActivityLevel,
    RoleDecision,
    ScoreLevelClassifier,
    ThresholdClassifier,
    activity_level,
)

from .scoring_engine import (
    ScoreBreakdown,
    ScoreResult,
    ScoringEngine,
    compute_role_score,
    calculate_zk_score,
)

__all__ = [
    # Sub-score calculators
    "GitHubBreakdown",
    "calculate_github_breakdown",
    "OnchainBreakdown",
    "calculate_onchain_breakdown",
    "is_deployer",
    # Role classification
    "Role",
    "ActivityLevel",
    "RoleDecision",
    "ScoreLevelClassifier",
    "ThresholdClassifier",
    "activity_level",
    # Scoring engine
    "ScoreBreakdown",
    "ScoreResult",
    "ScoringEngine",
    "compute_role_score",
    "calculate_zk_score",
]
