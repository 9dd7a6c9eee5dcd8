"""
ZK Role Scoring Engine.
Combines GitHub and on-chain sub-scores and classifies the user's role.
"""

import math
import logging
from typing import Dict, Mapping, Optional, Union
from dataclasses import dataclass, field

from ..config.scoring_config import SCORING_CONFIG, ROLE_CONFIG, freeze_config
from ..metrics.models import GitHubMetrics, OnchainMetrics
from ..metrics.normalization import validate_tiers
from .github_scorer import GitHubBreakdown, calculate_github_breakdown
from .onchain_scorer import OnchainBreakdown, calculate_onchain_breakdown
from .role_classifier import Role, ScoreLevelClassifier, ThresholdClassifier

logger = logging.getLogger(__name__)

GitHubInput = Union[GitHubMetrics, Mapping, None]
OnchainInput = Union[OnchainMetrics, Mapping, None]

CLASSIFIERS = {
    ScoreLevelClassifier.name: ScoreLevelClassifier,
    ThresholdClassifier.name: ThresholdClassifier,
}

TIER_TABLES = (
    ("github", "activity", "tiers"),
    ("onchain", "wealth", "native_tiers"),
    ("onchain", "wealth", "stablecoin_tiers"),
    ("onchain", "activity", "tiers"),
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Category scores for both sides."""
    github: GitHubBreakdown = field(default_factory=GitHubBreakdown)
    onchain: OnchainBreakdown = field(default_factory=OnchainBreakdown)

    def to_dict(self) -> Dict:
        return {
            "github": self.github.to_dict(),
            "onchain": self.onchain.to_dict(),
        }


@dataclass(frozen=True)
class ScoreResult:
    """Complete scoring result for one GitHub/wallet pair."""
    total_score: int = 0
    github_score: float = 0.0
    onchain_score: float = 0.0
    role: Role = Role.NEWCOMER
    role_confidence: int = 0
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    def to_dict(self) -> Dict:
        return {
            "total_score": self.total_score,
            "github_score": self.github_score,
            "onchain_score": self.onchain_score,
            "role": self.role.value,
            "role_confidence": self.role_confidence,
            "breakdown": self.breakdown.to_dict(),
        }


def _as_github(github: GitHubInput) -> GitHubMetrics:
    if isinstance(github, GitHubMetrics):
        return github
    return GitHubMetrics.from_dict(github)


def _as_onchain(onchain: OnchainInput) -> OnchainMetrics:
    if isinstance(onchain, OnchainMetrics):
        return onchain
    return OnchainMetrics.from_dict(onchain)


class ScoringEngine:
    """Role scoring engine."""

    def __init__(
        self,
        config: Optional[Mapping] = None,
        role_config: Optional[Mapping] = None,
        classifier: str = ScoreLevelClassifier.name
    ):
        """
        Initialize the scoring engine with configuration.

        Args:
            config: Scoring weights table shaped like SCORING_CONFIG
            role_config: Role thresholds table shaped like ROLE_CONFIG
            classifier: "score_levels" (default) or "thresholds"
        """
        if classifier not in CLASSIFIERS:
            raise ValueError(
                f"Unknown classifier '{classifier}' (expected one of {', '.join(sorted(CLASSIFIERS))})"
            )
        self.scoring_config = freeze_config(config) if config is not None else SCORING_CONFIG
        self.role_config = freeze_config(role_config) if role_config is not None else ROLE_CONFIG
        for side, category, key in TIER_TABLES:
            validate_tiers(self.scoring_config[side][category][key], f"{side}.{category}.{key}")

        if classifier == ThresholdClassifier.name:
            self.classifier = ThresholdClassifier(self.role_config, self.scoring_config["onchain"])
        else:
            self.classifier = ScoreLevelClassifier(self.role_config)

    def score_profile(self, github: GitHubInput, onchain: OnchainInput) -> ScoreResult:
        """
        Score a GitHub/on-chain metrics pair.

        Args:
            github: GitHubMetrics, a fetcher payload mapping, or None
            onchain: OnchainMetrics, a chain reader payload mapping, or None

        Returns:
            ScoreResult with sub-scores, breakdown, role and confidence
        """
        github = _as_github(github)
        onchain = _as_onchain(onchain)

        github_breakdown = calculate_github_breakdown(github, self.scoring_config["github"])
        onchain_breakdown = calculate_onchain_breakdown(onchain, self.scoring_config["onchain"])
        github_score = github_breakdown.total
        onchain_score = onchain_breakdown.total

        decision = self.classifier.classify(github_score, onchain_score, github, onchain)

        result = ScoreResult(
            total_score=int(math.floor(github_score + onchain_score + 0.5)),
            github_score=github_score,
            onchain_score=onchain_score,
            role=decision.role,
            role_confidence=decision.confidence,
            breakdown=ScoreBreakdown(github=github_breakdown, onchain=onchain_breakdown),
        )
        logger.debug(
            "Scored profile: total=%d role=%s confidence=%d",
            result.total_score, result.role.value, result.role_confidence
        )
        return result


_DEFAULT_ENGINE = ScoringEngine()


def compute_role_score(github: GitHubInput, onchain: OnchainInput) -> ScoreResult:
    """Score a metrics pair with the default configuration and classifier."""
    return _DEFAULT_ENGINE.score_profile(github, onchain)


def calculate_zk_score(github: GitHubInput, onchain: OnchainInput) -> int:
    """Legacy entry point returning only the total score."""
    return compute_role_score(github, onchain).total_score
