"""
Role classification from GitHub and on-chain sub-scores.

Two independent strategies are provided and never mixed:

    ScoreLevelClassifier  - discretises each sub-score into activity levels and
                            walks a fixed decision order (always total, with
                            Newcomer as the catch-all).
    ThresholdClassifier   - applies absolute thresholds to the raw metrics and
                            only ever returns a claimable role.
"""

import math
import logging
from enum import Enum, IntEnum
from typing import Mapping, Optional, Tuple
from dataclasses import dataclass

from ..config.scoring_config import ROLE_CONFIG, SCORING_CONFIG
from ..metrics.models import GitHubMetrics, OnchainMetrics
from ..metrics.normalization import normalize_native_balance, stablecoin_total
from .onchain_scorer import is_deployer

logger = logging.getLogger(__name__)


class Role(Enum):
    """Identity roles a user can be classified into."""
    CONTRIBUTOR = "Contributor"
    FOUNDER = "Founder"
    INVESTOR = "Investor"
    NEWCOMER = "Newcomer"


class ActivityLevel(IntEnum):
    """Ordered activity levels for a single sub-score."""
    NONE = 0
    MINIMAL = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4


@dataclass(frozen=True)
class RoleDecision:
    """Classified role with its confidence percentage."""
    role: Role
    confidence: int


def round_confidence(value: float, bounds: Tuple[int, int]) -> int:
    """Round half-up to an integer and clamp to bounds."""
    low, high = bounds
    if not math.isfinite(value):
        value = low
    return int(max(low, min(high, math.floor(value + 0.5))))


def activity_level(score: float, thresholds: Mapping) -> ActivityLevel:
    if score >= thresholds["high"]:
        return ActivityLevel.HIGH
    if score >= thresholds["medium"]:
        return ActivityLevel.MEDIUM
    if score >= thresholds["low"]:
        return ActivityLevel.LOW
    if score >= thresholds["minimal"]:
        return ActivityLevel.MINIMAL
    return ActivityLevel.NONE


def _sanitize(score) -> float:
    try:
        score = float(score)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(score) or score < 0:
        return 0.0
    return score


class ScoreLevelClassifier:
    """Classify by how the two sub-scores are distributed across activity levels."""

    name = "score_levels"

    def __init__(self, config: Optional[Mapping] = None):
        self.config = config or ROLE_CONFIG
        self.gh_thresholds = self.config["levels"]["github"]
        self.oc_thresholds = self.config["levels"]["onchain"]
        self.rules = self.config["score_levels"]

    def classify(
        self,
        github_score: float,
        onchain_score: float,
        github: Optional[GitHubMetrics] = None,
        onchain: Optional[OnchainMetrics] = None
    ) -> RoleDecision:
        """
        Decide role and confidence from the two sub-scores.

        Raw metrics are accepted for interface parity with ThresholdClassifier
        and ignored here.
        """
        gh = _sanitize(github_score)
        oc = _sanitize(onchain_score)
        gh_level = activity_level(gh, self.gh_thresholds)
        oc_level = activity_level(oc, self.oc_thresholds)

        role, confidence = self._decide(gh, oc, gh_level, oc_level)
        logger.debug(
            "[ROLE] github=%.2f (%s) onchain=%.2f (%s) -> %s %.1f",
            gh, gh_level.name, oc, oc_level.name, role.value, confidence
        )
        return RoleDecision(role=role, confidence=round_confidence(confidence, self.rules["confidence_bounds"]))

    def _decide(
        self,
        gh: float,
        oc: float,
        gh_level: ActivityLevel,
        oc_level: ActivityLevel
    ) -> Tuple[Role, float]:
        rules = self.rules

        # Clear GitHub activity with essentially zero on-chain activity
        if oc <= self.oc_thresholds["minimal"] and gh >= self.gh_thresholds["minimal"]:
            return Role.CONTRIBUTOR, self._level_confidence(gh_level, rules["contributor_confidence"])

        # Clear on-chain activity with essentially zero GitHub activity
        if gh <= self.gh_thresholds["minimal"] and oc >= self.oc_thresholds["minimal"]:
            return Role.INVESTOR, self._level_confidence(oc_level, rules["investor_confidence"])

        # Both significant: confidence grows with how balanced they are
        if gh_level >= ActivityLevel.MEDIUM and oc_level >= ActivityLevel.MEDIUM:
            balance_ratio = min(gh, oc) / max(gh, oc)
            return Role.FOUNDER, min(95, 70 + balance_ratio * 25)

        if gh_level >= ActivityLevel.LOW and oc_level >= ActivityLevel.LOW:
            github_share = gh / (gh + oc)
            dominance = rules["dominance_share"]
            if github_share > dominance:
                return Role.CONTRIBUTOR, min(85, 60 + gh / 8)
            if github_share < 1 - dominance:
                return Role.INVESTOR, min(85, 60 + oc / 6)
            # Balanced but not strong enough for Founder
            role = Role.CONTRIBUTOR if gh > oc else Role.INVESTOR
            return role, min(75, 50 + abs(gh - oc) / 10)

        # One side clearly ahead while the other is at most minimal
        if gh_level > oc_level and oc_level <= ActivityLevel.MINIMAL:
            return Role.CONTRIBUTOR, min(80, 50 + gh / 10)
        if oc_level > gh_level and gh_level <= ActivityLevel.MINIMAL:
            return Role.INVESTOR, min(80, 50 + oc / 8)

        # Weak signal on both sides reliably means a newcomer
        return Role.NEWCOMER, max(rules["newcomer_floor"], 95 - (gh + oc) / rules["newcomer_divisor"])

    @staticmethod
    def _level_confidence(level: ActivityLevel, table: Mapping) -> float:
        if level >= ActivityLevel.HIGH:
            return table["high"]
        if level == ActivityLevel.MEDIUM:
            return table["medium"]
        if level == ActivityLevel.LOW:
            return table["low"]
        return table["minimal"]


class ThresholdClassifier:
    """Classify with absolute thresholds on raw metrics; never returns Newcomer."""

    name = "thresholds"

    def __init__(
        self,
        config: Optional[Mapping] = None,
        onchain_config: Optional[Mapping] = None
    ):
        self.config = config or ROLE_CONFIG
        self.onchain_config = onchain_config or SCORING_CONFIG["onchain"]
        self.rules = self.config["thresholds"]

    def classify(
        self,
        github_score: float,
        onchain_score: float,
        github: Optional[GitHubMetrics] = None,
        onchain: Optional[OnchainMetrics] = None
    ) -> RoleDecision:
        gh = _sanitize(github_score)
        oc = _sanitize(onchain_score)
        github = github or GitHubMetrics()
        onchain = onchain or OnchainMetrics()

        founder = self.rules["founder"]
        investor = self.rules["investor"]
        contributor = self.rules["contributor"]

        balance = normalize_native_balance(onchain.native_balance, self.onchain_config)
        stablecoins = stablecoin_total(onchain.token_balances)
        contributions = github.total_contributions
        merged_prs = github.merged_pull_requests
        tx_count = onchain.transaction_count

        is_founder_github = (
            contributions >= founder["min_contributions"]
            and github.repository_count >= founder["min_repositories"]
            and github.total_stars >= founder["min_stars"]
        )
        is_founder_onchain = (
            balance >= founder["min_balance"]
            and tx_count >= founder["min_transactions"]
            and is_deployer(onchain)
        )
        is_investor_wealth = balance >= investor["min_balance"] or stablecoins >= investor["min_stablecoins"]
        is_investor_active = tx_count >= investor["min_transactions"]
        has_limited_github = (
            contributions < contributor["min_contributions"]
            or merged_prs < contributor["min_merged_prs"]
        )
        is_contributor_github = (
            contributions >= contributor["min_contributions"]
            and (merged_prs >= contributor["min_merged_prs"] or github.issues_created >= contributor["min_issues"])
        )

        if is_founder_github and is_founder_onchain:
            ratio = min(gh, oc) / max(gh, oc) if max(gh, oc) > 0 else 0.0
            role, confidence = Role.FOUNDER, 85 + 10 * ratio
        elif is_investor_wealth and is_investor_active and has_limited_github:
            role = Role.INVESTOR
            confidence = 80 + min(15, (tx_count - investor["min_transactions"]) / 100)
        elif is_contributor_github:
            role = Role.CONTRIBUTOR
            confidence = 75 + min(
                20, (contributions - contributor["min_contributions"]) / 100 + merged_prs / 10
            )
        else:
            role, confidence = self._fallback(gh, oc)

        logger.debug("[ROLE] thresholds github=%.2f onchain=%.2f -> %s %.1f", gh, oc, role.value, confidence)
        return RoleDecision(role=role, confidence=round_confidence(confidence, self.rules["confidence_bounds"]))

    def _fallback(self, gh: float, oc: float) -> Tuple[Role, float]:
        """Pick the dominant side, defaulting to Contributor when neither is clear."""
        total = gh + oc
        if total <= 0:
            return Role.CONTRIBUTOR, self.rules["fallback_bounds"][0]

        github_share = gh / total
        dominance = self.rules["fallback_dominance"]
        if github_share > dominance:
            role = Role.CONTRIBUTOR
        elif github_share < 1 - dominance:
            role = Role.INVESTOR
        else:
            role = Role.CONTRIBUTOR

        low, high = self.rules["fallback_bounds"]
        confidence = low + (high - low) * 2 * abs(github_share - 0.5)
        return role, max(low, min(high, confidence))
