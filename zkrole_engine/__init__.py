"""
ZK Role Engine - Role scoring for linked GitHub accounts and wallets.

Computes a normalised score from off-chain (GitHub) and on-chain (wallet)
activity and classifies the user as Contributor, Founder, Investor or
Newcomer, ready to be packaged as inputs for a role-claim proof.

Main Components:
    - config: Scoring weights, tiers and role thresholds
    - metrics: Input records and value normalisation
    - scoring: Sub-score calculators, role classifiers and the scoring engine
    - proof: Integer input builders for the role-claim circuit
"""

from typing import Dict, Mapping, Optional, Union

# Input records
from .metrics.models import (
    GitHubMetrics,
    OnchainMetrics,
    Repository,
    TokenBalance,
)

from .metrics.normalization import normalize_native_balance

# Scoring components
from .scoring.scoring_engine import (
    ScoringEngine,
    ScoreResult,
    ScoreBreakdown,
    compute_role_score,
    calculate_zk_score,
)

from .scoring.role_classifier import (
    Role,
    ActivityLevel,
    ScoreLevelClassifier,
    ThresholdClassifier,
)

# Proof inputs
from .proof.proof_inputs import (
    UnclaimableRoleError,
    build_claim_inputs,
    build_metric_inputs,
    create_score_hash,
)

# Configuration
from .config.scoring_config import (
    SCORING_CONFIG,
    ROLE_CONFIG,
    STABLECOIN_SYMBOLS,
    ROLE_DESCRIPTIONS,
)


__version__ = "1.0.0"
__all__ = [
    # Input records
    "GitHubMetrics",
    "OnchainMetrics",
    "Repository",
    "TokenBalance",
    "normalize_native_balance",
    # Scoring
    "ScoringEngine",
    "ScoreResult",
    "ScoreBreakdown",
    "compute_role_score",
    "calculate_zk_score",
    "Role",
    "ActivityLevel",
    "ScoreLevelClassifier",
    "ThresholdClassifier",
    # Proof inputs
    "UnclaimableRoleError",
    "build_claim_inputs",
    "build_metric_inputs",
    "create_score_hash",
    # Configuration
    "SCORING_CONFIG",
    "ROLE_CONFIG",
    "STABLECOIN_SYMBOLS",
    "ROLE_DESCRIPTIONS",
    # Main function
    "run_role_scoring",
]


def run_role_scoring(
    github: Union[GitHubMetrics, Mapping, None],
    onchain: Union[OnchainMetrics, Mapping, None],
    engine: Optional[ScoringEngine] = None,
) -> Dict:
    """
    Main entry point for role scoring.

    This function orchestrates the complete pipeline:
    1. Normalise the raw GitHub and on-chain payloads
    2. Score both sides and classify the role
    3. Package proof inputs when the role is claimable

    Args:
        github: GitHub metrics payload with keys such as:
            - totalContributions
            - repositories: list of {"starCount": int}
            - mergedPullRequests, issuesCreated, followers, contributedRepositories
        onchain: On-chain metrics payload with keys such as:
            - nativeBalance: decimal string (wei or whole coins) or number
            - transactionCount, isContractDeployer, contractDeploymentCount
            - hasNFTs, daoVoteCount
            - tokenBalances: list of {"symbol": str, "balance": number}
        engine: Optional configured ScoringEngine (defaults to the standard one)

    Returns:
        Dictionary containing:
            - role, role_confidence, total_score, github_score, onchain_score
            - breakdown: per-category scores
            - role_description: display text for the role
            - claim_inputs: circuit inputs, or None for Newcomer
            - metric_inputs: integer raw-metric vector
            - score_hash: short hex digest of the headline figures

    Example:
        >>> result = run_role_scoring(
        ...     {"totalContributions": 2000, "mergedPullRequests": 40},
        ...     {"nativeBalance": "0"},
        ... )
        >>> print(result["role"])
        Contributor
    """
    github_metrics = github if isinstance(github, GitHubMetrics) else GitHubMetrics.from_dict(github)
    onchain_metrics = onchain if isinstance(onchain, OnchainMetrics) else OnchainMetrics.from_dict(onchain)

    if engine is None:
        result = compute_role_score(github_metrics, onchain_metrics)
    else:
        result = engine.score_profile(github_metrics, onchain_metrics)

    try:
        claim_inputs = build_claim_inputs(result)
    except UnclaimableRoleError:
        claim_inputs = None

    response = result.to_dict()
    response.update({
        "role_description": ROLE_DESCRIPTIONS[result.role.value]["description"],
        "claim_inputs": claim_inputs,
        "metric_inputs": build_metric_inputs(github_metrics, onchain_metrics),
        "score_hash": create_score_hash(result),
    })
    return response
