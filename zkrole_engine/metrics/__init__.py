"""
Metrics Module for ZK role scoring.

Contains the immutable input records and the value normalisation helpers.
"""

from .models import (
    Repository,
    TokenBalance,
    GitHubMetrics,
    OnchainMetrics,
)

from .normalization import (
    coerce_amount,
    coerce_count,
    coerce_flag,
    normalize_native_balance,
    stablecoin_total,
    other_token_total,
    tiered_score,
    validate_tiers,
)

__all__ = [
    # Input records
    "Repository",
    "TokenBalance",
    "GitHubMetrics",
    "OnchainMetrics",
    # Normalisation
    "coerce_amount",
    "coerce_count",
    "coerce_flag",
    "normalize_native_balance",
    "stablecoin_total",
    "other_token_total",
    "tiered_score",
    "validate_tiers",
]
