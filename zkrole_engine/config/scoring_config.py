"""
Scoring configuration for ZK role scoring.
Contains category weights, progressive tiers, caps and role thresholds.

All tables are frozen on import so the scoring functions can close over them
without any risk of one caller changing another caller's weights.
"""

from types import MappingProxyType
from typing import Any


def freeze_config(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, (dict, MappingProxyType)):
        return MappingProxyType({key: freeze_config(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_config(item) for item in value)
    return value


# Tiers are (upper_bound, points_per_unit) segments applied progressively,
# followed by a log10 tail above the last bound.
SCORING_CONFIG = freeze_config({
    "github": {
        "activity": {
            "tiers": [(500, 0.1), (3000, 0.01)],
            "log_weight": 10,
            "cap": 80,
        },
        "impact": {
            "merged_pr": 3,
            "issue": 1.5,
            "cap": 50,
        },
        "community": {
            "star": 0.5,
            "follower": 0.1,
            "cap": 35,
        },
        "collaboration": {
            "owned_repo": 3,
            "owned_repo_cap": 15,
            "contributed_repo": 1.5,
            "contributed_repo_cap": 15,
        },
    },
    "onchain": {
        # Raw balances above this are assumed to be in base units (wei)
        "base_unit_threshold": 1_000_000,
        "base_unit_decimals": 18,
        "wealth": {
            "native_tiers": [(1, 1.0), (10, 1.5), (100, 2.0)],
            "native_log_weight": 25,
            "stablecoin_tiers": [(1_000, 0.01), (10_000, 0.004), (50_000, 0.002)],
            "stablecoin_log_weight": 20,
            "other_token": 0.001,
            "cap": 200,
        },
        "activity": {
            "tiers": [(100, 0.2), (1000, 0.04)],
            "log_weight": 10,
            "cap": 80,
        },
        "technical": {
            "contract_deployer": 40,
            "additional_deployment": 10,
            "additional_deployment_cap": 30,
            "nfts": 10,
        },
        "governance": {
            "dao_vote": 2,
            "cap": 30,
        },
    },
})

# Level thresholds are expressed on the capped sub-score scale
# (GitHub max 195, on-chain max 340).
ROLE_CONFIG = freeze_config({
    "levels": {
        "github": {"minimal": 10, "low": 30, "medium": 75, "high": 140},
        "onchain": {"minimal": 5, "low": 25, "medium": 60, "high": 150},
    },
    "score_levels": {
        "contributor_confidence": {"high": 95, "medium": 90, "low": 82, "minimal": 75},
        "investor_confidence": {"high": 93, "medium": 88, "low": 80, "minimal": 72},
        "dominance_share": 0.75,
        "newcomer_floor": 85,
        "newcomer_divisor": 4,
        "confidence_bounds": (0, 100),
    },
    "thresholds": {
        "founder": {
            "min_contributions": 800,
            "min_repositories": 5,
            "min_stars": 100,
            "min_balance": 1,
            "min_transactions": 200,
        },
        "investor": {
            "min_balance": 10,
            "min_stablecoins": 25_000,
            "min_transactions": 500,
        },
        "contributor": {
            "min_contributions": 1000,
            "min_merged_prs": 20,
            "min_issues": 10,
        },
        "fallback_dominance": 0.6,
        "fallback_bounds": (50, 70),
        "confidence_bounds": (50, 95),
    },
})

STABLECOIN_SYMBOLS = frozenset({"USDC", "DAI", "USDT", "USDP", "FRAX"})

# Integer role encoding fixed by the proof circuit's input schema
ROLE_CIRCUIT_CODES = freeze_config({
    "Contributor": 0,
    "Founder": 1,
    "Investor": 2,
})

ROLE_DESCRIPTIONS = freeze_config({
    "Founder": {
        "description": "High activity in both development and onchain. Likely building and using DeFi protocols.",
        "characteristics": ["Active developer", "Significant capital", "Technical expertise", "Market participant"],
    },
    "Contributor": {
        "description": "Strong GitHub presence with minimal onchain activity. Focused on building.",
        "characteristics": ["Open source contributor", "Technical skills", "Limited trading", "Developer-focused"],
    },
    "Investor": {
        "description": "High onchain activity with limited development. Focused on DeFi and trading.",
        "characteristics": ["Active trader", "DeFi user", "Capital deployment", "Market-focused"],
    },
    "Newcomer": {
        "description": "Limited activity in both areas. New to the ecosystem or exploring.",
        "characteristics": ["Learning phase", "Minimal activity", "Potential growth", "Ecosystem explorer"],
    },
})
