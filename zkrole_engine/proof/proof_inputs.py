"""
Proof input builders.

Packages scoring output as integer inputs for the role-claim circuit. The
circuit itself (compilation, witness, proving) lives outside this package.
"""

import math
from typing import Dict, Union

from ..config.scoring_config import ROLE_CIRCUIT_CODES, SCORING_CONFIG
from ..metrics.models import GitHubMetrics, OnchainMetrics
from ..metrics.normalization import normalize_native_balance, stablecoin_total
from ..scoring.onchain_scorer import is_deployer
from ..scoring.role_classifier import Role
from ..scoring.scoring_engine import ScoreResult


class UnclaimableRoleError(ValueError):
    """Raised when a role has no encoding in the proof circuit."""
    pass


def _round_half_up(value: float) -> int:
    # Values scaled past float range encode as 0, matching the balance normalisation
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def role_circuit_code(role: Union[Role, str]) -> int:
    """Map a role to the circuit's integer encoding (0=Contributor, 1=Founder, 2=Investor)."""
    name = role.value if isinstance(role, Role) else str(role)
    if name not in ROLE_CIRCUIT_CODES:
        raise UnclaimableRoleError(f"Role '{name}' cannot be claimed in a proof")
    return ROLE_CIRCUIT_CODES[name]


def build_claim_inputs(result: ScoreResult) -> Dict[str, int]:
    """
    Build the public inputs of a role claim.

    Args:
        result: Output of compute_role_score

    Returns:
        {"githubScore", "onchainScore", "claimedRole"} as integers

    Raises:
        UnclaimableRoleError: If the result's role is Newcomer
    """
    return {
        "githubScore": _round_half_up(result.github_score),
        "onchainScore": _round_half_up(result.onchain_score),
        "claimedRole": role_circuit_code(result.role),
    }


def build_metric_inputs(github: GitHubMetrics, onchain: OnchainMetrics) -> Dict[str, int]:
    """
    Flatten raw metrics to integer circuit inputs.

    The native balance is expressed in milli-units and stablecoins in cents
    so fractional holdings survive the integer conversion.
    """
    balance = normalize_native_balance(onchain.native_balance, SCORING_CONFIG["onchain"])
    return {
        "contributions": github.total_contributions,
        "repos": github.repository_count,
        "stars": github.total_stars,
        "prs": github.merged_pull_requests,
        "issues": github.issues_created,
        "followers": github.followers,
        "contributedRepos": github.contributed_repositories,
        "ethBalance": _round_half_up(balance * 1000),
        "txCount": onchain.transaction_count,
        "isContractDeployer": 1 if is_deployer(onchain) else 0,
        "hasNFTs": 1 if onchain.has_nfts else 0,
        "stablecoinBalance": _round_half_up(stablecoin_total(onchain.token_balances) * 100),
    }


def create_score_hash(result: ScoreResult) -> str:
    """
    Hash the headline figures of a result into a short hex digest.

    Uses the 32-bit rolling hash h = h * 31 + code_unit with signed wraparound,
    rendered as the hex of its absolute value.
    """
    data = f"{result.total_score}-{_round_half_up(result.github_score)}-{_round_half_up(result.onchain_score)}-{result.role.value}"
    value = 0
    for char in data:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return format(abs(value), "x")
