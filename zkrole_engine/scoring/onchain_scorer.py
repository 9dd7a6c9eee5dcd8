"""
On-chain sub-score calculation.
Scores wallet wealth, transaction activity, technical footprint and governance.
"""

import logging
from typing import Dict, Mapping, Optional
from dataclasses import dataclass, asdict

from ..config.scoring_config import SCORING_CONFIG
from ..metrics.models import OnchainMetrics
from ..metrics.normalization import (
    normalize_native_balance,
    other_token_total,
    stablecoin_total,
    tiered_score,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OnchainBreakdown:
    """On-chain category scores."""
    wealth: float = 0.0
    activity: float = 0.0
    technical: float = 0.0
    governance: float = 0.0

    @property
    def total(self) -> float:
        return round(self.wealth + self.activity + self.technical + self.governance, 2)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def is_deployer(onchain: OnchainMetrics) -> bool:
    """A wallet counts as a deployer if flagged or if any deployment was seen."""
    return onchain.is_contract_deployer or onchain.contract_deployment_count > 0


def calculate_onchain_breakdown(
    onchain: OnchainMetrics,
    config: Optional[Mapping] = None
) -> OnchainBreakdown:
    """Calculate on-chain category scores."""
    cfg = config or SCORING_CONFIG["onchain"]

    balance = normalize_native_balance(onchain.native_balance, cfg)
    stablecoins = stablecoin_total(onchain.token_balances)
    other_tokens = other_token_total(onchain.token_balances)

    # 1. Wealth
    wealth_cfg = cfg["wealth"]
    native_points = tiered_score(balance, wealth_cfg["native_tiers"], wealth_cfg["native_log_weight"])
    stable_points = tiered_score(stablecoins, wealth_cfg["stablecoin_tiers"], wealth_cfg["stablecoin_log_weight"])
    token_points = other_tokens * wealth_cfg["other_token"]
    wealth = min(wealth_cfg["cap"], native_points + stable_points + token_points)

    # 2. Activity
    activity_cfg = cfg["activity"]
    activity = tiered_score(
        onchain.transaction_count,
        activity_cfg["tiers"],
        activity_cfg["log_weight"],
        cap=activity_cfg["cap"],
    )

    # 3. Technical
    tech_cfg = cfg["technical"]
    technical = 0.0
    if is_deployer(onchain):
        technical += tech_cfg["contract_deployer"]
        extra_deployments = max(0, onchain.contract_deployment_count - 1)
        technical += min(
            tech_cfg["additional_deployment_cap"],
            extra_deployments * tech_cfg["additional_deployment"],
        )
    if onchain.has_nfts:
        technical += tech_cfg["nfts"]

    # 4. Governance
    gov_cfg = cfg["governance"]
    governance = min(gov_cfg["cap"], onchain.dao_vote_count * gov_cfg["dao_vote"])

    logger.debug(
        "[ONCHAIN] balance=%.4f stablecoins=%.2f other_tokens=%.2f txs=%d",
        balance, stablecoins, other_tokens, onchain.transaction_count
    )

    return OnchainBreakdown(
        wealth=round(wealth, 2),
        activity=round(activity, 2),
        technical=round(technical, 2),
        governance=round(governance, 2),
    )
