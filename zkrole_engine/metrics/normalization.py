"""
Value normalisation helpers for raw GitHub and on-chain metrics.

Upstream fetchers are inconsistent about types and units, so every helper
here degrades to zero instead of raising.
"""

import math
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Iterable, Optional, Sequence, Tuple

from ..config.scoring_config import SCORING_CONFIG, STABLECOIN_SYMBOLS


def coerce_amount(value) -> float:
    """Convert a number or numeric string to a finite non-negative float."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, str):
            number = float(Decimal(value.strip()))
        else:
            number = float(value)
    except (InvalidOperation, ValueError, TypeError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_count(value) -> int:
    """Convert a count to a non-negative int, truncating fractional values."""
    return int(coerce_amount(value))


def coerce_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def normalize_native_balance(raw, config=None) -> float:
    """
    Normalise a native-coin balance to human units.

    Values above the base-unit threshold (1,000,000 by default) are assumed to
    be expressed in base units (wei) and are divided by 10^18. Anything else is
    taken as already human-scaled.

    Args:
        raw: Decimal string or number as delivered by the chain reader
        config: Optional on-chain scoring config (defaults to SCORING_CONFIG)

    Returns:
        Balance in whole coins; 0.0 for malformed or negative input and for
        values too large to represent as a float
    """
    onchain_config = config or SCORING_CONFIG["onchain"]
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        amount = Decimal(raw.strip()) if isinstance(raw, str) else Decimal(str(raw))
    except (InvalidOperation, ValueError, TypeError):
        return 0.0
    if not amount.is_finite() or amount < 0:
        return 0.0
    if amount > onchain_config["base_unit_threshold"]:
        with localcontext() as ctx:
            ctx.traps[Overflow] = False
            amount = amount.scaleb(-onchain_config["base_unit_decimals"])
    balance = float(amount)
    if not math.isfinite(balance):
        return 0.0
    return balance


def stablecoin_total(token_balances: Iterable) -> float:
    """Sum balances of recognised stablecoins (symbol match is case-insensitive)."""
    return sum(
        token.balance for token in token_balances
        if token.symbol.upper() in STABLECOIN_SYMBOLS
    )


def other_token_total(token_balances: Iterable) -> float:
    """Sum balances of every token that is not a recognised stablecoin."""
    return sum(
        token.balance for token in token_balances
        if token.symbol.upper() not in STABLECOIN_SYMBOLS
    )


def validate_tiers(tiers: Sequence[Tuple[float, float]], name: str = "tiers") -> None:
    """Raise ValueError unless tiers is non-empty with positive, strictly increasing bounds."""
    if not tiers:
        raise ValueError(f"{name} must contain at least one (upper_bound, rate) pair")
    lower = 0
    for upper, _rate in tiers:
        if upper <= lower:
            raise ValueError(f"{name} bounds must be positive and strictly increasing")
        lower = upper


def tiered_score(
    value: float,
    tiers: Sequence[Tuple[float, float]],
    log_weight: float,
    cap: Optional[float] = None
) -> float:
    """
    Score a value with progressive linear tiers and a logarithmic tail.

    Each tier is (upper_bound, points_per_unit) and only applies to the part of
    the value that falls inside it. Above the last bound the score keeps
    growing by log_weight * log10(value / last_bound).
    """
    if value <= 0:
        return 0.0
    validate_tiers(tiers)

    score = 0.0
    lower = 0.0
    for upper, rate in tiers:
        if value <= upper:
            score += (value - lower) * rate
            break
        score += (upper - lower) * rate
        lower = upper
    else:
        score += log_weight * math.log10(value / lower)

    if cap is not None:
        score = min(score, cap)
    return score
