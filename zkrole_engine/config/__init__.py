"""
Configuration module for the ZK role scoring engine.

This module contains all configuration tables for scoring and role classification.
"""

from .scoring_config import (
    SCORING_CONFIG,
    ROLE_CONFIG,
    STABLECOIN_SYMBOLS,
    ROLE_CIRCUIT_CODES,
    ROLE_DESCRIPTIONS,
    freeze_config,
)

__all__ = [
    "SCORING_CONFIG",
    "ROLE_CONFIG",
    "STABLECOIN_SYMBOLS",
    "ROLE_CIRCUIT_CODES",
    "ROLE_DESCRIPTIONS",
    "freeze_config",
]
