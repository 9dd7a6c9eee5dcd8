"""
Proof Module: integer input builders for the role-claim circuit.
"""

from .proof_inputs import (
    UnclaimableRoleError,
    role_circuit_code,
    build_claim_inputs,
    build_metric_inputs,
    create_score_hash,
)

__all__ = [
    "UnclaimableRoleError",
    "role_circuit_code",
    "build_claim_inputs",
    "build_metric_inputs",
    "create_score_hash",
]
