"""
Test packaging of scoring output as role-claim circuit inputs.
"""

import unittest

from zkrole_engine.metrics.models import GitHubMetrics, OnchainMetrics, Repository, TokenBalance
from zkrole_engine.proof.proof_inputs import (
    UnclaimableRoleError,
    build_claim_inputs,
    build_metric_inputs,
    create_score_hash,
    role_circuit_code,
)
from zkrole_engine.scoring.role_classifier import Role
from zkrole_engine.scoring.scoring_engine import ScoreResult, compute_role_score


class TestRoleCircuitCode(unittest.TestCase):
    """Test the fixed integer role encoding."""

    def test_codes(self):
        self.assertEqual(role_circuit_code(Role.CONTRIBUTOR), 0)
        self.assertEqual(role_circuit_code(Role.FOUNDER), 1)
        self.assertEqual(role_circuit_code(Role.INVESTOR), 2)
        self.assertEqual(role_circuit_code("Investor"), 2)

    def test_newcomer_cannot_be_claimed(self):
        with self.assertRaises(UnclaimableRoleError):
            role_circuit_code(Role.NEWCOMER)

    def test_error_is_value_error(self):
        self.assertTrue(issubclass(UnclaimableRoleError, ValueError))


class TestClaimInputs(unittest.TestCase):
    """Test public inputs built from a ScoreResult."""

    def test_contributor_claim(self):
        result = ScoreResult(total_score=171, github_score=171.0, onchain_score=0.0,
                             role=Role.CONTRIBUTOR, role_confidence=95)
        self.assertEqual(
            build_claim_inputs(result),
            {"githubScore": 171, "onchainScore": 0, "claimedRole": 0},
        )

    def test_scores_round_half_up(self):
        result = ScoreResult(total_score=161, github_score=0.0, onchain_score=160.5,
                             role=Role.INVESTOR, role_confidence=93)
        self.assertEqual(build_claim_inputs(result)["onchainScore"], 161)
        self.assertEqual(build_claim_inputs(result)["claimedRole"], 2)

    def test_founder_from_engine(self):
        result = compute_role_score(
            {"totalContributions": 500, "mergedPullRequests": 25},
            {"transactionCount": 150, "nativeBalance": "3", "isContractDeployer": True},
        )
        self.assertEqual(
            build_claim_inputs(result),
            {"githubScore": 100, "onchainScore": 66, "claimedRole": 1},
        )

    def test_newcomer_raises(self):
        with self.assertRaises(UnclaimableRoleError):
            build_claim_inputs(compute_role_score({}, {}))


class TestMetricInputs(unittest.TestCase):
    """Test the integer raw-metric vector."""

    def test_metric_vector(self):
        github = GitHubMetrics(
            total_contributions=321,
            repositories=(Repository(4), Repository(6)),
            merged_pull_requests=3,
            issues_created=2,
            followers=9,
            contributed_repositories=1,
        )
        onchain = OnchainMetrics(
            native_balance="2000000000000000000",
            transaction_count=44,
            contract_deployment_count=1,
            has_nfts=True,
            token_balances=(TokenBalance("usdt", 12.5), TokenBalance("LINK", 99.0)),
        )
        self.assertEqual(build_metric_inputs(github, onchain), {
            "contributions": 321,
            "repos": 2,
            "stars": 10,
            "prs": 3,
            "issues": 2,
            "followers": 9,
            "contributedRepos": 1,
            "ethBalance": 2000,
            "txCount": 44,
            "isContractDeployer": 1,
            "hasNFTs": 1,
            "stablecoinBalance": 1250,
        })

    def test_values_beyond_float_range_encode_as_zero(self):
        """Scaling to milli-units or cents past float range yields 0, not an error."""
        onchain = OnchainMetrics(
            native_balance="1e324",
            token_balances=(TokenBalance("USDC", 1e307), TokenBalance("DAI", 1e307)),
        )
        inputs = build_metric_inputs(GitHubMetrics(), onchain)
        self.assertEqual(inputs["ethBalance"], 0)
        self.assertEqual(inputs["stablecoinBalance"], 0)

    def test_oversized_wei_balance(self):
        inputs = build_metric_inputs(GitHubMetrics(), OnchainMetrics(native_balance="1e400"))
        self.assertEqual(inputs["ethBalance"], 0)

    def test_empty_metrics(self):
        inputs = build_metric_inputs(GitHubMetrics(), OnchainMetrics())
        self.assertTrue(all(value == 0 for value in inputs.values()))
        self.assertTrue(all(isinstance(value, int) for value in inputs.values()))


class TestScoreHash(unittest.TestCase):
    """Test the 32-bit rolling hash of headline figures."""

    def test_known_values(self):
        self.assertEqual(create_score_hash(ScoreResult()), "181609a5")
        result = ScoreResult(total_score=171, github_score=171.0, onchain_score=0.0,
                             role=Role.CONTRIBUTOR, role_confidence=95)
        self.assertEqual(create_score_hash(result), "149f3b66")

    def test_deterministic(self):
        result = compute_role_score({"totalContributions": 900}, {"transactionCount": 20})
        self.assertEqual(create_score_hash(result), create_score_hash(result))

    def test_role_changes_hash(self):
        contributor = ScoreResult(total_score=50, github_score=50.0, role=Role.CONTRIBUTOR)
        investor = ScoreResult(total_score=50, github_score=50.0, role=Role.INVESTOR)
        self.assertNotEqual(create_score_hash(contributor), create_score_hash(investor))


if __name__ == "__main__":
    unittest.main()
