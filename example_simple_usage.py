"""
Simple examples demonstrating the ZK role engine.
"""

# Example 1: Score a GitHub-only profile
print("=" * 60)
print("Example 1: GitHub-only Profile")
print("=" * 60)

from zkrole_engine import compute_role_score

github = {
    "totalContributions": 2000,
    "repositories": [{"starCount": 50}, {"starCount": 30}],
    "mergedPullRequests": 40,
    "issuesCreated": 15,
    "followers": 200,
    "contributedRepositories": 10,
}

result = compute_role_score(github, {})
print(f"\nRole: {result.role.value} ({result.role_confidence}% confidence)")
print(f"Total score: {result.total_score} (github {result.github_score}, onchain {result.onchain_score})")
for category, value in result.breakdown.github.to_dict().items():
    print(f"  {category:15} {value:8.2f}")

# Example 2: Wei-denominated balance and stablecoins
print("\n" + "=" * 60)
print("Example 2: Onchain-only Wallet")
print("=" * 60)

onchain = {
    "nativeBalance": "15000000000000000000",  # 15 ETH in wei
    "transactionCount": 600,
    "hasNFTs": True,
    "tokenBalances": [{"symbol": "usdc", "balance": 30000}],
}

result = compute_role_score({}, onchain)
print(f"\nRole: {result.role.value} ({result.role_confidence}% confidence)")
for category, value in result.breakdown.onchain.to_dict().items():
    print(f"  {category:15} {value:8.2f}")

# Example 3: Full pipeline with proof inputs
print("\n" + "=" * 60)
print("Example 3: Full Pipeline")
print("=" * 60)

from zkrole_engine import run_role_scoring, ScoringEngine

balanced_github = {"totalContributions": 500, "mergedPullRequests": 25}
balanced_onchain = {"transactionCount": 150, "nativeBalance": "3", "isContractDeployer": True}

for name, engine in (("score levels", None), ("thresholds", ScoringEngine(classifier="thresholds"))):
    response = run_role_scoring(balanced_github, balanced_onchain, engine=engine)
    print(f"\n[{name}] {response['role']} ({response['role_confidence']}%)")
    print(f"  {response['role_description']}")
    print(f"  Claim inputs: {response['claim_inputs']}")
    print(f"  Score hash:   {response['score_hash']}")
