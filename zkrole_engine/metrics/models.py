"""
Input records for role scoring.

Both records are immutable snapshots built from whatever the GitHub and chain
fetchers returned. Missing or malformed fields default to zero values.
"""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field

from .normalization import coerce_amount, coerce_count, coerce_flag


def _pick(data: Mapping, *keys: str, default=None):
    """Return the first key present in data (snake_case, camelCase or legacy alias)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_sequence(value) -> Iterable:
    if isinstance(value, (list, tuple)):
        return value
    return ()


@dataclass(frozen=True)
class Repository:
    """An owned repository; only the star count matters for scoring."""
    star_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Repository":
        if not isinstance(data, Mapping):
            return cls()
        return cls(star_count=coerce_count(_pick(data, "star_count", "starCount", "stargazerCount", "stars")))


@dataclass(frozen=True)
class TokenBalance:
    """ERC-20 style token holding, already in human units."""
    symbol: str = ""
    balance: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "TokenBalance":
        if not isinstance(data, Mapping):
            return cls()
        symbol = _pick(data, "symbol", default="")
        return cls(
            symbol=str(symbol).strip(),
            balance=coerce_amount(_pick(data, "balance")),
        )


@dataclass(frozen=True)
class GitHubMetrics:
    """Off-chain activity snapshot for a linked GitHub account."""
    total_contributions: int = 0
    repositories: Tuple[Repository, ...] = field(default_factory=tuple)
    merged_pull_requests: int = 0
    issues_created: int = 0
    followers: int = 0
    contributed_repositories: int = 0

    @property
    def repository_count(self) -> int:
        return len(self.repositories)

    @property
    def total_stars(self) -> int:
        return sum(repo.star_count for repo in self.repositories)

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "GitHubMetrics":
        """
        Build metrics from a fetcher payload.

        Accepts the canonical camelCase names, snake_case names and the legacy
        aliases (topRepos, mergedPRs, contributedRepos). Anything unusable
        becomes zero.
        """
        if not isinstance(data, Mapping):
            return cls()

        repos = _pick(data, "repositories", "topRepos", "top_repos", default=())
        return cls(
            total_contributions=coerce_count(
                _pick(data, "total_contributions", "totalContributions")
            ),
            repositories=tuple(
                Repository.from_dict(repo) for repo in _as_sequence(repos) if isinstance(repo, Mapping)
            ),
            merged_pull_requests=coerce_count(
                _pick(data, "merged_pull_requests", "mergedPullRequests", "mergedPRs")
            ),
            issues_created=coerce_count(_pick(data, "issues_created", "issuesCreated")),
            followers=coerce_count(_pick(data, "followers")),
            contributed_repositories=coerce_count(
                _pick(data, "contributed_repositories", "contributedRepositories", "contributedRepos")
            ),
        )


@dataclass(frozen=True)
class OnchainMetrics:
    """On-chain activity snapshot for a connected wallet."""
    native_balance: Union[str, float] = "0"
    transaction_count: int = 0
    is_contract_deployer: bool = False
    contract_deployment_count: int = 0
    has_nfts: bool = False
    dao_vote_count: int = 0
    token_balances: Tuple[TokenBalance, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "OnchainMetrics":
        """
        Build metrics from a chain reader payload.

        The native balance is kept raw; unit normalisation happens at scoring
        time through normalize_native_balance.
        """
        if not isinstance(data, Mapping):
            return cls()

        balance = _pick(data, "native_balance", "nativeBalance", "balance", default="0")
        if not isinstance(balance, (str, int, float)) or isinstance(balance, bool):
            balance = "0"

        tokens = _pick(data, "token_balances", "tokenBalances", default=())
        return cls(
            native_balance=balance,
            transaction_count=coerce_count(
                _pick(data, "transaction_count", "transactionCount", "txCount")
            ),
            is_contract_deployer=coerce_flag(
                _pick(data, "is_contract_deployer", "isContractDeployer", default=False)
            ),
            contract_deployment_count=coerce_count(
                _pick(data, "contract_deployment_count", "contractDeploymentCount")
            ),
            has_nfts=coerce_flag(_pick(data, "has_nfts", "hasNFTs", default=False)),
            dao_vote_count=coerce_count(_pick(data, "dao_vote_count", "daoVoteCount")),
            token_balances=tuple(TokenBalance.from_dict(token) for token in _as_sequence(tokens)),
        )
