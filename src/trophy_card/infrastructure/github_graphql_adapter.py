"""GitHub GraphQL API adapter — implements the StatsFetcher port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from trophy_card.domain.entities import RawStats
from trophy_card.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_USER_AGENT = "github-profile-trophies-custom"

# The API caps a connection page at 100 nodes; stars beyond that are not counted.
_REPO_PAGE_SIZE = 100

STATS_QUERY = """
query($login: String!) {
  user(login: $login) {
    createdAt
    followers { totalCount }
    repositories(first: %d, ownerAffiliations: OWNER, isFork: false) {
      totalCount
      nodes {
        stargazerCount
      }
    }
    contributionsCollection {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
    }
  }
}
""" % _REPO_PAGE_SIZE


class GitHubGraphQLAdapter:
    """Concrete StatsFetcher backed by the GitHub v4 GraphQL API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        url: str = GITHUB_GRAPHQL_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._client = client
        self._url = url
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def fetch_stats(self, username: str) -> RawStats:
        """POST the stats query for *username* → RawStats."""
        user = await self._query_user(username)
        try:
            return _parse_user(user)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise UpstreamError(
                f"Malformed GraphQL payload for {username!r}: {exc!r}"
            ) from exc

    async def _query_user(self, username: str) -> dict[str, Any]:
        """Perform the GraphQL request with error translation."""
        payload = {"query": STATS_QUERY, "variables": {"login": username}}
        try:
            resp = await self._client.post(self._url, headers=self._headers, json=payload)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Network error querying {self._url}: {exc}") from exc

        if not resp.is_success:
            raise UpstreamError(
                f"GitHub GraphQL API returned HTTP {resp.status_code} for {username!r}"
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise UpstreamError(f"GitHub GraphQL API returned invalid JSON: {exc}") from exc

        if not isinstance(body, dict):
            raise UpstreamError("GitHub GraphQL API returned a non-object body.")

        errors = body.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise UpstreamError(f"GraphQL error for {username!r}: {message}")

        data = body.get("data")
        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise UpstreamError(f"GitHub user {username!r} not found.")
        return user


def _parse_user(user: dict[str, Any]) -> RawStats:
    repositories = user.get("repositories") or {}
    nodes = repositories.get("nodes") or []
    total_stars = sum(_count(node.get("stargazerCount")) for node in nodes if node)

    repository_count = _count(repositories.get("totalCount")) or len(nodes)
    if repository_count > _REPO_PAGE_SIZE:
        logger.warning(
            "Account owns %d repositories; stars only counted for the first %d",
            repository_count,
            _REPO_PAGE_SIZE,
        )

    contributions = user["contributionsCollection"]
    return RawStats(
        total_stars=total_stars,
        total_commits=_count(contributions["totalCommitContributions"]),
        total_followers=_count(user["followers"]["totalCount"]),
        total_pull_requests=_count(contributions.get("totalPullRequestContributions")),
        total_issues=_count(contributions.get("totalIssueContributions")),
        repository_count=repository_count,
        created_at=user.get("createdAt"),
    )


def _count(value: Any) -> int:
    """Coerce an API count to ``int``; null means zero, negatives are malformed."""
    count = int(value or 0)
    if count < 0:
        raise ValueError(f"negative count {count}")
    return count
