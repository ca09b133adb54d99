from typing import Any

import httpx
import structlog

from src.core.config.github_config import GitHubConfig
from src.core.errors import GitHubRateLimitError, GitHubResourceNotFoundError
from src.core.models import IssueComment, TeamMetadata

logger = structlog.get_logger()

PER_PAGE = 100


class GitHubClient:
    """
    A client for the GitHub REST endpoints the localization bot needs.

    The client is bound to one organization and repository. Errors are never
    swallowed: a 404 becomes GitHubResourceNotFoundError, an exhausted rate
    limit becomes GitHubRateLimitError, and any other failed status re-raises
    httpx.HTTPStatusError after logging. Nothing is retried.
    """

    def __init__(self, github_config: GitHubConfig, client: httpx.AsyncClient | None = None):
        self._config = github_config
        self._client = client

    @property
    def org(self) -> str:
        return self._config.org

    @property
    def repo_full_name(self) -> str:
        return self._config.repo_full_name

    def _headers(self, accept: str = "application/vnd.github+json") -> dict[str, str]:
        headers = {"Accept": accept, "X-GitHub-Api-Version": "2022-11-28"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self._config.api_base_url, timeout=30.0)
        return self._client

    async def close(self) -> None:
        """Closes the underlying HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        accept: str = "application/vnd.github+json",
        **kwargs: Any,
    ) -> httpx.Response:
        client = await self._get_client()
        response = await client.request(method, url, headers=self._headers(accept), **kwargs)

        if response.status_code == 404:
            raise GitHubResourceNotFoundError(f"{method} {url} returned 404")
        if response.status_code in (403, 429) and "rate limit" in response.text.lower():
            raise GitHubRateLimitError("GitHub API rate limit exceeded")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "github_request_failed",
                method=method,
                url=url,
                status_code=e.response.status_code,
                response_body=e.response.text,
            )
            raise
        return response

    async def _paginate(self, url: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Collect every page of a list endpoint by following the Link header."""
        items: list[dict[str, Any]] = []
        next_url: str | None = url
        page_params: dict[str, Any] | None = {"per_page": PER_PAGE, **(params or {})}

        while next_url:
            response = await self._request("GET", next_url, params=page_params)
            items.extend(response.json())
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            page_params = None

        return items

    async def list_pull_request_files(self, pr_number: int) -> list[str]:
        """Return the paths of files changed in a pull request."""
        files = await self._paginate(f"/repos/{self.repo_full_name}/pulls/{pr_number}/files")
        logger.info("pr_files_fetched", pr_number=pr_number, count=len(files))
        return [f["filename"] for f in files]

    async def get_file_content(self, path: str) -> str:
        """Fetch the raw content of a file on the default branch."""
        response = await self._request(
            "GET",
            f"/repos/{self.repo_full_name}/contents/{path.lstrip('/')}",
            accept="application/vnd.github.raw+json",
        )
        return response.text

    async def get_team(self, team_slug: str) -> TeamMetadata:
        """Fetch an organization team, including the slug of its parent team if any."""
        response = await self._request("GET", f"/orgs/{self.org}/teams/{team_slug}")
        data = response.json()
        parent = data.get("parent") or {}
        return TeamMetadata(slug=data.get("slug", team_slug), parent_slug=parent.get("slug"))

    async def list_team_members(self, team_slug: str) -> list[str]:
        members = await self._paginate(f"/orgs/{self.org}/teams/{team_slug}/members")
        return [member["login"] for member in members]

    async def list_issue_comments(self, issue_number: int) -> list[IssueComment]:
        """List the conversation comments of an issue or pull request."""
        comments = await self._paginate(f"/repos/{self.repo_full_name}/issues/{issue_number}/comments")
        return [
            IssueComment(author=(comment.get("user") or {}).get("login"), body=comment.get("body") or "")
            for comment in comments
        ]

    async def request_reviewers(self, pr_number: int, reviewers: list[str]) -> dict[str, Any]:
        """Request review from individual users on a pull request."""
        response = await self._request(
            "POST",
            f"/repos/{self.repo_full_name}/pulls/{pr_number}/requested_reviewers",
            json={"reviewers": reviewers},
        )
        logger.info("reviewers_requested", pr_number=pr_number, reviewers=reviewers)
        return response.json()

    async def create_issue_comment(self, issue_number: int, body: str) -> dict[str, Any]:
        """Create a comment on an issue or pull request."""
        response = await self._request(
            "POST",
            f"/repos/{self.repo_full_name}/issues/{issue_number}/comments",
            json={"body": body},
        )
        logger.info("comment_created", issue_number=issue_number)
        return response.json()
