"""GitHub API service for managing the owner's repositories and issues.

Thin async client over the GitHub REST API. Every call goes through one
request helper that injects the bearer credential and the JSON media type,
and turns any error response into a ``GitHubAPIError`` carrying the HTTP
status so that callers can classify the failure.
"""

import logging
from typing import Any, Callable

import aiohttp

from ..models import Issue, Repository, SearchResult

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
USER_AGENT = "GitHubRepoBot/1.0"


class GitHubAPIError(Exception):
    """Error response from the GitHub API.

    Attributes:
        status: HTTP status code of the response.
        message: Error message reported by GitHub, if any.
    """

    def __init__(self, status: int, message: str = ""):
        super().__init__(f"GitHub API error {status}: {message}")
        self.status = status
        self.message = message


class GitHubService:
    """Async GitHub API client scoped to one owner account."""

    def __init__(
        self,
        token: str,
        owner: str,
        base_url: str = "https://api.github.com",
        timeout: float = 20.0,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession,
    ):
        """Initialize GitHub service.

        Args:
            token: Personal access token.
            owner: Account that owns the managed repositories.
            base_url: REST API base URL.
            timeout: Total timeout for one request in seconds.
            session_factory: Callable creating the HTTP session for a request.
        """
        self.token = token
        self.owner = owner
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session_factory = session_factory

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send an authenticated request to the GitHub API.

        Args:
            method: HTTP method.
            path: API path starting with ``/``.
            params: Query string parameters.
            payload: JSON request body.

        Returns:
            Decoded JSON body, or None for empty responses (e.g. 204).

        Raises:
            GitHubAPIError: If GitHub answers with a status >= 400.
            aiohttp.ClientError: On connection-level failures.
        """
        url = f"{self.base_url}{path}"
        logger.info(f"GitHub {method} {path}")

        async with self._session_factory(timeout=self.timeout) as session:
            async with session.request(
                method, url, params=params, json=payload, headers=self.headers
            ) as response:
                if response.status >= 400:
                    message = await self._error_message(response)
                    logger.warning(f"GitHub {method} {path} failed: {response.status} - {message}")
                    raise GitHubAPIError(response.status, message)

                if response.status == 204:
                    return None
                return await response.json()

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        try:
            data = await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            return await response.text()
        if isinstance(data, dict):
            return str(data.get("message", ""))
        return ""

    # === REPOSITORIES ===

    async def create_repo(self, name: str, description: str = "", private: bool = False) -> Repository:
        """Create a repository for the authenticated user.

        The repository is initialized with a README so it can be cloned at once.
        """
        data = await self.request(
            "POST",
            "/user/repos",
            payload={
                "name": name,
                "description": description,
                "private": private,
                "auto_init": True,
            },
        )
        return Repository.model_validate(data)

    async def delete_repo(self, name: str) -> None:
        await self.request("DELETE", f"/repos/{self.owner}/{name}")

    async def list_repos(self, page: int = 1, per_page: int = 10) -> list[Repository]:
        """List the authenticated user's repositories, most recently updated first.

        Args:
            page: 1-based page number.
            per_page: Page size.

        Returns:
            Repositories on the requested page; empty past the last page.
        """
        data = await self.request(
            "GET",
            "/user/repos",
            params={"sort": "updated", "per_page": per_page, "page": page},
        )
        return [Repository.model_validate(item) for item in data]

    async def get_repo(self, name: str) -> Repository:
        data = await self.request("GET", f"/repos/{self.owner}/{name}")
        return Repository.model_validate(data)

    async def get_languages(self, name: str) -> dict[str, int]:
        """Get language breakdown of a repository in bytes of code."""
        data = await self.request("GET", f"/repos/{self.owner}/{name}/languages")
        return {language: int(size) for language, size in (data or {}).items()}

    async def update_repo(self, name: str, **fields: Any) -> Repository:
        """Patch repository settings such as ``private`` or ``description``."""
        data = await self.request("PATCH", f"/repos/{self.owner}/{name}", payload=fields)
        return Repository.model_validate(data)

    async def search_repos(self, query: str, limit: int = 5) -> SearchResult:
        """Search repositories owned by the configured account.

        Args:
            query: Free-form search terms.
            limit: Maximum number of results to return.
        """
        data = await self.request(
            "GET",
            "/search/repositories",
            params={"q": f"{query} user:{self.owner}", "per_page": limit},
        )
        return SearchResult.model_validate(data)

    # === ISSUES ===

    async def create_issue(self, repo: str, title: str, body: str = "") -> Issue:
        data = await self.request(
            "POST",
            f"/repos/{self.owner}/{repo}/issues",
            payload={"title": title, "body": body},
        )
        return Issue.from_api(data)

    async def list_open_issues(self, repo: str, limit: int = 10) -> list[Issue]:
        """List open issues of a repository, excluding pull requests."""
        data = await self.request(
            "GET",
            f"/repos/{self.owner}/{repo}/issues",
            params={"state": "open", "per_page": limit},
        )
        issues = [Issue.from_api(item) for item in data]
        return [issue for issue in issues if not issue.is_pull_request]
