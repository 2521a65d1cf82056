"""Tests for the GitHub API client request helper and endpoints."""

from __future__ import annotations

from typing import Any

import pytest

from app.services.github import GitHubAPIError, GitHubService


class _DummyResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int, body: Any = None, text: str = "") -> None:
        self.status = status
        self._body = body
        self._text = text

    async def json(self) -> Any:
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> "_DummyResponse":
        return self

    async def __aexit__(self, *exc: object) -> bool:
        return False


class _DummySession:
    """Lightweight stand-in for aiohttp.ClientSession recording requests."""

    def __init__(self, response: _DummyResponse) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []
        self.session_kwargs: dict[str, Any] = {}

    def __call__(self, **kwargs: Any) -> "_DummySession":
        self.session_kwargs = kwargs
        return self

    def request(self, method: str, url: str, **kwargs: Any) -> _DummyResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.response

    async def __aenter__(self) -> "_DummySession":
        return self

    async def __aexit__(self, *exc: object) -> bool:
        return False


def _repo_json(name: str = "demo", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": 1,
        "name": name,
        "full_name": f"octo/{name}",
        "html_url": f"https://github.com/octo/{name}",
        "description": None,
        "private": False,
        "stargazers_count": 0,
        "forks_count": 0,
        "open_issues_count": 0,
        "default_branch": "main",
        "created_at": "2024-01-05T10:00:00Z",
        "updated_at": "2025-03-09T12:30:00Z",
        "owner": {"login": "octo"},
    }
    data.update(overrides)
    return data


def _service(session: _DummySession) -> GitHubService:
    return GitHubService(
        token="ghp_secret",
        owner="octo",
        base_url="https://api.github.com/",
        timeout=5,
        session_factory=session,
    )


@pytest.mark.asyncio
async def test_request_sends_bearer_token_and_json_accept_header() -> None:
    session = _DummySession(_DummyResponse(200, [_repo_json()]))

    await _service(session).list_repos(page=2)

    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://api.github.com/user/repos"
    assert call["headers"]["Authorization"] == "Bearer ghp_secret"
    assert call["headers"]["Accept"] == "application/vnd.github+json"
    assert call["params"] == {"sort": "updated", "per_page": 10, "page": 2}
    assert session.session_kwargs["timeout"].total == 5


@pytest.mark.asyncio
async def test_create_repo_payload() -> None:
    session = _DummySession(_DummyResponse(201, _repo_json("secret", private=True)))

    repo = await _service(session).create_repo("secret", "My notes", private=True)

    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == {
        "name": "secret",
        "description": "My notes",
        "private": True,
        "auto_init": True,
    }
    assert repo.private is True
    assert repo.visibility == "private"


@pytest.mark.asyncio
async def test_error_status_raises_with_github_message() -> None:
    session = _DummySession(_DummyResponse(404, {"message": "Not Found"}))

    with pytest.raises(GitHubAPIError) as exc_info:
        await _service(session).get_repo("missing")

    assert exc_info.value.status == 404
    assert exc_info.value.message == "Not Found"
    assert session.calls[0]["url"] == "https://api.github.com/repos/octo/missing"


@pytest.mark.asyncio
async def test_error_without_json_body_uses_text() -> None:
    session = _DummySession(_DummyResponse(502, None, text="Bad gateway"))

    with pytest.raises(GitHubAPIError) as exc_info:
        await _service(session).delete_repo("demo")

    assert exc_info.value.status == 502
    assert exc_info.value.message == "Bad gateway"


@pytest.mark.asyncio
async def test_delete_returns_none_on_no_content() -> None:
    session = _DummySession(_DummyResponse(204))

    assert await _service(session).delete_repo("demo") is None
    assert session.calls[0]["method"] == "DELETE"


@pytest.mark.asyncio
async def test_update_repo_patches_given_fields() -> None:
    session = _DummySession(_DummyResponse(200, _repo_json(private=True)))

    repo = await _service(session).update_repo("demo", private=True)

    assert session.calls[0]["method"] == "PATCH"
    assert session.calls[0]["json"] == {"private": True}
    assert repo.private is True


@pytest.mark.asyncio
async def test_search_is_scoped_to_owner() -> None:
    session = _DummySession(_DummyResponse(200, {"total_count": 1, "items": [_repo_json("bot")]}))

    result = await _service(session).search_repos("telegram bot", limit=5)

    assert session.calls[0]["params"] == {"q": "telegram bot user:octo", "per_page": 5}
    assert [repo.name for repo in result.items] == ["bot"]


@pytest.mark.asyncio
async def test_languages_are_returned_as_byte_counts() -> None:
    session = _DummySession(_DummyResponse(200, {"Python": 1200, "Shell": 30}))

    languages = await _service(session).get_languages("demo")

    assert languages == {"Python": 1200, "Shell": 30}
    assert session.calls[0]["url"] == "https://api.github.com/repos/octo/demo/languages"


@pytest.mark.asyncio
async def test_list_open_issues_skips_pull_requests() -> None:
    issues = [
        {"number": 1, "title": "Bug", "html_url": "https://github.com/octo/demo/issues/1", "user": {"login": "a"}},
        {
            "number": 2,
            "title": "Feature PR",
            "html_url": "https://github.com/octo/demo/pull/2",
            "pull_request": {"url": "https://api.github.com/repos/octo/demo/pulls/2"},
        },
    ]
    session = _DummySession(_DummyResponse(200, issues))

    result = await _service(session).list_open_issues("demo")

    assert [issue.number for issue in result] == [1]
    assert session.calls[0]["params"] == {"state": "open", "per_page": 10}


@pytest.mark.asyncio
async def test_create_issue_payload() -> None:
    created = {"number": 12, "title": "Title", "html_url": "https://github.com/octo/demo/issues/12"}
    session = _DummySession(_DummyResponse(201, created))

    issue = await _service(session).create_issue("demo", "Title", "")

    assert session.calls[0]["url"] == "https://api.github.com/repos/octo/demo/issues"
    assert session.calls[0]["json"] == {"title": "Title", "body": ""}
    assert issue.number == 12
