"""Global test configuration and fixtures.

Provides shared fixtures for all test levels: environment setup, mocked
GitHub and Telegram collaborators, handler and dispatcher instances wired to
those mocks, and factories for GitHub payloads and Telegram updates.
"""

from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest

from app.bot.commands import CommandRegistry
from app.bot.dispatcher import UpdateDispatcher
from app.bot.handlers import CommandHandlers
from app.bot.notifier import TelegramNotifier
from app.models import Issue, Repository
from app.services.github import GitHubService

# Test constants
TEST_TELEGRAM_TOKEN = "123456:test-telegram-token"
TEST_GITHUB_TOKEN = "ghp_test_token"
TEST_GITHUB_USERNAME = "octo"
TEST_CHAT_ID = 4242
OTHER_CHAT_ID = 9999


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Setup test environment variables for all tests."""
    monkeypatch.setenv("TELEGRAM_TOKEN", TEST_TELEGRAM_TOKEN)
    monkeypatch.setenv("GITHUB_TOKEN", TEST_GITHUB_TOKEN)
    monkeypatch.setenv("GITHUB_USERNAME", TEST_GITHUB_USERNAME)
    for key in (
        "ALLOWED_CHAT_IDS",
        "WEBHOOK_URL",
        "WEBHOOK_PATH",
        "TELEGRAM_WEBHOOK_SECRET",
        "BOT_LISTEN_HOST",
        "PRIVATE_REPO_PREFIX",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_github() -> AsyncMock:
    """Mock GitHubService; every API method is an AsyncMock."""
    return AsyncMock(spec=GitHubService)


@pytest.fixture
def mock_notifier() -> AsyncMock:
    """Mock TelegramNotifier recording outgoing messages."""
    return AsyncMock(spec=TelegramNotifier)


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def handlers(mock_github: AsyncMock, mock_notifier: AsyncMock, registry: CommandRegistry) -> CommandHandlers:
    """Command handlers registered into ``registry`` and wired to the mocks."""
    return CommandHandlers(
        github=mock_github,
        notifier=mock_notifier,
        registry=registry,
        private_prefix="!",
    )


@pytest.fixture
def make_dispatcher(handlers: CommandHandlers, mock_notifier: AsyncMock):
    """Factory for a dispatcher over the real command set with a given allow-list."""

    def _make(allowed_chat_ids: frozenset[int] = frozenset()) -> UpdateDispatcher:
        return UpdateDispatcher(
            registry=handlers.registry,
            notifier=mock_notifier,
            allowed_chat_ids=allowed_chat_ids,
        )

    return _make


@pytest.fixture
def make_repo():
    """Factory for Repository models with realistic defaults."""

    def _make(name: str = "demo", **overrides: Any) -> Repository:
        data: dict[str, Any] = {
            "name": name,
            "full_name": f"{TEST_GITHUB_USERNAME}/{name}",
            "html_url": f"https://github.com/{TEST_GITHUB_USERNAME}/{name}",
            "description": "Demo project",
            "private": False,
            "stargazers_count": 3,
            "forks_count": 1,
            "open_issues_count": 2,
            "default_branch": "main",
            "created_at": datetime(2024, 1, 5, tzinfo=UTC),
            "updated_at": datetime(2025, 3, 9, tzinfo=UTC),
        }
        data.update(overrides)
        return Repository(**data)

    return _make


@pytest.fixture
def make_issue():
    """Factory for Issue models."""

    def _make(number: int = 1, title: str = "Bug", repo: str = "demo") -> Issue:
        return Issue(
            number=number,
            title=title,
            html_url=f"https://github.com/{TEST_GITHUB_USERNAME}/{repo}/issues/{number}",
            user_login="octo",
        )

    return _make


@pytest.fixture
def make_update():
    """Factory for Telegram webhook payloads."""

    def _make(text: str | None, chat_id: int | None = TEST_CHAT_ID) -> dict[str, Any]:
        message: dict[str, Any] = {"message_id": 1}
        if chat_id is not None:
            message["chat"] = {"id": chat_id, "type": "private"}
        if text is not None:
            message["text"] = text
        return {"update_id": 1000, "message": message}

    return _make


@pytest.fixture
def sent_texts(mock_notifier: AsyncMock):
    """Texts of all messages sent through the mocked notifier so far."""

    def _texts() -> list[str]:
        return [
            call.kwargs["text"] if "text" in call.kwargs else call.args[1]
            for call in mock_notifier.send_message.await_args_list
        ]

    return _texts
