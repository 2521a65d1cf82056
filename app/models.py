"""Data models for the repository bot.

Defines Pydantic models for the request-scoped data flowing through the bot:
the incoming chat message, the parsed command, and read-only views over the
GitHub API responses used to build replies. Unknown API fields are ignored.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IncomingMessage(BaseModel):
    """Text message extracted from a Telegram update.

    Attributes:
        chat_id: Telegram chat ID the message came from.
        text: Raw message text.
    """

    model_config = ConfigDict(frozen=True)

    chat_id: int
    text: str

    @classmethod
    def from_update(cls, update: dict[str, Any]) -> "IncomingMessage | None":
        """Build a message from a webhook update payload.

        Args:
            update: Decoded Telegram update, ``{"message": {"chat": {"id"}, "text"}}``.

        Returns:
            IncomingMessage, or None when the update carries no message text.

        Raises:
            pydantic.ValidationError: If the message has text but no usable chat ID.
        """
        message = update.get("message")
        if not isinstance(message, dict) or not message.get("text"):
            return None

        chat = message.get("chat") or {}
        return cls(chat_id=chat.get("id"), text=message["text"])


class ParsedCommand(BaseModel):
    """Slash-command split into its name and argument string.

    Attributes:
        name: Lowercased command name without the leading slash or @bot suffix.
        args: Remainder of the message, trimmed; empty when absent.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    args: str = ""


class Repository(BaseModel):
    """GitHub repository fields shown in replies."""

    name: str
    full_name: str = ""
    html_url: str
    description: str | None = None
    private: bool = False
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    default_branch: str | None = None
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def visibility(self) -> str:
        return "private" if self.private else "public"


class Issue(BaseModel):
    """GitHub issue fields shown in replies.

    Attributes:
        number: Issue number within the repository.
        title: Issue title.
        html_url: Browser URL of the issue.
        user_login: Login of the issue author, if present.
        is_pull_request: True for pull requests returned by the issues endpoint.
    """

    number: int
    title: str
    html_url: str
    user_login: str | None = None
    is_pull_request: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Issue":
        user = data.get("user") or {}
        return cls(
            number=data["number"],
            title=data["title"],
            html_url=data["html_url"],
            user_login=user.get("login"),
            is_pull_request="pull_request" in data,
        )


class SearchResult(BaseModel):
    """Repository search response.

    Attributes:
        total_count: Total number of matches reported by GitHub.
        items: Repositories on the returned page.
    """

    total_count: int = 0
    items: list[Repository] = Field(default_factory=list)
