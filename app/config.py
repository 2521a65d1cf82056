"""Configuration management for the repository bot.

Loads all settings from environment variables (and an optional ``.env`` file)
into typed, immutable configuration sections. The configuration is built once
at process start and passed explicitly to the components that need it.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_chat_ids(raw: str) -> frozenset[int]:
    """Parse a comma-separated list of chat identifiers.

    Args:
        raw: String such as ``"123, -100456"``. Blank entries are skipped.

    Returns:
        Frozen set of integer chat IDs, empty if nothing was listed.

    Raises:
        ValueError: If an entry is not an integer.
    """
    return frozenset(int(part) for part in raw.split(",") if part.strip())


class BotConfig(BaseSettings):
    """Telegram side of the bot.

    Attributes:
        token: Telegram bot API token.
        allowed_chat_ids_raw: Comma-separated allow-list as read from the environment.
        webhook_url: Public URL registered with Telegram on startup, if any.
        webhook_path: Local path the webhook route is served on.
        webhook_secret: Expected ``X-Telegram-Bot-Api-Secret-Token`` header value.
        listen_host: Interface the HTTP server binds to.
        port: Server port for webhook mode.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", frozen=True, populate_by_name=True
    )

    token: str = Field(..., validation_alias="TELEGRAM_TOKEN")
    allowed_chat_ids_raw: str = Field(default="", validation_alias="ALLOWED_CHAT_IDS")
    webhook_url: str | None = Field(default=None, validation_alias="WEBHOOK_URL")
    webhook_path: str = Field(default="/webhook", validation_alias="WEBHOOK_PATH")
    webhook_secret: str | None = Field(default=None, validation_alias="TELEGRAM_WEBHOOK_SECRET")
    listen_host: str = Field(default="127.0.0.1", validation_alias="BOT_LISTEN_HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("allowed_chat_ids_raw")
    @classmethod
    def _check_chat_ids(cls, value: str) -> str:
        try:
            parse_chat_ids(value)
        except ValueError as e:
            raise ValueError(f"ALLOWED_CHAT_IDS must be comma-separated integers: {e}") from e
        return value

    @field_validator("webhook_path")
    @classmethod
    def _check_webhook_path(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @property
    def allowed_chat_ids(self) -> frozenset[int]:
        """Get the allow-list of chat IDs.

        Returns:
            Set of permitted chat IDs; empty means every chat is allowed.
        """
        return parse_chat_ids(self.allowed_chat_ids_raw)


class GitHubConfig(BaseSettings):
    """GitHub REST API access.

    Attributes:
        token: Personal access token sent as a bearer credential.
        username: Account that owns the managed repositories.
        api_url: REST API base URL.
        timeout: Total timeout for one API request in seconds.
        private_prefix: Leading character on a new repo name that makes it private.
    """

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", frozen=True, populate_by_name=True
    )

    token: str = Field(..., validation_alias="GITHUB_TOKEN")
    username: str = Field(..., validation_alias="GITHUB_USERNAME")
    api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")
    timeout: float = Field(default=20.0, validation_alias="GITHUB_TIMEOUT")
    private_prefix: str = Field(default="!", min_length=1, max_length=1, validation_alias="PRIVATE_REPO_PREFIX")


class Config:
    """Application configuration.

    Groups the configuration sections so that a single object can be handed
    to the dependency container.
    """

    def __init__(self, bot: BotConfig | None = None, github: GitHubConfig | None = None):
        """Initialize configuration.

        Args:
            bot: Telegram settings, loaded from the environment if omitted.
            github: GitHub settings, loaded from the environment if omitted.
        """
        self.bot = bot or BotConfig()
        self.github = github or GitHubConfig()
