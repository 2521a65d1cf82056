"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from app.config import BotConfig, Config, GitHubConfig, parse_chat_ids


def test_bot_config_listen_host_defaults_to_localhost() -> None:
    """BotConfig should bind to localhost by default for safer webhooks."""
    bot_config = BotConfig()

    assert bot_config.listen_host == "127.0.0.1"


def test_bot_config_listen_host_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variable must override listen host when explicitly set."""
    monkeypatch.setenv("BOT_LISTEN_HOST", "0.0.0.0")

    bot_config = BotConfig()

    assert bot_config.listen_host == "0.0.0.0"


def test_empty_allow_list_means_open_mode() -> None:
    assert BotConfig().allowed_chat_ids == frozenset()


def test_allow_list_is_parsed_from_comma_separated_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_CHAT_IDS", "4242, -100555,,7 ")

    assert BotConfig().allowed_chat_ids == frozenset({4242, -100555, 7})


def test_malformed_allow_list_fails_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_CHAT_IDS", "4242,abc")

    with pytest.raises(ValidationError):
        BotConfig()


def test_missing_telegram_token_fails_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TELEGRAM_TOKEN")

    with pytest.raises(ValidationError):
        BotConfig(_env_file=None)


def test_webhook_path_gets_leading_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_PATH", "hooks/telegram")

    assert BotConfig().webhook_path == "/hooks/telegram"


def test_config_is_immutable() -> None:
    bot_config = BotConfig()

    with pytest.raises(ValidationError):
        bot_config.port = 9000  # type: ignore[misc]


def test_github_config_defaults() -> None:
    github = GitHubConfig()

    assert github.token == "ghp_test_token"
    assert github.username == "octo"
    assert github.api_url == "https://api.github.com"
    assert github.private_prefix == "!"


def test_private_prefix_must_be_one_character(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIVATE_REPO_PREFIX", "!!")

    with pytest.raises(ValidationError):
        GitHubConfig()


def test_config_groups_sections_from_environment() -> None:
    config = Config()

    assert config.bot.token == "123456:test-telegram-token"
    assert config.github.username == "octo"


def test_config_accepts_explicit_sections() -> None:
    bot = BotConfig(allowed_chat_ids_raw="5")
    github = GitHubConfig(api_url="https://ghe.example.com/api/v3")

    config = Config(bot=bot, github=github)

    assert config.bot.allowed_chat_ids == frozenset({5})
    assert config.github.api_url == "https://ghe.example.com/api/v3"


def test_parse_chat_ids_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_chat_ids("1;2")
