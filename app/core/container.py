"""Dependency-injection container.

This module defines a dependency-injection (DI) container that wires together
the application's components from a single ``Config`` instance. Everything is
a singleton: one GitHub client, one Telegram bot, one command registry per
process.
"""

from dependency_injector import containers, providers
from telegram import Bot

from app.bot.commands import CommandRegistry
from app.bot.dispatcher import UpdateDispatcher
from app.bot.handlers import CommandHandlers
from app.bot.notifier import TelegramNotifier
from app.config import Config
from app.services.github import GitHubService


class Container(containers.DeclarativeContainer):
    """DI container for the application.

    Override ``config`` (or any other provider) in tests to swap in fakes.
    """

    config = providers.Singleton(Config)

    # Services
    github_service = providers.Singleton(
        GitHubService,
        token=config.provided.github.token,
        owner=config.provided.github.username,
        base_url=config.provided.github.api_url,
        timeout=config.provided.github.timeout,
    )
    telegram_bot = providers.Singleton(Bot, token=config.provided.bot.token)

    # Bot components
    notifier = providers.Singleton(TelegramNotifier, bot=telegram_bot)
    command_registry = providers.Singleton(CommandRegistry)
    command_handlers = providers.Singleton(
        CommandHandlers,
        github=github_service,
        notifier=notifier,
        registry=command_registry,
        private_prefix=config.provided.github.private_prefix,
    )
    dispatcher = providers.Singleton(
        UpdateDispatcher,
        registry=command_handlers.provided.registry,
        notifier=notifier,
        allowed_chat_ids=config.provided.bot.allowed_chat_ids,
    )
