"""Application entry point.

Main module that builds the bot from the DI container and serves the
Telegram webhook with aiohttp. Configures logging, publishes the command
menu (and the webhook URL, when configured) on startup, and closes the
Telegram bot on shutdown.
"""

import logging

from aiohttp import web

from .bot.webhook import create_app
from .core.container import Container

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )
    # httpx logs every Telegram request URL, which contains the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_app(container: Container) -> web.Application:
    """Build the webhook application and attach startup/shutdown hooks.

    Args:
        container: Wired application container.

    Returns:
        aiohttp application ready to be served.
    """
    config = container.config()
    dispatcher = container.dispatcher()
    app = create_app(
        dispatcher,
        webhook_path=config.bot.webhook_path,
        webhook_secret=config.bot.webhook_secret,
    )

    async def on_startup(application: web.Application) -> None:
        bot = container.telegram_bot()
        await bot.initialize()
        logger.info(f"Telegram bot @{bot.username} initialized")

        # Failures below are logged by the notifier and do not stop the server
        notifier = container.notifier()
        await notifier.set_commands(container.command_registry().menu())
        if config.bot.webhook_url:
            await notifier.set_webhook(config.bot.webhook_url, config.bot.webhook_secret)

    async def on_cleanup(application: web.Application) -> None:
        await container.telegram_bot().shutdown()
        logger.info("Telegram bot shut down")

    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)
    return app


def main() -> None:
    """Main application entry point.

    Loads configuration from the environment, wires the container, and
    serves the webhook until interrupted.
    """
    container = Container()
    config = container.config()
    setup_logging(config.bot.log_level)

    app = build_app(container)
    logger.info(
        f"Serving webhook on {config.bot.listen_host}:{config.bot.port}{config.bot.webhook_path}"
    )
    web.run_app(app, host=config.bot.listen_host, port=config.bot.port, print=None)


if __name__ == "__main__":
    main()
