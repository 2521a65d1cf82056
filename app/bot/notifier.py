"""Telegram Bot API wrapper for outgoing messages.

Sends replies, typing indicators, and the one-time setup calls (command
menu, webhook registration) through python-telegram-bot's ``Bot``.
"""

import logging

from telegram import Bot, BotCommand, LinkPreviewOptions
from telegram.constants import ChatAction, ParseMode
from telegram.error import TelegramError

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Outgoing side of the bot."""

    def __init__(self, bot: Bot):
        """Initialize notifier.

        Args:
            bot: python-telegram-bot ``Bot`` instance.
        """
        self.bot = bot

    async def send_message(
        self,
        chat_id: int,
        text: str,
        parse_mode: str | None = ParseMode.HTML,
        disable_preview: bool = True,
    ) -> None:
        """Send a text message.

        Args:
            chat_id: Telegram chat ID.
            text: Message text.
            parse_mode: Telegram parse mode, HTML by default.
            disable_preview: Whether to suppress link previews.
        """
        await self.bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            link_preview_options=LinkPreviewOptions(is_disabled=disable_preview),
        )

    async def send_typing(self, chat_id: int) -> None:
        """Show the typing indicator. Failures are logged and ignored."""
        try:
            await self.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        except TelegramError as e:
            logger.warning(f"Failed to send typing indicator to {chat_id}: {e}")

    async def set_commands(self, commands: list[tuple[str, str]]) -> bool:
        """Publish the command menu.

        Args:
            commands: ``(name, description)`` pairs.

        Returns:
            True if Telegram accepted the menu, False otherwise.
        """
        try:
            await self.bot.set_my_commands([BotCommand(name, description) for name, description in commands])
        except TelegramError as e:
            logger.warning(f"Failed to register command menu: {e}")
            return False

        logger.info(f"Registered {len(commands)} commands in the bot menu")
        return True

    async def set_webhook(self, url: str, secret_token: str | None = None) -> bool:
        """Point Telegram at the webhook URL.

        Returns:
            True if the webhook was set, False otherwise.
        """
        try:
            await self.bot.set_webhook(url=url, secret_token=secret_token, allowed_updates=["message"])
        except TelegramError as e:
            logger.warning(f"Failed to set webhook {url}: {e}")
            return False

        logger.info(f"Webhook set to {url}")
        return True
