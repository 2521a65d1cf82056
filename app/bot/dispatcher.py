"""Update dispatcher.

Runs one webhook update through the bot: extract the message, parse the
command, check the allow-list, look up the handler and run it. Every failure
raised along the way is caught here, once, and reported to the chat.
"""

import logging
from collections.abc import Collection
from typing import Any

from ..models import IncomingMessage
from .auth import is_authorized
from .commands import CommandRegistry
from .errors import classify_error
from .messages import UNAUTHORIZED_MESSAGE, UNKNOWN_COMMAND_MESSAGE
from .notifier import TelegramNotifier
from .parser import parse_command
from .types import TelegramUpdate

logger = logging.getLogger(__name__)


def extract_chat_id(update: Any) -> int | None:
    """Recover the chat ID from a raw update, if it has a usable one."""
    if not isinstance(update, dict):
        return None
    message = update.get("message")
    if not isinstance(message, dict):
        return None
    chat = message.get("chat")
    if not isinstance(chat, dict):
        return None
    chat_id = chat.get("id")
    return chat_id if isinstance(chat_id, int) and not isinstance(chat_id, bool) else None


class UpdateDispatcher:
    """Routes Telegram updates to command handlers."""

    def __init__(
        self,
        registry: CommandRegistry,
        notifier: TelegramNotifier,
        allowed_chat_ids: Collection[int],
    ):
        """Initialize dispatcher.

        Args:
            registry: Registered bot commands.
            notifier: Outgoing Telegram messages.
            allowed_chat_ids: Chats permitted to use the bot; empty allows all.
        """
        self.registry = registry
        self.notifier = notifier
        self.allowed_chat_ids = frozenset(allowed_chat_ids)

    async def process_update(self, update: TelegramUpdate) -> None:
        """Handle one webhook update. Never raises.

        Args:
            update: Decoded Telegram update payload.
        """
        try:
            await self._dispatch(update)
        except Exception as e:
            await self.report_error(extract_chat_id(update), e)

    async def _dispatch(self, update: TelegramUpdate) -> None:
        message = IncomingMessage.from_update(update)
        if message is None:
            logger.debug("Ignoring update without message text")
            return

        parsed = parse_command(message.text)
        if parsed is None:
            return

        spec = self.registry.get(parsed.name)
        public = spec is not None and spec.public
        if not public and not is_authorized(message.chat_id, self.allowed_chat_ids):
            logger.warning(f"Rejected /{parsed.name} from unauthorized chat {message.chat_id}")
            await self.notifier.send_message(message.chat_id, UNAUTHORIZED_MESSAGE)
            return

        if spec is None:
            logger.info(f"Unknown command /{parsed.name} from chat {message.chat_id}")
            await self.notifier.send_message(message.chat_id, UNKNOWN_COMMAND_MESSAGE)
            return

        logger.info(f"Chat {message.chat_id} -> /{parsed.name}")
        await spec.handler(message.chat_id, parsed.args)

    async def report_error(self, chat_id: int | None, error: Exception) -> None:
        """Tell the chat that its command failed.

        The failure is logged with its traceback. If the chat is unknown or
        the reply cannot be delivered, logging is all that happens.

        Args:
            chat_id: Chat to notify, None if it could not be recovered.
            error: Exception raised while handling the update.
        """
        logger.error(f"Failed to process update for chat {chat_id}: {error}", exc_info=error)
        if chat_id is None:
            return

        try:
            await self.notifier.send_message(chat_id, classify_error(error))
        except Exception as e:
            logger.error(f"Failed to send error message to chat {chat_id}: {e}")
