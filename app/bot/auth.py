"""Chat allow-list check."""

from collections.abc import Collection


def is_authorized(chat_id: int, allowed_chat_ids: Collection[int]) -> bool:
    """Check whether a chat may use the bot.

    Args:
        chat_id: Telegram chat ID of the sender.
        allowed_chat_ids: Permitted chat IDs. Empty means everyone is allowed.

    Returns:
        True if the chat is allowed, False otherwise.
    """
    if not allowed_chat_ids:
        return True
    return chat_id in allowed_chat_ids
