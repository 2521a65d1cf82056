"""Typed structures shared across bot components."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypedDict

CommandHandler = Callable[[int, str], Awaitable[None]]
"""Coroutine function taking ``(chat_id, args)`` that replies to the chat."""


class TelegramChat(TypedDict, total=False):
    """Chat object of a Telegram update."""

    id: int
    type: str


class TelegramMessage(TypedDict, total=False):
    """Message object of a Telegram update, reduced to the fields the bot reads."""

    message_id: int
    chat: TelegramChat
    text: str


class TelegramUpdate(TypedDict, total=False):
    """Webhook payload posted by Telegram."""

    update_id: int
    message: TelegramMessage
