"""Command registry.

Maps command names to their handlers and is the single source for the
command menu advertised to Telegram and for the /help text.
"""

import logging
from dataclasses import dataclass
from html import escape

from .messages import HELP_HEADER, HELP_LINE
from .types import CommandHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """Registered bot command.

    Attributes:
        name: Lowercase command name without the slash.
        description: One-line description for the command menu.
        usage: Usage string shown in help, e.g. ``/repoinfo <name>``.
        handler: Coroutine function called with ``(chat_id, args)``.
        advertise: Whether the command is listed in the Telegram menu and help.
        public: Whether the command bypasses the chat allow-list.
    """

    name: str
    description: str
    usage: str
    handler: CommandHandler
    advertise: bool = True
    public: bool = False


class CommandRegistry:
    """Registry of bot commands keyed by name."""

    def __init__(self) -> None:
        """Initialize empty command registry."""
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        """Register a command.

        Args:
            spec: Command to register; its name must be lowercase.

        Raises:
            ValueError: If the name is not lowercase or is already registered.
        """
        if spec.name != spec.name.lower():
            raise ValueError(f"Command name must be lowercase: {spec.name}")
        if spec.name in self._commands:
            raise ValueError(f"Command already registered: {spec.name}")

        self._commands[spec.name] = spec
        logger.debug(f"Registered command: /{spec.name}")

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return list(self._commands)

    def menu(self) -> list[tuple[str, str]]:
        """Get the advertised commands in registration order.

        Returns:
            List of ``(name, description)`` pairs.
        """
        return [(spec.name, spec.description) for spec in self._commands.values() if spec.advertise]

    def help_text(self) -> str:
        """Build the help message listing every advertised command."""
        lines = [HELP_HEADER]
        for spec in self._commands.values():
            if spec.advertise:
                lines.append(HELP_LINE.format(usage=escape(spec.usage), description=escape(spec.description)))
        return "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
