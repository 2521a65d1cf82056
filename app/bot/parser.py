"""Slash-command parsing.

Splits message text into a command name and an argument string, plus the
small helpers handlers use to split their own arguments.
"""

from __future__ import annotations

import re
from typing import Final

from ..models import ParsedCommand

COMMAND_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^/(?P<name>\w+)(?:@\w+)?(?:\s+(?P<args>.*))?$", re.DOTALL
)


def parse_command(text: str | None) -> ParsedCommand | None:
    """Parse a slash-command.

    Accepts ``/name``, ``/name@botname`` and either form followed by
    whitespace and free-form arguments, which may span several lines.

    Args:
        text: Raw message text.

    Returns:
        ParsedCommand with a lowercased name and trimmed args, or None if the
        text is not a command.
    """
    if not text:
        return None

    match = COMMAND_PATTERN.match(text.strip())
    if match is None:
        return None

    return ParsedCommand(
        name=match.group("name").lower(),
        args=(match.group("args") or "").strip(),
    )


def split_name(args: str) -> tuple[str, str]:
    """Split args into a leading name and the free-form remainder.

    Only the first run of whitespace separates them; whitespace inside the
    remainder is kept as typed.

    >>> split_name("my-repo A  cool project")
    ('my-repo', 'A  cool project')
    """
    parts = args.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def split_title_body(text: str) -> tuple[str, str]:
    """Split issue text on the first pipe into title and body."""
    title, _, body = text.partition("|")
    return title.strip(), body.strip()


def parse_page(args: str) -> int | None:
    """Parse an optional 1-based page number.

    Returns:
        1 when args are empty, the page number when valid, None otherwise.
    """
    args = args.strip()
    if not args:
        return 1
    if not args.isdecimal() or int(args) < 1:
        return None
    return int(args)
