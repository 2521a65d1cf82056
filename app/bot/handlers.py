"""Telegram command handlers for repository and issue management.

Every handler has the same shape: validate the argument string, reply with a
usage hint if it does not fit, otherwise show the typing indicator, call
GitHub, and reply with the formatted result. GitHub failures are not caught
here; the dispatcher turns them into a user-facing message.
"""

import logging
from html import escape

from ..services.github import GitHubService
from .commands import CommandRegistry, CommandSpec
from .messages import (
    DESCRIPTION_CREATEISSUE,
    DESCRIPTION_CREATEREPO,
    DESCRIPTION_DELETEREPO,
    DESCRIPTION_EDITREPO,
    DESCRIPTION_HELP,
    DESCRIPTION_LISTISSUES,
    DESCRIPTION_LISTREPOS,
    DESCRIPTION_MYID,
    DESCRIPTION_REPOINFO,
    DESCRIPTION_SEARCH,
    DESCRIPTION_TOGGLEVISIBILITY,
    HELP_PRIVATE_NOTE,
    MY_ID_MESSAGE,
    USAGE_CREATEISSUE,
    USAGE_CREATEREPO,
    USAGE_DELETEREPO,
    USAGE_EDITREPO,
    USAGE_LISTISSUES,
    USAGE_LISTREPOS,
    USAGE_REPOINFO,
    USAGE_SEARCH,
    USAGE_TOGGLEVISIBILITY,
)
from .notifier import TelegramNotifier
from .parser import parse_page, split_name, split_title_body
from .response_formatter import ResponseFormatter, response_formatter

logger = logging.getLogger(__name__)

REPOS_PER_PAGE = 10
ISSUES_LIMIT = 10
SEARCH_LIMIT = 5


class CommandHandlers:
    """Bot commands bound to a GitHub account and a Telegram bot."""

    def __init__(
        self,
        github: GitHubService,
        notifier: TelegramNotifier,
        registry: CommandRegistry,
        private_prefix: str = "!",
        formatter: ResponseFormatter = response_formatter,
    ):
        """Initialize handlers and register them as bot commands.

        Args:
            github: GitHub API client.
            notifier: Outgoing Telegram messages.
            registry: Registry the commands are added to.
            private_prefix: Leading character of a repo name that makes it private.
            formatter: Reply formatter.
        """
        self.github = github
        self.notifier = notifier
        self.registry = registry
        self.private_prefix = private_prefix
        self.formatter = formatter
        self.register_commands()

    def register_commands(self) -> None:
        """Register all commands with the registry, in menu order."""
        commands = [
            CommandSpec("createrepo", DESCRIPTION_CREATEREPO, "/createrepo <name> [description]", self.create_repo),
            CommandSpec("deleterepo", DESCRIPTION_DELETEREPO, "/deleterepo <name>", self.delete_repo),
            CommandSpec("listrepos", DESCRIPTION_LISTREPOS, "/listrepos [page]", self.list_repos),
            CommandSpec("repoinfo", DESCRIPTION_REPOINFO, "/repoinfo <name>", self.repo_info),
            CommandSpec("togglevisibility", DESCRIPTION_TOGGLEVISIBILITY, "/togglevisibility <name>", self.toggle_visibility),
            CommandSpec("editrepo", DESCRIPTION_EDITREPO, "/editrepo <name> <description>", self.edit_repo),
            CommandSpec("createissue", DESCRIPTION_CREATEISSUE, "/createissue <repo> <title> [| body]", self.create_issue),
            CommandSpec("listissues", DESCRIPTION_LISTISSUES, "/listissues <repo>", self.list_issues),
            CommandSpec("search", DESCRIPTION_SEARCH, "/search <query>", self.search),
            CommandSpec("help", DESCRIPTION_HELP, "/help", self.help),
            CommandSpec("myid", DESCRIPTION_MYID, "/myid", self.my_id, public=True),
            CommandSpec("start", DESCRIPTION_HELP, "/start", self.help, advertise=False),
        ]
        for spec in commands:
            self.registry.register(spec)

    # === REPOSITORIES ===

    async def create_repo(self, chat_id: int, args: str) -> None:
        """Handle /createrepo <name> [description].

        A name starting with the private prefix creates a private repository;
        the prefix itself is not part of the name.
        """
        name, description = split_name(args)
        private = name.startswith(self.private_prefix)
        if private:
            name = name[len(self.private_prefix):]

        if not name:
            await self.notifier.send_message(chat_id, USAGE_CREATEREPO)
            return

        logger.info(f"Chat {chat_id} creating repo {name} (private={private})")
        await self.notifier.send_typing(chat_id)
        repo = await self.github.create_repo(name, description, private=private)
        await self.notifier.send_message(chat_id, self.formatter.format_repo_created(repo))

    async def delete_repo(self, chat_id: int, args: str) -> None:
        """Handle /deleterepo <name>. Deletion is immediate and irreversible."""
        name, _ = split_name(args)
        if not name:
            await self.notifier.send_message(chat_id, USAGE_DELETEREPO)
            return

        logger.info(f"Chat {chat_id} deleting repo {name}")
        await self.notifier.send_typing(chat_id)
        await self.github.delete_repo(name)
        await self.notifier.send_message(chat_id, self.formatter.format_repo_deleted(name))

    async def list_repos(self, chat_id: int, args: str) -> None:
        """Handle /listrepos [page]."""
        page = parse_page(args)
        if page is None:
            await self.notifier.send_message(chat_id, USAGE_LISTREPOS)
            return

        await self.notifier.send_typing(chat_id)
        repos = await self.github.list_repos(page=page, per_page=REPOS_PER_PAGE)
        await self.notifier.send_message(
            chat_id, self.formatter.format_repo_list(repos, page, REPOS_PER_PAGE)
        )

    async def repo_info(self, chat_id: int, args: str) -> None:
        """Handle /repoinfo <name>."""
        name, _ = split_name(args)
        if not name:
            await self.notifier.send_message(chat_id, USAGE_REPOINFO)
            return

        await self.notifier.send_typing(chat_id)
        repo = await self.github.get_repo(name)
        languages = await self.github.get_languages(name)
        await self.notifier.send_message(chat_id, self.formatter.format_repo_info(repo, languages))

    async def toggle_visibility(self, chat_id: int, args: str) -> None:
        """Handle /togglevisibility <name>.

        Reads the current visibility and writes the opposite; a concurrent
        change between the two calls is overwritten.
        """
        name, _ = split_name(args)
        if not name:
            await self.notifier.send_message(chat_id, USAGE_TOGGLEVISIBILITY)
            return

        await self.notifier.send_typing(chat_id)
        current = await self.github.get_repo(name)
        logger.info(f"Chat {chat_id} setting {name} private={not current.private}")
        updated = await self.github.update_repo(name, private=not current.private)
        await self.notifier.send_message(chat_id, self.formatter.format_visibility_changed(updated))

    async def edit_repo(self, chat_id: int, args: str) -> None:
        """Handle /editrepo <name> <description>."""
        name, description = split_name(args)
        if not name or not description:
            await self.notifier.send_message(chat_id, USAGE_EDITREPO)
            return

        await self.notifier.send_typing(chat_id)
        repo = await self.github.update_repo(name, description=description)
        await self.notifier.send_message(chat_id, self.formatter.format_description_updated(repo))

    async def search(self, chat_id: int, args: str) -> None:
        """Handle /search <query>, limited to the owner's repositories."""
        query = args.strip()
        if not query:
            await self.notifier.send_message(chat_id, USAGE_SEARCH)
            return

        await self.notifier.send_typing(chat_id)
        result = await self.github.search_repos(query, limit=SEARCH_LIMIT)
        await self.notifier.send_message(
            chat_id, self.formatter.format_search_results(query, result.items[:SEARCH_LIMIT])
        )

    # === ISSUES ===

    async def create_issue(self, chat_id: int, args: str) -> None:
        """Handle /createissue <repo> <title> [| body]."""
        repo, text = split_name(args)
        title, body = split_title_body(text)
        if not repo or not title:
            await self.notifier.send_message(chat_id, USAGE_CREATEISSUE)
            return

        logger.info(f"Chat {chat_id} creating issue in {repo}")
        await self.notifier.send_typing(chat_id)
        issue = await self.github.create_issue(repo, title, body)
        await self.notifier.send_message(chat_id, self.formatter.format_issue_created(repo, issue))

    async def list_issues(self, chat_id: int, args: str) -> None:
        """Handle /listissues <repo>."""
        repo, _ = split_name(args)
        if not repo:
            await self.notifier.send_message(chat_id, USAGE_LISTISSUES)
            return

        await self.notifier.send_typing(chat_id)
        issues = await self.github.list_open_issues(repo, limit=ISSUES_LIMIT)
        await self.notifier.send_message(
            chat_id, self.formatter.format_issue_list(repo, issues[:ISSUES_LIMIT])
        )

    # === INFO ===

    async def help(self, chat_id: int, args: str) -> None:
        """Handle /help and /start."""
        text = self.registry.help_text() + HELP_PRIVATE_NOTE.format(prefix=escape(self.private_prefix))
        await self.notifier.send_message(chat_id, text)

    async def my_id(self, chat_id: int, args: str) -> None:
        """Handle /myid."""
        await self.notifier.send_message(chat_id, MY_ID_MESSAGE.format(chat_id=chat_id))
