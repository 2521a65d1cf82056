"""Response formatting for bot replies.

Turns GitHub API models into Telegram HTML messages. Every value coming from
the user or from GitHub is HTML-escaped before it is placed in a template.
"""

from datetime import datetime
from html import escape

from ..models import Issue, Repository
from .messages import (
    ICON_PRIVATE,
    ICON_PUBLIC,
    ISSUE_CREATED,
    ISSUE_LIST_HEADER,
    ISSUE_LIST_LINE,
    NO_DESCRIPTION,
    NO_LANGUAGES,
    NO_MORE_REPOS,
    NO_OPEN_ISSUES,
    NO_REPOS,
    NO_SEARCH_MATCHES,
    REPO_CREATED,
    REPO_DELETED,
    REPO_DESCRIPTION_UPDATED,
    REPO_INFO_BRANCH,
    REPO_INFO_DATES,
    REPO_INFO_DESCRIPTION,
    REPO_INFO_HEADER,
    REPO_INFO_LANGUAGES,
    REPO_INFO_STATS,
    REPO_INFO_URL,
    REPO_LIST_HEADER,
    REPO_LIST_LINE,
    REPO_LIST_NEXT_PAGE,
    REPO_VISIBILITY_CHANGED,
    SEARCH_HEADER,
    SEARCH_LINE,
)

DATE_FORMAT = "%Y-%m-%d"


def _date(value: datetime | None) -> str:
    return value.strftime(DATE_FORMAT) if value else "?"


def _icon(repo: Repository) -> str:
    return ICON_PRIVATE if repo.private else ICON_PUBLIC


def format_languages(languages: dict[str, int]) -> str:
    """Format a language breakdown as percentages of total bytes.

    Args:
        languages: Mapping of language name to bytes of code.

    Returns:
        String like ``"Python 80.0%, Shell 20.0%"``, largest first.
    """
    total = sum(languages.values())
    if total <= 0:
        return NO_LANGUAGES

    ranked = sorted(languages.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(f"{escape(name)} {size * 100 / total:.1f}%" for name, size in ranked)


class ResponseFormatter:
    """Formats bot replies for repository and issue operations."""

    def format_repo_created(self, repo: Repository) -> str:
        return REPO_CREATED.format(
            visibility_icon=_icon(repo),
            name=escape(repo.name),
            visibility=repo.visibility,
            url=escape(repo.html_url),
        )

    def format_repo_deleted(self, name: str) -> str:
        return REPO_DELETED.format(name=escape(name))

    def format_visibility_changed(self, repo: Repository) -> str:
        return REPO_VISIBILITY_CHANGED.format(
            visibility_icon=_icon(repo),
            name=escape(repo.name),
            visibility=repo.visibility,
        )

    def format_description_updated(self, repo: Repository) -> str:
        return REPO_DESCRIPTION_UPDATED.format(
            name=escape(repo.name),
            description=escape(repo.description or NO_DESCRIPTION),
        )

    def format_repo_list(self, repos: list[Repository], page: int, page_size: int) -> str:
        """Format one page of repositories.

        Args:
            repos: Repositories on the page.
            page: 1-based page number.
            page_size: Requested page size; a full page gets a next-page hint.

        Returns:
            Numbered list, or the "no repos" / "no more repos" message when empty.
        """
        if not repos:
            return NO_REPOS if page == 1 else NO_MORE_REPOS.format(page=page)

        lines = [REPO_LIST_HEADER.format(page=page)]
        first_index = (page - 1) * page_size + 1
        for index, repo in enumerate(repos, start=first_index):
            lines.append(
                REPO_LIST_LINE.format(
                    index=index,
                    visibility_icon=_icon(repo),
                    url=escape(repo.html_url),
                    name=escape(repo.name),
                    stars=repo.stargazers_count,
                    updated=_date(repo.updated_at),
                )
            )

        if len(repos) >= page_size:
            lines.append(REPO_LIST_NEXT_PAGE.format(next_page=page + 1))

        return "\n".join(lines)

    def format_repo_info(self, repo: Repository, languages: dict[str, int]) -> str:
        """Format repository details combined with its language breakdown."""
        lines = [
            REPO_INFO_HEADER.format(
                visibility_icon=_icon(repo),
                full_name=escape(repo.full_name or repo.name),
            ),
            REPO_INFO_DESCRIPTION.format(description=escape(repo.description or NO_DESCRIPTION)),
            REPO_INFO_STATS.format(
                stars=repo.stargazers_count,
                forks=repo.forks_count,
                issues=repo.open_issues_count,
            ),
        ]
        if repo.default_branch:
            lines.append(REPO_INFO_BRANCH.format(branch=escape(repo.default_branch)))
        lines.append(
            REPO_INFO_DATES.format(created=_date(repo.created_at), updated=_date(repo.updated_at))
        )
        lines.append(REPO_INFO_LANGUAGES.format(languages=format_languages(languages)))
        lines.append(REPO_INFO_URL.format(url=escape(repo.html_url)))
        return "\n".join(lines)

    def format_issue_created(self, repo: str, issue: Issue) -> str:
        return ISSUE_CREATED.format(
            url=escape(issue.html_url),
            number=issue.number,
            repo=escape(repo),
            title=escape(issue.title),
        )

    def format_issue_list(self, repo: str, issues: list[Issue]) -> str:
        if not issues:
            return NO_OPEN_ISSUES.format(repo=escape(repo))

        lines = [ISSUE_LIST_HEADER.format(repo=escape(repo))]
        for issue in issues:
            lines.append(
                ISSUE_LIST_LINE.format(
                    url=escape(issue.html_url),
                    number=issue.number,
                    title=escape(issue.title),
                )
            )
        return "\n".join(lines)

    def format_search_results(self, query: str, repos: list[Repository]) -> str:
        if not repos:
            return NO_SEARCH_MATCHES.format(query=escape(query))

        lines = [SEARCH_HEADER.format(query=escape(query))]
        for repo in repos:
            lines.append(
                SEARCH_LINE.format(
                    visibility_icon=_icon(repo),
                    url=escape(repo.html_url),
                    name=escape(repo.name),
                    description=escape(repo.description or NO_DESCRIPTION),
                )
            )
        return "\n".join(lines)


response_formatter = ResponseFormatter()
