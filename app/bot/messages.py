"""Telegram bot message templates and constants.

Contains all user-facing message templates, usage hints, and error messages.
Templates are Telegram HTML; values substituted into them must be escaped
with ``html.escape`` by the caller.
"""

# Gate and dispatch
UNAUTHORIZED_MESSAGE = (
    "⛔ You are not authorized to use this bot.\n"
    "Send /myid to get your chat ID and ask the owner to add it to the allow-list."
)
UNKNOWN_COMMAND_MESSAGE = "🤷 Unknown command. Send /help to see what I can do."
MY_ID_MESSAGE = "🆔 Your chat ID: <code>{chat_id}</code>"

# Help
HELP_HEADER = "🤖 <b>GitHub Repo Bot</b>\n\nAvailable commands:"
HELP_LINE = "{usage} — {description}"
HELP_PRIVATE_NOTE = "\nPrefix a new repo name with <code>{prefix}</code> to make it private."

# Usage hints
USAGE_CREATEREPO = "Usage: /createrepo &lt;name&gt; [description]"
USAGE_DELETEREPO = "Usage: /deleterepo &lt;name&gt;"
USAGE_LISTREPOS = "Usage: /listrepos [page]"
USAGE_REPOINFO = "Usage: /repoinfo &lt;name&gt;"
USAGE_TOGGLEVISIBILITY = "Usage: /togglevisibility &lt;name&gt;"
USAGE_EDITREPO = "Usage: /editrepo &lt;name&gt; &lt;description&gt;"
USAGE_CREATEISSUE = "Usage: /createissue &lt;repo&gt; &lt;title&gt; [| body]"
USAGE_LISTISSUES = "Usage: /listissues &lt;repo&gt;"
USAGE_SEARCH = "Usage: /search &lt;query&gt;"

# Repositories
REPO_CREATED = "✅ Repo created!\n{visibility_icon} <b>{name}</b> ({visibility})\n{url}"
REPO_DELETED = "🗑️ Repo <b>{name}</b> deleted."
REPO_VISIBILITY_CHANGED = "{visibility_icon} <b>{name}</b> is now {visibility}."
REPO_DESCRIPTION_UPDATED = "✏️ Description of <b>{name}</b> updated:\n{description}"

REPO_LIST_HEADER = "📚 <b>Your repos</b> (page {page}):"
REPO_LIST_LINE = "{index}. {visibility_icon} <a href=\"{url}\">{name}</a> ⭐ {stars} · updated {updated}"
REPO_LIST_NEXT_PAGE = "\nMore: /listrepos {next_page}"
NO_REPOS = "📭 You don't have any repos yet."
NO_MORE_REPOS = "📭 No more repos on page {page}."

REPO_INFO_HEADER = "{visibility_icon} <b>{full_name}</b>"
REPO_INFO_DESCRIPTION = "📝 {description}"
REPO_INFO_STATS = "⭐ {stars} · 🍴 {forks} · 🐛 {issues} open issues"
REPO_INFO_BRANCH = "🌿 Default branch: {branch}"
REPO_INFO_DATES = "📅 Created {created} · updated {updated}"
REPO_INFO_LANGUAGES = "💻 Languages: {languages}"
REPO_INFO_URL = "🔗 {url}"
NO_DESCRIPTION = "No description"
NO_LANGUAGES = "none detected"

# Issues
ISSUE_CREATED = "✅ Issue <a href=\"{url}\">#{number}</a> created in <b>{repo}</b>:\n{title}"
ISSUE_LIST_HEADER = "🐛 <b>Open issues in {repo}</b>:"
ISSUE_LIST_LINE = "<a href=\"{url}\">#{number}</a> {title}"
NO_OPEN_ISSUES = "🎉 No open issues in <b>{repo}</b>."

# Search
SEARCH_HEADER = "🔎 <b>Results for</b> “{query}”:"
SEARCH_LINE = "{visibility_icon} <a href=\"{url}\">{name}</a> — {description}"
NO_SEARCH_MATCHES = "🔎 No repos match “{query}”."

# Visibility
ICON_PRIVATE = "🔒"
ICON_PUBLIC = "🌐"

# Error classification
ERROR_NOT_FOUND = "❌ Not found. Check the repository name."
ERROR_PERMISSION_DENIED = "❌ Permission denied. The GitHub token lacks access to do that."
ERROR_INVALID_REQUEST = "❌ Invalid request. The name may already exist or contain bad characters."
ERROR_BAD_CREDENTIALS = "❌ Bad GitHub credentials. Check the configured token."
ERROR_GENERIC = "❌ Something went wrong talking to GitHub. Try again later."

# Menu descriptions
DESCRIPTION_CREATEREPO = "Create a repo"
DESCRIPTION_DELETEREPO = "Delete a repo"
DESCRIPTION_LISTREPOS = "List your repos"
DESCRIPTION_REPOINFO = "Show repo details"
DESCRIPTION_TOGGLEVISIBILITY = "Switch a repo between public and private"
DESCRIPTION_EDITREPO = "Change a repo description"
DESCRIPTION_CREATEISSUE = "Open an issue"
DESCRIPTION_LISTISSUES = "List open issues"
DESCRIPTION_SEARCH = "Search your repos"
DESCRIPTION_HELP = "Show this help"
DESCRIPTION_MYID = "Show your chat ID"
