"""GitHub Repo Bot application package.

A Telegram bot that manages the owner's GitHub repositories and issues
through slash-commands received on a webhook.

The application follows a modular architecture with separate concerns for:
- Webhook entry point, command parsing, authorization, and dispatch
- Command handlers and reply formatting
- GitHub REST API access
- Configuration and dependency wiring
"""
