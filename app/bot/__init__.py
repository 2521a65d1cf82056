"""Telegram bot implementation package.

Contains the webhook route, update dispatcher, allow-list check, command
parser and registry, command handlers, and user-facing message templates.
"""
