"""External API services package.

Contains the GitHub REST API client used by the command handlers.
"""
