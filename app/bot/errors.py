"""Classification of failed GitHub calls into user-facing messages."""

from .messages import (
    ERROR_BAD_CREDENTIALS,
    ERROR_GENERIC,
    ERROR_INVALID_REQUEST,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
)

STATUS_MESSAGES: dict[int, str] = {
    401: ERROR_BAD_CREDENTIALS,
    403: ERROR_PERMISSION_DENIED,
    404: ERROR_NOT_FOUND,
    422: ERROR_INVALID_REQUEST,
}


def error_status(error: BaseException) -> int | None:
    """Get the HTTP status carried by an exception, if any.

    Works for ``GitHubAPIError`` and ``aiohttp.ClientResponseError``, which
    both expose ``status``.
    """
    status = getattr(error, "status", None)
    return status if isinstance(status, int) else None


def classify_error(error: BaseException) -> str:
    """Map a failure to a fixed message for the user.

    Args:
        error: Exception raised while handling a command.

    Returns:
        Message for the status code, or the generic failure message.
    """
    status = error_status(error)
    if status is None:
        return ERROR_GENERIC
    return STATUS_MESSAGES.get(status, ERROR_GENERIC)
