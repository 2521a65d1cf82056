"""HTTP webhook entry point.

aiohttp routes receiving Telegram updates. The webhook always answers
``200 OK`` once the update has been handled, whatever the outcome of the
command, so Telegram never redelivers an update because a command failed.
"""

import json
import logging
import secrets

from aiohttp import web

from .dispatcher import UpdateDispatcher

logger = logging.getLogger(__name__)

DISPATCHER_KEY = web.AppKey("dispatcher", UpdateDispatcher)
SECRET_KEY = web.AppKey("webhook_secret", str)
SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def _ok() -> web.Response:
    return web.Response(text="OK")


async def telegram_webhook(request: web.Request) -> web.Response:
    """Receive a Telegram update and run it through the dispatcher."""
    if request.method != "POST":
        return _ok()

    expected_secret = request.app[SECRET_KEY]
    if expected_secret:
        provided = request.headers.get(SECRET_HEADER, "")
        if not secrets.compare_digest(provided.encode(), expected_secret.encode()):
            logger.warning("Rejected webhook call with invalid secret token")
            return web.Response(status=403, text="Forbidden")

    try:
        update = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Ignoring webhook call with invalid JSON body")
        return _ok()

    if not isinstance(update, dict):
        logger.warning("Ignoring webhook call with non-object JSON body")
        return _ok()

    await request.app[DISPATCHER_KEY].process_update(update)
    return _ok()


async def health_check(request: web.Request) -> web.Response:
    """Health check endpoint."""
    return web.json_response({"status": "ok"})


def create_app(
    dispatcher: UpdateDispatcher,
    webhook_path: str = "/webhook",
    webhook_secret: str | None = None,
) -> web.Application:
    """Create the aiohttp application serving the webhook.

    Args:
        dispatcher: Dispatcher handling decoded updates.
        webhook_path: Path Telegram posts updates to.
        webhook_secret: Required secret token header value, if any.

    Returns:
        Configured ``web.Application``.
    """
    app = web.Application()
    app[DISPATCHER_KEY] = dispatcher
    app[SECRET_KEY] = webhook_secret or ""
    app.router.add_route("*", webhook_path, telegram_webhook)
    app.router.add_get("/health", health_check)
    return app
