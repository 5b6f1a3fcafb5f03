"""Logs method and path of every /api request. Raw ASGI."""

import logging
from typing import Callable

logger = logging.getLogger("casetrack.requests")


def RequestLoggingMiddleware(app: Callable, prefix: str = "/api") -> Callable:
    """Log API calls as they arrive and their response status."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        path = scope.get("path", "")
        if scope["type"] != "http" or not path.startswith(prefix):
            await app(scope, receive, send)
            return

        method = scope.get("method", "")
        logger.info("%s %s", method, path)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                logger.debug("%s %s -> %s", method, path, message["status"])
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
