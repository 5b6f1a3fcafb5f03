"""Request body size limit middleware.

Snapshots posted to /api/save can be large (attachments travel inside them
as data URLs), so the limit is generous but enforced both from the declared
Content-Length and, for chunked bodies, while reading.
Raw ASGI, no BaseHTTPMiddleware.
"""

import json
from typing import Callable


def _header(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


async def _reject(send: Callable, max_bytes: int, received: int) -> None:
    body = json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": f"Request body must be at most {max_bytes} bytes",
            "details": {"max_bytes": max_bytes, "received_bytes": received},
        }
    ).encode()
    await send(
        {
            "type": "http.response.start",
            "status": 413,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


async def _read_limited(receive: Callable, max_bytes: int) -> tuple[list[dict], int]:
    """Drain request messages until the body ends or passes max_bytes."""
    messages: list[dict] = []
    total = 0
    while True:
        message = await receive()
        messages.append(message)
        if message["type"] != "http.request":
            return messages, total
        total += len(message.get("body", b""))
        if total > max_bytes or not message.get("more_body", False):
            return messages, total


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Answer 413 for request bodies larger than max_bytes."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = _header(scope, b"content-length")
        if declared is not None and declared.strip().isdigit():
            if int(declared) > max_bytes:
                await _reject(send, max_bytes, int(declared))
                return
            await app(scope, receive, send)
            return

        messages, total = await _read_limited(receive, max_bytes)
        if total > max_bytes:
            await _reject(send, max_bytes, total)
            return

        async def replay() -> dict:
            if messages:
                return messages.pop(0)
            return await receive()

        await app(scope, replay, send)

    return asgi_app
