"""
Last-resort error handling middleware for DataCanvas.

Domain errors are mapped by the exception handlers registered in
``app.main``; anything that still escapes a route ends up here and is
turned into a 500 JSON body with the same ``{"message": ...}`` shape.
"""

import json
import logging

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger("datacanvas.middleware.error_handler")


class ErrorHandlerMiddleware:
    """Returns a JSON 500 response for unhandled exceptions."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            method = scope.get("method", "?")
            path = scope.get("path", "?")
            logger.exception("Unhandled exception on %s %s", method, path)

            # Too late to replace a response that is already on the wire
            if response_started:
                raise

            body = json.dumps({
                "message": "An unexpected error occurred. Please try again.",
                "path": path,
            }).encode("utf-8")

            await send({
                "type": "http.response.start",
                "status": 500,
                "headers": [
                    [b"content-type", b"application/json"],
                    [b"content-length", str(len(body)).encode()],
                ],
            })
            await send({
                "type": "http.response.body",
                "body": body,
            })
