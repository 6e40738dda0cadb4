"""
Request body size limit

Checks the declared Content-Length up front and also counts the bytes that
actually arrive, so chunked uploads without a length header are limited too.
"""

from __future__ import annotations

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

BODY_TOO_LARGE_MESSAGE = "Request body too large"


class RequestBodyTooLarge(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=BODY_TOO_LARGE_MESSAGE,
        )


def body_too_large_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        content={"error": BODY_TOO_LARGE_MESSAGE},
    )


class BodySizeLimitMiddleware:
    """Pure ASGI middleware; wraps `receive` to count body bytes."""

    def __init__(self, app, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        for name, value in scope.get("headers") or []:
            if name == b"content-length":
                try:
                    declared = int(value)
                except ValueError:
                    break
                if declared > self.max_bytes:
                    await body_too_large_response()(scope, receive, send)
                    return
                break

        received = 0
        response_started = False

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise RequestBodyTooLarge()
            return message

        async def tracking_send(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except RequestBodyTooLarge:
            # raised while reading outside the router's exception handlers
            if response_started:
                raise
            await body_too_large_response()(scope, receive, send)
