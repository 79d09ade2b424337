"""
ASGI middleware
"""
import asyncio

from fastapi import status
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class RequestTimeoutMiddleware:
    """
    Cancels a request still running after ``timeout_seconds`` and answers 504

    Runs the downstream app inside ``asyncio.wait_for``, so expiry cancels the
    handler task itself (dependencies, open DB sessions included). If the
    response has already started streaming there is nothing to replace; the
    request is cut off and logged.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float):
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, receive, send_tracking),
                timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.error(f"Request timed out: {scope['method']} {scope['path']}")
            if response_started:
                return

            response = JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={"detail": "Request timed out"}
            )
            await response(scope, receive, send)
