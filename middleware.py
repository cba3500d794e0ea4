#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ASGI middleware for the YouTube MCP server.

Written against the raw ASGI interface so that long-lived SSE streams pass
through untouched; the request is logged once the response has finished.
"""

import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from logging_config import StructuredLogger

logger = StructuredLogger(__name__)


class RequestLoggingMiddleware:
    """Logs method, path, status code and duration of every HTTP request."""

    SLOW_REQUEST_MS = 3000

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.monotonic()
        path = scope.get("path", "")
        method = scope.get("method", "")
        client = scope.get("client")
        client_ip = client[0] if client else "unknown"
        status_code = 500  # Default if exception occurs

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            logger.error(
                "Exception during request processing",
                path=path, method=method, client_ip=client_ip, error=str(exc)
            )
            raise
        finally:
            process_time_ms = (time.monotonic() - start_time) * 1000
            log_msg = {
                "path": path,
                "method": method,
                "status_code": status_code,
                "duration_ms": round(process_time_ms, 2),
                "client_ip": client_ip
            }

            if status_code >= 500:
                logger.error("Request completed", exc_info=False, **log_msg)
            elif status_code >= 400:
                logger.warning("Request completed", **log_msg)
            else:
                logger.info("Request completed", **log_msg)

            # SSE streams are long-lived by nature
            if process_time_ms > self.SLOW_REQUEST_MS and path != "/sse":
                logger.warning(f"Slow response: {method} {path}", **log_msg)
