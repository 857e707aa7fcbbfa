"""Pagination error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_paginator.core.errors import PaginationError, error_document

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert escaping pagination errors into JSON error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Answer with a 500 error document when a handler raises ``PaginationError``.

        Errors raised after the response has started are re-raised, since a
        second response cannot be sent.
        """
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def _send(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, _send)
        except PaginationError as exc:
            if response_started:
                raise
            logger.exception("Pagination failed for %s", scope.get("path", ""))
            response = JSONResponse(error_document(exc), status_code=500)
            await response(scope, receive, send)
