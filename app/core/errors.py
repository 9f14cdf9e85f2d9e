"""Client error types and their HTTP mapping."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.headers import create_failure_alert

logger = logging.getLogger(__name__)

PROBLEM_WITH_MESSAGE_TYPE = "https://www.jhipster.tech/problem/problem-with-message"


class BadRequestAlertException(Exception):
    """A request rejected for a given entity with a machine-readable reason."""

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    """Render a BadRequestAlertException as a 400 problem document with failure alert headers."""
    logger.info(
        "Rejected %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.error_key
    )
    return JSONResponse(
        status_code=400,
        media_type="application/problem+json",
        headers=create_failure_alert(exc.entity_name, exc.error_key),
        content={
            "type": PROBLEM_WITH_MESSAGE_TYPE,
            "title": exc.message,
            "status": 400,
            "message": f"error.{exc.error_key}",
            "entityName": exc.entity_name,
            "errorKey": exc.error_key,
            "params": exc.entity_name,
        },
    )
