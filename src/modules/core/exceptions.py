"""API-wide exceptions and the DRF exception handler.

Registered through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``:

- ``RequestValidationError`` renders as ``400 {"errors": [...]}``.
- Any other DRF ``APIException`` keeps the default DRF rendering.
- Unexpected exceptions (database failures included) are logged and
  rendered as ``500 {"error": ...}`` instead of propagating.
"""

from __future__ import annotations

from typing import Any, Dict, List

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class RequestValidationError(APIException):
    """One or more request fields failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "invalid"

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__()
        self.errors = errors

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, location: str = "body"
    ) -> RequestValidationError:
        """Translate a pydantic ``ValidationError`` into the API error shape."""
        errors = [
            {
                "type": "field",
                "msg": err["msg"],
                "path": ".".join(str(part) for part in err["loc"]),
                "location": location,
            }
            for err in exc.errors()
        ]
        return cls(errors)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, RequestValidationError):
        logger.info("request.validation_failed", errors=len(exc.errors))
        return Response({"errors": exc.errors}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "request.unhandled_error",
        view=type(view).__name__ if view is not None else None,
        error=str(exc),
    )
    set_rollback()
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
