import time
from typing import Any, Dict, Mapping, Tuple

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.request import Request

from modules.core.exceptions import RequestValidationError
from modules.core.validation import BODY, FieldRule, validate_request

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError as exc:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", error=str(exc))

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


class ValidatedViewSetMixin:
    """Runs the validation rules bound to the current action before dispatch.

    ``validation_rules`` maps a viewset action name to its ordered rules and
    is normally supplied per route by ``modules.core.routing.build_urlpatterns``.
    Failing requests never reach the action.
    """

    validation_rules: Mapping[str, Tuple[FieldRule, ...]] = {}

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        rules = self.validation_rules.get(self.action, ())
        if not rules:
            return
        body = request.data if any(rule.location == BODY for rule in rules) else {}
        errors = validate_request(rules, body=body, params=kwargs)
        if errors:
            raise RequestValidationError(errors)
