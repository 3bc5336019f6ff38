"""Operational endpoints."""

from __future__ import annotations

import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def _probe_database() -> Dict[str, Any]:
    start = time.monotonic()
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    try:
        database = _probe_database()
    except DatabaseError:
        logger.error("health.database_down", exc_info=True)
        database = {"status": "down"}

    healthy = database["status"] == "up"
    overall = "healthy" if healthy else "unhealthy"
    logger.info("health.checked", status=overall)

    return JsonResponse(
        {
            "status": overall,
            "timestamp": timezone.now().isoformat(),
            "services": {"database": database},
        },
        status=200 if healthy else 503,
    )
