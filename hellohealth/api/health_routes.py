"""Health endpoint.

Endpoints:
  GET /health/  aggregate report as JSON (503 when the root is DOWN)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from hellohealth.health.checker import CompositeChecker

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health")
@health_router.get("/health/")
def health(request: Request) -> JSONResponse:
    """Run every registered checker and return the combined report."""
    checker: CompositeChecker = request.app.state.checker
    report = checker.check()

    status_code = 503 if report.is_down() else 200
    return JSONResponse(content=report.to_dict(), status_code=status_code)
