"""
Shared route utilities for analytics endpoints.

Goals:
- Structured logger usage instead of ad-hoc prints
- Keep endpoint handlers small and consistent
"""

import time
import logging
from typing import Any, Callable, Dict, Optional

from flask import jsonify

from api.middleware.error_envelope import make_error_response
from services.metrics.base import QueryFailure


def route_logger(name: str) -> logging.Logger:
    """Return namespaced logger for analytics routes."""
    return logging.getLogger(f"analytics.{name}")


def elapsed_ms(start_time: float) -> int:
    """Return elapsed milliseconds since a perf_counter() start value."""
    return int((time.perf_counter() - start_time) * 1000)


def log_success(
    logger: logging.Logger,
    route: str,
    start_time: float,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    payload = {"route": route, "elapsed_ms": elapsed_ms(start_time)}
    if details:
        payload.update(details)
    logger.info("route_success %s", payload)


def log_error(
    logger: logging.Logger,
    route: str,
    start_time: float,
    err: Exception,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Log a failed route; call from inside the except block."""
    payload = {"route": route, "elapsed_ms": elapsed_ms(start_time)}
    if details:
        payload.update(details)
    cause = getattr(err, "cause", None)
    logger.exception("route_error %s err=%s cause=%r", payload, err, cause)


def chart_response(
    logger: logging.Logger,
    route: str,
    producer: Callable[[], Any],
    details: Optional[Dict[str, Any]] = None,
):
    """
    Run a chart producer and wrap the result as JSON.

    QueryFailure becomes the standard 500 envelope; the database error is
    logged here and never sent to the client.
    """
    start = time.perf_counter()
    try:
        data = producer()
    except QueryFailure as e:
        log_error(logger, route, start, e, details)
        return make_error_response(str(e))

    log_success(logger, route, start, details)
    return jsonify(data)
