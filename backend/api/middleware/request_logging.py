"""
Request context middleware - request IDs and sampled usage logging.

Every request gets an X-Request-ID (client-supplied or generated) that is
stored on flask.g and echoed in the response. API requests are logged
according to a sample rate, or always when their path is on the watchlist.
"""

import logging
import os
import random
import time
import uuid
from typing import List

from flask import Flask, g, request


logger = logging.getLogger("api.request")


def _parse_watchlist(raw: str) -> List[str]:
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def _should_log(path: str, watchlist: List[str], sample_rate: float) -> bool:
    if watchlist and any(path.startswith(prefix) for prefix in watchlist):
        return True
    if sample_rate <= 0:
        return False
    if sample_rate >= 1:
        return True
    return random.random() <= sample_rate


def setup_request_id_middleware(app: Flask) -> None:
    """Inject g.request_id before each request and echo it as X-Request-ID."""

    @app.before_request
    def _inject_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response


def setup_request_logging_middleware(app: Flask) -> None:
    """
    Set up request logging middleware on Flask app.

    Env vars:
      - REQUEST_LOG_ENABLED (default: true)
      - REQUEST_LOG_SAMPLE_RATE (default: 0.0)
      - REQUEST_LOG_ENDPOINTS (comma-separated path prefixes to always log)
    """
    enabled = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
    try:
        sample_rate = float(os.environ.get("REQUEST_LOG_SAMPLE_RATE", "0.0"))
    except ValueError:
        sample_rate = 0.0
    watchlist = _parse_watchlist(os.environ.get("REQUEST_LOG_ENDPOINTS", ""))

    if not enabled:
        return

    @app.before_request
    def _start_timer():
        g.request_start = time.perf_counter()

    @app.after_request
    def _log_request(response):
        path = request.path
        if not path.startswith("/api"):
            return response

        if not _should_log(path, watchlist, sample_rate):
            return response

        duration_ms = None
        if hasattr(g, "request_start"):
            duration_ms = round((time.perf_counter() - g.request_start) * 1000, 2)

        logger.info(
            "api_request path=%s query=%s status=%s duration_ms=%s request_id=%s",
            path,
            request.query_string.decode("utf-8", "replace"),
            response.status_code,
            duration_ms,
            getattr(g, "request_id", None),
        )
        return response
