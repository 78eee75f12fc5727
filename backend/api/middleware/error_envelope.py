"""
Error envelope middleware - Standardize all error responses.

Every error body has the same two keys:
{
    "error": "Server error",
    "message": "Query failed for metric 'room_types'"
}

Full details (stack traces, database errors) go to the server log only.
"""

import logging
from flask import Flask, jsonify, g
from werkzeug.exceptions import HTTPException


logger = logging.getLogger('api.middleware.error')

SERVER_ERROR = "Server error"


def make_error_response(message: str, status_code: int = 500, error: str = SERVER_ERROR):
    """
    Create a standardized error response.

    Args:
        message: Client-safe message
        status_code: HTTP status code
        error: Short error title

    Returns:
        Tuple of (response, status_code)
    """
    response = jsonify({
        "error": error,
        "message": message,
    })
    request_id = getattr(g, 'request_id', None)
    if request_id:
        response.headers['X-Request-ID'] = request_id
    return response, status_code


def setup_error_handlers(app: Flask) -> None:
    """
    Set up standardized error handlers on Flask app.

    Handles:
    - HTTP exceptions (404, 405, ...) keep their status codes
    - Unhandled Python exceptions become a generic 500
    """

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return make_error_response(error.description, error.code, error=error.name)

    @app.errorhandler(Exception)
    def handle_generic_error(error):
        if isinstance(error, HTTPException):
            return handle_http_error(error)

        logger.exception(
            "unhandled_error request_id=%s error_type=%s err=%s",
            getattr(g, 'request_id', None),
            type(error).__name__,
            error,
        )
        return make_error_response("An unexpected error occurred")
