"""
Input Normalization Utilities
=============================

Single source of truth for input errors raised at the request boundary.

Usage:
    from utils.normalize import ValidationError, validation_error_response

    @app.route("/data")
    def get_data():
        try:
            params = parse_params(DataParams)
        except ValidationError as e:
            return validation_error_response(e)
"""

from typing import Optional


class ValidationError(ValueError):
    """Raised when input cannot be normalized to expected type."""

    def __init__(self, message: str, field: str = None, received_value=None):
        super().__init__(message)
        self.field = field
        self.received_value = received_value


def to_str(
    value: Optional[str],
    *,
    default: Optional[str] = None,
    strip: bool = True,
) -> Optional[str]:
    """
    Normalize string input, optionally stripping whitespace.

    Args:
        value: Input string
        default: Value to return if input is None or empty
        strip: Whether to strip leading/trailing whitespace

    Returns:
        Normalized string or default
    """
    if value is None or value == "":
        return default
    result = str(value)
    if strip:
        result = result.strip()
    # Treat whitespace-only as empty
    if result == "":
        return default
    return result


def validation_error_response(error: ValidationError) -> tuple:
    """
    Convert ValidationError to a structured 400 response tuple.

    Usage:
        try:
            params = parse_params(PriceTrendsParams)
        except ValidationError as e:
            return validation_error_response(e)

    Returns:
        Tuple of (dict, 400) suitable for Flask response
    """
    response = {
        "error": str(error),
        "type": "validation_error"
    }
    if error.field:
        response["field"] = error.field
    if error.received_value is not None:
        response["received_value"] = str(error.received_value)
    return response, 400
