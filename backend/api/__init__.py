"""
API package - request boundary layer.

This package provides:
- Pydantic param models and parse_params()
- Global middleware (request_id, request_logging, error_envelope)
"""

from .contracts import parse_params

__all__ = ['parse_params']
