"""
Admin Endpoints

- /health - liveness check (no database access)
"""

from flask import jsonify
from routes.analytics import analytics_bp


@analytics_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})
