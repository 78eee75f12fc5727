"""
Analytics API Routes

All chart endpoints share one blueprint (analytics_bp) registered at /api:
- charts.py: chart data endpoints (series, pivots, heat ranking)
- admin.py: health check
"""

from flask import Blueprint

# Create the shared blueprint
analytics_bp = Blueprint('analytics', __name__)


# Import all route modules to register their routes with the blueprint
from routes.analytics import charts  # noqa: E402,F401
from routes.analytics import admin  # noqa: E402,F401
