"""
Flask Application Factory - SQL-Only Chart Analytics

Every chart is one grouped SQL aggregation (at most two sequential queries)
over the real_estate table. Nothing is cached or loaded into memory; the
API is public and read-only.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from models.database import db


def create_app(config_class=None):
    app = Flask(__name__)
    # Instance, not class: SQLALCHEMY_DATABASE_URI is a property
    app.config.from_object((config_class or Config)())

    # Initialize CORS - allow all origins on the API
    CORS(app,
         resources={r"/api/*": {"origins": "*"}},
         methods=["GET", "OPTIONS"],
         allow_headers=["Content-Type", "X-Request-ID"],
         expose_headers=["X-Request-ID"],
         supports_credentials=False,
         send_wildcard=True)

    # Request ID injection for request correlation and debugging
    from api.middleware import setup_request_id_middleware
    setup_request_id_middleware(app)

    # Request usage logging (sampling + watchlist)
    from api.middleware import setup_request_logging_middleware
    setup_request_logging_middleware(app)

    # {error, message} envelope for HTTP errors and unhandled exceptions
    from api.middleware import setup_error_handlers
    setup_error_handlers(app)

    db.init_app(app)

    from routes.analytics import analytics_bp
    app.register_blueprint(analytics_bp, url_prefix='/api')

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "name": "Real Estate Analytics API",
            "status": "running",
        })

    return app


def run_app():
    """Main entry point for local development - starts server with Flask's dev server."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = create_app()
    logging.getLogger(__name__).info(
        "Starting Flask API on port %s", app.config['PORT']
    )
    app.run(debug=app.config['DEBUG'], host="0.0.0.0", port=app.config['PORT'])


if __name__ == "__main__":
    run_app()
