import logging

from flask import Flask, jsonify

from api.middleware.request_logging import (
    setup_request_id_middleware,
    setup_request_logging_middleware,
)


def _build_test_app():
    app = Flask(__name__)

    @app.route("/api/room-types", methods=["GET"])
    def room_types():
        return jsonify({"labels": [], "data": []})

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"status": "running"})

    setup_request_id_middleware(app)
    setup_request_logging_middleware(app)
    return app


def _get(app, path, caplog):
    app.config["TESTING"] = True
    client = app.test_client()
    with caplog.at_level(logging.INFO, logger="api.request"):
        return client.get(path)


def _logged(caplog, path):
    return any(
        f"api_request path={path}" in record.getMessage()
        for record in caplog.records
    )


def test_request_logging_sample_rate(monkeypatch, caplog):
    monkeypatch.setenv("REQUEST_LOG_ENABLED", "true")
    monkeypatch.setenv("REQUEST_LOG_SAMPLE_RATE", "1.0")
    monkeypatch.setenv("REQUEST_LOG_ENDPOINTS", "")

    response = _get(_build_test_app(), "/api/room-types", caplog)

    assert response.status_code == 200
    assert _logged(caplog, "/api/room-types")


def test_request_logging_watchlist(monkeypatch, caplog):
    monkeypatch.setenv("REQUEST_LOG_ENABLED", "true")
    monkeypatch.setenv("REQUEST_LOG_SAMPLE_RATE", "0.0")
    monkeypatch.setenv("REQUEST_LOG_ENDPOINTS", "/api/room-types")

    response = _get(_build_test_app(), "/api/room-types", caplog)

    assert response.status_code == 200
    assert _logged(caplog, "/api/room-types")


def test_request_logging_disabled(monkeypatch, caplog):
    monkeypatch.setenv("REQUEST_LOG_ENABLED", "false")
    monkeypatch.setenv("REQUEST_LOG_SAMPLE_RATE", "1.0")

    _get(_build_test_app(), "/api/room-types", caplog)

    assert not _logged(caplog, "/api/room-types")


def test_non_api_paths_not_logged(monkeypatch, caplog):
    monkeypatch.setenv("REQUEST_LOG_ENABLED", "true")
    monkeypatch.setenv("REQUEST_LOG_SAMPLE_RATE", "1.0")

    _get(_build_test_app(), "/", caplog)

    assert not any("api_request" in record.getMessage() for record in caplog.records)


def test_request_id_generated(monkeypatch, caplog):
    monkeypatch.setenv("REQUEST_LOG_SAMPLE_RATE", "1.0")

    response = _get(_build_test_app(), "/api/room-types", caplog)

    request_id = response.headers.get("X-Request-ID")
    assert request_id
    assert any(
        f"request_id={request_id}" in record.getMessage()
        for record in caplog.records
    )
