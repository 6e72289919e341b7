import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient

from suggestion_box.core.exceptions import GoneException, register_exception_handlers
from suggestion_box.core.middleware import setup_middleware


def _app():
    app = FastAPI()
    setup_middleware(app)
    register_exception_handlers(app)

    @app.get("/gone")
    def gone():
        raise GoneException("Suggestion was already deleted by another user")

    @app.get("/boom")
    def boom():
        raise RuntimeError("database exploded")

    return app


def test_app_errors_render_their_status():
    client = TestClient(_app())
    response = client.get("/gone")
    assert response.status_code == 410
    assert response.json()["error"] == "Suggestion was already deleted by another user"


def test_unhandled_errors_hide_details():
    client = TestClient(_app(), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"
    assert "exploded" not in response.text


def test_request_id_is_echoed(client):
    request_id = str(uuid.uuid4())
    response = client.get("/health", headers={"X-Request-ID": request_id})
    assert response.headers["X-Request-ID"] == request_id
    assert client.get("/api/suggestions").headers.get("X-Request-ID")
