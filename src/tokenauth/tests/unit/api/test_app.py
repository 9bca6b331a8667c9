# ABOUTME: Unit tests for the FastAPI adapter
# ABOUTME: Exercises status codes, error bodies, validation messages and the reaper lifecycle over HTTP

import json

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from tokenauth.api import create_app
from tests.conftest import make_settings

JANE = {"name": "Jane Doe", "username": "jane@example.com", "password": "password123"}


@pytest.fixture
def app(password_hasher):
    return create_app(settings=make_settings(), password_hasher=password_hasher, configure_logging=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _login(client, username="jane@example.com", password="password123"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    @pytest.mark.unit
    def test_register_created(self, client):
        response = client.post("/api/auth/register", json=JANE)

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Jane Doe", "username": "jane@example.com", "role": "USER"}

    @pytest.mark.unit
    def test_register_conflict(self, client):
        client.post("/api/auth/register", json=JANE)

        response = client.post("/api/auth/register", json=JANE)

        assert response.status_code == 409
        assert response.json() == {"message": "Username is already taken"}

    @pytest.mark.unit
    def test_register_validation_messages(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "  ", "username": "not-an-email", "password": "short"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "name": "Name is mandatory",
            "username": "Username must be an email",
            "password": "Password must have from 8 to 32 characters",
        }

    @pytest.mark.unit
    def test_register_password_too_long(self, client):
        response = client.post("/api/auth/register", json={**JANE, "password": "x" * 33})

        assert response.status_code == 400
        assert response.json() == {"password": "Password must have from 8 to 32 characters"}


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    @pytest.mark.unit
    def test_login_created(self, client):
        client.post("/api/auth/register", json=JANE)

        response = _login(client)

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"token", "refreshToken"}

    @pytest.mark.unit
    def test_bad_credentials(self, client):
        client.post("/api/auth/register", json=JANE)

        wrong_password = _login(client, password="wrong-password")
        unknown_user = _login(client, username="nobody@example.com")

        assert wrong_password.status_code == 401
        assert unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json() == {"message": "Invalid username or password"}

    @pytest.mark.unit
    def test_missing_fields(self, client):
        response = client.post("/api/auth/login", json={})

        assert response.status_code == 400
        assert response.json() == {"username": "Username is mandatory", "password": "Password is mandatory"}


class TestRefreshEndpoint:
    """Tests for POST /api/auth/refreshToken."""

    @pytest.mark.unit
    def test_refresh_rotates(self, client):
        client.post("/api/auth/register", json=JANE)
        pair = _login(client).json()

        response = client.post("/api/auth/refreshToken", json=pair)

        assert response.status_code == 201
        assert response.json()["refreshToken"] != pair["refreshToken"]

    @pytest.mark.unit
    def test_reused_refresh_token_rejected(self, client):
        client.post("/api/auth/register", json=JANE)
        pair = _login(client).json()
        client.post("/api/auth/refreshToken", json=pair)

        response = client.post("/api/auth/refreshToken", json=pair)

        assert response.status_code == 401
        assert response.json() == {"message": "Refresh token not found"}

    @pytest.mark.unit
    def test_missing_refresh_token(self, client):
        response = client.post("/api/auth/refreshToken", json={"token": "abc"})

        assert response.status_code == 400
        assert "refreshToken" in response.json()


class TestPingEndpoint:
    """Tests for GET /api/auth/ping."""

    @pytest.mark.unit
    def test_ping_authenticated(self, client):
        client.post("/api/auth/register", json=JANE)
        token = _login(client).json()["token"]

        response = client.get("/api/auth/ping", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == "Pong"

    @pytest.mark.unit
    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer garbage"}, {"Authorization": "Basic abc"}])
    def test_ping_unauthenticated(self, client, headers):
        response = client.get("/api/auth/ping", headers=headers)

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}


class TestStorageFailures:
    """Store outages surface as 503."""

    @pytest.mark.unit
    def test_store_outage_on_login(self, app, client):
        client.post("/api/auth/register", json=JANE)
        client.portal.call(app.state.services.user_store.close)

        response = _login(client)

        assert response.status_code == 503
        assert response.json() == {"message": "Service temporarily unavailable"}

    @pytest.mark.unit
    def test_store_outage_during_request_authentication(self, app, client):
        client.post("/api/auth/register", json=JANE)
        token = _login(client).json()["token"]
        client.portal.call(app.state.services.user_store.close)

        response = client.get("/api/auth/ping", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 503


class TestLifespan:
    """The application owns the reaper lifecycle."""

    @pytest.mark.unit
    def test_reaper_started_and_stopped(self, password_hasher):
        app = create_app(
            settings=make_settings(REAPER_ENABLED=True),
            password_hasher=password_hasher,
            configure_logging=False,
        )
        reaper = app.state.services.reaper

        with TestClient(app):
            assert reaper.is_running

        assert not reaper.is_running

    @pytest.mark.unit
    def test_reaper_disabled(self, app):
        with TestClient(app):
            assert not app.state.services.reaper.is_running

    @pytest.mark.unit
    def test_lifespan_logs_with_configured_format(self, password_hasher, capsys, monkeypatch):
        monkeypatch.setenv("LOG_CONSOLE_COLORIZE", "false")
        app = create_app(
            settings=make_settings(LOG_FORMAT="structured", LOG_LEVEL="info"),
            password_hasher=password_hasher,
            configure_logging=True,
        )

        try:
            with TestClient(app):
                pass
            logger.complete()
        finally:
            logger.remove()

        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("{")]
        messages = [json.loads(line)["record"]["message"] for line in lines]
        assert any("starting" in message for message in messages)
