"""
Tests for password hashing, token helpers and the shared error envelope.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from jose import JWTError, jwt

from jobly.core.security import (
    create_access_token,
    decode_token,
    generate_password,
    get_password_hash,
    verify_password,
)
from main import app


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = get_password_hash("secret-password")

        assert hashed != "secret-password"
        assert verify_password("secret-password", hashed)
        assert not verify_password("wrong", hashed)

    def test_long_passwords_are_truncated_to_72_bytes(self):
        hashed = get_password_hash("a" * 80)

        assert verify_password("a" * 72, hashed)

    def test_generated_password_mixes_character_classes(self):
        password = generate_password()

        assert len(password) == 12
        assert any(c.islower() for c in password)
        assert any(c.isupper() for c in password)
        assert any(c.isdigit() for c in password)
        assert any(c in "!@#$%^&*" for c in password)


class TestTokens:

    def test_claims(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["sub"] == "u1"
        assert payload["username"] == "u1"
        assert payload["isAdmin"] is True
        assert "exp" in payload

    def test_expired(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_wrong_signing_key(self):
        token = jwt.encode({"sub": "u1", "username": "u1", "isAdmin": True}, "not-the-key", algorithm="HS256")

        with pytest.raises(JWTError):
            decode_token(token)


class TestErrorEnvelope:

    def test_unknown_route(self, client):
        response = client.get("/no-such-route")

        assert response.status_code == 404
        assert response.json()["error"]["status"] == 404

    def test_malformed_json(self, client, admin_headers):
        response = client.post(
            "/companies",
            content="{not json",
            headers={**admin_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_unexpected_error_is_500(self, db_session, monkeypatch):
        from jobly.core.database import get_db
        from jobly.crud import company as company_crud

        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(company_crud, "find_all", explode)
        app.dependency_overrides[get_db] = lambda: db_session
        try:
            with TestClient(app, raise_server_exceptions=False) as test_client:
                response = test_client.get("/companies")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Internal server error", "status": 500}}


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_root_banner(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Jobly API", "version": "1.0.0", "status": "healthy"}
