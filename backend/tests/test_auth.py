"""Access token verification."""

from datetime import timedelta

import pytest

from jwt_generation import generate_jwt_token
from src.config.settings import Config
from src.domain.exceptions import AuthenticationError
from src.presentation.dependencies.auth import verify_access_token


def test_valid_token_yields_user():
    user = verify_access_token(generate_jwt_token(user_id="admin-1", role="admin"))

    assert user.id.value == "admin-1"
    assert user.is_admin
    assert user.email == "admin-1@example.com"


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_malformed_token(token):
    with pytest.raises(AuthenticationError):
        verify_access_token(token)


def test_expired_token():
    token = generate_jwt_token(expires_in=timedelta(seconds=-5))

    with pytest.raises(AuthenticationError, match="expired"):
        verify_access_token(token)


def test_wrong_signature():
    with pytest.raises(AuthenticationError):
        verify_access_token(generate_jwt_token(secret="another-secret"))


def test_unknown_role_is_rejected():
    with pytest.raises(AuthenticationError):
        verify_access_token(generate_jwt_token(role="superuser"))


def test_missing_secret_fails_closed(monkeypatch):
    token = generate_jwt_token()
    monkeypatch.setattr(Config, "JWT_SECRET", "")

    with pytest.raises(AuthenticationError):
        verify_access_token(token)
