"""
Tests for session/jwt.py, auth/passwords.py and validation/rules.py.
"""

import time

import jwt
import pytest

from jobly.auth import check_password, hash_password
from jobly.errors import BadRequestError
from jobly.session import issue_tokens, verify_access, verify_refresh
from jobly.session.jwt import APP_JWT_SECRET, APP_REFRESH_SECRET, AUD, ISS
from jobly.validation import COMPANY_NEW_SCHEMA, USER_REGISTER_SCHEMA, validate_payload


class TestTokens:
    """Access and refresh tokens."""

    def test_access_round_trip(self):
        access, access_exp, _, _ = issue_tokens({"sub": "u1", "email": "u1@user.com"}, ["admin"])
        claims = verify_access(access)

        assert claims["sub"] == "u1"
        assert claims["roles"] == ["admin"]
        assert claims["typ"] == "access"
        assert claims["exp"] == access_exp

    def test_refresh_has_jti(self):
        _, access_exp, refresh, refresh_exp = issue_tokens({"sub": "u1"}, [])
        claims = verify_refresh(refresh)

        assert claims["typ"] == "refresh"
        assert claims["jti"]
        assert refresh_exp > access_exp

    def test_tokens_are_not_interchangeable(self):
        access, _, refresh, _ = issue_tokens({"sub": "u1"}, [])

        with pytest.raises(jwt.InvalidTokenError):
            verify_refresh(access)
        with pytest.raises(jwt.InvalidTokenError):
            verify_access(refresh)

    def test_wrong_typ_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"iss": ISS, "aud": AUD, "iat": now, "exp": now + 60, "sub": "u1", "typ": "refresh"},
            APP_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidTokenError, match="type"):
            verify_access(token)

    def test_expired_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"iss": ISS, "aud": AUD, "iat": now - 120, "exp": now - 60, "sub": "u1", "typ": "refresh"},
            APP_REFRESH_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(jwt.ExpiredSignatureError):
            verify_refresh(token)

    def test_foreign_audience_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"iss": ISS, "aud": "someone-else", "iat": now, "exp": now + 60, "sub": "u1", "typ": "access"},
            APP_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidAudienceError):
            verify_access(token)


class TestPasswords:

    def test_hash_and_check(self):
        hashed = hash_password("secret")

        assert hashed != "secret"
        assert check_password("secret", hashed)
        assert not check_password("Secret", hashed)


class TestValidatePayload:
    """Request body validation."""

    def test_valid(self):
        body = {"handle": "h", "name": "N", "description": "D"}
        assert validate_payload(body, COMPANY_NEW_SCHEMA) is body

    def test_lists_every_problem(self):
        with pytest.raises(BadRequestError) as exc:
            validate_payload({"handle": "h", "numEmployees": -1}, COMPANY_NEW_SCHEMA)

        message = exc.value.message
        assert "'name' is a required property" in message
        assert "'description' is a required property" in message
        assert "numEmployees" in message

    def test_rejects_non_object(self):
        with pytest.raises(BadRequestError, match="JSON object"):
            validate_payload(["not", "a", "dict"], COMPANY_NEW_SCHEMA)

    def test_email_format(self):
        body = {
            "username": "u",
            "password": "password",
            "firstName": "F",
            "lastName": "L",
            "email": "nope-at-all",
        }
        with pytest.raises(BadRequestError, match="email"):
            validate_payload(body, USER_REGISTER_SCHEMA)
