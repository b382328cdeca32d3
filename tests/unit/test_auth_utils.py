import time

import pytest
from jose import jwt

from innkeeper.utils import security
from innkeeper.utils.passwords import hash_password, verify_password
from innkeeper.utils.runtime import dev_mode_active, dev_mode_requested
from innkeeper.utils.urls import get_app_base_url, build_staff_login_link
from innkeeper.utils.ids import pad_employee_number, parse_employee_number


class TestPasswords:
    def test_hash_and_verify(self):
        encoded = hash_password("correct horse")
        assert encoded.startswith("$argon2id$")
        assert verify_password("correct horse", encoded)
        assert not verify_password("wrong", encoded)

    def test_missing_or_garbage_hash(self):
        assert not verify_password("x", None)
        assert not verify_password("", hash_password("x"))
        assert not verify_password("x", "not-a-hash")


class TestTokens:
    def test_round_trip_claims(self, monkeypatch):
        monkeypatch.delenv("JWT_EXPIRE_MINUTES", raising=False)
        monkeypatch.setenv("JWT_SECRET", "test-secret")
        token = security.create_access_token(subject="abc", role="hotelAdmin", kind="user", extra={"name": "Ana"})
        claims = security.decode_token(token)
        assert claims["sub"] == "abc"
        assert claims["role"] == "hotelAdmin"
        assert claims["kind"] == "user"
        assert claims["name"] == "Ana"
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_custom_expiry(self):
        token = security.create_access_token(subject="e1", role="employee", kind="employee", expires_minutes=7 * 24 * 60)
        claims = security.decode_token(token)
        assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60

    def test_bad_signature_and_expired(self):
        forged = jwt.encode({"sub": "x", "exp": int(time.time()) + 60}, "other-secret", algorithm="HS256")
        assert security.safe_decode_token(forged) is None
        expired = jwt.encode({"sub": "x", "exp": int(time.time()) - 60}, security._secret(), algorithm="HS256")
        assert security.safe_decode_token(expired) is None


class TestRuntime:
    def test_dev_mode_off_by_default(self):
        assert not dev_mode_requested()
        assert not dev_mode_active()

    def test_dev_mode_on_localhost(self, monkeypatch):
        monkeypatch.setenv("DEV_MODE", "true")
        monkeypatch.setenv("APP_BASE_URL", "http://localhost:3000")
        assert dev_mode_active()

    def test_dev_mode_refused_for_public_host(self, monkeypatch):
        monkeypatch.setenv("DEV_MODE", "true")
        monkeypatch.setenv("APP_BASE_URL", "https://hotel.example.com")
        with pytest.raises(RuntimeError):
            dev_mode_active()


class TestUrls:
    def test_base_url_precedence(self, monkeypatch):
        monkeypatch.delenv("APP_BASE_URL", raising=False)
        monkeypatch.delenv("APP_HOST", raising=False)
        assert get_app_base_url() == "http://localhost:3000"
        monkeypatch.setenv("APP_HOST", "hotel.example.com")
        assert get_app_base_url() == "https://hotel.example.com"
        monkeypatch.setenv("APP_HOST", "localhost:8080")
        assert get_app_base_url() == "http://localhost:8080"
        monkeypatch.setenv("APP_BASE_URL", "https://staff.example.com/")
        assert get_app_base_url() == "https://staff.example.com"
        assert build_staff_login_link() == "https://staff.example.com/login"


def test_employee_number_helpers():
    assert pad_employee_number(7) == "0007"
    assert pad_employee_number(12345) == "12345"
    assert parse_employee_number(" 0042 ") == 42
    assert parse_employee_number("CARD-9") is None
    assert parse_employee_number("") is None
