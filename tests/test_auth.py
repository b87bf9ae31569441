"""Unit tests for API key and user identity authentication."""

from unittest.mock import patch

import pytest
from fastapi import HTTPException

from interview_prep.core.auth import (
    get_current_user_id,
    hash_secret,
    parse_api_keys,
    validate_api_key,
    verify_api_key,
)
from interview_prep.core.errors import AuthenticationAppError


class TestParseAPIKeys:
    """Test API key parsing utility function."""

    def test_parse_single_key(self) -> None:
        assert parse_api_keys("my-secret-key") == {"my-secret-key"}

    def test_parse_multiple_keys(self) -> None:
        assert parse_api_keys("key1,key2,key3") == {"key1", "key2", "key3"}

    def test_parse_keys_with_whitespace(self) -> None:
        """Test that whitespace is trimmed from keys."""
        assert parse_api_keys("key1 , key2  ,  key3") == {"key1", "key2", "key3"}

    def test_parse_none_returns_empty_set(self) -> None:
        assert parse_api_keys(None) == set()

    def test_parse_whitespace_only_returns_empty_set(self) -> None:
        assert parse_api_keys("   ,  ,  ") == set()

    def test_parse_removes_duplicate_keys(self) -> None:
        assert parse_api_keys("key1,key2,key1,key3,key2") == {"key1", "key2", "key3"}


class TestHashSecret:
    def test_hash_is_stable_and_short(self) -> None:
        assert hash_secret("abc") == hash_secret("abc")
        assert len(hash_secret("abc")) == 16

    def test_hash_does_not_contain_secret(self) -> None:
        assert "my-secret" not in hash_secret("my-secret")


class TestValidateAPIKey:
    """Test core API key validation logic."""

    @patch("interview_prep.core.auth.settings")
    def test_validate_bypassed_when_auth_disabled(self, mock_settings) -> None:
        """Test that validation is skipped when API_KEY_REQUIRED=false."""
        mock_settings.app.api_key_required = False

        # Should not raise even with invalid key
        validate_api_key("any-random-key")
        validate_api_key("")

    @patch("interview_prep.core.auth.settings")
    def test_validate_raises_when_no_keys_configured(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = None

        with pytest.raises(AuthenticationAppError) as exc_info:
            validate_api_key("some-key")

        assert exc_info.value.code == "api_keys_not_configured"
        assert "no valid keys are configured" in exc_info.value.message

    @patch("interview_prep.core.auth.settings")
    def test_validate_accepts_valid_key(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = "valid-key-1,valid-key-2"

        validate_api_key("valid-key-1")
        validate_api_key("valid-key-2")

    @patch("interview_prep.core.auth.settings")
    def test_validate_rejects_invalid_key(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = "valid-key-1,valid-key-2"

        with pytest.raises(AuthenticationAppError) as exc_info:
            validate_api_key("invalid-key")

        assert exc_info.value.code == "invalid_api_key"
        assert "Invalid or missing API key" in exc_info.value.message

    @patch("interview_prep.core.auth.settings")
    def test_validate_handles_whitespace_in_configured_keys(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = " key1 , key2 , key3 "

        validate_api_key("key1")
        validate_api_key("key2")

        # Configured keys are trimmed, provided keys are not
        with pytest.raises(AuthenticationAppError):
            validate_api_key(" key1 ")


class TestVerifyAPIKeyDependency:
    """Test FastAPI dependency for API key verification."""

    @pytest.mark.asyncio
    @patch("interview_prep.core.auth.settings")
    async def test_verify_bypassed_when_auth_disabled(self, mock_settings) -> None:
        mock_settings.app.api_key_required = False

        await verify_api_key(x_api_key=None)

    @pytest.mark.asyncio
    @patch("interview_prep.core.auth.settings")
    async def test_verify_raises_403_when_header_missing(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = "valid-key"

        with pytest.raises(HTTPException) as exc_info:
            await verify_api_key(x_api_key=None)

        assert exc_info.value.status_code == 403
        assert "Missing API key" in exc_info.value.detail

    @pytest.mark.asyncio
    @patch("interview_prep.core.auth.settings")
    async def test_verify_raises_403_when_key_invalid(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = "valid-key"

        with pytest.raises(HTTPException) as exc_info:
            await verify_api_key(x_api_key="wrong-key")

        assert exc_info.value.status_code == 403
        assert "Invalid or missing API key" in exc_info.value.detail

    @pytest.mark.asyncio
    @patch("interview_prep.core.auth.settings")
    async def test_verify_accepts_valid_key(self, mock_settings) -> None:
        mock_settings.app.api_key_required = True
        mock_settings.app.api_keys = "my-valid-key,another-key"

        await verify_api_key(x_api_key="my-valid-key")
        await verify_api_key(x_api_key="another-key")


class TestCurrentUserDependency:
    """Test resolution of the X-User-ID header."""

    @pytest.mark.asyncio
    async def test_returns_lowercased_user_id(self, user_id: str) -> None:
        resolved = await get_current_user_id(None, x_user_id=user_id.upper())

        assert resolved == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "   ", "not-a-uuid", "12345"])
    async def test_rejects_missing_or_malformed_user_id(self, header) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user_id(None, x_user_id=header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Unauthorized"

    def test_route_returns_401_without_user_header(self, client) -> None:
        response = client.get("/v1/progress/today", headers={"X-API-Key": "test-api-key-123"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Unauthorized"

    def test_route_returns_403_with_wrong_api_key(self, client, user_id: str) -> None:
        response = client.get(
            "/v1/progress/today",
            headers={"X-API-Key": "wrong-key", "X-User-ID": user_id},
        )

        assert response.status_code == 403
