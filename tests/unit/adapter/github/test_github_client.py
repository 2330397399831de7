"""Unit tests for the GitHub identity client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from natter.adapter.github import MockGitHubIdentityClient, RealGitHubIdentityClient
from natter.domain.error import InvalidCredentialError, ProviderUnavailableError
from natter.domain.value import Username


def make_response(status_code: int, payload=None, json_error: bool = False):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json = MagicMock(side_effect=ValueError("not json"))
    else:
        response.json = MagicMock(return_value=payload)
    return response


class TestRealGitHubIdentityClient:
    """Tests for RealGitHubIdentityClient.get_username."""

    @pytest.mark.asyncio
    async def test_returns_login(self):
        client = RealGitHubIdentityClient(user_agent="natter-test", timeout=5.0)

        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=make_response(200, {"login": "alice"}))
            mock_client.return_value.__aenter__.return_value.get = get

            result = await client.get_username("token-123")

            assert result == Username("alice")
            get.assert_called_once_with(
                "https://api.github.com/user",
                headers={
                    "Authorization": "Bearer token-123",
                    "Accept": "application/json",
                    "User-Agent": "natter-test",
                },
                timeout=5.0,
            )

    @pytest.mark.asyncio
    async def test_uses_configured_api_url(self):
        client = RealGitHubIdentityClient(api_url="https://github.example.com/api/v3/")

        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=make_response(200, {"login": "alice"}))
            mock_client.return_value.__aenter__.return_value.get = get

            await client.get_username("token-123")

            assert get.call_args.args[0] == "https://github.example.com/api/v3/user"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403, 404])
    async def test_rejected_token(self, status_code):
        client = RealGitHubIdentityClient()

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(status_code, {"message": "Bad credentials"})
            )

            with pytest.raises(InvalidCredentialError):
                await client.get_username("bad-token")

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self):
        client = RealGitHubIdentityClient()

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(502)
            )

            with pytest.raises(ProviderUnavailableError):
                await client.get_username("token-123")

    @pytest.mark.asyncio
    async def test_network_error_is_unavailable(self):
        client = RealGitHubIdentityClient()

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectTimeout("timed out")
            )

            with pytest.raises(ProviderUnavailableError):
                await client.get_username("token-123")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"login": ""}, {"login": 5}, ["alice"]])
    async def test_missing_login_is_rejected(self, payload):
        client = RealGitHubIdentityClient()

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, payload)
            )

            with pytest.raises(InvalidCredentialError):
                await client.get_username("token-123")

    @pytest.mark.asyncio
    async def test_non_json_body_is_rejected(self):
        client = RealGitHubIdentityClient()

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, json_error=True)
            )

            with pytest.raises(InvalidCredentialError):
                await client.get_username("token-123")


class TestMockGitHubIdentityClient:
    """Tests for the mock client used in tests and local runs."""

    @pytest.mark.asyncio
    async def test_known_token(self):
        client = MockGitHubIdentityClient()

        assert (await client.get_username("mock-admin-token")).root == "mockadmin"

    @pytest.mark.asyncio
    async def test_custom_tokens(self):
        client = MockGitHubIdentityClient(tokens={"t": "bob"})

        assert (await client.get_username("t")).root == "bob"
        with pytest.raises(InvalidCredentialError):
            await client.get_username("mock-admin-token")
