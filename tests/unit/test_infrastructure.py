"""Unit tests for the infrastructure layer: HTTP client and ZeptoMail provider."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from config import EmailSettings
from infrastructure.email.zeptomail import ZeptoMailProvider
from infrastructure.http_client import HttpClient
from shared.datetime_utils import utcnow


def _email_settings(token: str = "secret-token") -> EmailSettings:
    return EmailSettings(
        zepto_api_token=token,
        zepto_from_email="noreply@example.com",
        zepto_from_name="Example Realty",
    )


def _provider(token: str = "secret-token", status_code: int = 200, side_effect=None):
    http = MagicMock()
    http.post = AsyncMock(
        return_value=MagicMock(status_code=status_code, text="upstream said no"),
        side_effect=side_effect,
    )
    provider = ZeptoMailProvider(
        _email_settings(token),
        http,
        app_name="Example Realty",
        app_url="https://realty.example.com",
        code_ttl_minutes=10,
    )
    return provider, http


# ── HttpClient ────────────────────────────────────────────────────────────────


class TestHttpClient:
    async def test_post_delegates_to_httpx(self, mocker):
        client = HttpClient()
        fake_resp = MagicMock(status_code=200)
        mocker.patch.object(client._client, "post", return_value=fake_resp)
        resp = await client.post("http://example.com")
        assert resp.status_code == 200
        await client.aclose()

    async def test_post_propagates_exception(self, mocker):
        client = HttpClient()
        mocker.patch.object(client._client, "post", side_effect=Exception("timeout"))
        with pytest.raises(Exception, match="timeout"):
            await client.post("http://example.com")
        await client.aclose()

    async def test_default_user_agent(self):
        async with HttpClient(headers={"X-Extra": "1"}) as client:
            assert client._client.headers["User-Agent"] == "realty-backend/1.0"
            assert client._client.headers["X-Extra"] == "1"


# ── ZeptoMailProvider ─────────────────────────────────────────────────────────


class TestZeptoMailProvider:
    async def test_brochure_code_email(self):
        provider, http = _provider()
        ok = await provider.send_brochure_code(
            "a@x.com", "P1", "042917", utcnow() + timedelta(minutes=10)
        )
        assert ok is True

        url = http.post.call_args[0][0]
        payload = http.post.call_args[1]["json"]
        headers = http.post.call_args[1]["headers"]
        assert url.startswith("https://api.zeptomail.in/")
        assert payload["to"][0]["email_address"]["address"] == "a@x.com"
        assert payload["subject"] == "Your Example Realty Brochure OTP"
        assert "042917" in payload["htmlbody"]
        assert "042917" in payload["textbody"]
        assert "10 minutes" in payload["textbody"]
        assert headers["Authorization"] == "Zoho-enczapikey secret-token"

    async def test_password_reset_email(self):
        provider, http = _provider()
        ok = await provider.send_password_reset_code(
            "owner@example.com", "550012", utcnow() + timedelta(minutes=10)
        )
        assert ok is True
        payload = http.post.call_args[1]["json"]
        assert payload["subject"] == "Password Reset Code - Example Realty"
        assert "550012" in payload["htmlbody"]

    async def test_prefixed_token_kept(self):
        provider, http = _provider(token="Zoho-enczapikey abc")
        await provider.send_brochure_code("a@x.com", "P1", "123456", utcnow())
        assert http.post.call_args[1]["headers"]["Authorization"] == "Zoho-enczapikey abc"

    async def test_missing_token_returns_false_without_request(self):
        provider, http = _provider(token="")
        assert await provider.send_brochure_code("a@x.com", "P1", "123456", utcnow()) is False
        http.post.assert_not_called()

    async def test_non_2xx_returns_false(self):
        provider, _ = _provider(status_code=500)
        assert await provider.send_brochure_code("a@x.com", "P1", "123456", utcnow()) is False

    async def test_transport_error_returns_false(self):
        provider, _ = _provider(side_effect=Exception("connection reset"))
        assert await provider.send_brochure_code("a@x.com", "P1", "123456", utcnow()) is False
