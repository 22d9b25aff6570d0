"""Tests for building a CredHubTemplate from settings."""

from typing import List
from unittest.mock import patch

import httpx
import pytest

from credhub_sdk.clients.auth import OAuth2ClientCredentialsAuth
from credhub_sdk.clients.factory import create_credhub_template, create_http_client
from credhub_sdk.config import CredHubSettings, OAuth2Settings, TLSSettings
from credhub_sdk.core.template import CredHubTemplate
from credhub_sdk.credentials.exceptions import CredHubConfigurationError
from credhub_sdk.credentials.types import CredentialType

NO_TLS = TLSSettings(cert_file=None, key_file=None, ca_cert_dir=None)


class TestCreateHttpClient:
    """Test cases for create_http_client."""

    def test_missing_url_raises(self):
        with pytest.raises(CredHubConfigurationError, match="CredHub-Config-500-00"):
            create_http_client(CredHubSettings(url=None, tls=NO_TLS))

    def test_without_authentication(self):
        client = create_http_client(
            CredHubSettings(url="https://credhub.example.com", tls=NO_TLS)
        )

        assert client.base_url == "https://credhub.example.com"
        assert client._auth is None
        assert client._verify is True

    def test_timeouts_from_settings(self):
        client = create_http_client(
            CredHubSettings(
                url="https://credhub.example.com",
                connect_timeout=2,
                read_timeout=7,
                tls=NO_TLS,
            )
        )

        assert client._timeout == httpx.Timeout(7.0, connect=2.0)

    def test_oauth2_installs_bearer_auth(self):
        settings = CredHubSettings(
            url="https://credhub.example.com",
            oauth2=OAuth2Settings(
                client_id="c",
                client_secret="s",
                access_token_uri="https://uaa.example.com/oauth/token",
            ),
            tls=NO_TLS,
        )

        client = create_http_client(settings)

        assert isinstance(client._auth, OAuth2ClientCredentialsAuth)
        assert client._auth.token_provider.settings == settings.oauth2

    def test_mutual_tls_uses_ssl_context(self):
        tls = TLSSettings(cert_file="/certs/instance.crt", key_file="/certs/instance.key")
        sentinel_context = object()
        with patch(
            "credhub_sdk.clients.factory.get_ssl_context",
            return_value=sentinel_context,
        ) as mock_get_ssl_context:
            client = create_http_client(
                CredHubSettings(url="https://credhub.example.com", tls=tls)
            )

        mock_get_ssl_context.assert_called_once_with(tls)
        assert client._verify is sentinel_context


class TestCreateCredHubTemplate:
    """Test cases for create_credhub_template."""

    def test_end_to_end_with_oauth2(self):
        """Test a full call: token fetch, bearer header and decoded result."""
        sent: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(
                200,
                json={
                    "id": "1111-1111-1111-1111",
                    "name": "/test",
                    "type": "value",
                    "value": "secret",
                },
            )

        settings = CredHubSettings(
            url="https://credhub.example.com:8844",
            oauth2=OAuth2Settings(
                client_id="c",
                client_secret="s",
                access_token_uri="https://uaa.example.com/oauth/token",
            ),
            tls=NO_TLS,
        )
        with patch(
            "credhub_sdk.clients.auth.OAuth2TokenProvider.get_access_token",
            return_value="token",
        ):
            with create_credhub_template(
                settings, transport=httpx.MockTransport(handler)
            ) as credhub:
                assert isinstance(credhub, CredHubTemplate)
                result = credhub.get_by_id("1111-1111-1111-1111", CredentialType.VALUE)

        assert result.value == "secret"
        assert sent[0].headers["Authorization"] == "Bearer token"
        assert sent[0].url.path == "/api/v1/data/1111-1111-1111-1111"

    def test_uses_environment_settings_by_default(self, monkeypatch):
        monkeypatch.setenv("CREDHUB_URL", "https://env.example.com")
        monkeypatch.setenv("CREDHUB_TLS__CERT_FILE", "")
        monkeypatch.setenv("CREDHUB_TLS__KEY_FILE", "")
        monkeypatch.setenv("CREDHUB_TLS__CA_CERT_DIR", "")
        with patch(
            "credhub_sdk.clients.factory.get_settings",
            side_effect=lambda: CredHubSettings(),
        ):
            credhub = create_credhub_template()

        assert credhub.http_client.base_url == "https://env.example.com"
