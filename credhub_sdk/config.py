"""Configuration settings for credhub-sdk using Pydantic."""

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credhub_sdk.constants import (
    CF_INSTANCE_CERT,
    CF_INSTANCE_KEY,
    CREDHUB_CONNECT_TIMEOUT,
    CREDHUB_READ_TIMEOUT,
    SSL_CERT_DIR,
)


class OAuth2Settings(BaseModel):
    """OAuth2 client-credentials settings used to obtain bearer tokens."""

    client_id: str
    client_secret: str
    access_token_uri: str
    scope: Optional[str] = None


class TLSSettings(BaseModel):
    """Client certificate and trust settings.

    ``cert_file``/``key_file`` enable mutual TLS; they default to the
    platform-provisioned instance identity files when those are present.
    ``ca_cert_dir`` adds trusted CA certificates on top of the system ones.
    """

    cert_file: Optional[str] = Field(default_factory=lambda: CF_INSTANCE_CERT or None)
    key_file: Optional[str] = Field(default_factory=lambda: CF_INSTANCE_KEY or None)
    ca_cert_dir: Optional[str] = Field(default_factory=lambda: SSL_CERT_DIR or None)

    @property
    def mutual_tls(self) -> bool:
        return bool(self.cert_file and self.key_file)


class CredHubSettings(BaseSettings):
    """Central configuration for the credential service client.

    Environment variables take precedence over defaults; nested settings use
    ``__`` as delimiter.

    Environment Variables:
        CREDHUB_URL: Base URL of the service (e.g. https://credhub.service.internal:8844)
        CREDHUB_CONNECT_TIMEOUT: Connection timeout in seconds
        CREDHUB_READ_TIMEOUT: Read timeout in seconds
        CREDHUB_OAUTH2__CLIENT_ID: OAuth2 client id (enables OAuth2)
        CREDHUB_OAUTH2__CLIENT_SECRET: OAuth2 client secret
        CREDHUB_OAUTH2__ACCESS_TOKEN_URI: OAuth2 token endpoint
        CREDHUB_TLS__CERT_FILE / CREDHUB_TLS__KEY_FILE: client certificate for mTLS
        CREDHUB_TLS__CA_CERT_DIR: directory of extra trusted CA certificates
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDHUB_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    url: Optional[str] = None
    connect_timeout: float = CREDHUB_CONNECT_TIMEOUT
    read_timeout: float = CREDHUB_READ_TIMEOUT
    oauth2: Optional[OAuth2Settings] = None
    tls: TLSSettings = Field(default_factory=TLSSettings)

    @classmethod
    def get_settings(cls, **kwargs: Any) -> "CredHubSettings":
        """Create settings with optional overrides."""
        return cls(**kwargs)


@lru_cache()
def get_settings() -> CredHubSettings:
    """Get the settings read from the environment.

    Note:
        This function is cached to avoid re-reading environment variables.
        To refresh settings, call get_settings.cache_clear()
    """
    return CredHubSettings()
