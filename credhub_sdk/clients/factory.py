"""Builds a ready-to-use CredHubTemplate from settings.

Authentication is chosen by ordinary branching on the settings:

- OAuth2 settings present: bearer tokens from the client-credentials grant
- client certificate present: mutual TLS
- neither: no client authentication

OAuth2 and mutual TLS can be combined.
"""

from typing import Optional

import httpx

from credhub_sdk.clients.auth import OAuth2ClientCredentialsAuth, OAuth2TokenProvider
from credhub_sdk.clients.http import CredHubHttpClient
from credhub_sdk.clients.ssl_utils import get_ssl_context
from credhub_sdk.common.error_codes import CONFIG_ERRORS
from credhub_sdk.config import CredHubSettings, get_settings
from credhub_sdk.core.template import CredHubTemplate
from credhub_sdk.credentials.exceptions import CredHubConfigurationError
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


def create_http_client(
    settings: CredHubSettings,
    transport: Optional[httpx.BaseTransport] = None,
) -> CredHubHttpClient:
    """Create the HTTP invocation layer described by ``settings``.

    Args:
        settings: Service URL, timeouts, OAuth2 and TLS settings.
        transport: Optional httpx transport (mainly for tests).

    Returns:
        CredHubHttpClient: A client for the configured service.

    Raises:
        CredHubConfigurationError: If the URL is missing or TLS files are invalid.
    """
    if not settings.url:
        raise CredHubConfigurationError(
            f"{CONFIG_ERRORS['MISSING_URL_ERROR']}: set CREDHUB_URL or pass url="
        )

    verify = get_ssl_context(settings.tls)
    timeout = httpx.Timeout(settings.read_timeout, connect=settings.connect_timeout)

    auth: Optional[httpx.Auth] = None
    if settings.oauth2 is not None:
        logger.info(
            f"Using OAuth2 client credentials for client '{settings.oauth2.client_id}'"
        )
        token_provider = OAuth2TokenProvider(
            settings.oauth2, verify=verify, timeout=settings.read_timeout
        )
        auth = OAuth2ClientCredentialsAuth(token_provider)

    if settings.tls.mutual_tls:
        logger.info("Using mutual TLS client certificate")
    elif auth is None:
        logger.warning("No client authentication configured for CredHub")

    return CredHubHttpClient(
        settings.url, auth=auth, verify=verify, timeout=timeout, transport=transport
    )


def create_credhub_template(
    settings: Optional[CredHubSettings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> CredHubTemplate:
    """Create a CredHubTemplate from explicit settings or the environment.

    Example:
        >>> from credhub_sdk.config import CredHubSettings, OAuth2Settings
        >>> credhub = create_credhub_template(
        ...     CredHubSettings(
        ...         url="https://credhub.service.internal:8844",
        ...         oauth2=OAuth2Settings(
        ...             client_id="my-client",
        ...             client_secret="my-secret",
        ...             access_token_uri="https://uaa.service.internal/oauth/token",
        ...         ),
        ...     )
        ... )
    """
    settings = settings or get_settings()
    return CredHubTemplate(create_http_client(settings, transport=transport))
