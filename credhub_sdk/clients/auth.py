"""OAuth2 client-credentials token provider and the httpx auth hook using it."""

import ssl
import threading
import time
from typing import Generator, Optional, Union

import httpx

from credhub_sdk.common.error_codes import AUTH_ERRORS
from credhub_sdk.config import OAuth2Settings
from credhub_sdk.constants import OAUTH2_TOKEN_EXPIRY_BUFFER_SECONDS
from credhub_sdk.credentials.exceptions import CredHubAuthError
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class OAuth2TokenProvider:
    """OAuth2 token manager for the client-credentials grant.

    Tokens are cached until shortly before they expire and refreshed on
    demand. The provider is safe to share between threads.

    Attributes:
        settings: Client id, secret and token endpoint.
    """

    def __init__(
        self,
        settings: OAuth2Settings,
        verify: Union[bool, ssl.SSLContext] = True,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the OAuth2 token manager.

        Args:
            settings: OAuth2 client settings.
            verify: TLS verification for the token endpoint.
            timeout: Request timeout in seconds.
            http_client: Optional client used for token requests (mainly for tests).
        """
        if not settings.access_token_uri:
            raise CredHubAuthError(
                f"{AUTH_ERRORS['AUTH_CONFIG_ERROR']}: access token URI is required"
            )
        self.settings = settings
        self._verify = verify
        self._timeout = timeout
        self._http_client = http_client
        self._lock = threading.Lock()

        # Token data
        self._access_token: Optional[str] = None
        self._token_expiry: float = 0

    def get_access_token(self, force_refresh: bool = False) -> str:
        """Get a valid access token, refreshing if necessary.

        Args:
            force_refresh: If True, forces token refresh regardless of expiry

        Returns:
            str: A valid access token

        Raises:
            CredHubAuthError: If the token endpoint rejects the request or
                returns an unusable response
        """
        with self._lock:
            if not force_refresh and self._is_token_valid():
                return self._access_token
            return self._fetch_token()

    def _fetch_token(self) -> str:
        logger.info("Refreshing OAuth2 token")
        current_time = time.time()
        data = {
            "grant_type": "client_credentials",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
        }
        if self.settings.scope:
            data["scope"] = self.settings.scope

        response = self._post(data)
        if not response.is_success:
            # Clear cached token on auth failure in case it's stale
            self._clear()
            raise CredHubAuthError(
                f"{AUTH_ERRORS['AUTH_TOKEN_REFRESH_ERROR']}: Failed to refresh token (HTTP {response.status_code}): {response.text}"
            )

        try:
            token_data = response.json()
        except ValueError as e:
            raise CredHubAuthError(
                f"{AUTH_ERRORS['AUTH_TOKEN_REFRESH_ERROR']}: Token response is not JSON"
            ) from e

        if (
            not isinstance(token_data, dict)
            or not token_data.get("access_token")
            or "expires_in" not in token_data
        ):
            raise CredHubAuthError(
                f"{AUTH_ERRORS['AUTH_TOKEN_REFRESH_ERROR']}: Missing required fields in OAuth2 response"
            )

        self._access_token = token_data["access_token"]
        self._token_expiry = current_time + float(token_data["expires_in"])
        return self._access_token

    def _post(self, data: dict) -> httpx.Response:
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self._http_client is not None:
            return self._http_client.post(
                self.settings.access_token_uri, data=data, headers=headers
            )
        with httpx.Client(verify=self._verify, timeout=self._timeout) as client:
            return client.post(self.settings.access_token_uri, data=data, headers=headers)

    def _is_token_valid(self) -> bool:
        if not self._access_token:
            return False
        return time.time() < self._token_expiry - OAUTH2_TOKEN_EXPIRY_BUFFER_SECONDS

    def is_token_valid(self) -> bool:
        """Check if the cached token exists and is not about to expire."""
        with self._lock:
            return self._is_token_valid()

    def get_time_until_expiry(self) -> Optional[float]:
        """Get the seconds remaining until the cached token expires, or None if no token."""
        with self._lock:
            if not self._access_token:
                return None
            return max(0.0, self._token_expiry - time.time())

    def refresh_token(self) -> str:
        """Force refresh the access token."""
        return self.get_access_token(force_refresh=True)

    def _clear(self) -> None:
        self._access_token = None
        self._token_expiry = 0

    def clear_cache(self) -> None:
        """Clear the cached token, forcing a refresh on next access."""
        with self._lock:
            self._clear()


class OAuth2ClientCredentialsAuth(httpx.Auth):
    """httpx auth hook adding a bearer token from an OAuth2TokenProvider."""

    def __init__(self, token_provider: OAuth2TokenProvider) -> None:
        self.token_provider = token_provider

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.token_provider.get_access_token()
        request.headers["Authorization"] = f"Bearer {token}"
        yield request
