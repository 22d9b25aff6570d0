"""HTTP invocation layer for the credential service.

CredHubHttpClient wraps a synchronous httpx.Client and issues exactly one
request per call against one of the URL templates in
:mod:`credhub_sdk.core.urls`. It never inspects the response status; that
is the job of :mod:`credhub_sdk.core.responses`.
"""

import ssl
import threading
from typing import Any, Dict, Optional, Union

import httpx

from credhub_sdk.clients import ClientInterface
from credhub_sdk.core.urls import expand
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class CredHubHttpClient(ClientInterface):
    """Synchronous HTTP client bound to a credential service base URL.

    Usage:
        >>> with CredHubHttpClient("https://credhub.example.com:8844") as client:
        ...     response = client.exchange("GET", ID_URL_PATH, "1111-1111")

    Attributes:
        base_url: Base URL of the service.
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[httpx.Auth] = None,
        verify: Union[bool, ssl.SSLContext] = True,
        timeout: Union[float, httpx.Timeout] = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL of the service.
            auth: Optional httpx auth hook (e.g. OAuth2 bearer tokens).
            verify: TLS verification setting or SSL context (for mutual TLS).
            timeout: Request timeout in seconds or an httpx.Timeout.
            headers: Extra headers sent with every request.
            transport: Optional httpx transport (mainly for tests).
        """
        self.base_url = base_url.rstrip("/")
        self._auth = auth
        self._verify = verify
        self._timeout = timeout
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

    def load(self) -> None:
        self._get_client()

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client.

        Creation is serialized so concurrent first calls share one pool.
        """
        with self._lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    base_url=self.base_url,
                    auth=self._auth,
                    verify=self._verify,
                    timeout=self._timeout,
                    headers=self._headers,
                    transport=self._transport,
                )
            return self._client

    def exchange(
        self,
        method: str,
        template: str,
        *uri_variables: Any,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        """Issue one request against a URL template.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE).
            template: URL template from :mod:`credhub_sdk.core.urls`.
            *uri_variables: Values for the template placeholders, in order.
            json: Optional JSON body.

        Returns:
            httpx.Response: The raw response, whatever its status.

        Raises:
            ValueError: If the variables do not match the template.
            httpx.HTTPError: On transport failure.
        """
        path = expand(template, *uri_variables)
        logger.debug(f"Calling CredHub {method.upper()} {template}")
        response = self._get_client().request(method.upper(), path, json=json)
        logger.debug(
            f"CredHub {method.upper()} {template} returned {response.status_code}"
        )
        return response

    def close(self) -> None:
        """Close the underlying HTTP client."""
        with self._lock:
            if self._client is not None and not self._client.is_closed:
                self._client.close()
            self._client = None

    def __enter__(self) -> "CredHubHttpClient":
        self._get_client()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
