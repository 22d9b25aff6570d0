"""Custom exceptions for credential service operations.

Every operation of the SDK raises one of these; transport failures
(``httpx.HTTPError``) are not wrapped.
"""

from typing import Optional

import httpx

from credhub_sdk.common.error_codes import CLIENT_ERRORS, ErrorCode


def _status_text(status_code: int) -> str:
    try:
        phrase = httpx.codes.get_reason_phrase(status_code)
    except ValueError:
        phrase = ""
    return f"{status_code} {phrase}".strip()


class CredHubError(Exception):
    """Base exception for credential service operations.

    All SDK exceptions inherit from this class, allowing for broad
    exception handling when needed.
    """

    pass


class CredHubClientError(CredHubError):
    """Raised when the credential service answers with a non-2xx status.

    The message always contains the numeric status code, so callers can
    match on it.

    Attributes:
        status_code: HTTP status returned by the service.
        service_message: Error text supplied by the service, if any.
        error_code: SDK error code classifying the failure.

    Example:
        >>> raise CredHubClientError(404, "The request could not be completed")
        CredHubClientError: Error calling CredHub: 404 Not Found: The request could not be completed
    """

    default_error_code: ErrorCode = CLIENT_ERRORS["REMOTE_STATUS_ERROR"]

    def __init__(
        self,
        status_code: int,
        service_message: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
    ):
        self.status_code = status_code
        self.service_message = service_message
        self.error_code = error_code or self.default_error_code
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"{self.error_code.description}: {_status_text(self.status_code)}"
        if self.service_message:
            message = f"{message}: {self.service_message}"
        return message


class CredHubResponseError(CredHubClientError):
    """Raised when a 2xx response body cannot be decoded into the expected shape.

    Kept distinct from a remote error status so callers can tell a
    misbehaving service (or a wrong ``credential_type``) from a refusal.

    Example:
        >>> raise CredHubResponseError(200, "response body is empty")
    """

    default_error_code = CLIENT_ERRORS["RESPONSE_DESERIALIZATION_ERROR"]


class CredHubConfigurationError(CredHubError):
    """Raised when the SDK configuration is missing or invalid.

    Example:
        >>> raise CredHubConfigurationError(
        ...     "CredHub-Config-500-00: CredHub URL is not configured"
        ... )
    """

    pass


class CredHubAuthError(CredHubError):
    """Raised when an OAuth2 access token cannot be obtained.

    This can occur when:
    - The token endpoint rejects the client credentials
    - The token response is missing required fields
    """

    pass
