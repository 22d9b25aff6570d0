"""
Error codes for the credhub-sdk.

Error codes follow the format: CredHub-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Client: errors raised while calling the credential service
- Auth: OAuth2 token acquisition errors
- Config: configuration errors
"""

from enum import Enum
from typing import Dict


class ErrorComponent(Enum):
    """Components that can generate errors in the system."""

    CLIENT = "Client"
    AUTH = "Auth"
    CONFIG = "Config"


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"CredHub-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Client Errors
CLIENT_ERRORS = {
    "REMOTE_STATUS_ERROR": ErrorCode(
        ErrorComponent.CLIENT.value, "502", "00", "Error calling CredHub"
    ),
    "RESPONSE_DESERIALIZATION_ERROR": ErrorCode(
        ErrorComponent.CLIENT.value, "502", "01", "Unable to decode CredHub response"
    ),
}

# Auth Errors
AUTH_ERRORS = {
    "AUTH_CONFIG_ERROR": ErrorCode(
        ErrorComponent.AUTH.value, "401", "00", "OAuth2 configuration error"
    ),
    "AUTH_TOKEN_REFRESH_ERROR": ErrorCode(
        ErrorComponent.AUTH.value, "401", "01", "OAuth2 token refresh failed"
    ),
}

# Configuration Errors
CONFIG_ERRORS = {
    "MISSING_URL_ERROR": ErrorCode(
        ErrorComponent.CONFIG.value, "500", "00", "CredHub URL is not configured"
    ),
    "TLS_CONFIG_ERROR": ErrorCode(
        ErrorComponent.CONFIG.value, "500", "01", "TLS configuration error"
    ),
}

# Combined dictionary of all error codes
ERROR_CODES: Dict[str, ErrorCode] = {
    **CLIENT_ERRORS,
    **AUTH_ERRORS,
    **CONFIG_ERRORS,
}
