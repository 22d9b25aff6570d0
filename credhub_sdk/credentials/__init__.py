"""Credential types, requests and response shapes.

Quick Start:
    >>> from credhub_sdk.credentials import (
    ...     CredentialRequest, CredentialType, ParametersRequest, PasswordParameters
    ... )
    >>> write = CredentialRequest.for_value("/example/api-url", "https://api.example.com")
    >>> generate = ParametersRequest.for_password(
    ...     "/example/db-password", PasswordParameters(length=32)
    ... )

Supported credential types:
    - value, password: plain strings
    - json: arbitrary JSON objects
    - user: username/password pairs
    - certificate, ssh, rsa: key material
"""

from credhub_sdk.credentials.details import (
    CredentialDetails,
    CredentialDetailsData,
    CredentialSummary,
)
from credhub_sdk.credentials.exceptions import (
    CredHubAuthError,
    CredHubClientError,
    CredHubConfigurationError,
    CredHubError,
    CredHubResponseError,
)
from credhub_sdk.credentials.parameters import (
    CertificateParameters,
    ExtendedKeyUsage,
    KeyUsage,
    PasswordParameters,
    RsaParameters,
    SshParameters,
)
from credhub_sdk.credentials.permissions import (
    ActorType,
    CredentialPermission,
    Operation,
)
from credhub_sdk.credentials.registry import CredentialTypeSpec, decoder_for
from credhub_sdk.credentials.requests import CredentialRequest, ParametersRequest
from credhub_sdk.credentials.types import (
    CertificateCredential,
    CredentialName,
    CredentialType,
    RsaCredential,
    ServiceInstanceCredentialName,
    SimpleCredentialName,
    SshCredential,
    UserCredential,
    WriteMode,
)

__all__ = [
    # Types
    "CredentialType",
    "WriteMode",
    "CredentialName",
    "SimpleCredentialName",
    "ServiceInstanceCredentialName",
    "UserCredential",
    "CertificateCredential",
    "SshCredential",
    "RsaCredential",
    # Parameters
    "PasswordParameters",
    "CertificateParameters",
    "SshParameters",
    "RsaParameters",
    "KeyUsage",
    "ExtendedKeyUsage",
    # Requests and responses
    "CredentialRequest",
    "ParametersRequest",
    "CredentialDetails",
    "CredentialDetailsData",
    "CredentialSummary",
    # Permissions
    "ActorType",
    "CredentialPermission",
    "Operation",
    # Registry
    "CredentialTypeSpec",
    "decoder_for",
    # Exceptions
    "CredHubError",
    "CredHubClientError",
    "CredHubResponseError",
    "CredHubConfigurationError",
    "CredHubAuthError",
]
