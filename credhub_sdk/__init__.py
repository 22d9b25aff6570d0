"""Client SDK for storing, generating and retrieving credentials in CredHub."""

from credhub_sdk.clients.factory import create_credhub_template
from credhub_sdk.config import CredHubSettings, OAuth2Settings, TLSSettings
from credhub_sdk.core.operations import CredHubOperations
from credhub_sdk.core.template import CredHubTemplate
from credhub_sdk.credentials import (
    CertificateCredential,
    CertificateParameters,
    CredentialDetails,
    CredentialName,
    CredentialPermission,
    CredentialRequest,
    CredentialSummary,
    CredentialType,
    CredHubAuthError,
    CredHubClientError,
    CredHubConfigurationError,
    CredHubError,
    CredHubResponseError,
    Operation,
    ParametersRequest,
    PasswordParameters,
    RsaCredential,
    RsaParameters,
    ServiceInstanceCredentialName,
    SimpleCredentialName,
    SshCredential,
    SshParameters,
    UserCredential,
    WriteMode,
)

__version__ = "0.1.0"

__all__ = [
    "create_credhub_template",
    "CredHubSettings",
    "OAuth2Settings",
    "TLSSettings",
    "CredHubOperations",
    "CredHubTemplate",
    "CertificateCredential",
    "CertificateParameters",
    "CredentialDetails",
    "CredentialName",
    "CredentialPermission",
    "CredentialRequest",
    "CredentialSummary",
    "CredentialType",
    "CredHubAuthError",
    "CredHubClientError",
    "CredHubConfigurationError",
    "CredHubError",
    "CredHubResponseError",
    "Operation",
    "ParametersRequest",
    "PasswordParameters",
    "RsaCredential",
    "RsaParameters",
    "ServiceInstanceCredentialName",
    "SimpleCredentialName",
    "SshCredential",
    "SshParameters",
    "UserCredential",
    "WriteMode",
]
