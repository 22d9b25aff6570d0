"""Core types describing credentials stored in the service.

The credential type tag decides which value shape (and which generation
parameter shape) a request or response carries.

Example:
    >>> from credhub_sdk.credentials.types import (
    ...     CredentialType, SimpleCredentialName, UserCredential
    ... )
    >>> name = SimpleCredentialName("example", "database")
    >>> name.name
    '/example/database'
    >>> UserCredential(username="admin", password="secret")
"""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class CredentialType(str, Enum):
    """Types of credentials supported by the service."""

    VALUE = "value"
    PASSWORD = "password"
    USER = "user"
    JSON = "json"
    CERTIFICATE = "certificate"
    SSH = "ssh"
    RSA = "rsa"


class WriteMode(str, Enum):
    """How the service treats an existing credential with the same name.

    - OVERWRITE: always store a new version
    - NO_OVERWRITE: keep the existing version and return it
    - CONVERGE: store a new version only if the value or parameters changed
    """

    OVERWRITE = "overwrite"
    NO_OVERWRITE = "no-overwrite"
    CONVERGE = "converge"


class CredentialName:
    """Name of a credential, always rendered as an absolute ``/``-joined path."""

    def __init__(self, *segments: str) -> None:
        cleaned = tuple(str(s).strip("/") for s in segments)
        if not cleaned or not all(cleaned):
            raise ValueError("credential name segments must be non-empty strings")
        self._segments: Tuple[str, ...] = cleaned

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    @property
    def name(self) -> str:
        return "/" + "/".join(self._segments)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CredentialName):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


class SimpleCredentialName(CredentialName):
    """A credential name built from arbitrary path segments.

    Example:
        >>> SimpleCredentialName("app", "db", "password").name
        '/app/db/password'
    """

    pass


class ServiceInstanceCredentialName(CredentialName):
    """A credential name scoped to a service broker binding.

    Renders as ``/c/{service_broker}/{service_offering}/{service_binding_id}/{credential}``.
    """

    NAMESPACE = "c"

    def __init__(
        self,
        service_broker: str,
        service_offering: str,
        service_binding_id: str,
        credential: str,
    ) -> None:
        super().__init__(
            self.NAMESPACE,
            service_broker,
            service_offering,
            service_binding_id,
            credential,
        )


def name_of(name: Any) -> str:
    """Return the string form of a credential name given as str or CredentialName."""
    if isinstance(name, CredentialName):
        return name.name
    if isinstance(name, str) and name:
        return name
    raise ValueError(f"invalid credential name: {name!r}")


class _CredentialModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class UserCredential(_CredentialModel):
    """A username/password pair. ``password_hash`` is only set by the service."""

    username: Optional[str] = None
    password: str
    password_hash: Optional[str] = None


class CertificateCredential(_CredentialModel):
    """An X.509 certificate with its private key and optional CA.

    ``ca_name`` references a CA credential stored in the service; it is only
    meaningful on write requests.
    """

    certificate: Optional[str] = None
    private_key: Optional[str] = None
    ca: Optional[str] = None
    ca_name: Optional[str] = None


class SshCredential(_CredentialModel):
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    public_key_fingerprint: Optional[str] = None


class RsaCredential(_CredentialModel):
    public_key: Optional[str] = None
    private_key: Optional[str] = None
