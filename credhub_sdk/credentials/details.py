"""Response shapes returned by the credential service."""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from credhub_sdk.credentials.types import CredentialType

T = TypeVar("T")


class CredentialDetails(BaseModel, Generic[T]):
    """One stored version of a credential.

    Attributes:
        id: Identifier of this version.
        name: Full credential name.
        type: Credential type tag.
        value: Decoded value; its shape depends on ``type``.
        version_created_at: When the service stored this version, if reported.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: CredentialType
    value: T
    version_created_at: Optional[datetime] = None


class CredentialDetailsData(BaseModel, Generic[T]):
    """Envelope for name-based lookups; versions are kept in service order."""

    model_config = ConfigDict(frozen=True)

    data: List[CredentialDetails[T]]


class CredentialSummary(BaseModel):
    """Name and creation time of a credential matched by a find request."""

    model_config = ConfigDict(frozen=True)

    name: str
    version_created_at: Optional[datetime] = None


class CredentialSummaryData(BaseModel):
    model_config = ConfigDict(frozen=True)

    credentials: List[CredentialSummary] = Field(default_factory=list)
