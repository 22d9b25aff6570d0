"""Access control entries attached to credentials."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Operation(str, Enum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    READ_ACL = "read_acl"
    WRITE_ACL = "write_acl"


class ActorType(str, Enum):
    """Identity kinds the service recognises, rendered as ``{prefix}:{id}``."""

    APP = "mtls-app"
    USER = "uaa-user"
    OAUTH_CLIENT = "uaa-client"


def actor_id(actor_type: ActorType, identity: str) -> str:
    """Build the actor string for an identity, e.g. ``mtls-app:<app-guid>``."""
    if not identity:
        raise ValueError("actor identity must not be empty")
    return f"{actor_type.value}:{identity}"


class CredentialPermission(BaseModel):
    """Operations an actor may perform on a credential.

    Example:
        >>> CredentialPermission.for_app("2d8ad3bb", [Operation.READ])
        CredentialPermission(actor='mtls-app:2d8ad3bb', operations=[<Operation.READ: 'read'>])
    """

    model_config = ConfigDict(frozen=True)

    actor: str
    operations: List[Operation] = Field(min_length=1)

    @field_validator("actor")
    @classmethod
    def _check_actor(cls, value: str) -> str:
        prefix, _, identity = value.partition(":")
        if not identity or prefix not in {t.value for t in ActorType}:
            raise ValueError(f"invalid actor '{value}'")
        return value

    @classmethod
    def for_app(cls, app_guid: str, operations: List[Operation]) -> "CredentialPermission":
        return cls(actor=actor_id(ActorType.APP, app_guid), operations=operations)

    @classmethod
    def for_user(cls, user_id: str, operations: List[Operation]) -> "CredentialPermission":
        return cls(actor=actor_id(ActorType.USER, user_id), operations=operations)

    @classmethod
    def for_client(
        cls, client_id: str, operations: List[Operation]
    ) -> "CredentialPermission":
        return cls(actor=actor_id(ActorType.OAUTH_CLIENT, client_id), operations=operations)


class CredentialPermissions(BaseModel):
    """Envelope used by the permissions endpoints."""

    model_config = ConfigDict(frozen=True)

    credential_name: str
    permissions: List[CredentialPermission] = Field(default_factory=list)
