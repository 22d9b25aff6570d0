"""Tests for credential permissions."""

import pytest
from pydantic import ValidationError

from credhub_sdk.credentials.permissions import (
    ActorType,
    CredentialPermission,
    CredentialPermissions,
    Operation,
    actor_id,
)


class TestCredentialPermission:
    """Test cases for CredentialPermission."""

    @pytest.mark.parametrize(
        "factory,expected",
        [
            (CredentialPermission.for_app, "mtls-app:id-1"),
            (CredentialPermission.for_user, "uaa-user:id-1"),
            (CredentialPermission.for_client, "uaa-client:id-1"),
        ],
    )
    def test_factories_build_actor(self, factory, expected):
        permission = factory("id-1", [Operation.READ])
        assert permission.actor == expected
        assert permission.operations == [Operation.READ]

    def test_serializes_operation_values(self):
        permission = CredentialPermission.for_app(
            "guid", [Operation.READ_ACL, Operation.WRITE_ACL]
        )
        assert permission.model_dump(mode="json") == {
            "actor": "mtls-app:guid",
            "operations": ["read_acl", "write_acl"],
        }

    @pytest.mark.parametrize("actor", ["", "guid", "unknown:guid", "mtls-app:"])
    def test_invalid_actor_rejected(self, actor):
        with pytest.raises(ValidationError):
            CredentialPermission(actor=actor, operations=["read"])

    def test_operations_required(self):
        with pytest.raises(ValidationError):
            CredentialPermission.for_app("guid", [])

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValidationError):
            CredentialPermission(actor="uaa-user:u", operations=["launch"])


class TestActorId:
    def test_builds_prefixed_identity(self):
        assert actor_id(ActorType.OAUTH_CLIENT, "client") == "uaa-client:client"

    def test_empty_identity_rejected(self):
        with pytest.raises(ValueError):
            actor_id(ActorType.APP, "")


class TestCredentialPermissions:
    def test_decodes_envelope(self):
        permissions = CredentialPermissions.model_validate(
            {
                "credential_name": "/n",
                "permissions": [{"actor": "uaa-user:u", "operations": ["delete"]}],
            }
        )
        assert permissions.permissions == [
            CredentialPermission.for_user("u", [Operation.DELETE])
        ]

    def test_permissions_default_to_empty(self):
        assert CredentialPermissions(credential_name="/n").permissions == []
