"""Contract of the credential service operations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union

from credhub_sdk.credentials.details import CredentialDetails, CredentialSummary
from credhub_sdk.credentials.permissions import CredentialPermission
from credhub_sdk.credentials.requests import CredentialRequest, ParametersRequest
from credhub_sdk.credentials.types import CredentialName, CredentialType

Name = Union[str, CredentialName]
TypeTag = Union[CredentialType, str]


class CredHubOperations(ABC):
    """Operations supported by the credential service.

    Every method performs exactly one blocking round trip and raises
    :class:`~credhub_sdk.credentials.exceptions.CredHubClientError` when the
    service does not answer with a 2xx status.
    """

    @abstractmethod
    def write(self, request: CredentialRequest) -> CredentialDetails:
        """Store a client-supplied credential value."""

    @abstractmethod
    def generate(self, request: ParametersRequest) -> CredentialDetails:
        """Ask the service to generate a credential value."""

    @abstractmethod
    def regenerate(self, name: Name, credential_type: TypeTag) -> CredentialDetails:
        """Generate a new value for an existing generated credential."""

    @abstractmethod
    def get_by_id(self, id: str, credential_type: TypeTag) -> CredentialDetails:
        """Retrieve one credential version by its id."""

    @abstractmethod
    def get_by_name(
        self, name: Name, credential_type: TypeTag
    ) -> List[CredentialDetails]:
        """Retrieve every stored version of a credential, in service order."""

    @abstractmethod
    def find_by_name(self, name: Name) -> List[CredentialSummary]:
        """Find credentials whose name contains ``name``."""

    @abstractmethod
    def find_by_path(self, path: str) -> List[CredentialSummary]:
        """Find credentials stored under a path."""

    @abstractmethod
    def delete_by_name(self, name: Name) -> None:
        """Delete every version of a credential."""

    @abstractmethod
    def get_permissions(self, name: Name) -> List[CredentialPermission]:
        """List the permissions attached to a credential."""

    @abstractmethod
    def add_permissions(self, name: Name, *permissions: CredentialPermission) -> None:
        """Grant permissions on a credential."""

    @abstractmethod
    def delete_permission(self, name: Name, actor: str) -> None:
        """Revoke every permission an actor holds on a credential."""

    @abstractmethod
    def interpolate_service_data(
        self, services_data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Replace ``credhub-ref`` entries in VCAP_SERVICES-shaped data."""
