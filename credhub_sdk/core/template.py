"""CredHubTemplate: the single entry point for credential operations.

Each method builds the request body, issues one call through the HTTP
invocation layer and maps the response with :mod:`credhub_sdk.core.responses`.
Errors are never recovered here; they always propagate to the caller.

Example:
    >>> from credhub_sdk import CredentialRequest, CredentialType, create_credhub_template
    >>> with create_credhub_template() as credhub:
    ...     credhub.write(CredentialRequest.for_password("/example/db", "s3cr3t"))
    ...     versions = credhub.get_by_name("/example/db", CredentialType.PASSWORD)
"""

from typing import Any, Dict, List

from pydantic import TypeAdapter

from credhub_sdk.clients.http import CredHubHttpClient
from credhub_sdk.core.operations import CredHubOperations, Name, TypeTag
from credhub_sdk.core.responses import check_response, map_response
from credhub_sdk.core.urls import (
    BASE_URL_PATH,
    ID_URL_PATH,
    INTERPOLATE_URL_PATH,
    NAME_LIKE_URL_QUERY,
    NAME_URL_QUERY,
    PATH_URL_QUERY,
    PERMISSIONS_ACTOR_URL_QUERY,
    PERMISSIONS_URL_PATH,
    PERMISSIONS_URL_QUERY,
    REGENERATE_URL_PATH,
)
from credhub_sdk.credentials.details import (
    CredentialDetails,
    CredentialSummary,
    CredentialSummaryData,
)
from credhub_sdk.credentials.permissions import (
    CredentialPermission,
    CredentialPermissions,
)
from credhub_sdk.credentials.registry import decoder_for
from credhub_sdk.credentials.requests import CredentialRequest, ParametersRequest
from credhub_sdk.credentials.types import name_of
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

_services_data_adapter = TypeAdapter(Dict[str, Any])


class CredHubTemplate(CredHubOperations):
    """Synchronous implementation of :class:`CredHubOperations`.

    The template holds no state of its own beyond the HTTP client, so it can
    be shared between threads as far as httpx allows.

    Attributes:
        http_client: The HTTP invocation layer used for every call.
    """

    def __init__(self, http_client: CredHubHttpClient) -> None:
        self.http_client = http_client

    def write(self, request: CredentialRequest) -> CredentialDetails:
        logger.info(f"Writing {request.type.value} credential '{request.name}'")
        response = self.http_client.exchange(
            "PUT", BASE_URL_PATH, json=request.to_payload()
        )
        return map_response(response, decoder_for(request.type).decode_details)

    def generate(self, request: ParametersRequest) -> CredentialDetails:
        logger.info(f"Generating {request.type.value} credential '{request.name}'")
        response = self.http_client.exchange(
            "POST", BASE_URL_PATH, json=request.to_payload()
        )
        return map_response(response, decoder_for(request.type).decode_details)

    def regenerate(self, name: Name, credential_type: TypeTag) -> CredentialDetails:
        credential_name = name_of(name)
        spec = decoder_for(credential_type)
        logger.info(f"Regenerating credential '{credential_name}'")
        response = self.http_client.exchange(
            "POST", REGENERATE_URL_PATH, json={"name": credential_name}
        )
        return map_response(response, spec.decode_details)

    def get_by_id(self, id: str, credential_type: TypeTag) -> CredentialDetails:
        spec = decoder_for(credential_type)
        response = self.http_client.exchange("GET", ID_URL_PATH, id)
        return map_response(response, spec.decode_details)

    def get_by_name(
        self, name: Name, credential_type: TypeTag
    ) -> List[CredentialDetails]:
        spec = decoder_for(credential_type)
        response = self.http_client.exchange("GET", NAME_URL_QUERY, name_of(name))
        return list(map_response(response, spec.decode_data).data)

    def find_by_name(self, name: Name) -> List[CredentialSummary]:
        response = self.http_client.exchange(
            "GET", NAME_LIKE_URL_QUERY, name_of(name)
        )
        summaries = map_response(response, CredentialSummaryData.model_validate)
        return list(summaries.credentials)

    def find_by_path(self, path: str) -> List[CredentialSummary]:
        response = self.http_client.exchange("GET", PATH_URL_QUERY, path)
        summaries = map_response(response, CredentialSummaryData.model_validate)
        return list(summaries.credentials)

    def delete_by_name(self, name: Name) -> None:
        credential_name = name_of(name)
        logger.info(f"Deleting credential '{credential_name}'")
        response = self.http_client.exchange("DELETE", NAME_URL_QUERY, credential_name)
        check_response(response)

    def get_permissions(self, name: Name) -> List[CredentialPermission]:
        response = self.http_client.exchange(
            "GET", PERMISSIONS_URL_QUERY, name_of(name)
        )
        return list(
            map_response(response, CredentialPermissions.model_validate).permissions
        )

    def add_permissions(self, name: Name, *permissions: CredentialPermission) -> None:
        if not permissions:
            raise ValueError("at least one permission is required")
        body = CredentialPermissions(
            credential_name=name_of(name), permissions=list(permissions)
        )
        logger.info(
            f"Adding {len(permissions)} permission(s) to credential '{body.credential_name}'"
        )
        response = self.http_client.exchange(
            "POST", PERMISSIONS_URL_PATH, json=body.model_dump(mode="json")
        )
        check_response(response)

    def delete_permission(self, name: Name, actor: str) -> None:
        credential_name = name_of(name)
        logger.info(
            f"Deleting permissions of '{actor}' on credential '{credential_name}'"
        )
        response = self.http_client.exchange(
            "DELETE", PERMISSIONS_ACTOR_URL_QUERY, credential_name, actor
        )
        check_response(response)

    def interpolate_service_data(
        self, services_data: Dict[str, Any]
    ) -> Dict[str, Any]:
        response = self.http_client.exchange(
            "POST", INTERPOLATE_URL_PATH, json=services_data
        )
        return map_response(response, _services_data_adapter.validate_python)

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "CredHubTemplate":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
