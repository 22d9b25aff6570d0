"""Mapping from credential type to value shape, parameter shape and decoders.

Every operation that decodes a credential value goes through
:func:`decoder_for`, so the type-to-shape mapping lives in one table.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, TypeAdapter

from credhub_sdk.credentials.details import CredentialDetails, CredentialDetailsData
from credhub_sdk.credentials.parameters import (
    CertificateParameters,
    PasswordParameters,
    RsaParameters,
    SshParameters,
)
from credhub_sdk.credentials.types import (
    CertificateCredential,
    CredentialType,
    RsaCredential,
    SshCredential,
    UserCredential,
)

JsonObject = Dict[str, Any]


@dataclass(frozen=True)
class CredentialTypeSpec:
    """Value and parameter shapes for a single credential type.

    Attributes:
        credential_type: The type tag this entry describes.
        value_type: Python type of the credential value.
        parameters_type: Model for generation parameters, or None when the
            service cannot generate this type.
    """

    credential_type: CredentialType
    value_type: Any
    parameters_type: Optional[Type[BaseModel]] = None
    _value_adapter: TypeAdapter = field(init=False, repr=False, compare=False)
    _details_adapter: TypeAdapter = field(init=False, repr=False, compare=False)
    _data_adapter: TypeAdapter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_value_adapter", TypeAdapter(self.value_type))
        object.__setattr__(
            self, "_details_adapter", TypeAdapter(CredentialDetails[self.value_type])
        )
        object.__setattr__(
            self, "_data_adapter", TypeAdapter(CredentialDetailsData[self.value_type])
        )

    @property
    def generatable(self) -> bool:
        return self.parameters_type is not None

    def validate_value(self, value: Any) -> Any:
        """Validate (and coerce dicts into models for) a value of this type.

        Raises:
            pydantic.ValidationError: If ``value`` does not have this type's shape.
        """
        return self._value_adapter.validate_python(value)

    def decode_details(self, payload: Any) -> CredentialDetails:
        return self._details_adapter.validate_python(payload)

    def decode_data(self, payload: Any) -> CredentialDetailsData:
        return self._data_adapter.validate_python(payload)


CREDENTIAL_TYPES: Dict[CredentialType, CredentialTypeSpec] = {
    spec.credential_type: spec
    for spec in (
        CredentialTypeSpec(CredentialType.VALUE, str),
        CredentialTypeSpec(CredentialType.PASSWORD, str, PasswordParameters),
        CredentialTypeSpec(CredentialType.USER, UserCredential, PasswordParameters),
        CredentialTypeSpec(CredentialType.JSON, JsonObject),
        CredentialTypeSpec(
            CredentialType.CERTIFICATE, CertificateCredential, CertificateParameters
        ),
        CredentialTypeSpec(CredentialType.SSH, SshCredential, SshParameters),
        CredentialTypeSpec(CredentialType.RSA, RsaCredential, RsaParameters),
    )
}


def decoder_for(credential_type: Union[CredentialType, str]) -> CredentialTypeSpec:
    """Look up the registry entry for a credential type.

    Args:
        credential_type: A CredentialType or its string tag (e.g. ``"ssh"``).

    Returns:
        CredentialTypeSpec: The entry holding the shapes and decoders.

    Raises:
        ValueError: If the type tag is unknown.
    """
    return CREDENTIAL_TYPES[CredentialType(credential_type)]
