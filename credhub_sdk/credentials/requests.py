"""Request objects for writing and generating credentials.

Requests are validated when they are built: the value (or parameters) must
have the shape registered for the declared credential type.

Example:
    >>> from credhub_sdk.credentials.requests import CredentialRequest
    >>> request = CredentialRequest.for_password("/example/db-password", "s3cr3t")
    >>> request.to_payload()
    {'name': '/example/db-password', 'type': 'password', 'value': 's3cr3t'}
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from credhub_sdk.credentials.parameters import (
    CertificateParameters,
    PasswordParameters,
    RsaParameters,
    SshParameters,
)
from credhub_sdk.credentials.registry import decoder_for
from credhub_sdk.credentials.types import (
    CertificateCredential,
    CredentialName,
    CredentialType,
    RsaCredential,
    SshCredential,
    UserCredential,
    WriteMode,
    name_of,
)

Name = Union[str, CredentialName]


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


class _BaseRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: CredentialType
    mode: Optional[WriteMode] = None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return name_of(value)

    def _base_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "type": self.type.value}
        if self.mode is not None:
            payload["mode"] = self.mode.value
        return payload


class CredentialRequest(_BaseRequest):
    """Stores a client-supplied value under a name."""

    value: Any

    @model_validator(mode="before")
    @classmethod
    def _check_value_shape(cls, data: Any) -> Any:
        if isinstance(data, dict) and "type" in data and "value" in data:
            spec = decoder_for(data["type"])
            data = {**data, "value": spec.validate_value(data["value"])}
        return data

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the service."""
        payload = self._base_payload()
        payload["value"] = _dump(self.value)
        return payload

    @classmethod
    def for_value(
        cls, name: Name, value: str, mode: Optional[WriteMode] = None
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.VALUE, mode=mode, value=value)

    @classmethod
    def for_password(
        cls, name: Name, password: str, mode: Optional[WriteMode] = None
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.PASSWORD, mode=mode, value=password)

    @classmethod
    def for_json(
        cls, name: Name, value: Dict[str, Any], mode: Optional[WriteMode] = None
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.JSON, mode=mode, value=value)

    @classmethod
    def for_user(
        cls,
        name: Name,
        username: Optional[str],
        password: str,
        mode: Optional[WriteMode] = None,
    ) -> "CredentialRequest":
        return cls(
            name=name,
            type=CredentialType.USER,
            mode=mode,
            value=UserCredential(username=username, password=password),
        )

    @classmethod
    def for_certificate(
        cls,
        name: Name,
        value: CertificateCredential,
        mode: Optional[WriteMode] = None,
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.CERTIFICATE, mode=mode, value=value)

    @classmethod
    def for_ssh(
        cls, name: Name, value: SshCredential, mode: Optional[WriteMode] = None
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.SSH, mode=mode, value=value)

    @classmethod
    def for_rsa(
        cls, name: Name, value: RsaCredential, mode: Optional[WriteMode] = None
    ) -> "CredentialRequest":
        return cls(name=name, type=CredentialType.RSA, mode=mode, value=value)


class ParametersRequest(_BaseRequest):
    """Asks the service to generate a value from parameters.

    ``parameters`` may be omitted for every generatable type except
    certificates, in which case the service defaults apply. ``username`` is
    only valid for ``user`` credentials.
    """

    parameters: Optional[Any] = None
    username: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _check_parameters_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "type" not in data:
            return data
        spec = decoder_for(data["type"])
        if not spec.generatable:
            raise ValueError(
                f"credentials of type '{spec.credential_type.value}' cannot be generated"
            )
        parameters = data.get("parameters")
        if parameters is None:
            if spec.credential_type is CredentialType.CERTIFICATE:
                raise ValueError("certificate generation requires parameters")
        else:
            parameters = spec.parameters_type.model_validate(parameters)
        if data.get("username") and spec.credential_type is not CredentialType.USER:
            raise ValueError("username is only valid when generating user credentials")
        return {**data, "parameters": parameters}

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the service."""
        payload = self._base_payload()
        if self.parameters is not None:
            payload["parameters"] = _dump(self.parameters)
        if self.username:
            payload["value"] = {"username": self.username}
        return payload

    @classmethod
    def for_password(
        cls,
        name: Name,
        parameters: Optional[PasswordParameters] = None,
        mode: Optional[WriteMode] = None,
    ) -> "ParametersRequest":
        return cls(
            name=name, type=CredentialType.PASSWORD, mode=mode, parameters=parameters
        )

    @classmethod
    def for_user(
        cls,
        name: Name,
        username: Optional[str] = None,
        parameters: Optional[PasswordParameters] = None,
        mode: Optional[WriteMode] = None,
    ) -> "ParametersRequest":
        return cls(
            name=name,
            type=CredentialType.USER,
            mode=mode,
            parameters=parameters,
            username=username,
        )

    @classmethod
    def for_certificate(
        cls,
        name: Name,
        parameters: CertificateParameters,
        mode: Optional[WriteMode] = None,
    ) -> "ParametersRequest":
        return cls(
            name=name, type=CredentialType.CERTIFICATE, mode=mode, parameters=parameters
        )

    @classmethod
    def for_ssh(
        cls,
        name: Name,
        parameters: Optional[SshParameters] = None,
        mode: Optional[WriteMode] = None,
    ) -> "ParametersRequest":
        return cls(name=name, type=CredentialType.SSH, mode=mode, parameters=parameters)

    @classmethod
    def for_rsa(
        cls,
        name: Name,
        parameters: Optional[RsaParameters] = None,
        mode: Optional[WriteMode] = None,
    ) -> "ParametersRequest":
        return cls(name=name, type=CredentialType.RSA, mode=mode, parameters=parameters)
