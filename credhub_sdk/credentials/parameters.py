"""Parameters for asking the service to generate a credential value."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class KeyUsage(str, Enum):
    DIGITAL_SIGNATURE = "digital_signature"
    NON_REPUDIATION = "non_repudiation"
    KEY_ENCIPHERMENT = "key_encipherment"
    DATA_ENCIPHERMENT = "data_encipherment"
    KEY_AGREEMENT = "key_agreement"
    KEY_CERT_SIGN = "key_cert_sign"
    CRL_SIGN = "crl_sign"
    ENCIPHER_ONLY = "encipher_only"
    DECIPHER_ONLY = "decipher_only"


class ExtendedKeyUsage(str, Enum):
    SERVER_AUTH = "server_auth"
    CLIENT_AUTH = "client_auth"
    CODE_SIGNING = "code_signing"
    EMAIL_PROTECTION = "email_protection"
    TIMESTAMPING = "timestamping"


class _ParametersModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PasswordParameters(_ParametersModel):
    """Rules for generating a password (also used for ``user`` credentials).

    Unset fields are omitted from the request so the service defaults apply.
    """

    length: Optional[int] = None
    exclude_upper: Optional[bool] = None
    exclude_lower: Optional[bool] = None
    exclude_number: Optional[bool] = None
    include_special: Optional[bool] = None

    @model_validator(mode="after")
    def _check_character_classes(self) -> "PasswordParameters":
        if self.length is not None and self.length <= 0:
            raise ValueError("password length must be positive")
        if (
            self.exclude_upper
            and self.exclude_lower
            and self.exclude_number
            and not self.include_special
        ):
            raise ValueError("password parameters exclude every character class")
        return self


class CertificateParameters(_ParametersModel):
    """Subject, signing and usage settings for a generated certificate.

    At least one subject field (or an alternative name) is required, and the
    certificate must be signed by a CA, self-signed, or itself be a CA.
    """

    key_length: Optional[int] = None
    duration: Optional[int] = None
    common_name: Optional[str] = None
    alternative_names: Optional[List[str]] = None
    organization: Optional[str] = None
    organization_unit: Optional[str] = None
    locality: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    ca: Optional[str] = None
    self_sign: Optional[bool] = None
    is_ca: Optional[bool] = None
    key_usage: Optional[List[KeyUsage]] = None
    extended_key_usage: Optional[List[ExtendedKeyUsage]] = None

    @model_validator(mode="after")
    def _check_subject_and_signer(self) -> "CertificateParameters":
        subject = (
            self.common_name,
            self.organization,
            self.organization_unit,
            self.locality,
            self.state,
            self.country,
        )
        if not any(subject) and not self.alternative_names:
            raise ValueError(
                "certificate parameters require a subject field or alternative names"
            )
        if not (self.ca or self.self_sign or self.is_ca):
            raise ValueError(
                "certificate parameters require one of ca, self_sign or is_ca"
            )
        return self


class SshParameters(_ParametersModel):
    key_length: Optional[int] = None
    ssh_comment: Optional[str] = None


class RsaParameters(_ParametersModel):
    key_length: Optional[int] = None
