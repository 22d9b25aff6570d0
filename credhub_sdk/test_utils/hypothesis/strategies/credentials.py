from hypothesis import strategies as st

from credhub_sdk.credentials.types import (
    CertificateCredential,
    CredentialType,
    RsaCredential,
    SshCredential,
    UserCredential,
)

# Strategy for generating credential name segments
name_segment_strategy = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(
        whitelist_categories=("Lu", "Ll", "Nd"),
        whitelist_characters="-_.",
    ),
)

# Strategy for generating full credential names
credential_name_strategy = st.lists(
    name_segment_strategy, min_size=1, max_size=4
).map(lambda segments: "/" + "/".join(segments))

secret_text_strategy = st.text(min_size=1, max_size=64)
optional_text_strategy = st.one_of(st.none(), secret_text_strategy)

json_value_strategy = st.dictionaries(
    keys=st.text(min_size=1, max_size=10),
    values=st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=20)),
    max_size=5,
)

user_credential_strategy = st.builds(
    UserCredential,
    username=optional_text_strategy,
    password=secret_text_strategy,
)

certificate_credential_strategy = st.builds(
    CertificateCredential,
    certificate=optional_text_strategy,
    private_key=optional_text_strategy,
    ca=optional_text_strategy,
)

ssh_credential_strategy = st.builds(
    SshCredential,
    public_key=optional_text_strategy,
    private_key=optional_text_strategy,
)

rsa_credential_strategy = st.builds(
    RsaCredential,
    public_key=optional_text_strategy,
    private_key=optional_text_strategy,
)

# Value strategy for every credential type
credential_value_strategies = {
    CredentialType.VALUE: secret_text_strategy,
    CredentialType.PASSWORD: secret_text_strategy,
    CredentialType.JSON: json_value_strategy,
    CredentialType.USER: user_credential_strategy,
    CredentialType.CERTIFICATE: certificate_credential_strategy,
    CredentialType.SSH: ssh_credential_strategy,
    CredentialType.RSA: rsa_credential_strategy,
}

# Strategy for (type, value) pairs across all credential types
typed_credential_value_strategy = st.sampled_from(list(CredentialType)).flatmap(
    lambda credential_type: st.tuples(
        st.just(credential_type), credential_value_strategies[credential_type]
    )
)

# Strategy for non-2xx HTTP status codes
error_status_strategy = st.one_of(
    st.integers(min_value=100, max_value=199),
    st.integers(min_value=300, max_value=599),
)
