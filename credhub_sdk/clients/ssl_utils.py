"""SSL utilities for the credential service HTTP client."""

import os
import ssl
from typing import List, Optional, Union

from credhub_sdk.common.error_codes import CONFIG_ERRORS
from credhub_sdk.config import TLSSettings
from credhub_sdk.credentials.exceptions import CredHubConfigurationError
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

# Supported certificate file extensions
CERT_FILE_EXTENSIONS = (".pem", ".crt", ".cer", ".ca-bundle")


def get_certificate_files(cert_dir: str) -> List[str]:
    """
    Get all certificate files from a directory.

    Args:
        cert_dir: Directory to search for certificate files

    Returns:
        List[str]: Sorted list of full paths to certificate files
    """
    cert_files: List[str] = []
    for filename in sorted(os.listdir(cert_dir)):
        if filename.lower().endswith(CERT_FILE_EXTENSIONS):
            cert_files.append(os.path.join(cert_dir, filename))
    return cert_files


def load_custom_ca_certs(ssl_context: ssl.SSLContext, cert_dir: str) -> int:
    """
    Add every certificate file found in ``cert_dir`` to the context's trust store.

    Files that fail to load are logged and skipped.

    Returns:
        int: Number of certificate files loaded
    """
    loaded = 0
    for cert_file in get_certificate_files(cert_dir):
        try:
            ssl_context.load_verify_locations(cafile=cert_file)
            loaded += 1
            logger.debug(f"Loaded certificate from: {cert_file}")
        except ssl.SSLError as e:
            logger.warning(f"Failed to load certificate from {cert_file}: {e}")
    return loaded


def load_client_certificate(
    ssl_context: ssl.SSLContext, cert_file: str, key_file: str
) -> None:
    """
    Load the client certificate chain used for mutual TLS.

    Raises:
        CredHubConfigurationError: If either file is missing or unreadable
    """
    for path in (cert_file, key_file):
        if not os.path.isfile(path):
            raise CredHubConfigurationError(
                f"{CONFIG_ERRORS['TLS_CONFIG_ERROR']}: file not found: {path}"
            )
    try:
        ssl_context.load_cert_chain(certfile=cert_file, keyfile=key_file)
    except (ssl.SSLError, OSError) as e:
        raise CredHubConfigurationError(
            f"{CONFIG_ERRORS['TLS_CONFIG_ERROR']}: unable to load client certificate {cert_file}: {e}"
        ) from e
    logger.debug(f"Loaded client certificate for mutual TLS from: {cert_file}")


def get_ssl_context(tls: Optional[TLSSettings] = None) -> Union[bool, ssl.SSLContext]:
    """
    Get the SSL verification context for the HTTP client.

    Returns ``True`` (default verification) when no custom CA directory and no
    client certificate are configured. Otherwise returns an SSLContext with
    the system CAs, any custom CAs from ``ca_cert_dir`` and, for mutual TLS,
    the client certificate chain.

    Example:
        >>> import httpx
        >>> client = httpx.Client(verify=get_ssl_context(settings.tls))
    """
    if tls is None:
        return True

    ca_cert_dir = tls.ca_cert_dir
    if ca_cert_dir and not os.path.isdir(ca_cert_dir):
        logger.warning(f"Ignoring missing CA certificate directory: {ca_cert_dir}")
        ca_cert_dir = None
    if not ca_cert_dir and not tls.mutual_tls:
        return True

    ssl_context = ssl.create_default_context()
    if ca_cert_dir:
        loaded = load_custom_ca_certs(ssl_context, ca_cert_dir)
        logger.debug(
            f"Created SSL context with default certificates and {loaded} custom certificate(s) from: {ca_cert_dir}"
        )
    if tls.mutual_tls:
        load_client_certificate(ssl_context, tls.cert_file, tls.key_file)
    return ssl_context
