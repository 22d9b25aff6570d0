"""Tests for SSL utilities."""

import os
import ssl
import tempfile

import pytest
import trustme

from credhub_sdk.clients.ssl_utils import (
    get_certificate_files,
    get_ssl_context,
    load_client_certificate,
    load_custom_ca_certs,
)
from credhub_sdk.config import TLSSettings
from credhub_sdk.credentials.exceptions import CredHubConfigurationError


@pytest.fixture
def ca() -> trustme.CA:
    return trustme.CA()


@pytest.fixture
def client_cert_files(ca, tmp_path):
    """Write a client certificate chain and key issued by ``ca`` to disk."""
    cert = ca.issue_cert("app.example.com")
    cert_file = tmp_path / "instance.crt"
    key_file = tmp_path / "instance.key"
    cert.cert_chain_pems[0].write_to_path(str(cert_file))
    cert.private_key_pem.write_to_path(str(key_file))
    return str(cert_file), str(key_file)


class TestGetCertificateFiles:
    """Test cases for get_certificate_files function."""

    def test_filters_and_sorts_by_extension(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            for filename in ("b.pem", "a.CRT", "c.cer", "d.ca-bundle", "notes.txt"):
                with open(os.path.join(tmpdir, filename), "w") as f:
                    f.write("")

            result = get_certificate_files(tmpdir)

            assert [os.path.basename(path) for path in result] == [
                "a.CRT",
                "b.pem",
                "c.cer",
                "d.ca-bundle",
            ]

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert get_certificate_files(tmpdir) == []


class TestLoadCustomCaCerts:
    """Test cases for load_custom_ca_certs function."""

    def test_loads_valid_certificates(self, ca):
        with tempfile.TemporaryDirectory() as tmpdir:
            ca.cert_pem.write_to_path(os.path.join(tmpdir, "ca.pem"))
            ssl_context = ssl.create_default_context()

            assert load_custom_ca_certs(ssl_context, tmpdir) == 1

    def test_skips_invalid_certificates(self, ca):
        """Test that an unreadable certificate is skipped, not fatal."""
        with tempfile.TemporaryDirectory() as tmpdir:
            ca.cert_pem.write_to_path(os.path.join(tmpdir, "good.pem"))
            with open(os.path.join(tmpdir, "bad.pem"), "w") as f:
                f.write(
                    "-----BEGIN CERTIFICATE-----\nnot base64\n-----END CERTIFICATE-----\n"
                )
            ssl_context = ssl.create_default_context()

            assert load_custom_ca_certs(ssl_context, tmpdir) == 1


class TestLoadClientCertificate:
    """Test cases for load_client_certificate function."""

    def test_loads_chain(self, client_cert_files):
        cert_file, key_file = client_cert_files
        ssl_context = ssl.create_default_context()

        load_client_certificate(ssl_context, cert_file, key_file)

    def test_missing_file_raises(self, client_cert_files):
        cert_file, _ = client_cert_files
        with pytest.raises(CredHubConfigurationError, match="file not found"):
            load_client_certificate(
                ssl.create_default_context(), cert_file, "/nonexistent/instance.key"
            )

    def test_mismatched_key_raises(self, ca, client_cert_files, tmp_path):
        cert_file, _ = client_cert_files
        other_key = tmp_path / "other.key"
        ca.issue_cert("other.example.com").private_key_pem.write_to_path(
            str(other_key)
        )

        with pytest.raises(CredHubConfigurationError, match="unable to load"):
            load_client_certificate(
                ssl.create_default_context(), cert_file, str(other_key)
            )


class TestGetSslContext:
    """Test cases for get_ssl_context function."""

    def test_returns_true_without_settings(self):
        assert get_ssl_context() is True

    def test_returns_true_without_custom_trust_or_client_cert(self):
        tls = TLSSettings(cert_file=None, key_file=None, ca_cert_dir=None)
        assert get_ssl_context(tls) is True

    def test_ignores_missing_ca_directory(self):
        tls = TLSSettings(
            cert_file=None, key_file=None, ca_cert_dir="/nonexistent/path/to/certs"
        )
        assert get_ssl_context(tls) is True

    def test_custom_ca_directory(self, ca):
        with tempfile.TemporaryDirectory() as tmpdir:
            ca.cert_pem.write_to_path(os.path.join(tmpdir, "ca.pem"))
            tls = TLSSettings(cert_file=None, key_file=None, ca_cert_dir=tmpdir)

            result = get_ssl_context(tls)

            assert isinstance(result, ssl.SSLContext)
            assert result.verify_mode == ssl.CERT_REQUIRED
            assert result.check_hostname is True

    def test_mutual_tls(self, client_cert_files):
        cert_file, key_file = client_cert_files
        tls = TLSSettings(cert_file=cert_file, key_file=key_file, ca_cert_dir=None)

        result = get_ssl_context(tls)

        assert isinstance(result, ssl.SSLContext)
        assert result.verify_mode == ssl.CERT_REQUIRED

    def test_mutual_tls_with_missing_files_raises(self):
        tls = TLSSettings(
            cert_file="/nonexistent/instance.crt",
            key_file="/nonexistent/instance.key",
            ca_cert_dir=None,
        )
        with pytest.raises(CredHubConfigurationError):
            get_ssl_context(tls)
