"""Global test configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from credhub_sdk.clients.http import CredHubHttpClient
from credhub_sdk.core.template import CredHubTemplate


@pytest.fixture
def mock_http_client() -> MagicMock:
    """A stand-in for the HTTP invocation layer."""
    return MagicMock(spec=CredHubHttpClient)


@pytest.fixture
def credhub_template(mock_http_client: MagicMock) -> CredHubTemplate:
    """A CredHubTemplate wired to the mocked invocation layer."""
    return CredHubTemplate(mock_http_client)
