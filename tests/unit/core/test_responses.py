"""Tests for response mapping and error translation."""

import pytest
from hypothesis import given
from pydantic import BaseModel

from credhub_sdk.common.error_codes import CLIENT_ERRORS
from credhub_sdk.core.responses import (
    check_response,
    extract_error_message,
    map_response,
    read_json,
)
from credhub_sdk.credentials.exceptions import CredHubClientError, CredHubResponseError
from credhub_sdk.test_utils.http import make_response
from credhub_sdk.test_utils.hypothesis.strategies.credentials import (
    error_status_strategy,
)


class _Secret(BaseModel):
    password: str
    length: int


class TestExtractErrorMessage:
    """Test cases for extract_error_message."""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ({"error": "boom"}, "boom"),
            ({"message": "  padded  "}, "padded"),
            ({"error_description": "bad client"}, "bad client"),
            (
                {"error": "invalid_token", "error_description": "Access token expired"},
                "Access token expired",
            ),
            ({"error": "", "message": "fallback"}, "fallback"),
            ({"other": "x"}, None),
            (["error"], None),
        ],
    )
    def test_json_bodies(self, body, expected):
        assert extract_error_message(make_response(400, json=body)) == expected

    def test_empty_body(self):
        assert extract_error_message(make_response(500)) is None

    def test_non_json_body(self):
        assert extract_error_message(make_response(502, content=b"<html>")) is None


class TestCheckResponse:
    """Test cases for check_response."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_statuses_pass(self, status):
        assert check_response(make_response(status)) is None

    @given(status=error_status_strategy)
    def test_non_success_raises_with_status(self, status: int):
        """Test that every non-2xx status raises an error carrying the code."""
        with pytest.raises(CredHubClientError) as exc_info:
            check_response(make_response(status))
        assert exc_info.value.status_code == status
        assert str(status) in str(exc_info.value)
        assert exc_info.value.error_code is CLIENT_ERRORS["REMOTE_STATUS_ERROR"]

    def test_message_format(self):
        with pytest.raises(CredHubClientError) as exc_info:
            check_response(make_response(403, json={"error": "denied"}))
        assert str(exc_info.value) == "Error calling CredHub: 403 Forbidden: denied"


class TestReadJson:
    def test_parses_body(self):
        assert read_json(make_response(200, json={"a": 1})) == {"a": 1}

    def test_empty_body_raises(self):
        with pytest.raises(CredHubResponseError, match="empty"):
            read_json(make_response(200))

    def test_invalid_json_raises(self):
        with pytest.raises(CredHubResponseError, match="not valid JSON"):
            read_json(make_response(200, content=b"{oops"))


class TestMapResponse:
    """Test cases for map_response."""

    def test_decodes_body(self):
        result = map_response(
            make_response(200, json={"password": "p", "length": 1}),
            _Secret.model_validate,
        )
        assert result == _Secret(password="p", length=1)

    def test_status_error_wins_over_body(self):
        """Test that a non-2xx status is reported even with a decodable body."""
        with pytest.raises(CredHubClientError) as exc_info:
            map_response(
                make_response(500, json={"password": "p", "length": 1}),
                _Secret.model_validate,
            )
        assert not isinstance(exc_info.value, CredHubResponseError)

    def test_shape_mismatch_raises_response_error(self):
        with pytest.raises(CredHubResponseError) as exc_info:
            map_response(
                make_response(200, json={"password": "p"}), _Secret.model_validate
            )
        assert exc_info.value.status_code == 200
        assert "length" in str(exc_info.value)
        assert (
            exc_info.value.error_code
            is CLIENT_ERRORS["RESPONSE_DESERIALIZATION_ERROR"]
        )

    def test_error_message_leaves_out_input_values(self):
        """Test that secret values from the body never reach the error message."""
        with pytest.raises(CredHubResponseError) as exc_info:
            map_response(
                make_response(
                    200, json={"password": "hunter2-secret", "length": "not-a-number"}
                ),
                _Secret.model_validate,
            )
        assert "not-a-number" not in str(exc_info.value)
        assert "hunter2-secret" not in str(exc_info.value)

    def test_is_deterministic(self):
        response = make_response(200, json={"password": "p", "length": 2})
        first = map_response(response, _Secret.model_validate)
        second = map_response(response, _Secret.model_validate)
        assert first == second
