"""Response mapping and error translation.

Every operation funnels its response through :func:`map_response` (or
:func:`check_response` when no body is expected). Given the same status and
body these functions always produce the same result or exception; they never
touch the network.
"""

import json
from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import ValidationError

from credhub_sdk.credentials.exceptions import CredHubClientError, CredHubResponseError
from credhub_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ERROR_MESSAGE_FIELDS = ("error_description", "error", "message")


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """Pull the human-readable message out of a service error body.

    Returns None when the body is empty, not JSON, or has no message field.
    """
    if not response.content:
        return None
    try:
        payload = json.loads(response.content)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for field in ERROR_MESSAGE_FIELDS:
        message = payload.get(field)
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def check_response(response: httpx.Response) -> None:
    """Raise CredHubClientError if the response status is not 2xx."""
    if response.is_success:
        return
    message = extract_error_message(response)
    logger.warning(
        f"CredHub responded with {response.status_code}"
        + (f": {message}" if message else "")
    )
    raise CredHubClientError(response.status_code, message)


def read_json(response: httpx.Response) -> Any:
    """Parse the JSON body of a successful response.

    Raises:
        CredHubResponseError: If the body is missing or not valid JSON.
    """
    if not response.content:
        raise CredHubResponseError(response.status_code, "response body is empty")
    try:
        return json.loads(response.content)
    except ValueError as e:
        raise CredHubResponseError(
            response.status_code, f"response body is not valid JSON: {e}"
        ) from e


def _summarize(error: ValidationError) -> str:
    # Input values are left out, they may hold secret material.
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'body'}: {detail['msg']}"
        for detail in error.errors(include_input=False)
    )


def map_response(response: httpx.Response, decode: Callable[[Any], T]) -> T:
    """Translate a response into a typed result or a typed exception.

    Args:
        response: Response returned by the HTTP invocation layer.
        decode: Function turning the parsed JSON body into the expected shape;
            usually a registry decoder or a pydantic ``model_validate``.

    Returns:
        T: The decoded result.

    Raises:
        CredHubClientError: If the status is not 2xx.
        CredHubResponseError: If a 2xx body is missing or has the wrong shape.
    """
    check_response(response)
    payload = read_json(response)
    try:
        return decode(payload)
    except ValidationError as e:
        logger.error(
            f"Unable to decode CredHub response ({response.status_code}): "
            f"{e.error_count()} validation error(s)"
        )
        raise CredHubResponseError(
            response.status_code, f"unexpected response shape: {_summarize(e)}"
        ) from e
