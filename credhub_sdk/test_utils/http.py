"""Helpers for building service responses in tests."""

from typing import Any, Optional

import httpx


def make_response(
    status_code: int, json: Optional[Any] = None, content: Optional[bytes] = None
) -> httpx.Response:
    """Build an httpx response as the invocation layer would return it."""
    if json is not None:
        return httpx.Response(status_code, json=json)
    return httpx.Response(status_code, content=content or b"")
