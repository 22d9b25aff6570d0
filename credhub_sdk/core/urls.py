"""URL templates for the credential service API.

Templates use ``{placeholder}`` markers that are filled positionally by
:func:`expand`; each variable is percent-encoded.
"""

import re
from typing import Any, List
from urllib.parse import quote

from credhub_sdk.constants import (
    DATA_URL_PATH,
    INTERPOLATE_URL_PATH,
    PERMISSIONS_URL_PATH,
    REGENERATE_URL_PATH,
)

BASE_URL_PATH = DATA_URL_PATH
ID_URL_PATH = DATA_URL_PATH + "/{id}"
NAME_URL_QUERY = DATA_URL_PATH + "?name={name}"
NAME_LIKE_URL_QUERY = DATA_URL_PATH + "?name-like={name}"
PATH_URL_QUERY = DATA_URL_PATH + "?path={path}"

PERMISSIONS_URL_QUERY = PERMISSIONS_URL_PATH + "?credential_name={name}"
PERMISSIONS_ACTOR_URL_QUERY = (
    PERMISSIONS_URL_PATH + "?credential_name={name}&actor={actor}"
)

__all__ = [
    "BASE_URL_PATH",
    "ID_URL_PATH",
    "NAME_URL_QUERY",
    "NAME_LIKE_URL_QUERY",
    "PATH_URL_QUERY",
    "REGENERATE_URL_PATH",
    "INTERPOLATE_URL_PATH",
    "PERMISSIONS_URL_PATH",
    "PERMISSIONS_URL_QUERY",
    "PERMISSIONS_ACTOR_URL_QUERY",
    "expand",
    "placeholders",
]

_PLACEHOLDER = re.compile(r"\{[^{}]+\}")


def placeholders(template: str) -> List[str]:
    """Return the placeholder markers of a template, in order."""
    return _PLACEHOLDER.findall(template)


def expand(template: str, *variables: Any) -> str:
    """Substitute ``variables`` into ``template`` positionally.

    Variables in the query string keep their slashes so credential names
    stay readable; path-segment variables are encoded completely so they
    cannot change the path. Every other reserved character is
    percent-encoded.

    Args:
        template: One of the URL templates defined in this module.
        *variables: One value per placeholder, in order.

    Returns:
        str: The expanded path (and query).

    Raises:
        ValueError: If the number of variables does not match the number of
            placeholders, or a variable is empty.

    Example:
        >>> expand(NAME_URL_QUERY, "/example/password")
        '/api/v1/data?name=/example/password'
    """
    markers = placeholders(template)
    if len(markers) != len(variables):
        raise ValueError(
            f"URL template '{template}' expects {len(markers)} variable(s), got {len(variables)}"
        )
    values = iter(variables)
    query_start = template.find("?")

    def _substitute(match: "re.Match[str]") -> str:
        value = str(next(values))
        if not value:
            raise ValueError(f"empty value for {match.group(0)} in '{template}'")
        in_query = 0 <= query_start < match.start()
        return quote(value, safe="/" if in_query else "")

    return _PLACEHOLDER.sub(_substitute, template)
