"""Extract parameters from Stores API URLs.

API calls look like ``/api/v1/{product}/{service}/{channel}/{locale}``.
Legacy calls omit the version segment and are served as the oldest
supported version.
"""

import re
from typing import Dict, Optional
from urllib.parse import unquote_plus

from core.logging import get_module_logger
from modules.stores.models import PathParameters

logger = get_module_logger()

API_VERSION_PATTERN = re.compile(r"^v[0-9]{1,2}$")


def is_valid_api_version(version: str) -> bool:
    """Check if an API version is formally valid (v1, v2, ..., v99)."""
    return API_VERSION_PATTERN.match(version) is not None


def extract_path_parameters(path: str, default_version: str = "v1") -> PathParameters:
    """Get the list of parameters for an API call.

    Args:
        path: Raw URL path as received, still percent-encoded, e.g.
            "/api/v1/fx_android/translation/beta/fr". Segments are decoded
            exactly once here.
        default_version: Version assumed when the path has none.

    Returns:
        PathParameters with "api" and the version segment removed.
    """
    segments = [segment for segment in path.split("/") if segment]

    # Remove "api" as all API calls start with /api
    segments = segments[1:]

    # A missing version means a legacy call: the first parameter after
    # "api" cannot be assumed to be a version
    if segments and is_valid_api_version(segments[0]):
        api_version = segments.pop(0)
        is_legacy = False
    else:
        api_version = default_version
        is_legacy = True
        logger.info(
            "legacy_request_without_version",
            path=path,
            fallback_version=default_version,
        )

    return PathParameters(
        segments=tuple(unquote_plus(segment).strip() for segment in segments),
        api_version=api_version,
        is_legacy=is_legacy,
    )


def extract_query_parameters(query: Optional[str]) -> Dict[str, str]:
    """Get the query parameters of an API call as {key: value}.

    Bare keys map to an empty string (``?foo``, ``?foo=``, ``?foo&bar=1``).
    When a key appears more than once, the first occurrence wins.

    Args:
        query: Raw query string, without the leading "?".

    Returns:
        Dict of query parameters.
    """
    parameters: Dict[str, str] = {}
    if not query:
        return parameters

    for item in query.split("&"):
        if not item:
            continue
        key, _, value = item.partition("=")
        parameters.setdefault(key, value)

    return parameters
