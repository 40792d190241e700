from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import JsonMetadataError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20


def fetch_json_metadata(
    uri: str,
    *,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Download the off-chain JSON document a metadata `uri` points to.

    Raises:
        JsonMetadataError: if the request fails, the server answers with an
            error status, or the body is not a JSON object.
    """
    uri = uri.strip()
    if not uri:
        raise JsonMetadataError("Metadata URI is empty")

    logger.debug("Fetching JSON metadata from %s", uri)
    get = session.get if session is not None else requests.get
    try:
        resp = get(uri, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise JsonMetadataError(f"Failed to fetch JSON metadata from {uri}: {e}") from e
    try:
        body = resp.json()
    except ValueError as e:
        raise JsonMetadataError(f"Invalid JSON metadata at {uri}: {e}") from e

    if not isinstance(body, dict):
        raise JsonMetadataError(
            f"JSON metadata at {uri} must be an object, got {type(body).__name__}"
        )
    return body
