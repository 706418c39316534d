"""Thin async HTTP client for the Intercom REST API."""

import logging
import os
from typing import Any, Dict, Optional

import httpx

from .errors import TransportError, UpstreamAPIError

logger = logging.getLogger(__name__)

# ─── Configuration ───────────────────────────────────────────────────────────

INTERCOM_API_BASE = "https://api.intercom.io"
INTERCOM_API_VERSION = "2.14"
ACCESS_TOKEN = os.environ.get("INTERCOM_ACCESS_TOKEN", "")
REQUEST_TIMEOUT = 30.0

_BODY_METHODS = ("POST", "PUT")

# ─── HTTP Client ─────────────────────────────────────────────────────────────


def _get_headers(with_body: bool = False) -> Dict[str, str]:
    """Return authorization headers for the Intercom API."""
    headers = {
        "Authorization": f"Bearer {ACCESS_TOKEN}",
        "Accept": "application/json",
        "Intercom-Version": INTERCOM_API_VERSION,
    }
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


async def call_intercom_api(
    endpoint: str,
    method: str = "GET",
    body: Optional[Any] = None,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """Make one authenticated request to the Intercom API.

    Args:
        endpoint: Path below the API base (e.g. ``/articles/123``).
        method: One of GET, POST, PUT, DELETE.
        body: JSON-serializable payload. Only sent for POST and PUT.
        params: Query string parameters.

    Returns:
        The decoded JSON response, or ``{"success": True}`` for 204 No Content.

    Raises:
        UpstreamAPIError: Intercom answered with a non-2xx status.
        TransportError: The request failed before a response arrived.
    """
    method = method.upper()
    send_body = body is not None and method in _BODY_METHODS

    logger.debug("%s %s", method, endpoint)
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        try:
            response = await client.request(
                method,
                f"{INTERCOM_API_BASE}{endpoint}",
                headers=_get_headers(with_body=send_body),
                params=params,
                json=body if send_body else None,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request to Intercom failed: {type(e).__name__}: {e}", e) from e

    if not response.is_success:
        logger.warning("%s %s returned %s", method, endpoint, response.status_code)
        raise UpstreamAPIError(response.status_code, response.text)

    if response.status_code == 204:
        return {"success": True}

    return response.json()
