"""Best-effort postal code to address lookup against the OneMap search API."""

from __future__ import annotations

import logging

import httpx

ADDRESS_NOT_FOUND = "Address not found."
DEFAULT_SEARCH_URL = "https://developers.onemap.sg/commonapi/search"
DEFAULT_TIMEOUT_SECONDS = 10.0

_LOGGER = logging.getLogger(__name__)


class AddressLookup:
    """Resolve postal codes to street addresses without ever raising."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_SEARCH_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create lookup client settings.

        Args:
            base_url: OneMap search endpoint.
            timeout_seconds: Per-request HTTP timeout.
            transport: Optional httpx transport override (used by tests).
        """
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def find_address(self, postal_code: str) -> str:
        """Return the first address registered for a postal code.

        Transport failures, non-success statuses, undecodable bodies and empty
        result sets all map to ``ADDRESS_NOT_FOUND``.

        Args:
            postal_code: Six-digit postal code.

        Returns:
            Address text or ``ADDRESS_NOT_FOUND``.
        """
        params = {
            "searchVal": postal_code,
            "returnGeom": "N",
            "getAddrDetails": "Y",
        }
        try:
            with httpx.Client(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                response = client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            _LOGGER.warning("Address lookup for %s failed: %s", postal_code, exc)
            return ADDRESS_NOT_FOUND
        return _first_address(payload) or ADDRESS_NOT_FOUND


def _first_address(payload: object) -> str | None:
    """Extract the first ``ADDRESS`` entry from a OneMap search payload.

    Args:
        payload: Decoded JSON response body.

    Returns:
        Address text when present.
    """
    if not isinstance(payload, dict):
        return None
    results = payload.get("results")
    if not isinstance(results, list):
        return None
    for result in results:
        if isinstance(result, dict):
            address = result.get("ADDRESS")
            if isinstance(address, str) and address.strip():
                return address.strip()
    return None
