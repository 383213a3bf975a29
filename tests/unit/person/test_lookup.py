"""Unit tests for postal code address lookup."""

from __future__ import annotations

import httpx
import pytest

from addressbook.person import ADDRESS_NOT_FOUND, AddressLookup, PostalCode


def _lookup(transport: httpx.MockTransport) -> AddressLookup:
    """Create lookup client bound to a mock transport."""
    return AddressLookup(base_url="https://onemap.test/search", transport=transport)


@pytest.mark.unit
def test_find_address_returns_first_result_and_sends_query() -> None:
    """Lookup should query by postal code and return the first address."""
    # Arrange - transport recording the request and returning two results
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "found": 2,
                "results": [
                    {"ADDRESS": "3 CLEMENTI AVENUE 3 SINGAPORE 119077"},
                    {"ADDRESS": "OTHER"},
                ],
            },
        )

    lookup = _lookup(httpx.MockTransport(handler))

    # Act - look up code
    address = lookup.find_address("119077")

    # Assert - first address returned, query params sent
    assert address == "3 CLEMENTI AVENUE 3 SINGAPORE 119077"
    assert seen[0].url.params["searchVal"] == "119077"
    assert seen[0].url.params["getAddrDetails"] == "Y"
    assert seen[0].url.params["returnGeom"] == "N"


@pytest.mark.unit
def test_find_address_returns_sentinel_on_transport_failure() -> None:
    """Network errors should map to the not-found sentinel."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    lookup = _lookup(httpx.MockTransport(handler))

    assert lookup.find_address("119077") == ADDRESS_NOT_FOUND


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "boom"}),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"found": 0, "results": []}),
        httpx.Response(200, json=["unexpected"]),
    ],
)
def test_find_address_returns_sentinel_on_unusable_response(
    response: httpx.Response,
) -> None:
    """Error statuses, bad bodies, and empty results map to the sentinel."""
    lookup = _lookup(httpx.MockTransport(lambda request: response))

    assert lookup.find_address("119077") == ADDRESS_NOT_FOUND


@pytest.mark.unit
def test_private_postal_code_still_looks_up_address() -> None:
    """The private flag should not influence lookup."""
    lookup = _lookup(
        httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"results": [{"ADDRESS": "BLK 1 TAMPINES"}]}
            )
        )
    )
    code = PostalCode.parse("520123", is_private=True)

    assert code.retrieve_matching_address(lookup) == "BLK 1 TAMPINES"
