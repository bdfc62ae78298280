"""Customer router composition for streaming customer listings."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from dataclasses import asdict

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from k8s_probe_demo.domain import Customer
from k8s_probe_demo.services import CustomerListingService

NDJSON_MEDIA_TYPE = "application/x-ndjson"


def api_create_customer_router(listing_service: CustomerListingService) -> APIRouter:
    """Create router exposing the streaming `/customers` endpoint.

    Args:
        listing_service: Service producing the customer sequence.

    Returns:
        APIRouter: Router exposing customer endpoints.

    Raises:
        ValueError: Raised when listing_service is None.
    """

    if listing_service is None:
        raise ValueError("listing_service must not be None")

    router = APIRouter(tags=["customers"])

    @router.get("/customers")
    async def api_customers_list(request: Request) -> StreamingResponse:
        """Stream all stored customers as they are read.

        The body is a JSON array by default, or newline-delimited JSON when the
        client accepts `application/x-ndjson`. Storage failures abort the body
        mid-stream.

        Returns:
            StreamingResponse: Incrementally rendered customer records.
        """

        customers = listing_service.list_all()
        if NDJSON_MEDIA_TYPE in request.headers.get("accept", ""):
            return StreamingResponse(_customers_render_ndjson(customers), media_type=NDJSON_MEDIA_TYPE)
        return StreamingResponse(_customers_render_json_array(customers), media_type="application/json")

    return router


def _customers_encode(customer: Customer) -> bytes:
    return json.dumps(asdict(customer), separators=(",", ":")).encode("utf-8")


async def _customers_render_json_array(customers: AsyncIterator[Customer]) -> AsyncIterator[bytes]:
    yield b"["
    separator = b""
    async for customer in customers:
        yield separator + _customers_encode(customer)
        separator = b","
    yield b"]"


async def _customers_render_ndjson(customers: AsyncIterator[Customer]) -> AsyncIterator[bytes]:
    async for customer in customers:
        yield _customers_encode(customer) + b"\n"
