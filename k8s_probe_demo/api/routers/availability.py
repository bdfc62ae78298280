"""Availability router composition for liveness toggling and slow responses."""

import time

from fastapi import APIRouter, Response, status

from k8s_probe_demo.availability import ApplicationAvailability


def api_create_availability_router(availability: ApplicationAvailability, slow_delay_seconds: float) -> APIRouter:
    """Create router exposing `/down` and `/slow`.

    Args:
        availability: Process availability state holder.
        slow_delay_seconds: Blocking delay applied by `/slow`.

    Returns:
        APIRouter: Router exposing availability control endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if availability is None:
        raise ValueError("availability must not be None")
    if slow_delay_seconds < 0:
        raise ValueError("slow_delay_seconds must not be negative")

    router = APIRouter(tags=["availability"])

    @router.get("/down")
    async def api_availability_down() -> Response:
        """Mark process liveness as BROKEN.

        Returns:
            Response: Empty success response.
        """

        availability.mark_broken()
        return Response(status_code=status.HTTP_200_OK)

    @router.get("/slow")
    def api_availability_slow() -> Response:
        """Hold this request's worker thread before answering.

        Declared synchronous so the framework runs it in its thread pool and
        the event loop keeps serving other requests.

        Returns:
            Response: Empty success response after the configured delay.
        """

        time.sleep(slow_delay_seconds)
        return Response(status_code=status.HTTP_200_OK)

    return router
