"""FastAPI application factory for the customer probe demo.

This module composes routers and the startup/shutdown lifecycle: readiness is
switched on after startup, the seeder runs in the background, and readiness is
switched off again on shutdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence

from fastapi import FastAPI

from k8s_probe_demo.availability import ApplicationAvailability
from k8s_probe_demo.config import AppSettings
from k8s_probe_demo.db import CustomerRepositoryPort, DatabaseHealthPort
from k8s_probe_demo.services import BootstrapSeeder, CustomerListingService

from .routers import api_create_availability_router, api_create_customer_router, api_create_health_router

logger = logging.getLogger(__name__)

LifecycleHook = Callable[[], Awaitable[None]]


def create_api_application(
    settings: AppSettings,
    availability: ApplicationAvailability,
    customer_repository: CustomerRepositoryPort,
    db_health_service: DatabaseHealthPort,
    seeder: BootstrapSeeder | None = None,
    startup_hooks: Sequence[LifecycleHook] = (),
    shutdown_hooks: Sequence[LifecycleHook] = (),
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        availability: Process availability state holder shared with the probes.
        customer_repository: Customer storage port behind `/customers`.
        db_health_service: Database health service used by the aggregate health probe.
        seeder: Optional startup seeder, started once after the application is up.
        startup_hooks: Coroutine factories awaited in order before seeding starts.
        shutdown_hooks: Coroutine factories awaited in order after readiness is withdrawn.

    Returns:
        FastAPI: Framework application instance with all routers attached.

    Raises:
        ValueError: Raised when required dependencies are None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if availability is None:
        raise ValueError("availability must not be None")

    @contextlib.asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        for startup_hook in startup_hooks:
            await startup_hook()
        seeding_task: asyncio.Task | None = None
        if seeder is not None:
            seeding_task = asyncio.create_task(seeder.seed())
            seeding_task.add_done_callback(_api_log_seeding_failure)
        availability.mark_accepting_traffic()
        try:
            yield
        finally:
            availability.mark_refusing_traffic()
            if seeding_task is not None and not seeding_task.done():
                logger.info("Cancelling unfinished customer seeding")
                seeding_task.cancel()
                await asyncio.wait([seeding_task])
            for shutdown_hook in shutdown_hooks:
                await shutdown_hook()

    application = FastAPI(title="K8s Probe Demo", lifespan=api_lifespan)

    application.include_router(
        api_create_availability_router(
            availability=availability,
            slow_delay_seconds=settings.slow_delay_seconds,
        )
    )
    application.include_router(
        api_create_customer_router(listing_service=CustomerListingService(repository=customer_repository))
    )
    application.include_router(
        api_create_health_router(availability=availability, db_health_service=db_health_service)
    )

    return application


def _api_log_seeding_failure(seeding_task: asyncio.Task) -> None:
    """Log an unexpected seeding error so the task result is always retrieved."""

    if seeding_task.cancelled():
        return
    error = seeding_task.exception()
    if error is not None:
        logger.error("Customer seeding failed", exc_info=error)
