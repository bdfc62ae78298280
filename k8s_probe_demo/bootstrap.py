"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from k8s_probe_demo.api import create_api_application
from k8s_probe_demo.availability import ApplicationAvailability, availability_print_change
from k8s_probe_demo.config import AppSettings, config_configure_logging, config_load_settings
from k8s_probe_demo.db import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyDatabaseHealthService,
    db_create_engine,
    db_initialize_schema,
)
from k8s_probe_demo.services import BootstrapSeeder


def bootstrap_create_availability() -> ApplicationAvailability:
    """Build the process availability holder with the console change handler.

    Returns:
        ApplicationAvailability: Holder in `CORRECT` liveness and `REFUSING_TRAFFIC` readiness.
    """

    availability = ApplicationAvailability()
    availability.on_availability_changed(availability_print_change)
    return availability


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    config_configure_logging(resolved_settings.log_level)

    engine = db_create_engine(database_url=resolved_settings.database_url)
    customer_repository = SQLAlchemyCustomerRepository(engine=engine)
    db_health_service = SQLAlchemyDatabaseHealthService(engine=engine)
    seeder = None
    if resolved_settings.seed_on_startup:
        seeder = BootstrapSeeder(repository=customer_repository, names=resolved_settings.seed_customer_names)

    startup_hooks = []
    if resolved_settings.database_initialize_schema:

        async def bootstrap_initialize_schema() -> None:
            await db_initialize_schema(engine)

        startup_hooks.append(bootstrap_initialize_schema)

    return create_api_application(
        settings=resolved_settings,
        availability=bootstrap_create_availability(),
        customer_repository=customer_repository,
        db_health_service=db_health_service,
        seeder=seeder,
        startup_hooks=startup_hooks,
        shutdown_hooks=[engine.dispose],
    )
