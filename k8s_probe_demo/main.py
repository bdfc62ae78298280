"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or initializes the customer schema without serving traffic.
"""

import argparse
import asyncio

import uvicorn

from k8s_probe_demo.bootstrap import bootstrap_create_application
from k8s_probe_demo.config import config_configure_logging, config_load_settings
from k8s_probe_demo.db import db_create_engine, db_initialize_schema


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="K8s probe demo runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "db-init"),
        help="Runtime command: `api` starts server, `db-init` creates the customer table and exits",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()

    if parsed_arguments.command == "db-init":
        config_configure_logging(settings.log_level)
        asyncio.run(main_initialize_schema(settings.database_url))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


async def main_initialize_schema(database_url: str) -> None:
    """Create the customer schema and release the engine."""

    engine = db_create_engine(database_url=database_url)
    try:
        await db_initialize_schema(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    main()
