"""Table definitions and schema bootstrap for customer storage."""

import logging

from sqlalchemy import Column, Integer, MetaData, Table, Text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

metadata = MetaData()

customer_table = Table(
    "customer",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
)


async def db_initialize_schema(engine: AsyncEngine) -> None:
    """Create missing tables for the customer store.

    Args:
        engine: Async engine bound to the target database.

    Returns:
        None: Tables are created as a side effect.

    Raises:
        ValueError: Raised when engine is None.
    """

    if engine is None:
        raise ValueError("engine must not be None")

    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
    logger.info("Customer schema ready on %s", engine.url.render_as_string(hide_password=True))
