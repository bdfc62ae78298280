"""Integration tests for the SQLAlchemy customer repository on SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect

from k8s_probe_demo.db import (
    CustomerRepositoryError,
    SQLAlchemyCustomerRepository,
    SQLAlchemyDatabaseHealthService,
    db_create_engine,
    db_initialize_schema,
)
from k8s_probe_demo.domain import Customer


def _build_database_url(tmp_path) -> str:
    """Build a file-backed SQLite URL inside the test temp directory.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        str: SQLAlchemy aiosqlite URL.
    """

    return f"sqlite+aiosqlite:///{tmp_path / 'customers.db'}"


async def _collect(repository: SQLAlchemyCustomerRepository) -> list[Customer]:
    return [customer async for customer in repository.find_all()]


@pytest.mark.asyncio
async def test_db_initialize_schema_creates_customer_table(tmp_path) -> None:
    """Create the customer table with id and name columns."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        await db_initialize_schema(engine)
        await db_initialize_schema(engine)
        async with engine.connect() as connection:
            columns = await connection.run_sync(
                lambda sync_connection: [column["name"] for column in inspect(sync_connection).get_columns("customer")]
            )
    finally:
        await engine.dispose()

    assert columns == ["id", "name"]


@pytest.mark.asyncio
async def test_db_customer_save_assigns_unique_ids_and_lists_in_storage_order(tmp_path) -> None:
    """Assign identifiers on insert and stream rows ordered by identifier."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        await db_initialize_schema(engine)
        repository = SQLAlchemyCustomerRepository(engine=engine)

        simon = await repository.save(Customer(id=None, name="Simon"))
        thomas = await repository.save(Customer(id=None, name="  Thomas "))
        listed_customers = await _collect(repository)
    finally:
        await engine.dispose()

    assert simon.id is not None
    assert thomas.id is not None
    assert simon.id != thomas.id
    assert thomas.name == "Thomas"
    assert listed_customers == [simon, thomas]


@pytest.mark.asyncio
async def test_db_customer_save_with_id_updates_existing_row(tmp_path) -> None:
    """Rename an existing customer while keeping its identifier."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        await db_initialize_schema(engine)
        repository = SQLAlchemyCustomerRepository(engine=engine)
        simon = await repository.save(Customer(id=None, name="Simon"))

        renamed = await repository.save(Customer(id=simon.id, name="Simone"))
        listed_customers = await _collect(repository)

        with pytest.raises(CustomerRepositoryError):
            await repository.save(Customer(id=simon.id + 100, name="Ghost"))
    finally:
        await engine.dispose()

    assert renamed == Customer(id=simon.id, name="Simone")
    assert listed_customers == [renamed]


@pytest.mark.asyncio
async def test_db_customer_save_rejects_blank_name(tmp_path) -> None:
    """Raise ValueError before touching storage for blank names."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        repository = SQLAlchemyCustomerRepository(engine=engine)
        with pytest.raises(ValueError):
            await repository.save(Customer(id=None, name="   "))
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_db_customer_storage_failures_are_wrapped(tmp_path) -> None:
    """Wrap SQL errors from a missing table in CustomerRepositoryError."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        repository = SQLAlchemyCustomerRepository(engine=engine)
        with pytest.raises(CustomerRepositoryError):
            await repository.save(Customer(id=None, name="Simon"))
        with pytest.raises(CustomerRepositoryError):
            await _collect(repository)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_db_health_service_reports_up_for_reachable_database(tmp_path) -> None:
    """Return UP with a password-free connection label."""

    engine = db_create_engine(_build_database_url(tmp_path))
    try:
        health_service = SQLAlchemyDatabaseHealthService(engine=engine)
        health = await health_service.db_check_health()
        label = health_service.db_connection_label()
    finally:
        await engine.dispose()

    assert health.status == "UP"
    assert label.startswith("sqlite+aiosqlite:///")


def test_db_services_reject_missing_engine() -> None:
    """Raise ValueError for missing engines and blank URLs."""

    with pytest.raises(ValueError):
        SQLAlchemyCustomerRepository(engine=None)
    with pytest.raises(ValueError):
        SQLAlchemyDatabaseHealthService(engine=None)
    with pytest.raises(ValueError):
        db_create_engine("   ")
