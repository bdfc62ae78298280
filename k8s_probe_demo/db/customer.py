"""Database service for customer persistence and streaming reads."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from k8s_probe_demo.domain import Customer

from .interfaces import CustomerRepositoryError, CustomerRepositoryPort


class SQLAlchemyCustomerRepository(CustomerRepositoryPort):
    """SQLAlchemy-backed customer repository over an async engine.

    Writes run in their own transaction; reads stream rows from a server-side
    cursor so callers never hold the whole table in memory.
    """

    def __init__(self, engine: AsyncEngine):
        """Initialize customer repository.

        Args:
            engine: SQLAlchemy async engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    async def save(self, customer: Customer) -> Customer:
        """Insert a new customer or rename an existing one.

        Args:
            customer: Record to persist. `id=None` inserts a new row.

        Returns:
            Customer: Stored record with its assigned identifier.

        Raises:
            ValueError: Raised when customer is None or its name is blank.
            CustomerRepositoryError: Raised when the row is missing or persistence fails.
        """

        if customer is None:
            raise ValueError("customer must not be None")
        normalized_name = self._validate_non_empty_text(customer.name, "name")

        try:
            async with self._engine.begin() as connection:
                if customer.id is None:
                    result = await connection.execute(
                        text("INSERT INTO customer (name) VALUES (:name) RETURNING id, name"),
                        {"name": normalized_name},
                    )
                else:
                    result = await connection.execute(
                        text("UPDATE customer SET name = :name WHERE id = :id RETURNING id, name"),
                        {"id": customer.id, "name": normalized_name},
                    )
                row = result.mappings().first()
        except SQLAlchemyError as error:
            raise CustomerRepositoryError(f"customer save failed for name={normalized_name!r}") from error

        if row is None:
            raise CustomerRepositoryError(f"customer not found: id={customer.id}")
        return self._map_customer(row)

    async def find_all(self) -> AsyncIterator[Customer]:
        """Stream all customers ordered by identifier.

        Returns:
            AsyncIterator[Customer]: Lazy single-pass customer sequence.

        Raises:
            CustomerRepositoryError: Raised mid-iteration when the read fails.
        """

        try:
            async with self._engine.connect() as connection:
                result = await connection.stream(text("SELECT id, name FROM customer ORDER BY id"))
                async for row in result.mappings():
                    yield self._map_customer(row)
        except SQLAlchemyError as error:
            raise CustomerRepositoryError("customer listing failed") from error

    @staticmethod
    def _map_customer(row) -> Customer:
        return Customer(id=int(row["id"]), name=str(row["name"]))

    @staticmethod
    def _validate_non_empty_text(value: str, field_name: str) -> str:
        normalized_value = (value or "").strip()
        if not normalized_value:
            raise ValueError(f"{field_name} must not be blank")
        return normalized_value
