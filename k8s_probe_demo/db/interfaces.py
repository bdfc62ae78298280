"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from collections.abc import AsyncIterator
from typing import Protocol

from k8s_probe_demo.domain import Customer, HealthStatus


class CustomerRepositoryError(RuntimeError):
    """Raised when customer storage cannot complete a read or write."""


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.
        """

    async def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class CustomerRepositoryPort(Protocol):
    """Port definition for asynchronous customer storage."""

    async def save(self, customer: Customer) -> Customer:
        """Persist one customer and return the stored record.

        Args:
            customer: Record to insert (`id` unset) or update (`id` set).

        Returns:
            Customer: Stored record carrying its assigned identifier.

        Raises:
            ValueError: Raised when the customer name is blank.
            CustomerRepositoryError: Raised when storage fails.
        """

    def find_all(self) -> AsyncIterator[Customer]:
        """Stream every stored customer in storage order.

        Returns:
            AsyncIterator[Customer]: Single-pass lazy sequence of customers.

        Raises:
            CustomerRepositoryError: Raised mid-iteration when storage fails.
        """
