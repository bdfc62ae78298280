"""Startup seeding of fixed customer records."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from k8s_probe_demo.db import CustomerRepositoryError, CustomerRepositoryPort
from k8s_probe_demo.domain import DEFAULT_SEED_CUSTOMER_NAMES, Customer

logger = logging.getLogger(__name__)


class BootstrapSeeder:
    """Write seed customers concurrently and report each stored record.

    A failed save is logged and skipped; the remaining saves still complete
    and nothing is retried.
    """

    def __init__(
        self,
        repository: CustomerRepositoryPort,
        names: Sequence[str] = DEFAULT_SEED_CUSTOMER_NAMES,
    ):
        """Initialize seeder.

        Args:
            repository: Customer storage port used for saves.
            names: Customer names written by `seed`.

        Raises:
            ValueError: Raised when repository is None.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository
        self._names = tuple(names)

    async def seed(self) -> list[Customer]:
        """Save one customer per configured name.

        Returns:
            list[Customer]: Successfully stored customers in completion order.
        """

        logger.info("Seeding %d customers", len(self._names))
        save_tasks = [
            asyncio.create_task(self._repository.save(Customer(id=None, name=name))) for name in self._names
        ]
        saved_customers: list[Customer] = []
        try:
            for completed_save in asyncio.as_completed(save_tasks):
                try:
                    customer = await completed_save
                except (CustomerRepositoryError, ValueError) as error:
                    logger.warning("Seed customer save failed: %s", error)
                    continue
                print(customer)
                saved_customers.append(customer)
        finally:
            pending_tasks = [task for task in save_tasks if not task.done()]
            for pending_task in pending_tasks:
                pending_task.cancel()
            if pending_tasks:
                logger.info("Cancelled %d unfinished seed saves", len(pending_tasks))
            await asyncio.gather(*save_tasks, return_exceptions=True)
        return saved_customers
