"""Customer listing service over the repository port."""

from collections.abc import AsyncIterator

from k8s_probe_demo.db import CustomerRepositoryPort
from k8s_probe_demo.domain import Customer


class CustomerListingService:
    """Expose stored customers as a lazy asynchronous sequence."""

    def __init__(self, repository: CustomerRepositoryPort):
        """Initialize listing service.

        Args:
            repository: Customer storage port.

        Raises:
            ValueError: Raised when repository is None.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository

    def list_all(self) -> AsyncIterator[Customer]:
        """Return every stored customer as the repository produces it.

        Returns:
            AsyncIterator[Customer]: Single-pass sequence; repository failures
            surface as `CustomerRepositoryError` during iteration.
        """

        return self._repository.find_all()
