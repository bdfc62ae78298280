"""Application services for customer listing and startup seeding."""

from .customers import CustomerListingService
from .seeding import DEFAULT_SEED_CUSTOMER_NAMES, BootstrapSeeder

__all__ = ["BootstrapSeeder", "CustomerListingService", "DEFAULT_SEED_CUSTOMER_NAMES"]
