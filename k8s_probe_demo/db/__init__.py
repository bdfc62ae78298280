"""Database layer package for all SQL and persistence boundaries."""

from .customer import SQLAlchemyCustomerRepository
from .health import SQLAlchemyDatabaseHealthService
from .interfaces import CustomerRepositoryError, CustomerRepositoryPort, DatabaseHealthPort
from .schema import customer_table, db_initialize_schema, metadata
from .session import db_create_engine

__all__ = [
    "CustomerRepositoryError",
    "CustomerRepositoryPort",
    "DatabaseHealthPort",
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyDatabaseHealthService",
    "customer_table",
    "db_create_engine",
    "db_initialize_schema",
    "metadata",
]
