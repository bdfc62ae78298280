"""Domain models used across application layer boundaries."""

from .models import (
    AvailabilityChangeEvent,
    AvailabilityState,
    DEFAULT_SEED_CUSTOMER_NAMES,
    Customer,
    HealthStatus,
    LivenessState,
    ReadinessState,
)

__all__ = [
    "AvailabilityChangeEvent",
    "AvailabilityState",
    "Customer",
    "DEFAULT_SEED_CUSTOMER_NAMES",
    "HealthStatus",
    "LivenessState",
    "ReadinessState",
]
