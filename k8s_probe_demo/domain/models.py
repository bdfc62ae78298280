"""Typed domain models shared across runtime layers.

This module provides the customer record and the availability vocabulary used
by the state holder, the probes and the change handlers.
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_SEED_CUSTOMER_NAMES: tuple[str, ...] = ("Simon", "Thomas")


@dataclass(frozen=True)
class Customer:
    """Customer record exchanged with the repository and the HTTP surface.

    Attributes:
        id: Store-assigned identifier, `None` until persisted.
        name: Customer display name.
    """

    id: int | None
    name: str


class LivenessState(str, Enum):
    """Whether the process is healthy enough to keep running."""

    CORRECT = "CORRECT"
    BROKEN = "BROKEN"


class ReadinessState(str, Enum):
    """Whether the process should receive traffic."""

    ACCEPTING_TRAFFIC = "ACCEPTING_TRAFFIC"
    REFUSING_TRAFFIC = "REFUSING_TRAFFIC"


AvailabilityState = LivenessState | ReadinessState


@dataclass(frozen=True)
class AvailabilityChangeEvent:
    """Notification delivered to availability handlers on every transition.

    Attributes:
        state: Newly active state value.
        state_type: Name of the state enum, for example `LivenessState`.
    """

    state: AvailabilityState
    state_type: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
