"""Availability state holder and change handlers for orchestration probes."""

from .state import ApplicationAvailability, AvailabilityChangeHandler, availability_print_change

__all__ = ["ApplicationAvailability", "AvailabilityChangeHandler", "availability_print_change"]
