"""Process availability state holder with change notification.

One `ApplicationAvailability` instance is built at bootstrap and handed to
every component that reads or changes liveness and readiness. Handlers are
called synchronously, in registration order, once per actual transition.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from k8s_probe_demo.domain import AvailabilityChangeEvent, AvailabilityState, LivenessState, ReadinessState

logger = logging.getLogger(__name__)

AvailabilityChangeHandler = Callable[[AvailabilityChangeEvent], None]


class ApplicationAvailability:
    """Owns the current liveness and readiness states of the process."""

    def __init__(
        self,
        liveness_state: LivenessState = LivenessState.CORRECT,
        readiness_state: ReadinessState = ReadinessState.REFUSING_TRAFFIC,
    ):
        self._liveness_state = liveness_state
        self._readiness_state = readiness_state
        self._handlers: list[AvailabilityChangeHandler] = []

    @property
    def liveness_state(self) -> LivenessState:
        return self._liveness_state

    @property
    def readiness_state(self) -> ReadinessState:
        return self._readiness_state

    def on_availability_changed(self, handler: AvailabilityChangeHandler) -> None:
        """Register a handler for every future availability transition.

        Args:
            handler: Callable receiving the change event.

        Raises:
            ValueError: Raised when handler is not callable.
        """

        if not callable(handler):
            raise ValueError("handler must be callable")
        self._handlers.append(handler)

    def publish(self, state: AvailabilityState) -> bool:
        """Make `state` the active value of its kind and notify handlers.

        Args:
            state: New liveness or readiness value.

        Returns:
            bool: True when the state changed and handlers were notified.

        Raises:
            ValueError: Raised when state is not an availability state.
        """

        if isinstance(state, LivenessState):
            if state is self._liveness_state:
                return False
            self._liveness_state = state
        elif isinstance(state, ReadinessState):
            if state is self._readiness_state:
                return False
            self._readiness_state = state
        else:
            raise ValueError(f"unsupported availability state: {state!r}")

        event = AvailabilityChangeEvent(state=state, state_type=type(state).__name__)
        logger.info("Availability changed: %s=%s", event.state_type, state.value)
        for handler in self._handlers:
            handler(event)
        return True

    def mark_broken(self) -> None:
        """Switch liveness to BROKEN for the rest of the process lifetime."""

        self.publish(LivenessState.BROKEN)

    def mark_accepting_traffic(self) -> None:
        self.publish(ReadinessState.ACCEPTING_TRAFFIC)

    def mark_refusing_traffic(self) -> None:
        self.publish(ReadinessState.REFUSING_TRAFFIC)


def availability_print_change(event: AvailabilityChangeEvent) -> None:
    """Print one availability transition as `<state type>: <state>`."""

    print(f"{event.state_type}: {event.state.value}")
