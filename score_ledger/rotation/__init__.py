"""Dealer rotation state machine."""

from .state_machine import (
    DealerRotationStateMachine,
    RotationTransitionResult,
    RotationTrigger,
)

__all__ = [
    "DealerRotationStateMachine",
    "RotationTransitionResult",
    "RotationTrigger",
]
