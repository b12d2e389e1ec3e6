"""
Event types for the inventory simulation.

Every event is an immutable value carrying the time at which it happens.
Events never change once created: a backlogged demand that is retried is
replaced by a new ``DemandArrival`` with the retry time and the same
``original_time``.
"""

from dataclasses import dataclass, replace
from typing import Tuple, Type


@dataclass(frozen=True)
class Event:
    """Base class for all events."""
    time: float


@dataclass(frozen=True)
class BeginDay(Event):
    """Start of a simulated day."""
    pass


@dataclass(frozen=True)
class EndDay(Event):
    """Close of a simulated day. Triggers cost accrual."""
    pass


@dataclass(frozen=True)
class DemandArrival(Event):
    """
    A customer demand for ``amount`` units.

    ``original_time`` is the time the demand first arrived. After a
    successful retry ``time`` is the time it was actually fulfilled.
    """
    amount: float
    original_time: float

    @property
    def is_backlogged(self) -> bool:
        """True if this demand was fulfilled later than it arrived."""
        return self.time > self.original_time

    @property
    def delay(self) -> float:
        return self.time - self.original_time

    def retry_at(self, time: float) -> 'DemandArrival':
        """Return a copy of this demand rescheduled at ``time``."""
        return replace(self, time=time)


@dataclass(frozen=True)
class ShipmentArrival(Event):
    """A replenishment shipment of ``amount`` units arriving from the supplier."""
    amount: float


EVENT_TYPES: Tuple[Type[Event], ...] = (BeginDay, EndDay, DemandArrival, ShipmentArrival)
