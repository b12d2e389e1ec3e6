"""
Priority queue of pending simulation events.

Events are ordered by time. Events with equal time come out in the order they
were pushed, which keeps runs reproducible.
"""

import heapq
from typing import Callable, List, Optional, Tuple

from .events import Event
from .exceptions import CausalityError, EmptyQueueError


class EventQueue:
    """
    Min-heap of events keyed on ``(time, insertion sequence)``.

    The queue is bound to its owner's clock so that it can refuse events
    scheduled into the past.
    """

    def __init__(self, clock: Callable[[], float]):
        """
        Initialize an empty queue.

        Args:
            clock: Zero-argument callable returning the owner's current time
        """
        self._clock = clock
        self._heap: List[Tuple[float, int, Event]] = []
        self._sequence = 0

    def push(self, event: Event) -> None:
        """
        Schedule an event.

        Raises:
            CausalityError: If the event's time is before the current clock
        """
        now = self._clock()
        if event.time < now:
            raise CausalityError(
                f"Cannot schedule {event} before current time {now}"
            )
        heapq.heappush(self._heap, (event.time, self._sequence, event))
        self._sequence += 1

    def pop_earliest(self) -> Event:
        """
        Remove and return the earliest event.

        Raises:
            EmptyQueueError: If no events remain
        """
        if not self._heap:
            raise EmptyQueueError("No pending events in queue")
        _, _, event = heapq.heappop(self._heap)
        return event

    def peek(self) -> Optional[Event]:
        """Next event without removing it, or None if the queue is empty."""
        return self._heap[0][2] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
