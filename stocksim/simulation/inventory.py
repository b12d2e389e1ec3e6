"""
Single-location inventory driven by discrete events.

The inventory owns its clock, stock, backlog, fulfilment history, running
cost and event queue. ``run_until`` pops events in time order, advances the
clock and hands each event to the matching ``on_*`` handler, which may
schedule further events.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from . import statistics
from .config import InventoryConfig
from .dispatcher import Dispatcher
from .event_queue import EventQueue
from .events import BeginDay, DemandArrival, EndDay, Event, ShipmentArrival
from .exceptions import CausalityError, EmptyQueueError
from .statistics import LogRow
from stocksim.utils.logger import get_logger


# A day closes just before the next whole time unit
DAY_END_OFFSET = 0.99
DAY_LENGTH = 1.0


logger = get_logger(__name__)


class Inventory:
    """
    Discrete-event model of a single inventory.

    States are implicit in ``(on_hand, backlog, request_placed)``. At most
    one replenishment request is outstanding at any time.
    """

    def __init__(self, config: Optional[InventoryConfig] = None,
                 rng: Optional[np.random.Generator] = None,
                 **overrides):
        """
        Initialize the inventory and schedule the first day.

        Args:
            config: Run settings (defaults to InventoryConfig())
            rng: Random stream for all sampling; built from ``config.seed`` if None
            **overrides: Individual InventoryConfig fields to replace
        """
        config = config or InventoryConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        self._time = 0.0
        self._on_hand = float(config.on_hand)
        self._request_placed = False
        self._running_cost = 0.0
        self._backlog: List[DemandArrival] = []
        self._fulfilled: List[DemandArrival] = []
        self._log: List[LogRow] = []
        self._events = EventQueue(clock=self._now)

        self.schedule_event(BeginDay(0.0))

    def _now(self) -> float:
        return self._time

    # Read accessors
    @property
    def time(self) -> float:
        return self._time

    @property
    def on_hand(self) -> float:
        return self._on_hand

    @property
    def request_placed(self) -> bool:
        return self._request_placed

    @property
    def running_cost(self) -> float:
        return self._running_cost

    @property
    def backlog(self) -> Tuple[DemandArrival, ...]:
        return tuple(self._backlog)

    @property
    def fulfilled(self) -> Tuple[DemandArrival, ...]:
        return tuple(self._fulfilled)

    @property
    def log(self) -> Tuple[LogRow, ...]:
        return tuple(self._log)

    @property
    def backlog_total(self) -> float:
        return sum(order.amount for order in self._backlog)

    @property
    def pending_events(self) -> int:
        return len(self._events)

    # Event loop
    def schedule_event(self, event: Event) -> None:
        """
        Put an event on the queue.

        Raises:
            CausalityError: If the event is earlier than the current time
        """
        self._events.push(event)

    def handle_next_event(self) -> Event:
        """
        Pop the earliest event, advance the clock to it and dispatch it.

        Returns:
            The event that was handled

        Raises:
            EmptyQueueError: If no events remain
            CausalityError: If the popped event is earlier than the clock
        """
        event = self._events.pop_earliest()
        if event.time < self._time:
            raise CausalityError(f"{event} happened before current time {self._time}")
        self._time = event.time
        Dispatcher.dispatch(event, self)
        return event

    def run_until(self, max_time: float) -> None:
        """
        Advance the simulation until the clock passes ``max_time``.

        The event that carries the clock past ``max_time`` is still handled.
        Calling again with a larger bound continues the same run.

        Raises:
            EmptyQueueError: If the queue runs dry before the bound is reached
        """
        logger.debug(f"Running from t={self._time:.2f} to t={max_time:.2f}")
        while self._time <= max_time:
            if self._events.is_empty():
                raise EmptyQueueError(
                    f"Event queue exhausted at t={self._time} before reaching t={max_time}"
                )
            self.handle_next_event()
        logger.debug(
            f"Stopped at t={self._time:.2f}: on_hand={self._on_hand:.1f}, "
            f"backlog={len(self._backlog)}, running_cost={self._running_cost:.2f}"
        )

    # Handlers
    def on_begin_day(self, event: BeginDay) -> None:
        """Schedule today's demands, the end of today and the start of tomorrow."""
        t = self._time
        n_orders = int(self.config.demand_count_dist.sample(self.rng))
        for j in range(1, n_orders + 1):
            amount = float(self.config.demand_size_dist.sample(self.rng))
            arrival_time = t + j / (n_orders + 1)
            self.schedule_event(DemandArrival(arrival_time, amount, arrival_time))
        self.schedule_event(EndDay(t + DAY_END_OFFSET))
        self.schedule_event(BeginDay(t + DAY_LENGTH))

    def on_shipment_arrival(self, event: ShipmentArrival) -> None:
        """Receive stock and retry every backlogged demand right now, oldest first."""
        self._on_hand += event.amount
        logger.debug(
            f"t={self._time:.2f}: shipment of {event.amount:.1f} arrived, "
            f"retrying {len(self._backlog)} backlogged orders"
        )
        for order in self._backlog:
            self.schedule_event(order.retry_at(self._time))
        self._backlog = []
        self._request_placed = False

    def on_demand_arrival(self, event: DemandArrival) -> None:
        """Fill the demand in full if stock allows, otherwise backlog it."""
        if self._on_hand >= event.amount:
            self._on_hand -= event.amount
            self._fulfilled.append(event)
        else:
            self._backlog.append(event)
        self.maybe_request_more()

    def maybe_request_more(self) -> bool:
        """
        Place a replenishment request if stock is at or below the reorder level
        and no request is outstanding. The request is paid for when placed.

        Returns:
            True if a request was placed
        """
        if self._request_placed or self._on_hand > self.config.reorder_level:
            return False

        batch_size = self.config.request_batch_size
        self._running_cost += (self.config.request_cost_per_batch
                               + batch_size * self.config.request_cost_per_unit)
        lead_time = self.sample_lead_time()
        self.schedule_event(ShipmentArrival(self._time + lead_time, batch_size))
        self._request_placed = True
        logger.debug(
            f"t={self._time:.2f}: requested {batch_size} units "
            f"(on_hand={self._on_hand:.1f}, lead_time={lead_time})"
        )
        return True

    def sample_lead_time(self) -> float:
        if self.config.stochastic_lead_time:
            return float(self.config.lead_time_dist.sample(self.rng))
        return float(self.config.lead_time)

    def on_end_day(self, event: EndDay) -> None:
        """Charge holding and shortage cost for the day and record a log row."""
        if self._on_hand >= 0:
            self._running_cost += self._on_hand * self.config.holding_cost_rate
        backlog_total = self.backlog_total
        self._running_cost += backlog_total * self.config.shortage_cost_rate
        self._log.append(LogRow(self._time, self._on_hand, backlog_total, self._running_cost))

    # Statistics
    def fraction_orders_backlogged(self) -> float:
        return statistics.fraction_orders_backlogged(self)

    def fraction_days_backlogged(self) -> float:
        return statistics.fraction_days_backlogged(self)

    def fulfilled_order_delay_times(self) -> Iterator[float]:
        return statistics.fulfilled_order_delay_times(self)

    def log_frame(self) -> pd.DataFrame:
        return statistics.log_frame(self)

    def fulfilled_frame(self) -> pd.DataFrame:
        return statistics.fulfilled_frame(self)

    def summary(self) -> dict:
        return statistics.summarize(self)

    def __repr__(self) -> str:
        return (f"Inventory(time={self._time}, on_hand={self._on_hand}, "
                f"backlog={len(self._backlog)}, running_cost={self._running_cost})")
