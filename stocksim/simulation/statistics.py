"""
Derived statistics over a finished (or paused) inventory run.

All functions are read-only and can be called any number of times. They
accept anything exposing ``fulfilled`` and ``log`` sequences, normally an
``Inventory``.
"""

from typing import Any, Dict, Iterator, NamedTuple

import numpy as np
import pandas as pd

from .exceptions import NoDataError


class LogRow(NamedTuple):
    """One end-of-day snapshot."""
    time: float
    on_hand: float
    backlog_total: float
    running_cost: float


FULFILLED_COLUMNS = ['time', 'original_time', 'amount', 'delay']


def fraction_orders_backlogged(inventory) -> float:
    """
    Share of fulfilled demands that had to wait in the backlog.

    Raises:
        NoDataError: If nothing has been fulfilled yet
    """
    fulfilled = inventory.fulfilled
    if not fulfilled:
        raise NoDataError("No fulfilled orders to compute backlog fraction over")
    return sum(1 for order in fulfilled if order.time > order.original_time) / len(fulfilled)


def fraction_days_backlogged(inventory) -> float:
    """
    Share of logged days that closed with outstanding backlog.

    Raises:
        NoDataError: If no day has closed yet
    """
    log = inventory.log
    if not log:
        raise NoDataError("No logged days to compute backlog fraction over")
    return sum(1 for row in log if row.backlog_total > 0) / len(log)


def fulfilled_order_delay_times(inventory) -> Iterator[float]:
    """Yield ``time - original_time`` for each fulfilled demand, in fulfilment order."""
    for order in inventory.fulfilled:
        yield order.time - order.original_time


def log_frame(inventory) -> pd.DataFrame:
    """End-of-day log as a DataFrame, one row per closed day."""
    return pd.DataFrame(list(inventory.log), columns=list(LogRow._fields))


def fulfilled_frame(inventory) -> pd.DataFrame:
    """Fulfilment history as a DataFrame."""
    rows = [
        (order.time, order.original_time, order.amount, order.time - order.original_time)
        for order in inventory.fulfilled
    ]
    return pd.DataFrame(rows, columns=FULFILLED_COLUMNS)


def summarize(inventory) -> Dict[str, Any]:
    """
    Collect headline numbers for a run into a flat dictionary.

    Fractions that are undefined for this run are reported as NaN so the
    result can go straight into a summary table.
    """
    try:
        orders_fraction = fraction_orders_backlogged(inventory)
    except NoDataError:
        orders_fraction = np.nan
    try:
        days_fraction = fraction_days_backlogged(inventory)
    except NoDataError:
        days_fraction = np.nan

    delays = np.fromiter(fulfilled_order_delay_times(inventory), dtype=float)

    return {
        'time': inventory.time,
        'on_hand': inventory.on_hand,
        'running_cost': inventory.running_cost,
        'orders_fulfilled': len(inventory.fulfilled),
        'orders_backlogged': len(inventory.backlog),
        'fraction_orders_backlogged': orders_fraction,
        'fraction_days_backlogged': days_fraction,
        'mean_delay': float(delays.mean()) if len(delays) > 0 else np.nan,
    }
