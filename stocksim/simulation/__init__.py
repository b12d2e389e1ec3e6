"""
Inventory Simulation

Discrete-event model of a single inventory under stochastic demand: an event
queue, a dispatcher routing events to inventory handlers, and derived
statistics over finished runs.
"""

from .config import InventoryConfig, create_config_from_env, create_default_config
from .distributions import (
    Constant,
    Distribution,
    DistributionFactory,
    GammaSize,
    PoissonCount,
    TableLeadTime,
)
from .dispatcher import Dispatcher
from .event_queue import EventQueue
from .events import BeginDay, DemandArrival, EndDay, Event, ShipmentArrival
from .exceptions import CausalityError, EmptyQueueError, NoDataError, SimulationError
from .inventory import Inventory
from .sampling import SampleBatch, run_samples
from .statistics import (
    LogRow,
    fraction_days_backlogged,
    fraction_orders_backlogged,
    fulfilled_order_delay_times,
    summarize,
)

__all__ = [
    'InventoryConfig',
    'create_config_from_env',
    'create_default_config',
    'Constant',
    'Distribution',
    'DistributionFactory',
    'GammaSize',
    'PoissonCount',
    'TableLeadTime',
    'Dispatcher',
    'EventQueue',
    'BeginDay',
    'DemandArrival',
    'EndDay',
    'Event',
    'ShipmentArrival',
    'CausalityError',
    'EmptyQueueError',
    'NoDataError',
    'SimulationError',
    'Inventory',
    'SampleBatch',
    'run_samples',
    'LogRow',
    'fraction_days_backlogged',
    'fraction_orders_backlogged',
    'fulfilled_order_delay_times',
    'summarize',
]
