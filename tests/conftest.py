"""Pytest configuration and shared fixtures."""

import pytest

from stocksim.simulation import Constant, DemandArrival, Inventory, InventoryConfig, ShipmentArrival


class RecordingInventory(Inventory):
    """Inventory that remembers what it handled, for checking run-wide properties."""

    def __init__(self, *args, **kwargs):
        self.handled = []
        self.requests = []
        self.shipments = []
        self.end_of_day_stock = []
        super().__init__(*args, **kwargs)

    def handle_next_event(self):
        event = super().handle_next_event()
        self.handled.append(event)
        return event

    def maybe_request_more(self):
        placed_before = self.request_placed
        placed = super().maybe_request_more()
        if placed:
            assert not placed_before
            self.requests.append(self.time)
        return placed

    def on_shipment_arrival(self, event):
        assert self.request_placed
        self.shipments.append(self.time)
        super().on_shipment_arrival(event)

    def on_end_day(self, event):
        self.end_of_day_stock.append(self.on_hand)
        super().on_end_day(event)


def quiet_config(**overrides):
    """Config with no generated demand, so tests can script every event."""
    values = dict(
        demand_count_dist=Constant(0),
        demand_size_dist=Constant(1.0),
        reorder_level=0,
    )
    values.update(overrides)
    return InventoryConfig(**values)


def drain(inventory, until):
    """Handle events one by one until the clock passes ``until``; return them."""
    handled = []
    while inventory.time <= until:
        handled.append(inventory.handle_next_event())
    return handled


@pytest.fixture
def scenario_config():
    """Configuration used by the reference 100-day scenario."""
    return InventoryConfig(on_hand=600, reorder_level=50, request_batch_size=100, lead_time=2.0)


@pytest.fixture
def scripted_inventory():
    """
    Inventory with one fulfilled demand and one demand that waits in the
    backlog for a shipment, run to t=1.5.
    """
    inventory = Inventory(quiet_config(on_hand=5))
    inventory.schedule_event(DemandArrival(0.1, 3.0, 0.1))
    inventory.schedule_event(DemandArrival(0.2, 10.0, 0.2))
    inventory.schedule_event(ShipmentArrival(1.5, 30.0))
    inventory.run_until(1.5)
    return inventory


def step(inventory, count):
    """Handle exactly ``count`` events; return them."""
    return [inventory.handle_next_event() for _ in range(count)]
