"""
Routes each event type to the inventory handler responsible for it.
"""

from typing import Any, Dict, Type

from .events import EVENT_TYPES, BeginDay, DemandArrival, EndDay, Event, ShipmentArrival


class Dispatcher:
    """
    Maps event types to handler method names and calls them.

    The route table must cover every event type; this is checked when the
    module is imported.
    """

    ROUTES: Dict[Type[Event], str] = {
        BeginDay: 'on_begin_day',
        EndDay: 'on_end_day',
        DemandArrival: 'on_demand_arrival',
        ShipmentArrival: 'on_shipment_arrival',
    }

    @classmethod
    def handler_name(cls, event: Event) -> str:
        """Handler for the event's type, or for its nearest routed base class."""
        for klass in type(event).__mro__:
            if klass in cls.ROUTES:
                return cls.ROUTES[klass]
        raise TypeError(f"No handler registered for {type(event).__name__}")

    @classmethod
    def dispatch(cls, event: Event, handler: Any) -> Any:
        """
        Call the handler method matching the event's type.

        Args:
            event: Event just popped from the queue
            handler: Object implementing the ``on_*`` handler methods

        Returns:
            Whatever the handler returns
        """
        return getattr(handler, cls.handler_name(event))(event)


def _check_routes() -> None:
    known = set(EVENT_TYPES) | set(Event.__subclasses__())
    missing = [t.__name__ for t in known if t not in Dispatcher.ROUTES]
    unknown = [t.__name__ for t in Dispatcher.ROUTES if t not in known]
    if missing or unknown:
        raise TypeError(
            f"Dispatcher routes out of sync with event types "
            f"(missing: {missing}, unknown: {unknown})"
        )


_check_routes()
