"""
Custom exceptions for the inventory simulation.
"""

class SimulationError(Exception):
    """Base exception for simulation errors"""
    pass

class CausalityError(SimulationError):
    """Raised when an event would be scheduled or processed before the current clock"""
    pass

class EmptyQueueError(SimulationError):
    """Raised when the event loop needs an event but the queue is exhausted"""
    pass

class NoDataError(SimulationError):
    """Raised when a statistic is requested over an empty history"""
    pass
