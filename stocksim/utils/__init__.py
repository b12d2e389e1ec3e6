"""
Utility modules for the stocksim package.
"""

from .logger import SimulationLogger, get_logger, setup_logging

__all__ = [
    'SimulationLogger',
    'get_logger',
    'setup_logging',
]
