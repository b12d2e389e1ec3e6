"""
stocksim: discrete-event simulation of a single inventory under stochastic demand.
"""

from .simulation import *
from .utils import *

__version__ = "0.1.0"
