"""
Random samplers used by the inventory simulation.

Samplers hold parameters only. The random stream is passed in on every call,
so each inventory instance can own an independently seeded generator.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

import numpy as np


class Distribution(ABC):
    """
    Abstract base class for samplers.

    All samplers must implement the sample method.
    """

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> float:
        """
        Draw a single value.

        Args:
            rng: Random stream owned by the caller

        Returns:
            Sampled value
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Configuration form understood by DistributionFactory."""
        return {'name': DistributionFactory.name_of(self), **vars(self)}

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({params})"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)


class PoissonCount(Distribution):
    """Number of customer demands per day."""

    def __init__(self, lam: float = 4.0):
        if lam < 0:
            raise ValueError(f"Poisson rate must be non-negative, got {lam}")
        self.lam = lam

    def sample(self, rng: np.random.Generator) -> int:
        return int(rng.poisson(self.lam))


class GammaSize(Distribution):
    """Size of a single customer demand."""

    def __init__(self, shape: float = 10.0, scale: float = 2.0):
        if shape <= 0 or scale <= 0:
            raise ValueError(f"Gamma shape and scale must be positive, got shape={shape}, scale={scale}")
        self.shape = shape
        self.scale = scale

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.gamma(self.shape, self.scale))


class Constant(Distribution):
    """Always returns the same value. Used for fixed lead times and scripted tests."""

    def __init__(self, value: float):
        self.value = value

    def sample(self, rng: np.random.Generator) -> float:
        return self.value


class TableLeadTime(Distribution):
    """
    Lead time looked up from a cumulative probability table.

    A uniform draw ``u`` in [0, 1) selects the first row whose upper bound is
    strictly greater than ``u``, so every interval is half-open
    ``[lower, upper)``.
    """

    DEFAULT_TABLE: Tuple[Tuple[float, float], ...] = (
        (0.1, 2.0),
        (0.3, 3.0),
        (0.7, 4.0),
        (1.0, 5.0),
    )

    def __init__(self, table: Sequence[Sequence[float]] = DEFAULT_TABLE):
        rows = [(float(upper), float(value)) for upper, value in table]
        if not rows:
            raise ValueError("Lead time table must not be empty")
        uppers = [upper for upper, _ in rows]
        if any(b <= a for a, b in zip(uppers, uppers[1:])):
            raise ValueError(f"Lead time table bounds must be strictly increasing, got {uppers}")
        if uppers[-1] != 1.0:
            raise ValueError(f"Lead time table must end at 1.0, got {uppers[-1]}")
        self.table = rows

    def lookup(self, u: float) -> float:
        """Map a uniform draw in [0, 1) to a lead time."""
        for upper, value in self.table:
            if u < upper:
                return value
        raise ValueError(f"Uniform draw {u} outside [0, 1)")

    def sample(self, rng: np.random.Generator) -> float:
        return self.lookup(float(rng.random()))

    def to_dict(self) -> Dict[str, Any]:
        return {'name': 'table', 'table': [list(row) for row in self.table]}


class DistributionFactory:
    """
    Factory for creating samplers from configuration.
    """

    _distributions = {
        'poisson': PoissonCount,
        'gamma': GammaSize,
        'constant': Constant,
        'table': TableLeadTime,
    }

    @classmethod
    def create(cls, name: str, **kwargs) -> Distribution:
        """
        Create a sampler by name.

        Args:
            name: Name of the distribution
            **kwargs: Parameters for the distribution constructor

        Returns:
            Distribution instance

        Raises:
            ValueError: If the name is not recognized
        """
        if name not in cls._distributions:
            available = list(cls._distributions.keys())
            raise ValueError(f"Unknown distribution '{name}'. Available distributions: {available}")
        return cls._distributions[name](**kwargs)

    @classmethod
    def from_config(cls, value: Any) -> Distribution:
        """
        Build a sampler from a config value.

        Accepts an existing Distribution, a bare number (treated as constant)
        or a mapping of the form ``{'name': ..., **params}``.
        """
        if isinstance(value, Distribution):
            return value
        if isinstance(value, (int, float)):
            return Constant(value)
        if isinstance(value, dict):
            params = dict(value)
            name = params.pop('name', None)
            if name is None:
                raise ValueError(f"Distribution config is missing 'name': {value}")
            return cls.create(name, **params)
        raise ValueError(f"Cannot build a distribution from {value!r}")

    @classmethod
    def name_of(cls, distribution: Distribution) -> str:
        for name, dist_class in cls._distributions.items():
            if type(distribution) is dist_class:
                return name
        return type(distribution).__name__

    @classmethod
    def register(cls, name: str, dist_class: type):
        """
        Register a new sampler.

        Args:
            name: Name for the distribution
            dist_class: Class (must inherit from Distribution)
        """
        if not issubclass(dist_class, Distribution):
            raise ValueError("Distribution class must inherit from Distribution")
        cls._distributions[name] = dist_class
