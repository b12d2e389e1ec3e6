"""
Configuration for the inventory simulation.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union
import os

import yaml

from .distributions import Distribution, DistributionFactory, GammaSize, PoissonCount, TableLeadTime


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "simulation_config.yaml"


@dataclass(frozen=True)
class InventoryConfig:
    """Settings that stay fixed for the whole of one simulation run."""

    # Starting stock
    on_hand: float = 0.0

    # Costs
    request_cost_per_batch: float = 25.0
    request_cost_per_unit: float = 3.0
    holding_cost_rate: float = 0.05 / 7  # per unit per day
    shortage_cost_rate: float = 2.00 / 7  # per backlogged unit per day

    # Replenishment policy
    request_batch_size: float = 600
    reorder_level: float = 200
    lead_time: float = 2.0
    stochastic_lead_time: bool = False
    lead_time_dist: Distribution = field(default_factory=TableLeadTime)

    # Demand
    demand_count_dist: Distribution = field(default_factory=PoissonCount)
    demand_size_dist: Distribution = field(default_factory=lambda: GammaSize(shape=10.0, scale=2.0))

    # Random stream (None draws fresh OS entropy)
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings and build samplers given as config mappings."""
        for name in ('demand_count_dist', 'demand_size_dist', 'lead_time_dist'):
            object.__setattr__(self, name, DistributionFactory.from_config(getattr(self, name)))

        for name in ('request_cost_per_batch', 'request_cost_per_unit',
                     'holding_cost_rate', 'shortage_cost_rate', 'on_hand', 'lead_time'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        if self.request_batch_size <= 0:
            raise ValueError(f"request_batch_size must be positive, got {self.request_batch_size}")

    def with_overrides(self, **overrides) -> 'InventoryConfig':
        """
        Return a copy with some fields replaced.

        Raises:
            TypeError: If an override does not name a config field
        """
        unknown = set(overrides) - self.field_names()
        if unknown:
            raise TypeError(f"Unknown inventory settings: {sorted(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'InventoryConfig':
        unknown = set(values) - cls.field_names()
        if unknown:
            raise ValueError(f"Unknown inventory settings: {sorted(unknown)}")
        return cls(**values)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> 'InventoryConfig':
        """
        Load settings from the ``inventory`` section of a YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            InventoryConfig with file values over the defaults
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            raw = yaml.safe_load(f) or {}

        values = {k: v for k, v in (raw.get('inventory') or {}).items() if v is not None}
        return cls.from_dict(values)

    @classmethod
    def from_env(cls, base: Optional['InventoryConfig'] = None) -> 'InventoryConfig':
        """
        Apply ``STOCKSIM_*`` environment variables over a base config.

        Args:
            base: Starting settings (defaults to InventoryConfig())

        Returns:
            InventoryConfig with environment values over ``base``
        """
        config = base or cls()

        overrides = {}
        for env_name, (field_name, convert) in _ENV_FIELDS.items():
            if os.getenv(env_name):
                overrides[field_name] = convert(os.getenv(env_name))

        return config.with_overrides(**overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for logging."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = value.to_dict() if isinstance(value, Distribution) else value
        return result


_ENV_FIELDS = {
    'STOCKSIM_ON_HAND': ('on_hand', float),
    'STOCKSIM_REORDER_LEVEL': ('reorder_level', float),
    'STOCKSIM_BATCH_SIZE': ('request_batch_size', float),
    'STOCKSIM_LEAD_TIME': ('lead_time', float),
    'STOCKSIM_STOCHASTIC_LEAD_TIME': ('stochastic_lead_time', lambda v: v.lower() in ('1', 'true', 'yes')),
    'STOCKSIM_SEED': ('seed', int),
}


def create_default_config() -> InventoryConfig:
    """Create a default configuration."""
    return InventoryConfig()


def create_config_from_env(base: Optional[InventoryConfig] = None) -> InventoryConfig:
    """Create configuration from environment variables."""
    return InventoryConfig.from_env(base)
