"""Tests for inventory configuration loading and validation."""

from dataclasses import FrozenInstanceError

import pytest

from stocksim.simulation import (
    Constant,
    GammaSize,
    InventoryConfig,
    PoissonCount,
    TableLeadTime,
    create_config_from_env,
)
from stocksim.simulation.config import DEFAULT_CONFIG_PATH


def test_defaults():
    config = InventoryConfig()

    assert config.request_cost_per_batch == 25.0
    assert config.request_cost_per_unit == 3.0
    assert config.holding_cost_rate == pytest.approx(0.05 / 7)
    assert config.shortage_cost_rate == pytest.approx(2.00 / 7)
    assert config.lead_time == 2.0
    assert config.stochastic_lead_time is False
    assert config.demand_count_dist == PoissonCount(4)
    assert config.demand_size_dist == GammaSize(10, 2)
    assert config.lead_time_dist == TableLeadTime()


def test_overrides_replace_only_named_fields():
    config = InventoryConfig().with_overrides(on_hand=600, reorder_level=50)

    assert config.on_hand == 600
    assert config.reorder_level == 50
    assert config.request_batch_size == 600


def test_unknown_override_raises():
    with pytest.raises(TypeError):
        InventoryConfig().with_overrides(warehouses=3)


@pytest.mark.parametrize("field_name, value", [
    ('holding_cost_rate', -0.1),
    ('request_cost_per_unit', -1.0),
    ('lead_time', -2.0),
    ('request_batch_size', 0),
])
def test_invalid_values_raise(field_name, value):
    with pytest.raises(ValueError):
        InventoryConfig(**{field_name: value})


def test_distribution_mappings_are_built():
    config = InventoryConfig(demand_count_dist={'name': 'constant', 'value': 2})

    assert config.demand_count_dist == Constant(2)


def test_bundled_yaml_matches_defaults():
    assert InventoryConfig.from_yaml(DEFAULT_CONFIG_PATH) == InventoryConfig()


def test_from_yaml(tmp_path):
    path = tmp_path / "inventory.yaml"
    path.write_text(
        "inventory:\n"
        "  on_hand: 600\n"
        "  reorder_level: 50\n"
        "  request_batch_size: 100\n"
        "  stochastic_lead_time: true\n"
        "  demand_size_dist:\n"
        "    name: constant\n"
        "    value: 7.5\n"
        "  seed: 9\n"
    )

    config = InventoryConfig.from_yaml(path)

    assert config.on_hand == 600
    assert config.reorder_level == 50
    assert config.request_batch_size == 100
    assert config.stochastic_lead_time is True
    assert config.demand_size_dist == Constant(7.5)
    assert config.seed == 9


def test_from_yaml_rejects_unknown_keys(tmp_path):
    path = tmp_path / "inventory.yaml"
    path.write_text("inventory:\n  shelves: 4\n")

    with pytest.raises(ValueError, match="Unknown inventory settings"):
        InventoryConfig.from_yaml(path)


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        InventoryConfig.from_yaml(tmp_path / "missing.yaml")


def test_config_from_env(monkeypatch):
    monkeypatch.setenv('STOCKSIM_REORDER_LEVEL', '75')
    monkeypatch.setenv('STOCKSIM_SEED', '123')
    monkeypatch.setenv('STOCKSIM_STOCHASTIC_LEAD_TIME', 'true')

    config = create_config_from_env()

    assert config.reorder_level == 75.0
    assert config.seed == 123
    assert config.stochastic_lead_time is True


def test_to_dict_serializes_distributions():
    result = InventoryConfig().to_dict()

    assert result['demand_count_dist'] == {'name': 'poisson', 'lam': 4.0}
    assert result['request_batch_size'] == 600


def test_from_env_classmethod_applies_over_base(monkeypatch):
    monkeypatch.setenv('STOCKSIM_BATCH_SIZE', '250')

    config = InventoryConfig.from_env(InventoryConfig(reorder_level=40))

    assert config.request_batch_size == 250.0
    assert config.reorder_level == 40


def test_config_cannot_change_after_construction():
    config = InventoryConfig(request_batch_size=100)

    with pytest.raises(FrozenInstanceError):
        config.request_batch_size = -5

    assert config.request_batch_size == 100


def test_overrides_are_still_validated():
    with pytest.raises(ValueError):
        InventoryConfig().with_overrides(request_batch_size=-5)
