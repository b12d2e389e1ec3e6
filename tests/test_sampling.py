"""Tests for batches of independent runs."""

import pandas as pd
import pytest

from stocksim.simulation import Inventory, run_samples
from stocksim.simulation.sampling import run_single_sample


@pytest.fixture
def small_config(scenario_config):
    return scenario_config


def test_batch_summary_has_one_row_per_sample(small_config):
    batch = run_samples(3, max_time=20, config=small_config, seed=1, max_workers=1)

    assert len(batch.inventories) == 3
    assert list(batch.summary.index) == [0, 1, 2]
    assert batch.summary.index.name == 'sample'
    assert all(isinstance(inv, Inventory) for inv in batch.inventories)
    assert all(inv.time > 20 for inv in batch.inventories)


def test_batch_is_reproducible_from_seed(small_config):
    first = run_samples(3, max_time=20, config=small_config, seed=5, max_workers=1)
    second = run_samples(3, max_time=20, config=small_config, seed=5, max_workers=1)

    pd.testing.assert_frame_equal(first.summary, second.summary)


def test_samples_use_independent_streams(small_config):
    batch = run_samples(4, max_time=30, config=small_config, seed=5, max_workers=1)

    assert batch.summary['running_cost'].nunique() > 1


def test_parallel_batch_matches_sequential(small_config):
    sequential = run_samples(6, max_time=15, config=small_config, seed=11, max_workers=1)
    parallel = run_samples(6, max_time=15, config=small_config, seed=11, max_workers=2)

    pd.testing.assert_frame_equal(sequential.summary, parallel.summary)
    assert [inv.log for inv in sequential.inventories] == [inv.log for inv in parallel.inventories]


def test_single_sample_matches_batch_entry(small_config):
    import numpy as np

    seed_seqs = np.random.SeedSequence(21).spawn(2)
    alone = run_single_sample(small_config, seed_seqs[1], 20)
    batch = run_samples(2, max_time=20, config=small_config, seed=21, max_workers=1)

    assert alone.log == batch.inventories[1].log


def test_needs_at_least_one_sample():
    with pytest.raises(ValueError):
        run_samples(0)


def test_progress_is_logged_without_progress_bar(small_config, monkeypatch):
    from stocksim.simulation import sampling

    calls = []
    monkeypatch.setattr(sampling.logger, 'log_batch_progress',
                        lambda current, total, details="": calls.append((current, total)))

    run_samples(3, max_time=5, config=small_config, seed=1, max_workers=1)

    assert calls == [(1, 3), (2, 3), (3, 3)]


def test_progress_bar_replaces_progress_log_lines(small_config, monkeypatch):
    from stocksim.simulation import sampling

    calls = []
    monkeypatch.setattr(sampling.logger, 'log_batch_progress',
                        lambda current, total, details="": calls.append((current, total)))

    run_samples(2, max_time=5, config=small_config, seed=1, max_workers=1, show_progress=True)

    assert calls == []
