"""
Batches of independent inventory runs.

Each sample gets its own random stream spawned from one SeedSequence, so a
batch is reproducible from a single seed and samples share no state.
"""

import time
from concurrent.futures import ProcessPoolExecutor, as_completed
import multiprocessing as mp
from typing import Dict, List, NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import InventoryConfig
from .exceptions import SimulationError
from .inventory import Inventory
from stocksim.utils.logger import get_logger


logger = get_logger(__name__)


class SampleBatch(NamedTuple):
    """Finished runs and one summary row per run."""
    inventories: List[Inventory]
    summary: pd.DataFrame


def run_single_sample(config: InventoryConfig, seed_seq: np.random.SeedSequence,
                      max_time: float) -> Inventory:
    """Build one inventory on its own random stream and run it to ``max_time``."""
    inventory = Inventory(config, rng=np.random.default_rng(seed_seq))
    inventory.run_until(max_time)
    return inventory


def _report_progress(done: int, total: int, failed: int, show_progress: bool) -> None:
    """Log batch progress roughly every tenth of the batch when no progress bar is shown."""
    if show_progress:
        return
    every = max(1, total // 10)
    if done % every == 0 or done == total:
        logger.log_batch_progress(done, total, f"{failed} failed" if failed else "")


def run_samples(n_samples: int, max_time: float = 100.0,
                config: Optional[InventoryConfig] = None,
                seed: Optional[int] = None,
                max_workers: Optional[int] = None,
                show_progress: bool = False) -> SampleBatch:
    """
    Run ``n_samples`` independent simulations.

    Args:
        n_samples: Number of runs
        max_time: Time bound passed to ``Inventory.run_until``
        config: Settings shared by every run (defaults to InventoryConfig())
        seed: Root seed; falls back to ``config.seed``, then to OS entropy
        max_workers: Worker processes (1 runs in-process; None uses CPU count)
        show_progress: Show a progress bar instead of periodic progress log lines

    Returns:
        SampleBatch with the finished inventories, in sample order, and a
        summary DataFrame indexed by sample number
    """
    if n_samples < 1:
        raise ValueError(f"n_samples must be at least 1, got {n_samples}")

    config = config or InventoryConfig()
    root_seed = seed if seed is not None else config.seed
    seed_seqs = np.random.SeedSequence(root_seed).spawn(n_samples)

    if max_workers is None:
        max_workers = min(mp.cpu_count(), n_samples)

    logger.log_run_start("Sampling", {'samples': n_samples, 'max_time': max_time,
                                      'seed': root_seed, 'workers': max_workers})
    start = time.time()

    results: Dict[int, Inventory] = {}
    failed = 0

    # For small batches, run sequentially to avoid overhead
    if max_workers <= 1 or n_samples <= 4:
        for index in tqdm(range(n_samples), desc="Sampling", unit="run", disable=not show_progress):
            try:
                results[index] = run_single_sample(config, seed_seqs[index], max_time)
            except SimulationError as e:
                logger.log_error_with_context(e, f"sample {index}")
                failed += 1
            _report_progress(index + 1, n_samples, failed, show_progress)
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            future_to_index = {
                executor.submit(run_single_sample, config, seed_seqs[index], max_time): index
                for index in range(n_samples)
            }
            for done, future in enumerate(tqdm(as_completed(future_to_index), total=n_samples,
                                               desc="Sampling", unit="run", disable=not show_progress), 1):
                index = future_to_index[future]
                try:
                    results[index] = future.result()
                except SimulationError as e:
                    logger.log_error_with_context(e, f"sample {index}")
                    failed += 1
                _report_progress(done, n_samples, failed, show_progress)

    order = sorted(results)
    inventories = [results[index] for index in order]
    summary = pd.DataFrame([inventory.summary() for inventory in inventories],
                           index=pd.Index(order, name='sample'))

    details = {'succeeded': len(inventories), 'failed': n_samples - len(inventories)}
    if len(inventories) > 0:
        details['mean_running_cost'] = f"{summary['running_cost'].mean():.2f}"
    logger.log_run_completion("Sampling", time.time() - start, details)

    return SampleBatch(inventories, summary)
