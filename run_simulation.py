#!/usr/bin/env python3
"""
Inventory Simulation Runner

Runs a batch of independent inventory simulations and logs the cost and
backlog summary.
"""

import argparse
import sys

from stocksim.simulation import InventoryConfig, SimulationError, create_config_from_env, run_samples
from stocksim.utils.logger import get_logger, setup_logging


def run_simulation(n_samples: int = 10,
                   max_time: float = 100.0,
                   seed: int = None,
                   config_file: str = None,
                   stochastic_lead_time: bool = False,
                   max_workers: int = 1,
                   log_level: str = "INFO"):
    """
    Run a batch of inventory simulations.

    Args:
        n_samples: Number of independent runs
        max_time: Simulated time to run each sample to
        seed: Root random seed for the batch
        config_file: YAML file with an ``inventory`` section (optional)
        stochastic_lead_time: Draw lead times from the lead time table
        max_workers: Maximum number of parallel workers
        log_level: Logging level for the simulation

    Returns:
        SampleBatch with finished runs and summary table
    """
    logger = get_logger("run_simulation", level=log_level)
    logger.info("🔍 Inventory Simulation")

    config = InventoryConfig.from_yaml(config_file) if config_file else InventoryConfig()
    config = create_config_from_env(config)
    if stochastic_lead_time:
        config = config.with_overrides(stochastic_lead_time=True)

    logger.info(f"📋 Settings: {config.to_dict()}")

    batch = run_samples(n_samples, max_time=max_time, config=config, seed=seed,
                        max_workers=max_workers, show_progress=True)

    if batch.summary.empty:
        logger.error("❌ No simulation results generated")
        return batch

    summary = batch.summary
    logger.info("📊 Simulation Summary:")
    logger.info(f"  Samples simulated: {len(summary)}")
    logger.info(f"  Mean running cost: {summary['running_cost'].mean():.2f} "
                f"(std {summary['running_cost'].std():.2f})")
    logger.info(f"  Mean fraction of orders backlogged: {summary['fraction_orders_backlogged'].mean():.2%}")
    logger.info(f"  Mean fraction of days backlogged: {summary['fraction_days_backlogged'].mean():.2%}")
    logger.info(f"  Mean order delay: {summary['mean_delay'].mean():.3f}")
    logger.info("✅ Simulation completed successfully!")
    return batch


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Run inventory simulation")
    parser.add_argument("--samples", type=int, default=10,
                        help="Number of independent runs")
    parser.add_argument("--max-time", type=float, default=100.0,
                        help="Simulated time to run each sample to")
    parser.add_argument("--seed", type=int,
                        help="Root random seed for the batch")
    parser.add_argument("--config",
                        help="YAML configuration file with an 'inventory' section")
    parser.add_argument("--stochastic-lead-time", action="store_true",
                        help="Draw lead times from the lead time table")
    parser.add_argument("--max-workers", type=int, default=1,
                        help="Maximum number of parallel workers")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for the simulation")

    args = parser.parse_args()

    # Setup logging FIRST before any other operations
    setup_logging(level=args.log_level, console_output=True, file_output=False)

    try:
        run_simulation(
            n_samples=args.samples,
            max_time=args.max_time,
            seed=args.seed,
            config_file=args.config,
            stochastic_lead_time=args.stochastic_lead_time,
            max_workers=args.max_workers,
            log_level=args.log_level
        )
    except (SimulationError, ValueError, FileNotFoundError) as e:
        get_logger("run_simulation").log_error_with_context(e, "Simulation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
