#!/usr/bin/env python
"""
Dose Simulation - Main Runner Script

This script runs the falling-beam dose simulation.

Usage:
    python run_simulation.py 100 0.01 1 c
    python run_simulation.py 100 0.01 1 g 0.15 1 2 50 --output Data/dose_map.txt
    python run_simulation.py --check

Without arguments the default scenario is run and its dump is written to
Data/dose_map.txt in the project directory.
"""

from pathlib import Path
import sys

# Make the package importable when run from a checkout
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from radiation_pattern import config
from radiation_pattern.core import SimulationConfig
from radiation_pattern.runner import run_full_simulation, main as runner_main
from radiation_pattern.testing import run_quick_test


def main():
    """Script entry point."""
    if sys.argv[1:] == ["--check"]:
        sys.exit(0 if run_quick_test() else 1)
    if len(sys.argv) > 1:
        sys.exit(runner_main())

    # Default run - output into the project directory
    sim_config = SimulationConfig(start_height=100.0, dt=0.01, end_time=1.0, beam_type="c")
    run_full_simulation(
        sim_config,
        output_file=project_dir / config.DATA_OUTPUT_DIR / config.DOSE_MAP_FILE,
        plot_file=project_dir / config.FIGURES_OUTPUT_DIR / config.DOSE_MAP_FIGURE,
    )


if __name__ == "__main__":
    main()
