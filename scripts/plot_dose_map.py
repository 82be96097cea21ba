#!/usr/bin/env python
"""
Dose Map Visualization Script

This script plots a dose map written by run_simulation.py.

Usage:
    python plot_dose_map.py
    python plot_dose_map.py --data-file Data/dose_map.txt --grid-radius 0.15
"""

from pathlib import Path
import sys
import argparse

# Make the package importable when run from a checkout
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from radiation_pattern import config
from radiation_pattern.core import Circle, load_dose_map
from radiation_pattern.plotting import plot_dose_map


def main():
    """Script entry point."""
    parser = argparse.ArgumentParser(description="Plot an exported dose map")
    parser.add_argument("--data-file", type=Path, default=None,
                        help="Path to the dose map text file")
    parser.add_argument("--grid-radius", type=float, default=config.GRID_RADIUS_CM,
                        help="Detector radius to outline (cm)")
    parser.add_argument("--save", type=Path, default=None,
                        help="Save the figure instead of showing it")

    args = parser.parse_args()

    data_file = args.data_file or project_dir / config.DATA_OUTPUT_DIR / config.DOSE_MAP_FILE
    if not data_file.exists():
        print(f"[error] Dose map file not found: {data_file}")
        print("[info] Please run run_simulation.py first to generate the dose map.")
        sys.exit(1)

    print(f"[info] Loading dose map from {data_file}")
    data = load_dose_map(data_file)
    print(f"[info] Loaded {len(data)} samples")

    cx, cy = config.DETECTOR_CENTER_CM
    detector = Circle.at(cx, cy, args.grid_radius)
    plot_dose_map(data, detector=detector, save_path=args.save, show=args.save is None)


if __name__ == "__main__":
    main()
