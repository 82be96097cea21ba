"""
Plotting subpackage for dose simulation results.

Example usage:
    from radiation_pattern.plotting import plot_dose_map
    from radiation_pattern.core import load_dose_map

    data = load_dose_map('Data/dose_map.txt')
    plot_dose_map(data, save_path='Figures/dose_map.png')
"""

from .results import (
    plot_dose_map,
    print_statistics,
)

__all__ = [
    "plot_dose_map",
    "print_statistics",
]
