"""
Testing subpackage for the dose simulation.

This subpackage provides tools for checking the simulation:
- Validation of dose maps and of the core modules
- Comparison of the grid sampling modes

Example usage:
    from radiation_pattern.testing import run_quick_test, compare_execution_modes

    run_quick_test()
    results = compare_execution_modes(SimulationConfig(100.0, 0.01, 1.0, 'g'))
"""

from .validation import (
    validate_dose_map,
    validate_simulation_module,
    run_quick_test,
)

from .comparison import (
    compare_execution_modes,
    print_comparison,
)

__all__ = [
    # Validation
    "validate_dose_map",
    "validate_simulation_module",
    "run_quick_test",
    # Comparison
    "compare_execution_modes",
    "print_comparison",
]
