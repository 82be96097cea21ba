"""
Validation utilities for the dose grid and the simulation loop.

These checks can be run before a long simulation to make sure the
accumulator, the beam models and the time loop behave as expected.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from ..core.beams import CircleBeam, GaussBeam
from ..core.data_classes import SimulationConfig
from ..core.geometry import Circle, Point
from ..core.kinematics import count_ticks, free_fall_step
from ..core.point_map import PointMap
from ..core.simulation import run_simulation


def validate_dose_map(point_map: PointMap, detector: Circle, name: str = "Dose map") -> Tuple[bool, str]:
    """Validate an accumulated dose map.

    Checks that the dump covers every cell once, that all values are finite
    and non-negative, and that cells outside ``detector`` hold exactly zero.

    Returns
    -------
    valid : bool
        True if the map is valid.
    message : str
        Description of validation result.
    """
    errors = []
    expected = point_map.n_rows * point_map.n_cols

    samples = point_map.dump()
    if len(samples) != expected:
        errors.append(f"Dump has {len(samples)} samples, expected {expected}")
    coords = {(x, y) for x, y, _ in samples}
    if len(coords) != len(samples):
        errors.append(f"Dump has {len(samples) - len(coords)} duplicate coordinates")

    values = point_map.values
    if not np.all(np.isfinite(values)):
        errors.append("Contains NaN or Inf values")
    if np.any(values < 0):
        errors.append("Contains negative dose")

    outside = ~detector.contains(*point_map.lattice())
    if np.any(values[outside] != 0.0):
        errors.append(f"{int(np.count_nonzero(values[outside]))} cells outside the detector received dose")

    if errors:
        return False, f"{name}: " + "; ".join(errors)

    return True, f"{name}: Valid ({expected} cells, {int(np.count_nonzero(values))} dosed)"


def validate_simulation_module() -> Tuple[bool, List[Tuple[str, bool, str]]]:
    """Validate that beams, kinematics and the time loop work correctly.

    Returns
    -------
    success : bool
        True if all tests pass.
    results : list
        List of ``(test_name, passed, message)``.
    """
    results = []
    all_passed = True

    def record(name: str, passed: bool, message: str) -> None:
        nonlocal all_passed
        results.append((name, passed, message))
        if not passed:
            all_passed = False

    # Circle beam boundary
    beam = CircleBeam(Point(0.0, 0.0), 1.0, 5.0)
    values = (beam.intensity(0.5, 0.0), beam.intensity(1.0, 0.0), beam.intensity(1.0001, 0.0))
    record("Circle beam profile", values == (5.0, 0.0, 0.0), f"samples {values}")

    # Gauss beam peak
    gauss = GaussBeam(Point(0.0, 0.0), 1.0, 2.0)
    peak = gauss.intensity(0.0, 0.0)
    expected_peak = 2.0 / math.sqrt(2 * math.pi)
    record("Gauss beam peak", peak == expected_peak, f"peak {peak:.6g}, expected {expected_peak:.6g}")

    # Semi-implicit Euler step
    dt = 0.01
    position, velocity = free_fall_step(100.0, 0.0, dt, 981.0)
    ok = velocity == -981.0 * dt and position == 100.0 + velocity * dt
    record("Free-fall step", ok, f"y={position:.6g} cm, v={velocity:.6g} cm/s")

    # Tick counting
    ticks = count_ticks(0.25, 1.0)
    record("Tick count (exact)", ticks == 4, f"{ticks} ticks")
    ticks = count_ticks(0.3, 1.0)
    record("Tick count (overshoot)", ticks == 4, f"{ticks} ticks")

    # Small end-to-end runs
    for beam_type in ("c", "g"):
        try:
            sim_config = SimulationConfig(
                start_height=1.0, dt=0.01, end_time=0.1, beam_type=beam_type,
                resolution=10, max_workers=0,
            )
            result = run_simulation(sim_config)
            valid, msg = validate_dose_map(result.point_map, result.detector, f"Run ({beam_type})")
            record(f"Simulation ({beam_type})", valid, msg)
        except Exception as e:
            record(f"Simulation ({beam_type})", False, str(e))

    return all_passed, results


def run_quick_test(verbose: bool = True) -> bool:
    """Run a quick validation test and print results.

    Example
    -------
    >>> from radiation_pattern.testing import run_quick_test
    >>> success = run_quick_test()
    """
    if verbose:
        print("=" * 70)
        print("DOSE SIMULATION VALIDATION")
        print("=" * 70)

    success, results = validate_simulation_module()

    if verbose:
        for test_name, passed, message in results:
            status = "✓" if passed else "✗"
            print(f"{status} {test_name}: {message}")

        print()
        print("=" * 70)
        if success:
            print("ALL TESTS PASSED ✓")
        else:
            print("SOME TESTS FAILED ✗")
        print("=" * 70)

    return success
