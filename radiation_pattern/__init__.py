"""
Radiation Pattern Simulation Package
====================================

This package simulates a radiation beam falling under gravity above a
circular detector and accumulates the deposited dose on a 2D lattice.

Modules:
--------
- config: Configurable simulation defaults
- core.constants: Physical constants
- core.geometry: Point, Rect, Circle primitives
- core.point_map: Lattice accumulator
- core.beams: Circular and Gaussian beam models
- core.kinematics: Free-fall integration
- core.simulation: Time loop
- core.io_utils: Text dump import/export
- plotting: Dose map figures and statistics
- runner: Command-line entry point
"""

from . import config
from .core import (
    GRAVITY_CM_S2,
    Point,
    Rect,
    Circle,
    outer_square,
    inner_square,
    outer_circle,
    inner_circle,
    PointMap,
    Beam,
    BeamType,
    CircleBeam,
    GaussBeam,
    create_beam,
    free_fall_step,
    count_ticks,
    SimulationConfig,
    SimulationState,
    SimulationResult,
    run_simulation,
    write_dose_map,
    export_dose_map,
    load_dose_map,
)

__version__ = "1.0.0"
__all__ = [
    # Config module
    "config",
    # Constants
    "GRAVITY_CM_S2",
    # Geometry
    "Point",
    "Rect",
    "Circle",
    "outer_square",
    "inner_square",
    "outer_circle",
    "inner_circle",
    # Accumulator
    "PointMap",
    # Beams
    "Beam",
    "BeamType",
    "CircleBeam",
    "GaussBeam",
    "create_beam",
    # Kinematics
    "free_fall_step",
    "count_ticks",
    # Simulation
    "SimulationConfig",
    "SimulationState",
    "SimulationResult",
    "run_simulation",
    # IO
    "write_dose_map",
    "export_dose_map",
    "load_dose_map",
]
