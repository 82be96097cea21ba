"""
Core modules of the dose simulation:
- constants: physical constants and debug flag
- geometry: Point, Rect, Circle and bounding conversions
- point_map: lattice accumulator (PointMap)
- beams: beam dose-rate models
- kinematics: free-fall integration
- data_classes: SimulationConfig, SimulationState, SimulationResult
- simulation: time loop
- io_utils: text dump import/export
"""

# Constants
from .constants import GRAVITY_CM_S2, DEBUG

# Geometry
from .geometry import (
    Point,
    Rect,
    Circle,
    outer_square,
    inner_square,
    outer_circle,
    inner_circle,
)

# Accumulator
from .point_map import PointMap, format_sample

# Beams
from .beams import (
    Beam,
    BeamType,
    CircleBeam,
    GaussBeam,
    create_beam,
)

# Kinematics
from .kinematics import free_fall_step, count_ticks

# Data classes
from .data_classes import (
    SimulationConfig,
    SimulationState,
    SimulationResult,
)

# Simulation
from .simulation import (
    build_detector,
    build_point_map,
    dose_field,
    run_simulation,
)

# IO
from .io_utils import (
    write_dose_map,
    export_dose_map,
    load_dose_map,
)

__all__ = [
    # Constants
    'GRAVITY_CM_S2',
    'DEBUG',
    # Geometry
    'Point',
    'Rect',
    'Circle',
    'outer_square',
    'inner_square',
    'outer_circle',
    'inner_circle',
    # Accumulator
    'PointMap',
    # Beams
    'Beam',
    'BeamType',
    'CircleBeam',
    'GaussBeam',
    'create_beam',
    # Kinematics
    'free_fall_step',
    'count_ticks',
    # Data classes
    'SimulationConfig',
    'SimulationState',
    'SimulationResult',
    # Simulation
    'build_detector',
    'build_point_map',
    'dose_field',
    'run_simulation',
    # IO
    'format_sample',
    'write_dose_map',
    'export_dose_map',
    'load_dose_map',
]
