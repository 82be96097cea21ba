"""
Data classes for the falling-beam dose simulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .. import config
from .beams import Beam
from .constants import GRAVITY_CM_S2
from .geometry import Circle
from .point_map import PointMap


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable run parameters, built once at startup.

    Attributes
    ----------
    start_height : float
        Initial vertical beam position (cm).
    dt : float
        Fixed time step (s).
    end_time : float
        The loop runs while ``time < end_time`` (s).
    beam_type : str
        ``'c'`` for a circular beam, ``'g'`` for a Gaussian beam.
    grid_radius : float
        Detector radius (cm).
    beam_radius : float
        Beam radius or standard deviation (cm).
    intensity : float
        Baseline dose rate (W/cm²).
    resolution : int
        Lattice points per axis.
    gravity : float
        Downward acceleration (cm/s²).
    intensity_ramp : float
        Baseline dose-rate change per second (W/cm²/s).
    max_workers : int or None
        Thread count for grid sampling; ``0`` samples on the calling thread.
    vectorized : bool
        Sample the grid with array operations instead of per-cell calls.
    """

    start_height: float
    dt: float
    end_time: float
    beam_type: str = "c"
    grid_radius: float = config.GRID_RADIUS_CM
    beam_radius: float = config.BEAM_RADIUS_CM
    intensity: float = config.BEAM_INTENSITY_W_CM2
    resolution: int = config.GRID_RESOLUTION
    gravity: float = GRAVITY_CM_S2
    intensity_ramp: float = config.BEAM_INTENSITY_RAMP
    max_workers: Optional[int] = config.DEFAULT_MAX_WORKERS
    vectorized: bool = config.DEFAULT_VECTORIZED


@dataclass
class SimulationState:
    """Mutable state of the time loop."""

    time: float = 0.0
    beam_velocity: float = 0.0  # cm/s
    beam_position: float = 0.0  # cm
    ticks: int = 0


@dataclass
class SimulationResult:
    """Everything a finished run produced."""

    config: SimulationConfig
    point_map: PointMap
    detector: Circle
    beam: Beam
    state: SimulationState
