"""
Time loop coupling the falling beam to the dose grid.
"""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from typing import Callable, Optional

import numpy as np

from .. import config
from .beams import Beam, create_beam
from .constants import DEBUG
from .data_classes import SimulationConfig, SimulationResult, SimulationState
from .geometry import Circle, outer_square
from .kinematics import free_fall_step
from .point_map import PointMap


def build_detector(grid_radius: float) -> Circle:
    """Circular detector region centred at ``config.DETECTOR_CENTER_CM``."""
    cx, cy = config.DETECTOR_CENTER_CM
    return Circle.at(cx, cy, grid_radius)


def build_point_map(detector: Circle, resolution: int) -> PointMap:
    """Square ``resolution`` x ``resolution`` lattice bounding ``detector``."""
    return PointMap(outer_square(detector), resolution, resolution)


def dose_field(detector: Circle, beam: Beam, dt: float, vectorized: bool = False) -> Callable:
    """Per-tick dose sampled at a point: ``intensity * dt`` inside the detector, else 0.

    The returned function reads the beam's current state on every call, so the
    beam must be positioned before the grid is sampled.
    """
    if vectorized:
        def field(x, y):
            return np.where(detector.contains(x, y), beam.intensity_grid(x, y) * dt, 0.0)
    else:
        def field(x: float, y: float) -> float:
            if detector.contains(x, y):
                return beam.intensity(x, y) * dt
            return 0.0
    return field


def _grid_executor(sim_config: SimulationConfig):
    if sim_config.vectorized or sim_config.max_workers == 0:
        return nullcontext(None)
    return ThreadPoolExecutor(max_workers=sim_config.max_workers, thread_name_prefix="dose-grid")


def run_simulation(
    sim_config: SimulationConfig,
    beam: Optional[Beam] = None,
    point_map: Optional[PointMap] = None,
    on_tick: Optional[Callable[[SimulationState, PointMap], None]] = None,
) -> SimulationResult:
    """Drop the beam from ``start_height`` and accumulate dose until ``end_time``.

    Each tick applies, in order: a semi-implicit Euler free-fall step, the
    time advance, the beam move, the optional intensity ramp, and one grid
    accumulation. The loop stops once ``time >= end_time``; the last tick may
    overshoot ``end_time`` by less than ``dt``.

    Parameters
    ----------
    sim_config : SimulationConfig
        Run parameters.
    beam : Beam, optional
        Beam to drop. Built from ``sim_config`` when omitted.
    point_map : PointMap, optional
        Accumulator to fill. A square lattice bounding the detector is built
        when omitted.
    on_tick : callable, optional
        Called as ``on_tick(state, point_map)`` after every accumulation.

    Returns
    -------
    SimulationResult
    """
    detector = build_detector(sim_config.grid_radius)
    if point_map is None:
        point_map = build_point_map(detector, sim_config.resolution)
    if beam is None:
        beam = create_beam(sim_config.beam_type, sim_config.beam_radius, sim_config.intensity)

    dt = sim_config.dt
    state = SimulationState(beam_position=sim_config.start_height)
    field = dose_field(detector, beam, dt, vectorized=sim_config.vectorized)

    with _grid_executor(sim_config) as executor:
        while state.time < sim_config.end_time:
            state.beam_position, state.beam_velocity = free_fall_step(
                state.beam_position, state.beam_velocity, dt, sim_config.gravity
            )
            state.time += dt
            state.ticks += 1

            beam.set_position(config.BEAM_X_CM, state.beam_position)
            if sim_config.intensity_ramp:
                beam.change_intensity(sim_config.intensity_ramp * dt)

            point_map.accumulate(field, executor=executor, vectorized=sim_config.vectorized)

            if DEBUG:
                print(
                    f"[debug] tick {state.ticks}: t={state.time:.6g} s, "
                    f"y={state.beam_position:.6g} cm, v={state.beam_velocity:.6g} cm/s",
                    file=sys.stderr,
                )
            if on_tick is not None:
                on_tick(state, point_map)

    return SimulationResult(
        config=sim_config,
        point_map=point_map,
        detector=detector,
        beam=beam,
        state=state,
    )
