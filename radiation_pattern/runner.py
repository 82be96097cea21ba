"""
Dose Simulation Runner Module

This module provides the command-line entry point and a ``run_full_simulation``
function that can be called from scripts or imported directly.

Usage:
    radiation-pattern START_HEIGHT DT END_TIME BEAM_TYPE [GRID_RADIUS [BEAM_RADIUS [INTENSITY [RESOLUTION]]]]
    radiation-pattern 100 0.01 1 c
    radiation-pattern 100 0.01 1 g 0.15 1 2 50 --output Data/dose_map.txt --plot Figures/dose_map.png
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import config
from .core.beams import BeamType
from .core.data_classes import SimulationConfig, SimulationResult
from .core.io_utils import export_dose_map, write_dose_map
from .core.simulation import run_simulation
from .plotting import plot_dose_map, print_statistics

USAGE = """\
Supply at least 4 parameters
  1: start height (cm)
  2: timestep (s)
  3: end time (s)
  4: beam type (c = circular, g = gaussian)

You may supply up to 8 parameters (defaults)
  5: grid radius ({grid_radius:g} cm)
  6: beam radius ({beam_radius:g} cm)
  7: beam intensity ({intensity:g} W/cm^2)
  8: grid resolution ({resolution})
""".format(
    grid_radius=config.GRID_RADIUS_CM,
    beam_radius=config.BEAM_RADIUS_CM,
    intensity=config.BEAM_INTENSITY_W_CM2,
    resolution=config.GRID_RESOLUTION,
)

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_float(text: str) -> float:
    """Parse like C ``atof``: the longest numeric prefix, or 0.0 if none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_int(text: str) -> int:
    """Parse like C ``atoi``: the leading integer, or 0 if none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def build_config(
    values: Sequence[str],
    max_workers: Optional[int] = config.DEFAULT_MAX_WORKERS,
    vectorized: bool = config.DEFAULT_VECTORIZED,
    intensity_ramp: float = config.BEAM_INTENSITY_RAMP,
) -> SimulationConfig:
    """Build a ``SimulationConfig`` from positional CLI values.

    The first four values are required; the optional ones fall back to the
    defaults in ``config``. The beam type is validated, numbers are not.

    Raises
    ------
    ValueError
        If fewer than four values are given or the beam type is unknown.
    """
    if len(values) < 4:
        raise ValueError("Supply at least 4 parameters")

    beam_type = BeamType.parse(values[3])

    grid_radius = parse_float(values[4]) if len(values) > 4 else config.GRID_RADIUS_CM
    beam_radius = parse_float(values[5]) if len(values) > 5 else config.BEAM_RADIUS_CM
    intensity = parse_float(values[6]) if len(values) > 6 else config.BEAM_INTENSITY_W_CM2
    resolution = parse_int(values[7]) if len(values) > 7 else config.GRID_RESOLUTION

    return SimulationConfig(
        start_height=parse_float(values[0]),
        dt=parse_float(values[1]),
        end_time=parse_float(values[2]),
        beam_type=beam_type.value,
        grid_radius=grid_radius,
        beam_radius=beam_radius,
        intensity=intensity,
        resolution=resolution,
        intensity_ramp=intensity_ramp,
        max_workers=max_workers,
        vectorized=vectorized,
    )


_VALUE_OPTIONS = ("--workers", "--intensity-ramp", "--output", "--plot")


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split ``argv`` into positional values and option tokens.

    Only ``--name`` tokens and ``-h`` are options, so negative numbers such as
    ``-1e3`` or ``-inf`` stay positional. Options may sit between positionals,
    and everything after ``--`` is positional. A value option's argument is
    glued on as ``--name=value`` so that it may itself start with ``-``.
    """
    values: List[str] = []
    options: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            values.extend(tokens)
        elif token.startswith("--") or token == "-h":
            if token in _VALUE_OPTIONS:
                value = next(tokens, None)
                if value is not None:
                    token = f"{token}={value}"
            options.append(token)
        else:
            values.append(token)
    return values, options


def run_full_simulation(
    sim_config: SimulationConfig,
    output_file: Optional[Path] = None,
    plot_file: Optional[Path] = None,
    verbose: bool = True,
) -> SimulationResult:
    """Run the simulation and emit its dose map.

    This is the main entry point for running simulations. It handles:
    1. Running the time loop
    2. Writing the dose dump (stdout, or ``output_file``)
    3. Printing run statistics
    4. Saving a dose map figure

    Parameters
    ----------
    sim_config : SimulationConfig
        Run parameters.
    output_file : Path, optional
        File for the text dump. If None, the dump goes to stdout.
    plot_file : Path, optional
        PNG file for the dose map figure. If None, no figure is made.
    verbose : bool
        Whether to print diagnostics to stderr.

    Returns
    -------
    SimulationResult
    """
    if verbose:
        print("\n" + "=" * 60, file=sys.stderr)
        print("SIMULATION CONFIGURATION", file=sys.stderr)
        print("=" * 60, file=sys.stderr)
        print(f"Start height: {sim_config.start_height:g} cm", file=sys.stderr)
        print(f"Time step: {sim_config.dt:g} s, end time: {sim_config.end_time:g} s", file=sys.stderr)
        print(f"Beam: {BeamType.parse(sim_config.beam_type).name.lower()}, radius {sim_config.beam_radius:g} cm, "
              f"intensity {sim_config.intensity:g} W/cm^2", file=sys.stderr)
        print(f"Detector radius: {sim_config.grid_radius:g} cm, resolution {sim_config.resolution}",
              file=sys.stderr)
        print("=" * 60 + "\n", file=sys.stderr)
        print("[info] Starting simulation...", file=sys.stderr)

    result = run_simulation(sim_config)

    if output_file is not None:
        path = export_dose_map(result.point_map, output_file)
        if verbose:
            print(f"[info] Saved dose map to {path}", file=sys.stderr)
    else:
        write_dose_map(result.point_map, sys.stdout)

    if verbose:
        print_statistics(result)

    if plot_file is not None:
        plot_dose_map(result.point_map, result.detector, save_path=plot_file)

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Simulate a beam falling over a circular detector and print the dose map",
        usage="%(prog)s START_HEIGHT DT END_TIME BEAM_TYPE [GRID_RADIUS [BEAM_RADIUS [INTENSITY [RESOLUTION]]]]",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--workers", type=int, default=config.DEFAULT_MAX_WORKERS,
                        help="Threads used to sample the grid (0 = calling thread only)")
    parser.add_argument("--vectorized", action="store_true",
                        help="Sample the grid with array operations")
    parser.add_argument("--intensity-ramp", type=float, default=config.BEAM_INTENSITY_RAMP,
                        help="Change of beam intensity per second (W/cm^2/s)")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write the dose map to this file instead of stdout")
    parser.add_argument("--plot", type=Path, default=None,
                        help="Save a dose map figure to this file")
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print diagnostics to stderr")

    if argv is None:
        argv = sys.argv[1:]
    values, options = split_arguments(argv)
    args = parser.parse_args(options)

    if len(values) < 4:
        print(USAGE)
        return 1

    try:
        sim_config = build_config(
            values,
            max_workers=args.workers,
            vectorized=args.vectorized or config.DEFAULT_VECTORIZED,
            intensity_ramp=args.intensity_ramp,
        )
    except ValueError as e:
        print(e)
        return 1

    run_full_simulation(
        sim_config,
        output_file=args.output,
        plot_file=args.plot,
        verbose=not args.quiet,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
