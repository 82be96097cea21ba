"""
Dose map visualization and run statistics.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch

from .. import config
from ..core.data_classes import SimulationResult
from ..core.geometry import Circle
from ..core.point_map import PointMap


def plot_dose_map(
    data: Union[PointMap, np.ndarray],
    detector: Optional[Circle] = None,
    save_path: Optional[Union[str, Path]] = None,
    show: bool = False,
    title: str = "Accumulated Dose",
):
    """Draw the accumulated dose on the lattice.

    Parameters
    ----------
    data : PointMap or np.ndarray
        Accumulator, or an ``(N, 3)`` array of ``x, y, dose`` as returned by
        ``load_dose_map``.
    detector : Circle, optional
        Detector outline to overlay.
    save_path : str or Path, optional
        PNG file to write.
    show : bool
        Whether to open an interactive window.

    Returns
    -------
    matplotlib.figure.Figure
    """
    samples = data.to_array() if isinstance(data, PointMap) else np.asarray(data, dtype=float)
    if samples.size == 0:
        print("[warning] Empty dose map, nothing to plot.", file=sys.stderr)
        return None

    x, y, dose = samples[:, 0], samples[:, 1], samples[:, 2]

    fig, ax = plt.subplots(figsize=config.DOSE_MAP_FIGSIZE)
    n_side = max(int(np.sqrt(len(samples))), 1)
    marker_size = max(4.0, 4000.0 / n_side)
    sc = ax.scatter(x, y, c=dose, cmap=config.DOSE_COLORMAP, s=marker_size, marker="s", linewidths=0)

    if detector is not None:
        outline = CirclePatch(
            (detector.center.x, detector.center.y),
            detector.radius,
            fill=False,
            edgecolor=config.DETECTOR_COLOR,
            linewidth=config.DETECTOR_LINEWIDTH,
            label="Detector boundary",
        )
        ax.add_patch(outline)
        ax.legend(loc="upper right")

    ax.set_xlabel("x (cm)")
    ax.set_ylabel("y (cm)")
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)
    fig.colorbar(sc, ax=ax, label="Dose (J/cm²)")
    fig.tight_layout()

    if save_path:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=config.PLOT_DPI, bbox_inches="tight")
        print(f"[info] Saved dose map figure to {save_path}", file=sys.stderr)

    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def print_statistics(result: SimulationResult, stream=None):
    """Print a summary of a finished run (stderr by default)."""
    if stream is None:
        stream = sys.stderr

    values = result.point_map.values
    state = result.state
    detector = result.detector
    pm = result.point_map

    inside = detector.contains(*pm.lattice())
    n_inside = int(np.count_nonzero(inside))
    n_dosed = int(np.count_nonzero(values > 0))

    print("\n" + "=" * 60, file=stream)
    print("DOSE SIMULATION STATISTICS", file=stream)
    print("=" * 60, file=stream)
    print(f"Beam type: {result.beam.__class__.__name__}", file=stream)
    print(f"Ticks: {state.ticks} (dt = {result.config.dt:g} s)", file=stream)
    print(f"Final time: {state.time:.6g} s", file=stream)
    print(f"Final beam position: {state.beam_position:.6g} cm", file=stream)
    print(f"Final beam velocity: {state.beam_velocity:.6g} cm/s", file=stream)
    print(f"Grid: {pm.n_rows} x {pm.n_cols} cells, spacing {pm.spacing_x:.6g} x {pm.spacing_y:.6g} cm",
          file=stream)
    print(f"Cells inside detector: {n_inside}", file=stream)
    print(f"Cells with dose: {n_dosed}", file=stream)
    if values.size:
        print(f"Peak dose: {np.max(values):.6g}", file=stream)
        print(f"Total dose: {np.sum(values):.6g}", file=stream)
    print("=" * 60 + "\n", file=stream)
