"""
Plain-text import/export of dose maps.

The dump format is one ``"<x> <y> <dose>"`` line per lattice cell, numbers in
``%g`` notation, followed by one blank line.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

import numpy as np

from .point_map import PointMap


def write_dose_map(point_map: PointMap, stream: Optional[TextIO] = None) -> None:
    """Write the dump of ``point_map`` to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    point_map.write(stream)
    stream.flush()


def export_dose_map(point_map: PointMap, filename: Union[str, Path]) -> Path:
    """Write the text dump to ``filename``, creating parent directories.

    Returns
    -------
    Path
        The written file.
    """
    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        write_dose_map(point_map, f)
    return output_path


def load_dose_map(filename: Union[str, Path]) -> np.ndarray:
    """Read a text dump back as an ``(N, 3)`` array of ``x, y, dose``.

    Raises
    ------
    FileNotFoundError
        If ``filename`` does not exist.
    ValueError
        If a non-blank line does not hold exactly three numbers.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"Dose map not found: {path}")

    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 3:
                raise ValueError(f"{path}:{lineno}: expected 3 columns, got {len(fields)}")
            rows.append([float(v) for v in fields])
    return np.array(rows, dtype=float).reshape(-1, 3)
