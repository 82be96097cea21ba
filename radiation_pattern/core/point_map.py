"""
Lattice accumulator for sampling a scalar field over a rectangle.

A ``PointMap`` owns one contiguous buffer of ``n_rows * n_cols`` cells. Each
``accumulate`` call samples a field function at every lattice point and adds
the sample into the cell. Rows are independent, so the per-cell path can be
spread over a ``concurrent.futures`` executor: one task per row, joined before
the call returns.

Axis mapping
------------
During accumulation the row index ``i`` selects ``x = tl.x + i * spacing_x``
and the column index ``j`` selects ``y = tl.y + j * spacing_y``. ``dump``
walks ``i`` over the column count and ``j`` over the row count and reads the
flat cell ``i * n_rows + j``. For square lattices both walks coincide; for
rectangular lattices the dump keeps this exact pairing so that the output
ordering is reproducible.
"""

from __future__ import annotations

from concurrent.futures import Executor, wait
from typing import Callable, List, Optional, TextIO, Tuple

import numpy as np

from .geometry import Point, Rect

FieldFunction = Callable[[float, float], float]


def format_sample(x: float, y: float, value: float) -> str:
    return f"{x:g} {y:g} {value:g}"


def _spacing(extent: float, count: int) -> float:
    """``extent / count`` without raising on zero counts."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(extent) / count)


class PointMap:
    """Dense 2D accumulator over a rectangular lattice.

    Parameters
    ----------
    rect : Rect
        Bounding rectangle of the lattice.
    x_points : int
        Number of columns.
    y_points : int, optional
        Number of rows. Defaults to ``x_points``.
    """

    def __init__(self, rect: Rect, x_points: int, y_points: Optional[int] = None) -> None:
        if y_points is None:
            y_points = x_points
        self._rect = rect
        self._n_cols = int(x_points)
        self._n_rows = int(y_points)
        self._spacing_x = _spacing(rect.width, self._n_cols)
        self._spacing_y = _spacing(rect.height, self._n_rows)
        self._data = np.zeros((self._n_rows, self._n_cols), dtype=float)

    @classmethod
    def from_corners(
        cls, tl: Point, br: Point, x_points: int, y_points: Optional[int] = None
    ) -> PointMap:
        return cls(Rect(tl, br), x_points, y_points)

    def __copy__(self):
        raise TypeError("PointMap owns its buffer and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("PointMap owns its buffer and cannot be copied")

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def spacing_x(self) -> float:
        return self._spacing_x

    @property
    def spacing_y(self) -> float:
        return self._spacing_y

    @property
    def values(self) -> np.ndarray:
        """Copy of the accumulated cells, shape ``(n_rows, n_cols)``."""
        return self._data.copy()

    def _row_x(self) -> List[float]:
        tl = self._rect.tl
        return [tl.x + i * self._spacing_x for i in range(self._n_rows)]

    def _col_y(self) -> List[float]:
        tl = self._rect.tl
        return [tl.y + j * self._spacing_y for j in range(self._n_cols)]

    def lattice(self) -> Tuple[np.ndarray, np.ndarray]:
        """Accumulation coordinates as ``(n_rows, 1)`` x and ``(1, n_cols)`` y arrays."""
        x_grid = np.asarray(self._row_x(), dtype=float)[:, np.newaxis]
        y_grid = np.asarray(self._col_y(), dtype=float)[np.newaxis, :]
        return x_grid, y_grid

    def _accumulate_row(self, field: FieldFunction, i: int, x: float, ys: List[float]) -> None:
        row = self._data[i]
        for j, y in enumerate(ys):
            row[j] += field(x, y)

    def accumulate(
        self,
        field: FieldFunction,
        executor: Optional[Executor] = None,
        vectorized: bool = False,
    ) -> None:
        """Add ``field(x, y)`` to every cell.

        Parameters
        ----------
        field : callable
            Scalar field ``f(x, y) -> float``. With ``executor`` set it is
            called concurrently from several threads and must not mutate
            shared state.
        executor : concurrent.futures.Executor, optional
            Thread pool used to evaluate rows in parallel. All row tasks are
            joined before returning; the first task failure is re-raised.
        vectorized : bool
            Call ``field`` once with broadcastable coordinate arrays of shape
            ``(n_rows, 1)`` and ``(1, n_cols)`` instead of once per cell.
        """
        if vectorized:
            x_grid, y_grid = self.lattice()
            samples = np.asarray(field(x_grid, y_grid), dtype=float)
            self._data += np.broadcast_to(samples, self._data.shape)
            return

        xs = self._row_x()
        ys = self._col_y()
        if executor is None:
            for i, x in enumerate(xs):
                self._accumulate_row(field, i, x, ys)
            return

        futures = [executor.submit(self._accumulate_row, field, i, x, ys) for i, x in enumerate(xs)]
        wait(futures)
        for future in futures:
            future.result()

    def dump(self) -> List[Tuple[float, float, float]]:
        """Return ``(x, y, value)`` for every cell in output order."""
        tl = self._rect.tl
        flat = self._data.reshape(-1)
        samples = []
        for i in range(self._n_cols):
            x = tl.x + i * self._spacing_x
            for j in range(self._n_rows):
                y = tl.y + j * self._spacing_y
                samples.append((x, y, float(flat[i * self._n_rows + j])))
        return samples

    def write(self, stream: TextIO) -> None:
        """Write one ``"x y value"`` line per cell in dump order, then a blank line."""
        for x, y, value in self.dump():
            stream.write(format_sample(x, y, value) + "\n")
        stream.write("\n")

    def to_array(self) -> np.ndarray:
        """``dump()`` as an ``(N, 3)`` array."""
        return np.array(self.dump(), dtype=float).reshape(-1, 3)

    def total(self) -> float:
        return float(np.sum(self._data))

    def __repr__(self) -> str:
        return (
            f"PointMap(rect={self._rect!r}, rows={self._n_rows}, cols={self._n_cols}, "
            f"spacing=({self._spacing_x:g}, {self._spacing_y:g}))"
        )
