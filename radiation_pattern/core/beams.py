"""
Beam dose-rate models.

A beam has a centre position and a baseline intensity (W/cm²), both mutable
between ticks. ``intensity(x, y)`` is the dose rate at a point for the current
state and never mutates the beam, so it is safe to call from many threads
while a tick is being sampled.

Two shapes exist:

- ``CircleBeam``: flat dose rate ``I`` strictly inside a disk of radius ``r``.
- ``GaussBeam``: ``I / (r * sqrt(2π)) * exp(-d² / (2 r²))`` where ``d`` is the
  distance to the centre. The prefactor is the 1D Gaussian normalisation
  applied to a radial distance, so the profile does not integrate to ``I``
  over the plane; this is the reference dose model and is kept as is.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from .geometry import Circle, Point


class BeamType(Enum):
    """Beam shape selector, keyed by the CLI token."""

    CIRCLE = "c"
    GAUSS = "g"

    @classmethod
    def parse(cls, token: str) -> BeamType:
        """Map the first character of ``token`` (case-insensitive) to a type.

        Raises
        ------
        ValueError
            If the token is empty or names no known shape.
        """
        key = token[:1].lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError("Beam type must be c/g")


class Beam(ABC):
    """Common interface of the beam shapes."""

    def __init__(self, center: Point, intensity: float) -> None:
        self._center = center
        self._base_intensity = intensity

    @property
    def position(self) -> Point:
        return self._center

    @property
    def base_intensity(self) -> float:
        return self._base_intensity

    def set_position(self, x: float, y: float) -> None:
        """Move the beam centre to ``(x, y)``."""
        self._center = Point(x, y)

    def change_intensity(self, delta: float) -> None:
        """Add ``delta`` to the baseline intensity."""
        self._base_intensity += delta

    @abstractmethod
    def intensity(self, x: float, y: float) -> float:
        """Dose rate at ``(x, y)`` for the current centre and intensity."""

    @abstractmethod
    def intensity_grid(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        """Element-wise ``intensity`` over broadcastable coordinate arrays."""


class CircleBeam(Beam):
    """Uniform disk of radius ``radius``; zero on and outside the rim."""

    def __init__(self, center: Point, radius: float, intensity: float) -> None:
        super().__init__(center, intensity)
        self.radius = radius

    @property
    def disk(self) -> Circle:
        return Circle(self._center, self.radius)

    def intensity(self, x: float, y: float) -> float:
        return self._base_intensity if self.disk.contains(x, y) else 0.0

    def intensity_grid(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.where(self.disk.contains(x, y), self._base_intensity, 0.0)

    def __repr__(self) -> str:
        return f"CircleBeam(center={self._center!r}, radius={self.radius}, intensity={self._base_intensity})"


class GaussBeam(Beam):
    """Radial Gaussian profile with standard deviation ``radius``."""

    def __init__(self, center: Point, radius: float, intensity: float) -> None:
        super().__init__(center, intensity)
        self.radius = radius

    def peak(self) -> float:
        return self._base_intensity / (self.radius * math.sqrt(2 * math.pi))

    def intensity(self, x: float, y: float) -> float:
        dx = x - self._center.x
        dy = y - self._center.y
        return self._base_intensity / (self.radius * math.sqrt(2 * math.pi)) * math.exp(
            -(dx * dx + dy * dy) / (2 * (self.radius * self.radius))
        )

    def intensity_grid(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        dx = x - self._center.x
        dy = y - self._center.y
        return self._base_intensity / (self.radius * math.sqrt(2 * math.pi)) * np.exp(
            -(dx * dx + dy * dy) / (2 * (self.radius * self.radius))
        )

    def __repr__(self) -> str:
        return f"GaussBeam(center={self._center!r}, radius={self.radius}, intensity={self._base_intensity})"


def create_beam(beam_type, radius: float, intensity: float, center: Point = Point(0.0, 0.0)) -> Beam:
    """Build a beam from a ``BeamType`` or a CLI token such as ``'c'``/``'G'``."""
    if not isinstance(beam_type, BeamType):
        beam_type = BeamType.parse(str(beam_type))
    if beam_type is BeamType.CIRCLE:
        return CircleBeam(center, radius, intensity)
    return GaussBeam(center, radius, intensity)
