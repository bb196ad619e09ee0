"""Value types shared by the calculator, the renderer and the UI."""

from __future__ import annotations

import math
from typing import NamedTuple

NM = 1.0e-9
MM = 1.0e-3


class BeamInput(NamedTuple):
    """Beam and lens parameters in meters.

    ``object_distance`` is signed: negative when the input waist sits in
    front of the lens.
    """

    wavelength: float
    focal_length: float
    object_distance: float
    waist: float

    @classmethod
    def from_display(
        cls, wavelength_nm: float, focal_length_mm: float, object_distance_mm: float, waist_mm: float
    ) -> "BeamInput":
        """Build from form values; the object distance is entered as a positive magnitude."""
        return cls(
            wavelength=wavelength_nm * NM,
            focal_length=focal_length_mm * MM,
            object_distance=-object_distance_mm * MM,
            waist=waist_mm * MM,
        )

    def is_valid(self) -> bool:
        if not all(math.isfinite(v) for v in self):
            return False
        return self.wavelength > 0 and self.focal_length > 0 and self.waist > 0


class BeamResult(NamedTuple):
    """Derived beam parameters in meters and radians."""

    rayleigh_range: float
    output_waist: float
    magnification: float
    output_waist_position: float
    divergence: float
    output_divergence: float
    output_rayleigh_range: float


class Readouts(NamedTuple):
    """Formatted result fields, already in mm / mrad."""

    output_waist_position: str
    output_waist: str
    rayleigh_range: str
    output_rayleigh_range: str
    divergence: str
    output_divergence: str
